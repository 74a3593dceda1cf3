"""Tests for path export and Cairo rendering."""

import math

import numpy as np
import pytest

from pra.config import WalkerConfig
from pra.spawner import spawn_scene
from config.render_config import RenderConfig
from rendering.exporters import export_walker_data, load_walker_data, scene_to_data
from rendering.walker_renderer import WalkerRenderer
from rendering.utils import hex_to_rgba, split_strokes


@pytest.fixture(scope='module')
def grown_scene():
    config = WalkerConfig(seed='render', size=8, population=1.5,
                          turn_resolution=math.radians(2.0), log_interval=1000)
    scene = spawn_scene(config)
    scene.run()
    return scene


class TestExport:

    def test_scene_to_data(self, grown_scene):
        data = scene_to_data(grown_scene)
        assert data['size'] == 8
        assert data['seed'] == 'render'
        assert len(data['walkers']) == len(grown_scene.walkers)
        first = data['walkers'][0]
        assert set(first) == {'index', 'channel', 'color_group', 'color', 'path'}
        # Every finished walker ends with the break written when it went inactive
        assert all(w['path'][-1] is None for w in data['walkers'])

    def test_export_and_load(self, grown_scene, tmp_path):
        path = tmp_path / 'out' / 'paths.json'
        data = export_walker_data(grown_scene, str(path))
        assert load_walker_data(str(path)) == data


class TestUtils:

    def test_hex_to_rgba(self):
        assert hex_to_rgba('#FF0000') == (1.0, 0.0, 0.0, 1.0)
        assert hex_to_rgba('#fff', alpha=0.5) == (1.0, 1.0, 1.0, 0.5)
        with pytest.raises(ValueError):
            hex_to_rgba('#12345')

    def test_split_strokes(self):
        path = [[0, 0], [1, 0], None, [0, 0], None]
        assert split_strokes(path) == [[(0, 0), (1, 0)], [(0, 0)]]


class TestRenderer:

    def test_render_frame(self, grown_scene):
        renderer = WalkerRenderer(RenderConfig(max_dimension=200))
        frame = renderer.render_frame(scene_to_data(grown_scene))

        assert frame.shape == (200, 200, 4)
        assert frame.dtype == np.uint8
        # Something other than the white background was drawn
        assert (frame[:, :, :3] < 250).any()

    def test_partial_frame_draws_less(self, grown_scene):
        renderer = WalkerRenderer(RenderConfig(max_dimension=200))
        data = scene_to_data(grown_scene)
        full = renderer.render_frame(data)
        partial = renderer.render_frame(data, max_entries=2)
        assert (partial[:, :, :3] < 250).sum() < (full[:, :, :3] < 250).sum()

    def test_svg_layers(self, grown_scene, tmp_path):
        data = scene_to_data(grown_scene)
        renderer = WalkerRenderer(RenderConfig(line_style='dashed'))
        written = renderer.save_svg_layers(data, lambda g: tmp_path / f'layer_{g}.svg')

        groups = {w['color_group'] for w in data['walkers']}
        assert len(written) == len(groups)
        for path in written:
            assert '<svg' in open(path).read()
