"""Tests for population stepping and liveness."""

import math

import pytest

from pra.config import WalkerConfig
from pra.scene import WalkerScene
from pra.spawner import spawn_scene
from pra.vector import Vector2D
from pra.walker import WalkerMode
from rendering.exporters import scene_to_data


class TestStepping:

    def test_add_walker_registers_origin(self, scene, make_walker):
        walker = scene.add_walker(make_walker(x=2.0, y=3.0))
        assert walker.index == 0
        assert scene.registry.point_count == 1
        assert scene.recorder[0] == []

    def test_later_walkers_see_same_round_points(self, scene, make_walker):
        """No snapshot isolation: the second walker is blocked by the first one's new point."""
        first = scene.add_walker(make_walker(x=0.0, dx=1.0, max_turn=0.0))
        second = scene.add_walker(make_walker(x=2.0, dx=-1.0, max_turn=0.0))

        scene.step()

        assert first.position == Vector2D(1.0, 0.0)
        assert first.mode == WalkerMode.FORWARD
        assert second.mode == WalkerMode.REVERSE
        assert second.position == Vector2D(2.0, 0.0)

    def test_creation_order_decides(self, small_config, make_walker):
        scene = WalkerScene(small_config)
        second = scene.add_walker(make_walker(x=2.0, dx=-1.0, max_turn=0.0))
        first = scene.add_walker(make_walker(x=0.0, dx=1.0, max_turn=0.0))

        scene.step()

        assert second.position == Vector2D(1.0, 0.0)
        assert first.mode == WalkerMode.REVERSE

    def test_step_batch(self, scene, make_walker):
        scene.add_walker(make_walker())
        assert scene.step_batch(5) is True
        assert scene.iteration == 5

    def test_step_after_termination_is_noop(self, scene, make_walker):
        scene.registry.register_point(Vector2D(1, 0))
        scene.registry.register_point(Vector2D(-1, 0))
        walker = scene.add_walker(make_walker(max_turn=0.0))

        assert scene.step_batch(10) is False
        assert scene.iteration == 2
        path = scene.recorder[walker.index]

        scene.step()
        scene.step_batch(3)
        assert scene.iteration == 2
        assert scene.recorder[walker.index] == path

    def test_empty_scene_is_inactive(self, scene):
        assert not scene.has_active()
        scene.step()
        assert scene.iteration == 0

    def test_mode_counts(self, scene, make_walker):
        scene.add_walker(make_walker())
        assert scene.mode_counts() == {'inactive': 0, 'forward': 1, 'reverse': 0}


class TestRun:

    def test_run_terminates(self):
        config = WalkerConfig(seed='terminate', size=6, population=2.0,
                              turn_resolution=math.radians(2.0), log_interval=1000)
        scene = spawn_scene(config)
        assert len(scene.walkers) > 0

        iterations = scene.run(max_steps=20000)

        assert not scene.has_active()
        assert iterations == scene.iteration
        assert scene.mode_counts()['inactive'] == len(scene.walkers)

    def test_run_respects_step_limit(self):
        config = WalkerConfig(seed='limit', size=20, log_interval=1000)
        scene = spawn_scene(config)
        scene.run(max_steps=3)
        assert scene.iteration == 3

    def test_callback_called_each_iteration(self):
        config = WalkerConfig(seed='callback', size=10, log_interval=1000)
        scene = spawn_scene(config)
        seen = []
        scene.run(max_steps=4, callback=lambda s, i: seen.append(i))
        assert seen == [1, 2, 3, 4]


class TestDeterminism:

    def test_same_seed_same_paths(self):
        config = WalkerConfig(seed='reproducible', size=8, population=1.5,
                              turn_resolution=math.radians(2.0), log_interval=1000)
        a = spawn_scene(config)
        b = spawn_scene(config)
        a.run()
        b.run()
        assert scene_to_data(a) == scene_to_data(b)

    def test_different_seed_different_population(self):
        config = WalkerConfig(seed='one', size=10, log_interval=1000)
        a = spawn_scene(config)
        b = spawn_scene(config.with_seed('two'))
        assert [w.position for w in a.walkers] != [w.position for w in b.walkers]
