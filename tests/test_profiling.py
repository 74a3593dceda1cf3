"""Tests for the opt-in growth counters."""

import math

import pytest

from pra import profiling
from pra.config import WalkerConfig
from pra.profiling import enable_profiling, profiler
from pra.spawner import spawn_scene
from pra.vector import Vector2D


@pytest.fixture
def counting():
    profiler.reset()
    profiler.enabled = True
    yield profiler
    profiler.enabled = False
    profiler.reset()


@pytest.fixture
def grown_scene():
    config = WalkerConfig(seed='counters', size=10, turn_resolution=math.radians(5.0),
                          log_interval=1000)
    return spawn_scene(config)


class TestGrowthCounters:

    def test_full_run_is_consistent(self, counting, grown_scene):
        grown_scene.run()
        n = len(grown_scene.walkers)

        assert counting.searches > 0
        assert counting.candidates_tested >= counting.searches
        assert counting.points_accepted == grown_scene.registry.point_count - n
        # Every walker reverses once and then stops
        assert counting.reversals == n
        assert counting.terminations == n
        assert counting.failed_searches == counting.reversals + counting.terminations
        assert counting.steps == grown_scene.iteration

    def test_every_rejection_has_a_cause(self, counting, grown_scene):
        grown_scene.run()

        rejected = counting.candidates_tested - counting.points_accepted
        assert counting.blocked_by_wall + counting.blocked_by_neighbour == rejected
        assert counting.blocked_by_neighbour > 0

    def test_wall_block_counted(self, counting, scene, make_walker):
        walker = scene.add_walker(make_walker(x=10.0, dx=1.0, max_turn=0.0))
        walker.step(scene)

        # Zero turn is tried once per side
        assert counting.candidates_tested == 2
        assert counting.blocked_by_wall == 2
        assert counting.blocked_by_neighbour == 0
        assert counting.reversals == 1
        assert counting.failed_searches == 1

    def test_neighbour_block_counted(self, counting, scene, make_walker):
        scene.registry.register_point(Vector2D(1, 0))
        walker = scene.add_walker(make_walker(turn_resolution=math.pi / 2))
        walker.step(scene)

        assert counting.blocked_by_neighbour == 1
        assert counting.candidates_tested == 2
        assert counting.points_accepted == 1

    def test_summary_ratios(self, counting, grown_scene):
        grown_scene.run()
        summary = counting.summary()

        assert summary['candidates_per_search'] == pytest.approx(
            counting.candidates_tested / counting.searches)
        assert summary['ms_per_step'] >= 0.0


class TestDisabled:

    def test_counters_stay_zero(self, grown_scene):
        profiler.reset()
        assert not profiler.enabled
        grown_scene.run()

        assert profiler.summary()['searches'] == 0
        assert profiler.candidates_tested == 0
        assert profiler.blocked_by_neighbour == 0
        assert profiler.steps == 0

    def test_enable_registers_exit_summary_once(self, monkeypatch):
        registered = []
        monkeypatch.setattr(profiling.atexit, 'register', registered.append)
        monkeypatch.setattr(profiler, '_exit_hook', False)
        try:
            enable_profiling()
            enable_profiling()
            assert profiler.enabled
            assert registered == [profiler.print_summary]
        finally:
            profiler.enabled = False

    def test_summary_silent_without_searches(self, capsys):
        profiler.reset()
        profiler.print_summary()
        assert capsys.readouterr().out == ""
