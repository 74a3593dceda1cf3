"""Tests for the redundant-registration bin grid."""

import numpy as np
import pytest

from pra.spatial import SpatialRegistry
from pra.vector import Vector2D


class TestConstruction:

    def test_domain_must_fit_grid(self):
        with pytest.raises(ValueError):
            SpatialRegistry(half_size=119, bin_size=2, extent=120)

    def test_bin_size_positive(self):
        with pytest.raises(ValueError):
            SpatialRegistry(half_size=10, bin_size=0)

    def test_all_bins_created(self):
        registry = SpatialRegistry(half_size=10, bin_size=2, extent=120)
        # floor(-60) .. floor(60) on each axis
        assert registry.bin_count == 121 * 121


class TestRegistration:

    def test_point_copied_into_3x3_block(self):
        registry = SpatialRegistry(half_size=10)
        p = Vector2D(1, 0)
        registry.register_point(p)

        assert registry.bin_index(p) == (0, 0)
        for ix in (-1, 0, 1):
            for iy in (-1, 0, 1):
                assert p in registry.points_in_bin((ix, iy))
        assert p not in registry.points_in_bin((2, 0))
        assert registry.point_count == 1
        assert registry.stored_count == 9

    def test_negative_coordinates_floor(self):
        registry = SpatialRegistry(half_size=10)
        assert registry.bin_index(Vector2D(-0.5, -2.0)) == (-1, -1)

    def test_soundness(self):
        """Any registered point closer than one bin is found from the query bin."""
        rng = np.random.default_rng(7)
        registry = SpatialRegistry(half_size=50, bin_size=2)
        for _ in range(300):
            q = Vector2D(rng.uniform(-40, 40), rng.uniform(-40, 40))
            angle = rng.uniform(0, 2 * np.pi)
            r = rng.uniform(0, 1.999)
            p = Vector2D(q.x + r * np.cos(angle), q.y + r * np.sin(angle))
            registry.register_point(q)
            assert q in registry.points_in_bin(registry.bin_index(p))


class TestQueries:

    def test_outside_domain_is_blocked(self):
        registry = SpatialRegistry(half_size=10)
        assert registry.is_blocked(Vector2D(10.5, 0), None, 1.0)
        assert registry.is_blocked(Vector2D(0, -10.01), None, 1.0)

    def test_domain_edge_is_free(self):
        registry = SpatialRegistry(half_size=10)
        assert not registry.is_blocked(Vector2D(10, -10), None, 1.0)

    def test_threshold_is_strict(self):
        registry = SpatialRegistry(half_size=10)
        registry.register_point(Vector2D(0, 0))
        assert registry.is_blocked(Vector2D(0.99, 0), None, 1.0)
        assert not registry.is_blocked(Vector2D(1.0, 0), None, 1.0)

    def test_neighbour_across_bin_border(self):
        registry = SpatialRegistry(half_size=10)
        registry.register_point(Vector2D(1.9, 1.9))
        assert registry.bin_index(Vector2D(2.1, 2.1)) != registry.bin_index(Vector2D(1.9, 1.9))
        assert registry.is_blocked(Vector2D(2.1, 2.1), None, 1.0)

    def test_excluding_skips_equal_points(self):
        registry = SpatialRegistry(half_size=10)
        own = Vector2D(0.5, 0.5)
        registry.register_point(own)
        assert registry.is_blocked(Vector2D(0.6, 0.5), None, 1.0)
        assert not registry.is_blocked(Vector2D(0.6, 0.5), Vector2D(0.5, 0.5), 1.0)
