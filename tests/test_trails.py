"""
Tests for trail retention policies.
"""

import pytest

from ray_physics.errors import InvalidConfiguration
from ray_physics.trails import Trail, TrailPolicy


def fill(trail, n):
    for i in range(n):
        trail.append((float(i), 0.0))
    return trail


class TestPolicies:

    def test_unbounded_keeps_everything(self):
        trail = fill(Trail(), 1000)
        assert len(trail) == 1000
        assert trail[0] == (0.0, 0.0)
        assert trail[-1] == (999.0, 0.0)

    def test_ring_keeps_newest(self):
        trail = fill(TrailPolicy.ring(3).make_trail(), 5)
        assert trail.points() == ((2.0, 0.0), (3.0, 0.0), (4.0, 0.0))

    def test_decimated_keeps_every_kth(self):
        trail = fill(TrailPolicy.decimated(2).make_trail(), 5)
        assert [p[0] for p in trail] == [0.0, 2.0, 4.0]

    def test_points_is_a_copy(self):
        trail = fill(Trail(), 2)
        snapshot = trail.points()
        trail.append((9.0, 9.0))
        assert len(snapshot) == 2
        assert len(trail) == 3


class TestValidation:

    def test_unknown_kind(self):
        with pytest.raises(InvalidConfiguration):
            TrailPolicy("fading")

    @pytest.mark.parametrize("size", [None, 0, -4])
    def test_ring_needs_size(self, size):
        with pytest.raises(InvalidConfiguration):
            TrailPolicy("ring", size=size)

    def test_decimation_interval(self):
        with pytest.raises(InvalidConfiguration):
            TrailPolicy.decimated(0)
