# -*- coding: utf-8 -*-
"""
Tests for the boundary-index mappers and clipped sample fetch.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-17

Modified
--------
2026-10-17
"""

# Third-party
import numpy as np
import pytest

# wavresample internal
from wavresample.interpolation import (
    BOUNDARY_MAPPERS,
    clip_clamp,
    clip_mirror,
    clip_periodic,
    fetch,
)
from wavresample.vocabulary import BoundaryPolicy


# ── Clamp ───────────────────────────────────────────────────────────────


class TestClamp:
    """Saturation to the edge samples."""

    def test_below(self):
        assert clip_clamp(-1, 5) == 0

    def test_above(self):
        assert clip_clamp(5, 5) == 4

    def test_inside(self):
        assert clip_clamp(2, 5) == 2

    def test_far_out(self):
        assert clip_clamp(-1000, 5) == 0
        assert clip_clamp(1000, 5) == 4


# ── Periodic ────────────────────────────────────────────────────────────


class TestPeriodic:
    """Cyclic wrap with period ``n``."""

    def test_below(self):
        assert clip_periodic(-1, 5) == 4

    def test_one_period(self):
        assert clip_periodic(5, 5) == 0

    def test_past_period(self):
        assert clip_periodic(7, 5) == 2

    def test_negative_multiple_periods(self):
        assert clip_periodic(-11, 5) == 4

    def test_single_sample(self):
        assert clip_periodic(-3, 1) == 0
        assert clip_periodic(3, 1) == 0


# ── Mirror ──────────────────────────────────────────────────────────────


class TestMirror:
    """Reflection about both edges with period ``2 * (n - 1)``."""

    def test_below(self):
        assert clip_mirror(-1, 5) == 1

    def test_full_period(self):
        assert clip_mirror(8, 5) == 0

    def test_just_past_end(self):
        assert clip_mirror(5, 5) == 3

    def test_edges_not_duplicated(self):
        """Indices walk 0..4..0 with each edge visited once per bounce."""
        walked = [clip_mirror(t, 5) for t in range(-4, 13)]
        assert walked == [4, 3, 2, 1, 0, 1, 2, 3, 4, 3, 2, 1, 0, 1, 2, 3, 4]

    def test_single_sample(self):
        assert clip_mirror(-2, 1) == 0
        assert clip_mirror(7, 1) == 0

    def test_two_samples(self):
        assert [clip_mirror(t, 2) for t in range(-2, 4)] == [0, 1, 0, 1, 0, 1]


# ── Shared mapper properties ────────────────────────────────────────────


class TestMapperProperties:
    """Properties every mapper must satisfy."""

    @pytest.mark.parametrize('policy', list(BoundaryPolicy))
    def test_identity_inside(self, policy):
        mapper = BOUNDARY_MAPPERS[policy]
        assert [mapper(t, 7) for t in range(7)] == list(range(7))

    @pytest.mark.parametrize('policy', list(BoundaryPolicy))
    @pytest.mark.parametrize('n', [1, 2, 3, 8])
    def test_total_onto_valid_range(self, policy, n):
        mapper = BOUNDARY_MAPPERS[policy]
        for t in range(-50, 50):
            assert 0 <= mapper(t, n) < n

    @pytest.mark.parametrize('policy', list(BoundaryPolicy))
    def test_array_matches_scalar(self, policy):
        mapper = BOUNDARY_MAPPERS[policy]
        t = np.arange(-20, 20, dtype=np.int64)
        expected = [mapper(int(ti), 6) for ti in t]
        np.testing.assert_array_equal(mapper(t, 6), expected)

    def test_table_covers_every_policy(self):
        assert set(BOUNDARY_MAPPERS) == set(BoundaryPolicy)


# ── Fetch ───────────────────────────────────────────────────────────────


class TestFetch:
    """Direct reads in range, mapped reads outside."""

    def test_in_range_reads_directly(self):
        def exploding(t, n):
            raise AssertionError("mapper must not be called in range")

        assert fetch([1.0, 2.0, 3.0], 1, exploding) == 2.0

    def test_out_of_range_uses_mapper(self):
        samples = [1.0, 2.0, 3.0]
        assert fetch(samples, -1, clip_clamp) == 1.0
        assert fetch(samples, -1, clip_periodic) == 3.0
        assert fetch(samples, -1, clip_mirror) == 2.0

    def test_array_indices(self):
        samples = np.array([1.0, 2.0, 3.0])
        result = fetch(samples, np.array([-1, 0, 2, 3]), clip_clamp)
        np.testing.assert_array_equal(result, [1.0, 1.0, 3.0, 3.0])

    def test_does_not_mutate(self):
        samples = [4.0, 5.0]
        fetch(samples, 9, clip_mirror)
        assert samples == [4.0, 5.0]
