"""Tests for sphere and ball iteration in the rhombic-dodecahedral lattice."""

import pytest

from rhombus.models.quadric import QuadricCoord
from rhombus.util.errors import InvalidArgument
from rhombus.util.quadric_math import ball_iter, ball_size, sphere_iter, sphere_size

ORIGIN = QuadricCoord(0, 0, 0, 0)


class TestSphere:
    def test_sphere_zero_is_center(self):
        c = QuadricCoord(1, 2, -7, 4)
        assert list(sphere_iter(c, 0)) == [c]

    def test_sphere_one_is_the_twelve_neighbors(self):
        assert set(sphere_iter(ORIGIN, 1)) == set(ORIGIN.neighbors())

    def test_sphere_one_is_lexicographic(self):
        cells = list(sphere_iter(ORIGIN, 1))
        assert cells == sorted(cells)
        assert cells[0] == QuadricCoord(-1, 0, 0, 1)
        assert cells[-1] == QuadricCoord(1, 0, 0, -1)

    @pytest.mark.parametrize("radius, expected", [(0, 1), (1, 12), (2, 42), (3, 92), (4, 162)])
    def test_sphere_counts(self, radius, expected):
        cells = list(sphere_iter(ORIGIN, radius))
        assert len(cells) == expected == sphere_size(radius)

    def test_sphere_cells_at_exact_distance(self):
        center = QuadricCoord(2, -1, 3, -4)
        cells = list(center.sphere(3))
        assert cells
        assert all(center.distance_to(c) == 3 for c in cells)
        assert len(set(cells)) == len(cells)

    def test_sphere_two_contains_known_cells(self):
        cells = set(sphere_iter(ORIGIN, 2))
        for c in (
            QuadricCoord(-2, 0, 0, 2),
            QuadricCoord(1, -1, 1, -1),
            QuadricCoord(0, 1, 1, -2),
        ):
            assert c in cells

    def test_sphere_is_repeatable(self):
        c = QuadricCoord(1, -1, 0, 0)
        assert list(sphere_iter(c, 3)) == list(sphere_iter(c, 3))

    def test_negative_radius_raises(self):
        with pytest.raises(InvalidArgument):
            sphere_iter(ORIGIN, -1)


class TestBall:
    @pytest.mark.parametrize("radius", [0, 1, 2, 3])
    def test_ball_count_and_distance(self, radius):
        center = QuadricCoord(-1, 0, 4, -3)
        cells = list(ball_iter(center, radius))
        assert len(cells) == ball_size(radius)
        assert len(set(cells)) == len(cells)
        assert all(center.distance_to(c) <= radius for c in cells)

    def test_ball_sizes(self):
        assert ball_size(0) == 1
        assert ball_size(1) == 13
        assert ball_size(2) == 55

    def test_ball_goes_outwards(self):
        distances = [ORIGIN.distance_to(c) for c in ORIGIN.ball(3)]
        assert distances == sorted(distances)

    def test_ball_covers_every_cell_in_range(self):
        # every neighbor of a cell at distance < r lies within the ball
        ball = set(ball_iter(ORIGIN, 3))
        for c in ball_iter(ORIGIN, 2):
            for n in c.neighbors():
                assert n in ball

    def test_negative_radius_raises(self):
        with pytest.raises(InvalidArgument):
            ball_iter(ORIGIN, -3)
