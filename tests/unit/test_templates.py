"""Unit tests for the line template catalog.

Tests cover:
- Catalog shape
- Closest-slope lookup, quadrant filtering and axis-aligned shortcuts
"""

import math

import pytest

from glyphtrace.core.templates import LINE_TEMPLATES, LineTemplate, find_closest_template
from glyphtrace.exceptions import TemplateNotFoundError


class TestCatalog:
    """Tests for the built-in templates."""

    def test_full_rotation(self):
        """Thirty templates cover every direction."""
        assert len(LINE_TEMPLATES) == 30
        assert len({(t.rise, t.run) for t in LINE_TEMPLATES}) == 30

    def test_single_horizontal_and_vertical(self):
        """Axis-aligned lines share one template per axis."""
        assert sum(t.is_horizontal() for t in LINE_TEMPLATES) == 1
        assert sum(t.is_vertical() for t in LINE_TEMPLATES) == 1

    def test_tiles_are_rectangular(self):
        for template in LINE_TEMPLATES:
            assert all(len(row) == template.num_cols for row in template.tile)

    def test_ragged_tile_rejected(self):
        with pytest.raises(ValueError):
            LineTemplate(1, 1, ("ab", "c"))

    def test_vertical_slope_is_infinite(self):
        assert LineTemplate(4, 0, ("|",)).slope == math.inf
        assert LineTemplate(-4, 0, ("|",)).slope == -math.inf


class TestFindClosest:
    """Tests for template lookup."""

    def test_exact_match(self):
        """Rise 2 over run 8 picks the 0.25 template."""
        template = find_closest_template(2, 8)
        assert (template.rise, template.run) == (2, 8)

    @pytest.mark.parametrize("run", [5, -5, 1, -100])
    def test_horizontal(self, run: int):
        """Any horizontal direction uses the horizontal template."""
        assert find_closest_template(0, run).is_horizontal()

    @pytest.mark.parametrize("rise", [3, -3, 1, 100])
    def test_vertical(self, rise: int):
        """Any vertical direction uses the vertical template."""
        assert find_closest_template(rise, 0).is_vertical()

    @pytest.mark.parametrize(
        "rise,run,expected",
        [
            (5, 5, (4, 4)),
            (-5, -5, (-4, -4)),
            (5, -5, (4, -4)),
            (-5, 5, (-4, 4)),
            (-1, -8, (-1, -8)),
            (-3, 4, (-3, 4)),
            (9, 2, (4, 1)),
            (1, 7, (1, 8)),
        ],
    )
    def test_nearest_slope_in_quadrant(self, rise: int, run: int, expected: tuple[int, int]):
        template = find_closest_template(rise, run)
        assert (template.rise, template.run) == expected

    def test_quadrant_filter(self):
        """Lines are never drawn with a template heading the other way."""
        for rise, run in [(3, 7), (-3, 7), (3, -7), (-3, -7), (7, 2), (-7, -2)]:
            template = find_closest_template(rise, run)
            assert rise * template.rise >= 0
            assert run * template.run >= 0

    def test_zero_length(self):
        with pytest.raises(TemplateNotFoundError):
            find_closest_template(0, 0)

    def test_empty_catalog(self):
        with pytest.raises(TemplateNotFoundError):
            find_closest_template(1, 1, templates=())
