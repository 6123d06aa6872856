"""
Tests for the Hive palette generator.
"""

import warnings
import numpy as np
import pytest
from hivecolors import (
    HIVE_COLOR_MAP,
    HIVE_ANCHORS_RGB,
    Direction,
    InvalidDirectionError,
    InvalidRangeError,
    HiveColorError,
    PaletteRequest,
    generate_palette,
    hive_colors,
    hive_colors_array,
    make_palette_factory,
    hive_palette,
)
from hivecolors.colors import parse_hex, ColorLab, ColorRGBINT


def _rgb(hex_color):
    return np.array(parse_hex(hex_color)[:3], dtype=float)


def _lab(hex_color):
    return np.array(ColorLab(ColorRGBINT(parse_hex(hex_color)[:3])).value)


class TestLength:
    @pytest.mark.parametrize("n", [1, 2, 3, 8, 17, 256])
    def test_length_matches_n(self, n):
        assert len(generate_palette(n)) == n

    @pytest.mark.parametrize("n", [0, -1, -10])
    def test_empty_for_non_positive(self, n):
        assert generate_palette(n) == []

    def test_empty_skips_validation(self):
        assert generate_palette(0, begin=5, direction=0) == []

    def test_non_integer_n(self):
        with pytest.raises(TypeError):
            generate_palette(2.5)

    def test_numpy_integer_n(self):
        assert len(generate_palette(np.int64(4))) == 4


class TestAnchors:
    def test_anchor_table(self):
        assert HIVE_COLOR_MAP == (
            "#003366", "#006699", "#3399CC", "#66CC99",
            "#99CC33", "#FFCC00", "#FF6600", "#CC3300",
        )
        assert HIVE_ANCHORS_RGB[0] == (0, 51, 102)
        assert HIVE_ANCHORS_RGB[-1] == (204, 51, 0)

    def test_eight_colors_reproduce_anchors(self):
        """Knots sit at k/7, so n=8 samples land exactly on the anchors."""
        palette = generate_palette(8)
        assert palette == [c + "FF" for c in HIVE_COLOR_MAP]

    def test_single_color_is_first_anchor(self):
        assert generate_palette(1) == ["#003366FF"]

    def test_single_color_uses_begin(self):
        assert generate_palette(1, begin=1.0, end=0.0) == ["#CC3300FF"]


class TestScenario:
    def test_three_colors(self):
        first, middle, last = generate_palette(3, alpha=1, begin=0, end=1, direction=1)
        assert first == "#003366FF"
        assert last == "#CC3300FF"
        assert middle == generate_palette(1, begin=0.5)[0]

    def test_middle_is_not_rgb_average(self):
        middle = _rgb(generate_palette(3)[1])
        naive = (_rgb("#003366") + _rgb("#CC3300")) / 2
        assert np.abs(middle - naive).max() > 20

    def test_middle_is_between_green_anchors(self):
        """t=0.5 falls between #66CC99 (t=3/7) and #99CC33 (t=4/7)."""
        r, g, b = _rgb(generate_palette(3)[1])
        assert 102 - 10 <= r <= 153 + 10
        assert g >= 180
        assert 51 - 10 <= b <= 153 + 10

    def test_matches_spline_points(self):
        arr = hive_colors_array(5)
        single = np.vstack([hive_colors_array(1, begin=t) for t in np.linspace(0, 1, 5)])
        np.testing.assert_allclose(arr, single, atol=1e-12)


class TestDirection:
    @pytest.mark.parametrize("begin, end", [(0.0, 1.0), (0.2, 0.7), (0.9, 0.1), (0.5, 0.5)])
    @pytest.mark.parametrize("n", [1, 2, 7, 30])
    def test_reversed_equals_swapped_forward(self, begin, end, n):
        assert generate_palette(n, begin=begin, end=end, direction=-1) == \
            generate_palette(n, begin=end, end=begin, direction=1)

    def test_reversed_default_range_is_reverse_order(self):
        assert generate_palette(8, direction=Direction.REVERSED) == list(reversed(generate_palette(8)))

    @pytest.mark.parametrize("direction", [1, Direction.FORWARD, "forward", "FORWARD", "1"])
    def test_forward_spellings(self, direction):
        assert generate_palette(4, direction=direction) == generate_palette(4)

    @pytest.mark.parametrize("direction", [-1, Direction.REVERSED, "reversed", " Reversed ", "-1"])
    def test_reversed_spellings(self, direction):
        assert generate_palette(4, direction=direction) == generate_palette(4, direction=-1)

    @pytest.mark.parametrize("direction", [0, 2, -2, "backwards", None, True, 0.5, "0", "1.0"])
    def test_invalid_direction(self, direction):
        with pytest.raises(InvalidDirectionError):
            generate_palette(3, direction=direction)


class TestRange:
    @pytest.mark.parametrize("begin, end", [(0.2, 1.3), (-0.1, 0.5), (0.0, -0.0001), (float("nan"), 1.0)])
    def test_invalid_range(self, begin, end):
        with pytest.raises(InvalidRangeError):
            generate_palette(4, begin=begin, end=end)

    def test_range_error_is_value_error(self):
        with pytest.raises(ValueError, match="begin and end must be within"):
            generate_palette(4, begin=0.2, end=1.3)
        assert issubclass(InvalidRangeError, HiveColorError)
        assert issubclass(InvalidDirectionError, HiveColorError)

    def test_range_checked_before_direction(self):
        with pytest.raises(InvalidRangeError):
            generate_palette(4, begin=2, direction=0)

    def test_sub_range_endpoints(self):
        sub = hive_colors_array(4, begin=0.25, end=0.75)
        full = hive_colors_array(5)
        np.testing.assert_allclose(sub[0], hive_colors_array(1, begin=0.25)[0])
        np.testing.assert_allclose(sub[-1], hive_colors_array(1, begin=0.75)[0])
        np.testing.assert_allclose(sub[0], full[1])
        np.testing.assert_allclose(sub[-1], full[3])


class TestAlpha:
    @pytest.mark.parametrize("alpha, suffix", [(0, "00"), (0.5, "80"), (1, "FF")])
    def test_alpha_suffix(self, alpha, suffix):
        palette = generate_palette(6, alpha=alpha)
        assert all(c.endswith(suffix) for c in palette)
        assert all(len(c) == 9 for c in palette)

    @pytest.mark.parametrize("alpha", [0, 0.5, 1])
    def test_alpha_array(self, alpha):
        np.testing.assert_allclose(hive_colors_array(6, alpha=alpha)[:, 3], alpha)

    def test_alpha_does_not_change_rgb(self):
        opaque = generate_palette(5)
        faded = generate_palette(5, alpha=0.3)
        assert [c[:7] for c in opaque] == [c[:7] for c in faded]

    @pytest.mark.parametrize("alpha, suffix", [(1.5, "FF"), (-0.2, "00")])
    def test_out_of_range_alpha_is_clamped_with_warning(self, alpha, suffix):
        with pytest.warns(UserWarning, match="clamped"):
            palette = generate_palette(3, alpha=alpha)
        assert all(c.endswith(suffix) for c in palette)

    def test_in_range_alpha_does_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            generate_palette(3, alpha=0.7)

    def test_nan_alpha(self):
        with pytest.raises(ValueError):
            generate_palette(3, alpha=float("nan"))

    def test_warning_points_at_caller(self):
        with pytest.warns(UserWarning) as record:
            generate_palette(3, alpha=2)
        assert record[0].filename == __file__

    def test_clamped_alpha_matches_boundary(self):
        with pytest.warns(UserWarning):
            over = hive_colors_array(4, alpha=3.0)
        np.testing.assert_array_equal(over, hive_colors_array(4, alpha=1.0))


class TestSmoothness:
    def test_no_large_jumps_in_lab(self):
        palette = generate_palette(100)
        lab = np.array([_lab(c[:7]) for c in palette])
        steps = np.linalg.norm(np.diff(lab, axis=0), axis=1)
        assert steps.max() < 3 * steps.mean()

    def test_channels_in_range(self):
        arr = hive_colors_array(500)
        assert arr.min() >= 0.0
        assert arr.max() <= 1.0


class TestRequest:
    def test_defaults(self):
        request = PaletteRequest(5)
        assert request.alpha == 1.0
        assert request.begin == 0.0
        assert request.end == 1.0
        assert request.direction is Direction.FORWARD

    def test_validated_parses_direction(self):
        assert PaletteRequest(5, direction="reversed").validated().direction is Direction.REVERSED

    def test_sample_points(self):
        np.testing.assert_allclose(PaletteRequest(3, begin=0.2, end=0.6).sample_points(), [0.2, 0.4, 0.6])
        np.testing.assert_allclose(
            PaletteRequest(3, begin=0.2, end=0.6, direction=-1).sample_points(), [0.6, 0.4, 0.2]
        )
        assert PaletteRequest(0).sample_points().shape == (0,)

    def test_request_is_frozen(self):
        request = PaletteRequest(5)
        with pytest.raises(AttributeError):
            request.n = 6


class TestFactory:
    def test_factory_matches_generate(self):
        palette = make_palette_factory(alpha=0.5, begin=0.1, end=0.9, direction=-1)
        assert palette(6) == generate_palette(6, alpha=0.5, begin=0.1, end=0.9, direction=-1)
        assert palette(0) == []

    def test_factory_validates_up_front(self):
        with pytest.raises(InvalidRangeError):
            make_palette_factory(begin=1.3)
        with pytest.raises(InvalidDirectionError):
            make_palette_factory(direction=0)

    def test_aliases(self):
        assert hive_colors is generate_palette
        assert hive_palette is make_palette_factory

    def test_factory_warns_once_at_creation(self):
        with pytest.warns(UserWarning, match="clamped") as record:
            palette = make_palette_factory(alpha=2)
        assert len(record) == 1
        assert record[0].filename == __file__

        with warnings.catch_warnings():
            warnings.simplefilter("error")
            colors = palette(3)
        assert all(c.endswith("FF") for c in colors)

    def test_factory_rejects_nan_alpha(self):
        with pytest.raises(ValueError):
            make_palette_factory(alpha=float("nan"))
