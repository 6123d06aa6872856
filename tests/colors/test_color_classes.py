import numpy as np
import pytest
from hivecolors.colors import (
    ColorRGBINT,
    ColorRGBAINT,
    ColorUnitRGB,
    ColorUnitRGBA,
    ColorPercentageRGB,
    ColorPercentageRGBA,
    ColorLab,
    ColorXYZ,
    color_class_for,
)
from hivecolors.types import FormatType


def test_scalar_values_are_clamped():
    assert ColorRGBINT((300, -5, 12)).value == (255, 0, 12)
    assert ColorUnitRGBA((1.5, 0.5, -0.1, 2.0)).value == (1.0, 0.5, 0.0, 1.0)


def test_array_values_are_clamped():
    arr = np.array([[1.2, 0.5, -0.3], [0.0, 1.0, 0.25]])
    color = ColorUnitRGB(arr)
    assert color.is_array
    assert color.shape == (2, 3)
    np.testing.assert_array_equal(color.value, [[1.0, 0.5, 0.0], [0.0, 1.0, 0.25]])


def test_wrong_channel_count_raises():
    with pytest.raises(ValueError):
        ColorRGBINT((1, 2))
    with pytest.raises(ValueError):
        ColorUnitRGBA(np.zeros((3, 3)))


def test_wrong_dtype_raises():
    with pytest.raises(TypeError):
        ColorRGBINT(np.zeros((2, 3), dtype=float))


def test_string_value_raises():
    with pytest.raises(TypeError):
        ColorRGBINT("#FFFFFF")


def test_colors_are_immutable():
    color = ColorRGBINT((1, 2, 3))
    with pytest.raises(AttributeError):
        color._value = (4, 5, 6)


def test_conversion_between_formats():
    color = ColorRGBINT((255, 51, 0))
    unit = color.convert("rgb", FormatType.FLOAT)
    assert isinstance(unit, ColorUnitRGB)
    assert unit.value == pytest.approx((1.0, 0.2, 0.0))

    pct = color.convert("rgba", FormatType.PERCENTAGE)
    assert isinstance(pct, ColorPercentageRGBA)
    assert pct.value == pytest.approx((100.0, 20.0, 0.0, 100.0))


def test_lab_is_not_clamped():
    lab = ColorLab(ColorRGBINT((0, 0, 255)))
    L, a, b = lab.value
    assert b < 0
    assert a > 50


def test_lab_round_trip_to_rgb():
    original = ColorRGBINT((51, 153, 204))
    back = ColorRGBINT(ColorLab(original))
    assert back == original


def test_xyz_class():
    xyz = ColorXYZ(ColorUnitRGB((1.0, 1.0, 1.0)))
    assert xyz.value[1] == pytest.approx(1.0)


def test_with_alpha_scalar_and_array():
    rgba = ColorUnitRGBA((0.1, 0.2, 0.3, 1.0))
    half = rgba.with_alpha(0.5)
    assert half.alpha == 0.5
    assert rgba.alpha == 1.0

    arr = ColorUnitRGBA(np.ones((3, 4)))
    faded = arr.with_alpha(0.25)
    np.testing.assert_array_equal(faded.alpha, [0.25, 0.25, 0.25])


def test_with_alpha_clamps():
    assert ColorRGBAINT((1, 2, 3, 4)).with_alpha(999).alpha == 255


def test_equality_and_hash():
    assert ColorRGBINT((1, 2, 3)) == ColorRGBINT((1, 2, 3))
    assert ColorRGBINT((1, 2, 3)) != ColorRGBAINT((1, 2, 3, 255))
    assert len({ColorRGBINT((1, 2, 3)), ColorRGBINT((1, 2, 3))}) == 1


def test_registry_lookup():
    assert color_class_for("rgb", FormatType.INT) is ColorRGBINT
    assert color_class_for("RGBA", "float") is ColorUnitRGBA
    assert color_class_for("rgb", FormatType.PERCENTAGE) is ColorPercentageRGB
    assert color_class_for("lab", FormatType.INT) is ColorLab


def test_has_alpha_follows_mode():
    assert ColorUnitRGBA((0.1, 0.2, 0.3, 0.4)).has_alpha
    assert not ColorUnitRGB((0.1, 0.2, 0.3)).has_alpha
    assert not ColorLab((50.0, 0.0, 0.0)).has_alpha
