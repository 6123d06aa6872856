import numpy as np
from typing import Callable, Tuple, cast

from ..types.format_type import FormatType, channel_max
from ..types.color_types import ColorElement, ColorSpace, element_to_array

from .srgb import np_unit_rgb_to_xyz, np_xyz_to_unit_rgb
from .lab import np_xyz_to_lab, np_lab_to_xyz


def _rgb_to_lab(r: np.ndarray, g: np.ndarray, b: np.ndarray) -> np.ndarray:
    xyz = np_unit_rgb_to_xyz(r, g, b)
    return np_xyz_to_lab(xyz[..., 0], xyz[..., 1], xyz[..., 2])


def _lab_to_rgb(L: np.ndarray, a: np.ndarray, b: np.ndarray) -> np.ndarray:
    xyz = np_lab_to_xyz(L, a, b)
    return np_xyz_to_unit_rgb(xyz[..., 0], xyz[..., 1], xyz[..., 2])


CONVERT_NUMPY: dict[tuple[str, str], Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]] = {
    ("rgb", "xyz"): np_unit_rgb_to_xyz,
    ("xyz", "rgb"): np_xyz_to_unit_rgb,
    ("xyz", "lab"): np_xyz_to_lab,
    ("lab", "xyz"): np_lab_to_xyz,
    ("rgb", "lab"): _rgb_to_lab,
    ("lab", "rgb"): _lab_to_rgb,
}

# Only RGB channels are scaled by the format; XYZ and Lab are absolute.
SCALED_SPACES = {"rgb"}
CONVERT_SPACES = {"rgb", "xyz", "lab"}


def _base_space(space: str) -> str:
    return space[:3]


def normalize(color: np.ndarray, space: str, fmt: FormatType) -> np.ndarray:
    if space in SCALED_SPACES:
        return color / channel_max[fmt]
    if space in CONVERT_SPACES:
        return color.astype(float)
    raise ValueError(f"Unknown space: {space}")


def round_half_up(values: np.ndarray) -> np.ndarray:
    """Nearest integer, halves rounded up (0.5 -> 1, 127.5 -> 128)."""
    return np.floor(np.asarray(values, dtype=float) + 0.5).astype(int)


def scale(color: np.ndarray, space: str, fmt: FormatType) -> np.ndarray:
    if space in SCALED_SPACES:
        scaled = color * channel_max[fmt]
        return round_half_up(scaled) if fmt == FormatType.INT else scaled
    if space in CONVERT_SPACES:
        return color
    raise ValueError(f"Unknown space: {space}")


def convert_alpha(alpha: np.ndarray | None, input_fmt: FormatType, output_fmt: FormatType) -> np.ndarray | None:
    if alpha is None:
        return None

    max_in  = channel_max[input_fmt]
    max_out = channel_max[output_fmt]

    result = alpha / max_in * max_out
    return round_half_up(result) if output_fmt == FormatType.INT else result


def _convert_core(
    color: np.ndarray,
    from_space: str,
    to_space: str,
    input_fmt: FormatType,
    output_fmt: FormatType,
) -> np.ndarray:
    has_alpha_in  = from_space.endswith("a")
    has_alpha_out = to_space.endswith("a")

    if has_alpha_in:
        base = color[..., :3]
        alpha = color[..., 3]
    else:
        base = color
        alpha = None

    fs, ts = _base_space(from_space), _base_space(to_space)

    # to unit channels, convert, back to the output format
    base_norm = normalize(base, fs, input_fmt)

    if fs == ts:
        converted = base_norm
    else:
        key = (fs, ts)
        if key not in CONVERT_NUMPY:
            raise ValueError(f"No conversion from {from_space} to {to_space}")
        converted = CONVERT_NUMPY[key](
            base_norm[..., 0],
            base_norm[..., 1],
            base_norm[..., 2],
        )

    out = scale(converted, ts, output_fmt)

    # alpha output
    if has_alpha_out:
        new_alpha = convert_alpha(alpha, input_fmt, output_fmt)
        if new_alpha is None:
            # Default alpha value when no alpha in input
            default_alpha = channel_max[output_fmt]
            alpha_array = np.full(out.shape[:-1] + (1,), default_alpha)
            return np.concatenate([out, alpha_array], axis=-1)
        return np.concatenate([out, new_alpha[..., None]], axis=-1)

    return out


def convert(
    color: ColorElement,
    from_space: ColorSpace | str,
    to_space: ColorSpace | str,
    input_type: FormatType = FormatType.INT,
    output_type: FormatType = FormatType.INT,
) -> ColorElement:
    """Convert a single color given as a tuple; returns a tuple."""
    if from_space.lower() == to_space.lower() and input_type == output_type:
        return color  # No conversion needed
    color_array = element_to_array(color)
    result = _convert_core(
        color_array,
        from_space.lower(),
        to_space.lower(),
        FormatType(input_type),
        FormatType(output_type),
    )
    # Convert back to tuple for scalar output
    return tuple(v.item() for v in result.flat) if result.ndim == 1 else cast(ColorElement, result)


def np_convert(
    color: np.ndarray,
    from_space: ColorSpace | str,
    to_space: ColorSpace | str,
    input_type: FormatType = FormatType.INT,
    output_type: FormatType = FormatType.INT,
) -> np.ndarray:
    """Convert an array of colors whose last axis holds the channels."""
    if from_space.lower() == to_space.lower() and input_type == output_type:
        return color
    return _convert_core(
        np.asarray(color),
        from_space.lower(),
        to_space.lower(),
        FormatType(input_type),
        FormatType(output_type),
    )
