from __future__ import annotations
from abc import ABC
from typing import Any, ClassVar, Tuple, Self, Union, cast

import numpy as np
from numpy import ndarray
from boundednumbers.functions import clamp

from ..conversions import convert, FormatType, np_convert
from ..types.format_type import format_classes, format_valid_dtypes, default_format_dtypes
from ..types.color_types import ColorElement, ColorValue, ColorSpace, Scalar, has_alpha_channel
from ..utils import get_dimension


class ColorBase:
    """
    Immutable color value: one color as a tuple, or many as an ndarray whose
    last axis holds the channels.

    Subclasses fix ``mode``, ``format_type``, ``num_channels`` and ``maxima``.
    Channels are clamped to ``[0, maxima]`` unless ``maxima`` is None.
    """
    __slots__ = ('_value',)

    num_channels: ClassVar[int] = 1
    mode: ClassVar[ColorSpace]
    maxima: ClassVar[ColorElement | None]
    format_type: ClassVar[FormatType]
    _is_frozen: bool = False

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{type(self).__name__} is frozen; {name} cannot be set")
        super().__setattr__(name, value)

    def __init__(self, value: ColorValue | ColorBase) -> None:
        if isinstance(value, ColorBase):
            value = self._adopt(value)

        if isinstance(value, ndarray):
            self._value = self._checked_array(value)
        else:
            self._value = self._checked_tuple(value)

        super().__setattr__('_is_frozen', True)

    def _adopt(self, other: ColorBase) -> ColorValue:
        """Channels of ``other`` expressed in this class's space and format."""
        if other.mode == self.mode and other.format_type == self.format_type:
            return other.value
        converter = np_convert if other.is_array else convert
        return converter(
            color=other.value,
            from_space=other.mode,
            to_space=self.mode,
            input_type=other.format_type,
            output_type=self.format_type,
        )

    def _checked_array(self, arr: ndarray) -> ndarray:
        allowed = format_valid_dtypes[self.format_type]
        if not isinstance(arr.dtype.type(0), allowed):
            raise TypeError(f"{self.mode} ({self.format_type}) arrays need a dtype like {allowed}, not {arr.dtype}")
        if arr.ndim == 0 or arr.shape[-1] != self.num_channels:
            raise ValueError(f"{self.mode} arrays need {self.num_channels} channels on the last axis, got shape {arr.shape}")

        if self.maxima is not None:
            arr = np.clip(arr, 0, np.array(self.maxima))
        return arr.astype(default_format_dtypes[self.format_type], copy=False)

    def _checked_tuple(self, value: Any) -> Tuple[Scalar, ...]:
        if get_dimension(value) != self.num_channels:
            raise ValueError(f"{self.mode} expects {self.num_channels} channels, got {value!r}")

        cast_to = format_classes[self.format_type]
        channels = tuple(cast_to(v) for v in value)
        if self.maxima is None:
            return channels
        return tuple(
            cast_to(clamp(v, 0, m)) for v, m in zip(channels, cast(Tuple[Scalar, ...], self.maxima))
        )

    @property
    def value(self) -> ColorValue:
        return self._value

    @property
    def is_array(self) -> bool:
        return isinstance(self._value, ndarray)

    @property
    def shape(self) -> Tuple[int, ...] | None:
        """Array shape, or None for a single color."""
        return self._value.shape if isinstance(self._value, ndarray) else None

    @property
    def has_alpha(self) -> bool:
        return has_alpha_channel(self.mode)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        if type(self) is not type(other):
            return False
        if self.is_array or other.is_array:
            return bool(np.array_equal(np.asarray(self.value), np.asarray(other.value)))
        return self.value == other.value

    def __hash__(self) -> int:
        if self.is_array:
            raise TypeError(f"array-valued {type(self).__name__} is unhashable")
        return hash((type(self), self.value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"

    def convert(self, to_space: ColorSpace | str, to_format: FormatType | None = None) -> ColorBase:
        """
        Same color(s) as an instance of the class registered for
        ``(to_space, to_format)``; the format defaults to this one.
        """
        from .registry import color_class_for
        return color_class_for(to_space, to_format or self.format_type)(self)


class WithAlpha(ABC):
    """Mixin for classes whose last channel is alpha, capped at ``alpha_max``."""

    num_channels: ClassVar[int]
    mode: ClassVar[ColorSpace]
    value: ColorValue
    alpha_max: ClassVar[Scalar]

    @property
    def alpha(self) -> Union[Scalar, ndarray]:
        if isinstance(self.value, ndarray):
            return self.value[..., -1]
        return cast(Tuple[Scalar, ...], self.value)[-1]

    def with_alpha(self, alpha: Union[Scalar, ndarray]) -> Self:
        """Copy with the alpha channel replaced (clamped to ``[0, alpha_max]``)."""
        if not isinstance(self.value, ndarray):
            if isinstance(alpha, ndarray):
                raise TypeError("array alpha needs an array-valued color")
            channels = cast(Tuple[Scalar, ...], self.value)
            return type(self)(channels[:-1] + (clamp(alpha, 0, self.alpha_max),))  # type: ignore[call-arg]

        lead_shape = self.value.shape[:-1]
        if isinstance(alpha, ndarray) and alpha.shape != lead_shape:
            raise ValueError(f"alpha of shape {alpha.shape} does not fit colors of shape {lead_shape}")
        alphas = np.broadcast_to(np.clip(alpha, 0, self.alpha_max), lead_shape)
        out = self.value.copy()
        out[..., -1] = alphas
        return type(self)(out)  # type: ignore[call-arg]


def build_registry(*classes: type[ColorBase]):
    """Map ``(mode, format_type)`` to each class."""
    return {(cls.mode, cls.format_type): cls for cls in classes}
