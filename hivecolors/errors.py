"""Exceptions raised by hivecolors."""


class HiveColorError(ValueError):
    """Base class for palette request errors."""


class InvalidRangeError(HiveColorError):
    """``begin`` or ``end`` lies outside ``[0, 1]``."""


class InvalidDirectionError(HiveColorError):
    """``direction`` is neither forward nor reversed."""
