from typing import Any
from collections.abc import Sized

def get_dimension(element: Any) -> int:
    """Number of channels in a color element; strings are not colors."""
    if element is None:
        return 0
    if isinstance(element, str):
        raise TypeError(f"expected a channel sequence, got string {element!r}")
    if isinstance(element, Sized):
        return len(element)
    return 1
