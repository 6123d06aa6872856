"""Channel scales shared by the RGB color classes and conversions."""
from enum import Enum
import numpy as np


class FormatType(str, Enum):
    """How RGB and alpha channels are scaled: 0-255, 0-1 or 0-100."""
    INT = "int"
    FLOAT = "float"
    PERCENTAGE = "percentage"


# Value of a fully saturated channel (and of an opaque alpha)
channel_max = {
    FormatType.INT: 255,
    FormatType.FLOAT: 1.0,
    FormatType.PERCENTAGE: 100.0,
}

format_classes = {
    FormatType.INT: int,
    FormatType.FLOAT: float,
    FormatType.PERCENTAGE: float,
}

# Arrays are stored with these dtypes after validation
default_format_dtypes = {
    FormatType.INT: np.int64,
    FormatType.FLOAT: np.float64,
    FormatType.PERCENTAGE: np.float64,
}

format_valid_dtypes = {
    FormatType.INT: (int, np.integer),
    FormatType.FLOAT: (float, np.floating),
    FormatType.PERCENTAGE: (float, np.floating),
}
