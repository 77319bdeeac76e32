"""epochconv - convert epoch timestamps between textual formats.

Example:
    from epochconv import decode, encode

    instant = decode("1700000000000", "millis")
    print(encode(instant, "rfc3339"))  # 2023-11-14T22:13:20Z
"""

from epochconv.config import Settings, load_settings
from epochconv.convert import collect_units, convert_unit, convert_units
from epochconv.decode import decode, parse_integer
from epochconv.encode import encode
from epochconv.errors import (
    ConversionError,
    EpochconvError,
    InputReadError,
    MalformedInputError,
    OutOfRangeError,
    UnsupportedFormatError,
)
from epochconv.formats import INPUT_RULES, OUTPUT_RULES, FormatRule, resolve_format
from epochconv.instant import Instant

__all__ = [
    "ConversionError",
    "EpochconvError",
    "FormatRule",
    "INPUT_RULES",
    "InputReadError",
    "Instant",
    "MalformedInputError",
    "OUTPUT_RULES",
    "OutOfRangeError",
    "Settings",
    "UnsupportedFormatError",
    "collect_units",
    "convert_unit",
    "convert_units",
    "decode",
    "encode",
    "load_settings",
    "parse_integer",
    "resolve_format",
]
