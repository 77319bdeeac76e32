"""epochconv error hierarchy.

All project exceptions inherit from EpochconvError, enabling:
- ``except EpochconvError`` at the CLI boundary
- Fine-grained catches in library callers (``except MalformedInputError``)

Hierarchy:
    EpochconvError
    ├── UnsupportedFormatError      # no rule matches a format identifier
    ├── MalformedInputError         # token is not a signed 64-bit integer
    ├── OutOfRangeError             # instant cannot be rendered
    ├── InputReadError              # reading stdin failed
    └── ConversionError             # per-unit failure with stage context
"""

from __future__ import annotations

from typing import Any


class EpochconvError(Exception):
    """Base class for all epochconv errors."""


class UnsupportedFormatError(EpochconvError):
    def __init__(self, identifier: str) -> None:
        super().__init__("Unsupported format")
        self.identifier = identifier


class MalformedInputError(EpochconvError):
    def __init__(self, token: str, reason: str = "invalid syntax") -> None:
        super().__init__(f"parsing {token!r}: {reason}")
        self.token = token
        self.reason = reason


class OutOfRangeError(EpochconvError):
    def __init__(self, instant: Any) -> None:
        super().__init__(
            f"{instant} is outside the renderable range "
            "0001-01-01T00:00:00Z to 9999-12-31T23:59:59Z (four-digit years only)"
        )
        self.instant = instant


class InputReadError(EpochconvError):
    """Raised when standard input cannot be read."""


class ConversionError(EpochconvError):
    """A single unit failed to convert.

    ``stage`` is ``"Input"`` for decode failures and ``"Output"`` for encode
    failures; ``value`` is the token or instant being converted.
    """

    def __init__(self, stage: str, value: object, format_name: str, cause: EpochconvError) -> None:
        super().__init__(f"{stage}: {value} as {format_name}: {cause}")
        self.stage = stage
        self.value = value
        self.format_name = format_name
        self.cause = cause


__all__ = [
    "ConversionError",
    "EpochconvError",
    "InputReadError",
    "MalformedInputError",
    "OutOfRangeError",
    "UnsupportedFormatError",
]
