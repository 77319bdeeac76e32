"""Input decoding: integer epoch counts to Instants."""

from __future__ import annotations

import re

from epochconv.errors import MalformedInputError
from epochconv.formats import (
    INPUT_RULES,
    MICROSECONDS,
    MILLISECONDS,
    NANOSECONDS,
    SECONDS,
    FormatRule,
    resolve_format,
)
from epochconv.instant import Instant

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# int() alone would also accept whitespace, underscores and non-ASCII digits
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

NANOS_PER_UNIT: dict[str, int] = {
    SECONDS.name: 1_000_000_000,
    MILLISECONDS.name: 1_000_000,
    MICROSECONDS.name: 1_000,
    NANOSECONDS.name: 1,
}


def parse_integer(token: str) -> int:
    """Parse a signed base-10 integer that fits in 64 bits.

    Raises:
        MalformedInputError: If the token is not such an integer.
    """
    if not _INTEGER_RE.fullmatch(token):
        raise MalformedInputError(token)
    value = int(token)
    if not INT64_MIN <= value <= INT64_MAX:
        raise MalformedInputError(token, "value out of range")
    return value


def decode_with_rule(token: str, rule: FormatRule) -> Instant:
    nanos_per_unit = NANOS_PER_UNIT[rule.name]
    return Instant.from_count(parse_integer(token), nanos_per_unit)


def decode(token: str, identifier: str) -> Instant:
    """Decode ``token`` using the input rule named by ``identifier``.

    The identifier is resolved before the token is looked at, so an unknown
    format is reported even for a malformed token.

    Raises:
        UnsupportedFormatError: If ``identifier`` names no input rule.
        MalformedInputError: If ``token`` is not a signed 64-bit integer.
    """
    rule = resolve_format(identifier, INPUT_RULES)
    return decode_with_rule(token, rule)


__all__ = ["INT64_MAX", "INT64_MIN", "NANOS_PER_UNIT", "decode", "decode_with_rule", "parse_integer"]
