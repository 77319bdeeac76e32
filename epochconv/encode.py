"""Output encoding: Instants to text."""

from __future__ import annotations

from collections.abc import Callable

from epochconv.errors import OutOfRangeError
from epochconv.formats import OUTPUT_RULES, RFC3339, FormatRule, resolve_format
from epochconv.instant import Instant


def format_rfc3339(instant: Instant) -> str:
    """Render as ``YYYY-MM-DDTHH:MM:SSZ`` in UTC, dropping sub-second digits.

    Raises:
        OutOfRangeError: If the instant falls outside years 0001-9999.
    """
    try:
        dt = instant.to_datetime()
    except OverflowError as exc:
        raise OutOfRangeError(instant) from exc
    return dt.isoformat(timespec="seconds").replace("+00:00", "Z")


RENDERERS: dict[str, Callable[[Instant], str]] = {
    RFC3339.name: format_rfc3339,
}


def encode_with_rule(instant: Instant, rule: FormatRule) -> str:
    return RENDERERS[rule.name](instant)


def encode(instant: Instant, identifier: str) -> str:
    """Render ``instant`` using the output rule named by ``identifier``.

    Raises:
        UnsupportedFormatError: If ``identifier`` names no output rule.
        OutOfRangeError: If the instant cannot be rendered.
    """
    rule = resolve_format(identifier, OUTPUT_RULES)
    return encode_with_rule(instant, rule)


__all__ = ["RENDERERS", "encode", "encode_with_rule", "format_rfc3339"]
