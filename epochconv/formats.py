"""Format rules and identifier resolution.

A rule is selected by matching a user-supplied identifier against the
rule's aliases after lowercasing and trimming whitespace. The first alias
of each rule is its canonical name and the default when none is given.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from epochconv.errors import UnsupportedFormatError


@dataclass(frozen=True)
class FormatRule:
    name: str
    aliases: tuple[str, ...]

    def default(self) -> str:
        return self.aliases[0] if self.aliases else ""

    def matches(self, identifier: str) -> bool:
        return identifier.strip().lower() in self.aliases


SECONDS = FormatRule("seconds", ("unix", "sec", "secs"))
MILLISECONDS = FormatRule("milliseconds", ("milli", "millis"))
MICROSECONDS = FormatRule("microseconds", ("micro", "micros"))
NANOSECONDS = FormatRule("nanoseconds", ("nano", "nanos"))

RFC3339 = FormatRule("rfc3339", ("rfc3339",))

INPUT_RULES: tuple[FormatRule, ...] = (SECONDS, MILLISECONDS, MICROSECONDS, NANOSECONDS)
OUTPUT_RULES: tuple[FormatRule, ...] = (RFC3339,)

DEFAULT_INPUT_FORMAT = SECONDS.default()
DEFAULT_OUTPUT_FORMAT = RFC3339.default()


def resolve_format(identifier: str, rules: Iterable[FormatRule]) -> FormatRule:
    """Return the first rule whose aliases contain ``identifier``.

    Raises:
        UnsupportedFormatError: If no rule matches.
    """
    for rule in rules:
        if rule.matches(identifier):
            return rule
    raise UnsupportedFormatError(identifier)


def format_aliases(rules: Iterable[FormatRule]) -> list[str]:
    """Flatten the aliases of ``rules`` in declaration order (for help text)."""
    return [alias for rule in rules for alias in rule.aliases]


__all__ = [
    "DEFAULT_INPUT_FORMAT",
    "DEFAULT_OUTPUT_FORMAT",
    "FormatRule",
    "INPUT_RULES",
    "MICROSECONDS",
    "MILLISECONDS",
    "NANOSECONDS",
    "OUTPUT_RULES",
    "RFC3339",
    "SECONDS",
    "format_aliases",
    "resolve_format",
]
