"""CLI helper functions."""

from __future__ import annotations

from typing import NoReturn

FAILURE_MARKER = "* * *"


def fail(message: object) -> NoReturn:
    raise SystemExit(f"{FAILURE_MARKER} {message}")
