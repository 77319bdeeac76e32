"""Line-oriented conversion driver.

Units are converted strictly in input order. The first failure stops the
run; lines already yielded stay yielded.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import BinaryIO

from epochconv.config import Settings
from epochconv.decode import decode
from epochconv.encode import encode
from epochconv.errors import ConversionError, EpochconvError, InputReadError
from epochconv.lib.log import get_logger

logger = get_logger(__name__)


def collect_units(args: Sequence[str], stream: BinaryIO) -> list[str]:
    """Return the positional args, or every newline-separated unit of ``stream``.

    The stream is read as raw bytes and decoded as UTF-8 here, so only
    ``"\\n"`` separates units; ``"\\r"`` stays part of its unit. The stream
    is read only when ``args`` is empty. A trailing newline leaves a
    trailing empty unit.

    Raises:
        InputReadError: If the stream cannot be read or decoded.
    """
    if args:
        logger.info("using positional units", count=len(args))
        return list(args)
    try:
        data = stream.read().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputReadError(f"reading standard input: {exc}") from exc
    units = data.split("\n")
    logger.info("read units from stdin", count=len(units))
    return units


def convert_unit(token: str, settings: Settings) -> str:
    """Decode then encode one token, attaching stage context to failures."""
    try:
        instant = decode(token, settings.from_format)
    except EpochconvError as exc:
        raise ConversionError("Input", token, settings.from_format, exc) from exc
    try:
        text = encode(instant, settings.to_format)
    except EpochconvError as exc:
        raise ConversionError("Output", instant, settings.to_format, exc) from exc
    logger.debug("converted", token=token, seconds=instant.seconds, nanos=instant.nanos)
    return text


def convert_units(units: Iterable[str], settings: Settings) -> Iterator[str]:
    for token in units:
        yield convert_unit(token, settings)


__all__ = ["collect_units", "convert_unit", "convert_units"]
