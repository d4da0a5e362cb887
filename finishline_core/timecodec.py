"""Conversion between HH:MM:SS finish-time text and whole seconds.

decode_time() is deliberately lenient: each component is read as a leading
integer (sign + digits, trailing characters ignored) and no component has an
upper bound, so "25:90:90" decodes arithmetically. Strict format checking
belongs to the input layer (see validation.RegistrationConfig.TIME_PATTERN).
"""
from __future__ import annotations

import re

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_leading_int(part: str | None) -> int | None:
    if part is None:
        return None
    match = _LEADING_INT.match(part)
    if not match:
        return None
    return int(match.group(1), 10)


def decode_time(text: str | None) -> int | None:
    """Parse "HH:MM:SS" into total seconds.

    Returns:
        Total seconds, or None when text is empty/None or any of the three
        components is missing or not numeric.

    Examples:
        - "01:02:03" -> 3723
        - "25:90:90" -> 95490
        - "" -> None
        - "12:xx:00" -> None
    """
    if not text:
        return None
    parts = text.split(":")
    hours, minutes, seconds = (
        _parse_leading_int(parts[i] if i < len(parts) else None) for i in range(3)
    )
    if hours is None or minutes is None or seconds is None:
        return None
    return hours * 3600 + minutes * 60 + seconds


def encode_time(seconds: int) -> str:
    """Format non-negative seconds as zero-padded "HH:MM:SS"."""
    hours, rest = divmod(int(seconds), 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"
