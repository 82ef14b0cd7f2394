"""Parsing of track and disc number tags."""

import re
from typing import Any, Optional

from loguru import logger

# Leading integer of values like "3", "03/12", "3 of 12"
_LEADING_NUMBER = re.compile(r'^\s*(\d+)')


def parse_tag_number(value: Any) -> Optional[int]:
    """
    Extract a non-negative number from a raw tag value.

    Handles the shapes tag libraries hand back: plain integers,
    strings in "N" or "N/Total" form, MP4 (N, Total) tuples and
    single-item lists of any of those.

    Args:
        value: Raw tag value.

    Returns:
        The first integer component, or None if absent or malformed.

    Examples:
        >>> parse_tag_number("3/12")
        3
        >>> parse_tag_number(["07"])
        7
        >>> parse_tag_number("side A")
    """
    if value is None:
        return None

    if isinstance(value, list):
        return parse_tag_number(value[0]) if value else None

    if isinstance(value, tuple):
        return parse_tag_number(value[0]) if value else None

    if isinstance(value, bool):
        return None

    if isinstance(value, int):
        return value if value >= 0 else None

    if not isinstance(value, str):
        value = str(value)

    match = _LEADING_NUMBER.match(value)
    if not match:
        if value.strip():
            logger.debug(f"Malformed number tag ignored: {value!r}")
        return None
    return int(match.group(1))
