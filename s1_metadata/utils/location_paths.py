"""Storage-location hints for extracted Sentinel-1 products.

Generates the archive location recorded on every feature:

    {YYYY}/{MM}/{DD}/{platform}/{title}

The date comes from the acquisition start timestamp.  This is string
formatting only; the feature store decides what the path points at.
"""

from __future__ import annotations

import re

# Any run of non-digits between date components is a separator
_DATE_SEPARATOR_RE = re.compile(r"\D+")

# Widths of the year, month and day groups
_DATE_GROUP_WIDTHS = (4, 2, 2)


def normalise_date_segment(start_time: str) -> str:
    """Turn the date part of a timestamp into a ``YYYY/MM/DD`` path segment.

    The date part is everything before the ``T`` time designator (or the
    first whitespace).  Separators of any kind are replaced by ``/``.

    Args:
        start_time: Acquisition start timestamp, e.g.
            ``"2015-07-27T04:47:06.611"``.

    Returns:
        The slash-delimited date, e.g. ``"2015/07/27"``.

    Raises:
        ValueError: If the date part is not three separated digit groups
            of four, two and two digits.
    """
    date_part = re.split(r"[T\s]", start_time.strip(), maxsplit=1)[0]
    groups = [part for part in _DATE_SEPARATOR_RE.split(date_part) if part]
    if tuple(len(part) for part in groups) != _DATE_GROUP_WIDTHS:
        msg = f"expected a YYYY-MM-DD date before the time, got {date_part!r}"
        raise ValueError(msg)
    return "/".join(groups)


def build_location_path(start_time: str, platform: str, title: str) -> str:
    """Build the storage-location hint for a product.

    Format: ``{YYYY}/{MM}/{DD}/{platform}/{title}``

    Args:
        start_time: Acquisition start timestamp.
        platform: Mission identifier (e.g. ``"S1A"``).
        title: Product title.

    Returns:
        Deterministic location string.

    Raises:
        ValueError: If *start_time* carries no usable date.
    """
    return f"{normalise_date_segment(start_time)}/{platform.strip()}/{title.strip()}"
