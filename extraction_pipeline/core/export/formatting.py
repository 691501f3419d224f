"""
Presentation helpers: view-count parsing, sorting and Brazilian (pt-BR) formatting.
"""

import re
from datetime import datetime, timezone
from typing import List, Optional, Union

from ..youtube.video_info import VideoRecord

NOT_AVAILABLE = "N/A"
INVALID_DATE = "Data Inválida"
_NON_DIGITS = re.compile(r"[^0-9]")


def parse_views(views: Optional[str]) -> int:
    """Numeric view count for sorting; placeholders and garbage rank as -1."""
    if not isinstance(views, str):
        return -1
    cleaned = views.replace(",", "").strip()
    return int(cleaned) if cleaned.isdecimal() else -1


def sort_videos_by_views(videos: List[VideoRecord]) -> List[VideoRecord]:
    """Sort by views, highest first. Ties keep their original relative order."""
    # sorted() stays stable with reverse=True
    return sorted(videos, key=lambda v: parse_views(v.views), reverse=True)


def format_brazilian_number(value: Union[str, int, None]) -> str:
    """
    Format a count with '.' as the thousands separator ("1234567" -> "1.234.567").

    Non-numeric strings (e.g. view placeholders) are returned unchanged.
    """
    if value is None:
        return NOT_AVAILABLE

    if isinstance(value, str):
        digits = _NON_DIGITS.sub("", value)
        if not digits:
            return value
        number = int(digits)
    else:
        number = int(value)

    return f"{number:,}".replace(",", ".")


def format_iso_date_to_brazilian(iso_date: Optional[str]) -> str:
    """ISO 8601 timestamp -> DD/MM/YYYY (UTC)."""
    if not iso_date:
        return NOT_AVAILABLE

    try:
        # fromisoformat() only accepts a trailing 'Z' from Python 3.11 on
        parsed = datetime.fromisoformat(iso_date.strip().replace("Z", "+00:00"))
    except ValueError:
        return INVALID_DATE

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.strftime("%d/%m/%Y")
