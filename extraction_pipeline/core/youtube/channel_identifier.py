"""
Channel Identifier Resolver
Turns a channel URL into the identifier channels.list understands.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional
from urllib.parse import unquote, urlparse

logger = logging.getLogger(__name__)

CHANNEL_ID_PREFIX = "UC"

# Path segments that are channel tabs or routing prefixes, never a bare handle
RESERVED_SEGMENTS = frozenset(
    ["channel", "c", "user", "videos", "featured", "playlists", "community", "about", "live"]
)


class IdentifierKind(Enum):
    """How the channel is named; the value is the channels.list query parameter."""
    BY_ID = "id"
    BY_HANDLE = "forHandle"
    BY_USERNAME = "forUsername"


@dataclass(frozen=True)
class ChannelIdentifier:
    kind: IdentifierKind
    value: str

    @property
    def query_param(self) -> str:
        return self.kind.value

    @property
    def query_value(self) -> str:
        """Value sent to the API (handles go without the leading '@')."""
        if self.kind is IdentifierKind.BY_HANDLE:
            return self.value[1:] if self.value.startswith("@") else self.value
        return self.value


def parse_channel_identifier(channel_url: str) -> Optional[ChannelIdentifier]:
    """
    Extract a channel identifier from a YouTube URL.

    Supported shapes:
    - https://www.youtube.com/@handle[/videos]
    - https://www.youtube.com/channel/UC...
    - https://www.youtube.com/c/name and /user/name (legacy usernames)
    - https://www.youtube.com/name (bare handle, or bare UC... id)

    Returns:
        The identifier, or None when the URL cannot be parsed or names no channel.
    """
    try:
        parsed = urlparse(channel_url.strip())
    except (AttributeError, ValueError) as e:
        logger.warning(f"Could not parse channel URL {channel_url!r}: {e}")
        return None

    if not parsed.scheme or not parsed.netloc:
        logger.warning(f"Not an absolute URL: {channel_url!r}")
        return None

    segments = [unquote(s) for s in parsed.path.split("/") if s]
    if not segments:
        logger.warning(f"Could not determine channel identifier from URL: {channel_url}")
        return None

    first = segments[0]
    second = segments[1] if len(segments) > 1 else None

    if first.startswith("@"):
        return ChannelIdentifier(IdentifierKind.BY_HANDLE, first)
    if first == "channel" and second:
        return ChannelIdentifier(IdentifierKind.BY_ID, second)
    if first in ("c", "user") and second:
        return ChannelIdentifier(IdentifierKind.BY_USERNAME, second)

    if len(segments) == 1 and first not in RESERVED_SEGMENTS:
        if first.startswith(CHANNEL_ID_PREFIX):
            return ChannelIdentifier(IdentifierKind.BY_ID, first)
        # Handles are the primary modern form; forHandle also resolves them without '@'
        return ChannelIdentifier(IdentifierKind.BY_HANDLE, first)

    logger.warning(f"Could not determine channel identifier from URL: {channel_url}")
    return None
