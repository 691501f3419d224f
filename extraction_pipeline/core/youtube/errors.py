"""
Extraction error taxonomy.

Every fatal failure of a run is an ExtractionError; the orchestrator turns it
into the error of the ExtractionResult. Per-batch statistics failures are not
errors, they degrade the affected records to a placeholder view count.
"""

from typing import Optional


class ExtractionError(Exception):
    """Base class for fatal extraction failures."""

    default_message = "Extraction failed"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def kind(self) -> str:
        return type(self).__name__


class InvalidInput(ExtractionError):
    """Missing API key or a URL that names no channel. Raised before any request."""
    default_message = "Invalid input"


class ChannelLookupFailed(ExtractionError):
    """channels.list failed (HTTP error, API error object or transport failure)."""
    default_message = "Channel lookup failed"


class ChannelNotFound(ExtractionError):
    default_message = "Channel not found by the API for the given identifier"


class UploadsPlaylistMissing(ExtractionError):
    default_message = "Could not find the uploads playlist for this channel"

    def __init__(self, message: Optional[str] = None, channel_title: Optional[str] = None):
        super().__init__(message)
        self.channel_title = channel_title


class PlaylistFetchFailed(ExtractionError):
    """A playlistItems.list page failed; the whole run is aborted."""

    def __init__(self, page: int, message: str):
        super().__init__(f"Error fetching playlist items (page {page}): {message}")
        self.page = page
        self.reason = message
