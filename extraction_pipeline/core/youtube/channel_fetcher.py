"""
Channel Info Fetcher
Resolves a channel identifier to its title and uploads playlist with one channels.list call.
"""

import logging

from googleapiclient.errors import HttpError

from .channel_identifier import ChannelIdentifier, IdentifierKind
from .channel_info import ChannelInfo
from .errors import ChannelLookupFailed, ChannelNotFound, UploadsPlaylistMissing
from .progress import ProgressReporter
from .youtube_client import NETWORK_ERRORS, YouTubeClient, api_error_message, describe_http_error

logger = logging.getLogger(__name__)

UNKNOWN_CHANNEL_TITLE = "Unknown channel title"


class ChannelInfoFetcher:
    """Service responsible for resolving the channel behind an identifier."""

    def __init__(self, youtube_client: YouTubeClient, reporter: ProgressReporter):
        self._client = youtube_client
        self._reporter = reporter

    def fetch(self, identifier: ChannelIdentifier) -> ChannelInfo:
        """
        Resolve the identifier into a ChannelInfo.

        Raises:
            ChannelLookupFailed: the request failed or the API returned an error object
            ChannelNotFound: the API knows no channel for the identifier
            UploadsPlaylistMissing: the channel exposes no uploads playlist
        """
        logger.info(f"Resolving channel by {identifier.query_param}: {identifier.value}")

        try:
            response = self._client.list_channels(identifier)
        except HttpError as e:
            message = describe_http_error(e)
            logger.error(f"Channel API error: {message}")
            raise ChannelLookupFailed(f"API error while fetching channel: {message}")
        except NETWORK_ERRORS as e:
            logger.error(f"Network error while fetching channel info: {e}")
            raise ChannelLookupFailed(f"Network error while fetching channel info: {e}")

        error_message = api_error_message(response)
        if error_message:
            logger.error(f"Channel API error: {error_message}")
            raise ChannelLookupFailed(error_message)

        items = response.get("items") or []
        if not items:
            raise ChannelNotFound()

        data = items[0]
        snippet = data.get("snippet") or {}
        content_details = data.get("contentDetails") or {}

        title = snippet.get("title") or UNKNOWN_CHANNEL_TITLE
        uploads_playlist_id = (content_details.get("relatedPlaylists") or {}).get("uploads")
        if not uploads_playlist_id:
            raise UploadsPlaylistMissing(channel_title=title)

        channel = ChannelInfo(
            channel_id=data.get("id", ""),
            title=title,
            uploads_playlist_id=uploads_playlist_id,
            description=snippet.get("description", ""),
            custom_url=snippet.get("customUrl", "")
        )

        # Cross-check: a handle lookup should land on a channel with that customUrl
        if identifier.kind is IdentifierKind.BY_HANDLE and channel.custom_url:
            expected = "@" + identifier.query_value.lower()
            if channel.custom_url.lower() != expected:
                logger.warning(
                    f"Handle mismatch: looked up {identifier.value}, "
                    f"channel customUrl is {channel.custom_url}"
                )

        logger.info(f"Channel resolved: {channel}")
        self._reporter.update(
            message=f'Channel "{title}" found. Uploads playlist ID: {uploads_playlist_id}'
        )
        return channel
