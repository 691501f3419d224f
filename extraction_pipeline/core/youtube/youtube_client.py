"""
YouTube API Client
Thin wrapper over the three YouTube Data API v3 read endpoints the extractor uses.
"""

import logging
from http.client import HTTPException
from typing import Any, Dict, List, Optional

from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from httplib2 import HttpLib2Error

from .channel_identifier import ChannelIdentifier

logger = logging.getLogger(__name__)

# Failures below the HTTP layer (DNS, refused connections, timeouts, truncated
# bodies) and 2xx bodies that are not JSON, which JsonModel reports as ValueError
NETWORK_ERRORS = (HttpLib2Error, HTTPException, OSError, ValueError)


def api_error_message(response: Dict[str, Any]) -> Optional[str]:
    """Return the message of an API error object embedded in a response body, if any."""
    error = response.get("error") if isinstance(response, dict) else None
    if not error:
        return None
    if isinstance(error, dict):
        return error.get("message") or f"API error {error.get('code', '')}".strip()
    return str(error)


def describe_http_error(error: HttpError) -> str:
    """Human readable message for an HttpError, preferring the API's own message."""
    reason = getattr(error, "reason", None) or "Unknown error"
    status = getattr(error.resp, "status", None)
    return f"{reason} (HTTP {status})" if status else reason


class YouTubeClient:
    """
    YouTube Data API client.

    Every method issues exactly one request and returns the decoded JSON body.
    HttpError and transport errors propagate to the caller, which decides
    whether they are fatal for the run.
    """

    def __init__(self, api_key: str, api_endpoint: Optional[str] = None, service: Any = None):
        """Initialize the YouTube API service (or use an injected one)."""
        if service is not None:
            self._service = service
            return

        client_options = {"api_endpoint": api_endpoint} if api_endpoint else None
        # cache_discovery=False prevents the 'file_cache' warning in logs
        self._service = build(
            "youtube", "v3",
            developerKey=api_key,
            cache_discovery=False,
            client_options=client_options
        )

    def list_channels(self, identifier: ChannelIdentifier) -> Dict[str, Any]:
        """channels.list by id, forHandle or forUsername."""
        logger.debug(f"channels.list {identifier.query_param}={identifier.query_value}")
        params = {identifier.query_param: identifier.query_value}
        return self._service.channels().list(
            part="snippet,contentDetails",
            **params
        ).execute()

    def list_playlist_items(
        self,
        playlist_id: str,
        max_results: int = 50,
        page_token: Optional[str] = None
    ) -> Dict[str, Any]:
        """Low-level API call to playlistItems.list."""
        params = {
            "part": "snippet",
            "playlistId": playlist_id,
            "maxResults": max_results,
        }
        if page_token:
            params["pageToken"] = page_token
        return self._service.playlistItems().list(**params).execute()

    def list_video_statistics(self, video_ids: List[str]) -> Dict[str, Any]:
        """Low-level API call to videos.list for view statistics of one batch."""
        return self._service.videos().list(
            part="statistics",
            id=",".join(video_ids)
        ).execute()
