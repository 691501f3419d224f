"""
Playlist Paginator
Walks a channel's uploads playlist page by page.
"""

import logging
import math
import time
from typing import Callable, List, Optional

from googleapiclient.errors import HttpError

from .errors import PlaylistFetchFailed
from .progress import ProgressReporter
from .video_info import PlaylistVideoRef
from .youtube_client import NETWORK_ERRORS, YouTubeClient, api_error_message, describe_http_error

logger = logging.getLogger(__name__)


class PlaylistPaginator:
    """
    Service responsible for listing every upload of a playlist.

    Responsibilities:
    - Follow nextPageToken until the API stops returning one.
    - Pause a fixed delay before each page request.
    - Keep only items that carry both a video ID and a title.
    - Report page and discovery counters.
    """

    def __init__(
        self,
        youtube_client: YouTubeClient,
        reporter: ProgressReporter,
        page_size: int = 50,
        request_delay: float = 0.2,
        sleep: Callable[[float], None] = time.sleep
    ):
        self._client = youtube_client
        self._reporter = reporter
        self._page_size = page_size
        self._request_delay = request_delay
        self._sleep = sleep

    def collect(self, playlist_id: str) -> List[PlaylistVideoRef]:
        """
        Retrieve every video reference of the playlist, in playlist order.

        Raises:
            PlaylistFetchFailed: any page failed; nothing collected so far is returned
        """
        refs: List[PlaylistVideoRef] = []
        next_page_token: Optional[str] = None
        current_page = 0
        total_pages = 1

        self._reporter.update(
            message="Fetching the video list of the uploads playlist...",
            videos_found=0,
            current_page=0,
            total_pages=total_pages
        )

        while True:
            current_page += 1
            self._reporter.update(
                message=f"Fetching playlist page {current_page}...",
                current_page=current_page,
                total_pages=total_pages
            )

            response = self._fetch_page(playlist_id, next_page_token, current_page)

            total_results = (response.get("pageInfo") or {}).get("totalResults")
            if current_page == 1 and total_results:
                total_pages = math.ceil(total_results / self._page_size)
                logger.info(f"Playlist reports {total_results} items (~{total_pages} pages)")
                self._reporter.update(total_pages=total_pages)

            for item in response.get("items") or []:
                ref = self._to_ref(item)
                if ref is not None:
                    refs.append(ref)

            self._reporter.update(videos_found=len(refs))
            logger.info(f"Page {current_page}: {len(refs)} videos discovered so far")

            next_page_token = response.get("nextPageToken")
            if not next_page_token:
                break

        return refs

    def _fetch_page(self, playlist_id: str, page_token: Optional[str], page: int) -> dict:
        """One playlistItems.list call, translated to PlaylistFetchFailed on any failure."""
        self._sleep(self._request_delay)
        try:
            response = self._client.list_playlist_items(
                playlist_id=playlist_id,
                max_results=self._page_size,
                page_token=page_token
            )
        except HttpError as e:
            message = describe_http_error(e)
            logger.error(f"PlaylistItems API error on page {page}: {message}")
            raise PlaylistFetchFailed(page, message)
        except NETWORK_ERRORS as e:
            logger.error(f"Network error fetching playlist page {page}: {e}")
            raise PlaylistFetchFailed(page, f"network error: {e}")

        error_message = api_error_message(response)
        if error_message:
            logger.error(f"PlaylistItems API error on page {page}: {error_message}")
            raise PlaylistFetchFailed(page, error_message)

        return response

    @staticmethod
    def _to_ref(item: dict) -> Optional[PlaylistVideoRef]:
        snippet = item.get("snippet") or {}
        video_id = (snippet.get("resourceId") or {}).get("videoId")
        title = snippet.get("title")
        if not video_id or not title:
            return None
        return PlaylistVideoRef(
            video_id=video_id,
            title=title,
            published_at=snippet.get("publishedAt")
        )
