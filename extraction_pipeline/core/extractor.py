"""
Channel Video Extractor
Runs the full pipeline: identify channel -> resolve uploads playlist -> list uploads -> fetch views.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .config.app_config import AppConfig
from .youtube.channel_fetcher import ChannelInfoFetcher
from .youtube.channel_identifier import parse_channel_identifier
from .youtube.errors import ExtractionError, InvalidInput, UploadsPlaylistMissing
from .youtube.playlist_paginator import PlaylistPaginator
from .youtube.progress import ExtractionState, ProgressCallback, ProgressReporter
from .youtube.stats_batcher import StatisticsBatcher
from .youtube.video_info import VideoRecord
from .youtube.youtube_client import YouTubeClient

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str, Optional[str]], YouTubeClient]


def default_client_factory(api_key: str, api_endpoint: Optional[str] = None) -> YouTubeClient:
    return YouTubeClient(api_key, api_endpoint=api_endpoint)


@dataclass
class ExtractionResult:
    """Terminal artifact of one run. On error `videos` is always empty."""
    official_channel_title: Optional[str] = None
    videos: List[VideoRecord] = field(default_factory=list)
    error: Optional[str] = None
    error_kind: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ChannelVideoExtractor:
    """
    Orchestrator for one extraction run per call.

    Fatal failures (input, channel lookup, playlist pages) end the run with an
    error result and no video data. Statistics failures only degrade the
    affected records.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        client_factory: ClientFactory = default_client_factory,
        sleep: Callable[[float], None] = time.sleep
    ):
        self._config = config or AppConfig()
        self._client_factory = client_factory
        self._sleep = sleep

    def extract(
        self,
        channel_url: str,
        api_key: str,
        on_progress: Optional[ProgressCallback] = None
    ) -> ExtractionResult:
        """
        Extract every public upload of the channel with its view count.

        Returns:
            ExtractionResult: videos in uploads-playlist order, or an error.
        """
        reporter = ProgressReporter(on_progress)
        channel_title: Optional[str] = None

        try:
            reporter.update(
                state=ExtractionState.VALIDATING_INPUT,
                message="Identifying channel...",
                videos_found=0,
                videos_processed_for_stats=0,
                current_page=0,
                total_pages=0
            )
            if not api_key or not api_key.strip():
                raise InvalidInput("A YouTube API key is required")

            identifier = parse_channel_identifier(channel_url or "")
            if identifier is None:
                raise InvalidInput("Could not identify the channel from the given URL")

            client = self._client_factory(api_key.strip(), self._config.api_endpoint)

            # Phase 1: channel info
            reporter.update(
                state=ExtractionState.FETCHING_CHANNEL_INFO,
                message="Fetching channel information from the API..."
            )
            channel = ChannelInfoFetcher(client, reporter).fetch(identifier)
            channel_title = channel.title

            # Phase 2: uploads playlist
            reporter.update(state=ExtractionState.FETCHING_PLAYLIST_ITEMS)
            paginator = PlaylistPaginator(
                client,
                reporter,
                page_size=self._config.page_size,
                request_delay=self._config.request_delay,
                sleep=self._sleep
            )
            refs = paginator.collect(channel.uploads_playlist_id)
            logger.info(f"Discovered {len(refs)} videos in uploads playlist")
            reporter.update(
                message=f"{len(refs)} video IDs collected. Fetching statistics...",
                videos_found=len(refs)
            )

            # Phase 3: statistics
            reporter.update(state=ExtractionState.FETCHING_VIDEO_STATS)
            batcher = StatisticsBatcher(
                client,
                reporter,
                batch_size=self._config.stats_batch_size,
                request_delay=self._config.request_delay,
                sleep=self._sleep
            )
            videos = batcher.fetch(refs)

        except ExtractionError as e:
            if isinstance(e, UploadsPlaylistMissing):
                channel_title = e.channel_title
            logger.error(f"Extraction failed ({e.kind}): {e.message}")
            reporter.update(state=ExtractionState.ERROR, message=f"Extraction error: {e.message}")
            return ExtractionResult(
                official_channel_title=channel_title,
                videos=[],
                error=e.message,
                error_kind=e.kind
            )

        reporter.update(
            state=ExtractionState.COMPLETED,
            message=f"Extraction complete. {len(videos)} videos processed."
        )
        logger.info(f"Extraction complete for {channel_title!r}: {len(videos)} videos")
        return ExtractionResult(official_channel_title=channel_title, videos=videos)


def extract_channel_videos(
    channel_url: str,
    api_key: str,
    on_progress: Optional[ProgressCallback] = None,
    config: Optional[AppConfig] = None
) -> ExtractionResult:
    """Run one extraction with the given (or default) configuration."""
    return ChannelVideoExtractor(config).extract(channel_url, api_key, on_progress)
