"""
Statistics Batcher
Fetches view counts for discovered videos in batches of IDs.
"""

import logging
import math
import time
from typing import Callable, Dict, List

from googleapiclient.errors import HttpError

from .progress import ProgressReporter
from .video_info import (
    PlaylistVideoRef,
    VideoRecord,
    VIEWS_API_ERROR,
    VIEWS_NETWORK_ERROR,
    VIEWS_NOT_AVAILABLE,
)
from .youtube_client import NETWORK_ERRORS, YouTubeClient, api_error_message, describe_http_error

logger = logging.getLogger(__name__)


class StatisticsBatcher:
    """
    Service responsible for attaching view counts to playlist references.

    A failed batch never aborts the run: its records get a placeholder view
    count instead, so the output always has one record per input reference.
    """

    def __init__(
        self,
        youtube_client: YouTubeClient,
        reporter: ProgressReporter,
        batch_size: int = 50,
        request_delay: float = 0.2,
        sleep: Callable[[float], None] = time.sleep
    ):
        self._client = youtube_client
        self._reporter = reporter
        self._batch_size = batch_size
        self._request_delay = request_delay
        self._sleep = sleep

    def fetch(self, refs: List[PlaylistVideoRef]) -> List[VideoRecord]:
        """Return one VideoRecord per reference, in the same order."""
        records: List[VideoRecord] = []
        total = len(refs)
        total_batches = math.ceil(total / self._batch_size)

        self._reporter.update(videos_processed_for_stats=0)

        for i in range(0, total, self._batch_size):
            batch = refs[i:i + self._batch_size]
            batch_number = i // self._batch_size + 1
            self._reporter.update(
                message=f"Fetching statistics for video batch {batch_number} of {total_batches}..."
            )
            logger.info(
                f"Processing batch {batch_number}: Videos {i} to {min(i + self._batch_size, total)}"
            )

            records.extend(self._fetch_batch(batch, batch_number))
            self._reporter.update(videos_processed_for_stats=len(records))

        return records

    def _fetch_batch(self, batch: List[PlaylistVideoRef], batch_number: int) -> List[VideoRecord]:
        self._sleep(self._request_delay)
        try:
            response = self._client.list_video_statistics([ref.video_id for ref in batch])
        except HttpError as e:
            return self._degrade(batch, batch_number, VIEWS_API_ERROR, describe_http_error(e))
        except NETWORK_ERRORS as e:
            return self._degrade(batch, batch_number, VIEWS_NETWORK_ERROR, str(e))

        error_message = api_error_message(response)
        if error_message:
            return self._degrade(batch, batch_number, VIEWS_API_ERROR, error_message)

        views_by_id: Dict[str, str] = {}
        for item in response.get("items") or []:
            statistics = item.get("statistics") or {}
            views_by_id[item.get("id")] = statistics.get("viewCount") or "0"

        missing = sum(1 for ref in batch if ref.video_id not in views_by_id)
        if missing:
            logger.info(f"Batch {batch_number}: {missing} videos without statistics (deleted or private)")

        return [
            VideoRecord.from_ref(ref, views_by_id.get(ref.video_id, VIEWS_NOT_AVAILABLE))
            for ref in batch
        ]

    def _degrade(
        self,
        batch: List[PlaylistVideoRef],
        batch_number: int,
        placeholder: str,
        reason: str
    ) -> List[VideoRecord]:
        logger.warning(
            f"Statistics batch {batch_number} failed ({reason}); "
            f"{len(batch)} videos marked as {placeholder!r}"
        )
        self._reporter.update(
            message=f"Error fetching statistics for batch {batch_number}. View counts may be missing."
        )
        return [VideoRecord.from_ref(ref, placeholder) for ref in batch]
