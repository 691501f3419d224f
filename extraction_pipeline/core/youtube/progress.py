"""
Extraction progress reporting.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class ExtractionState(Enum):
    IDLE = "idle"
    VALIDATING_INPUT = "validating_input"
    FETCHING_CHANNEL_INFO = "fetching_channel_info"
    FETCHING_PLAYLIST_ITEMS = "fetching_playlist_items"
    FETCHING_VIDEO_STATS = "fetching_video_stats"
    COMPLETED = "completed"
    ERROR = "error"


@dataclass
class ExtractionProgress:
    state: ExtractionState = ExtractionState.IDLE
    message: str = ""
    videos_found: int = 0
    videos_processed_for_stats: int = 0
    current_page: int = 0
    total_pages: int = 0


ProgressCallback = Callable[[ExtractionProgress], None]


class ProgressReporter:
    """
    Single-writer progress channel.

    Every update is applied to the current snapshot and pushed to the callback
    right away, in the order the updates happen. The callback receives a copy,
    so callers may keep it without seeing later mutations.
    """

    def __init__(self, on_progress: Optional[ProgressCallback] = None):
        self._on_progress = on_progress
        self._progress = ExtractionProgress()

    @property
    def snapshot(self) -> ExtractionProgress:
        return replace(self._progress)

    def update(self, **changes) -> None:
        for field_name, value in changes.items():
            if not hasattr(self._progress, field_name):
                raise AttributeError(f"Unknown progress field: {field_name}")
            setattr(self._progress, field_name, value)

        if changes.get("message"):
            logger.debug(changes["message"])

        if self._on_progress is not None:
            self._on_progress(replace(self._progress))


def progress_percentage(progress: ExtractionProgress) -> int:
    """Overall completion in percent, weighted per phase (playlist pages 70%, stats 20%)."""
    state = progress.state

    if state is ExtractionState.COMPLETED:
        return 100
    if state is ExtractionState.VALIDATING_INPUT:
        return 5
    if state is ExtractionState.FETCHING_CHANNEL_INFO:
        return 10
    if state is ExtractionState.FETCHING_PLAYLIST_ITEMS:
        page_progress = 0.0
        if progress.total_pages > 0 and progress.current_page:
            page_progress = progress.current_page / progress.total_pages * 70
        return int(10 + min(page_progress, 70))
    if state is ExtractionState.FETCHING_VIDEO_STATS:
        stats_progress = 0.0
        if progress.videos_found > 0 and progress.videos_processed_for_stats:
            stats_progress = progress.videos_processed_for_stats / progress.videos_found * 20
        return int(80 + min(stats_progress, 19))
    return 0
