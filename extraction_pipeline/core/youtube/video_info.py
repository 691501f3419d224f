"""
Video Domain Models
Playlist references and the final per-video records of an extraction run.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

# View-count placeholders used when no real count is available
VIEWS_NOT_AVAILABLE = "N/A"
VIEWS_API_ERROR = "API error"
VIEWS_NETWORK_ERROR = "network error"


@dataclass(frozen=True)
class PlaylistVideoRef:
    """One upload discovered in the uploads playlist."""
    video_id: str
    title: str
    published_at: Optional[str] = None


@dataclass(frozen=True)
class VideoRecord:
    """
    Domain model representing a single video in the extraction output.

    `views` is kept as the API string (counts can exceed 32 bits) or one of the
    VIEWS_* placeholders.
    """
    video_id: str
    title: str
    views: str
    published_at: Optional[str] = None

    @classmethod
    def from_ref(cls, ref: PlaylistVideoRef, views: str) -> "VideoRecord":
        return cls(
            video_id=ref.video_id,
            title=ref.title,
            views=views,
            published_at=ref.published_at,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert object to dictionary for serialization (e.g., CSV)."""
        return asdict(self)
