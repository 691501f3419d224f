"""
YouTube API integration module
"""

from .channel_identifier import ChannelIdentifier, IdentifierKind, parse_channel_identifier
from .channel_info import ChannelInfo
from .progress import ExtractionProgress, ExtractionState, ProgressReporter, progress_percentage
from .video_info import PlaylistVideoRef, VideoRecord
from .youtube_client import YouTubeClient

__all__ = [
    "ChannelIdentifier",
    "ChannelInfo",
    "ExtractionProgress",
    "ExtractionState",
    "IdentifierKind",
    "PlaylistVideoRef",
    "ProgressReporter",
    "VideoRecord",
    "YouTubeClient",
    "parse_channel_identifier",
    "progress_percentage",
]
