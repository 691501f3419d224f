"""
Export module: formatting and file writers for extracted video lists
"""

from .formatting import sort_videos_by_views
from .video_exporter import VideoExporter

__all__ = ["VideoExporter", "sort_videos_by_views"]
