"""
Application Configuration Model
Represents a validated configuration state
"""

from typing import List, Optional

DEFAULT_PAGE_SIZE = 50
DEFAULT_STATS_BATCH_SIZE = 50
DEFAULT_REQUEST_DELAY = 0.2
SUPPORTED_EXPORT_FORMATS = ("txt", "md", "csv", "xlsx")


class AppConfig:
    """
    Immutable configuration object for the channel views extractor.

    Represents a VALID configuration state only.
    All validation must be performed before instantiation.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        channel_url: Optional[str] = None,
        api_endpoint: Optional[str] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        stats_batch_size: int = DEFAULT_STATS_BATCH_SIZE,
        request_delay: float = DEFAULT_REQUEST_DELAY,
        storage_root: str = "./storage",
        export_formats: Optional[List[str]] = None
    ):
        """
        Initialize AppConfig with validated values.

        Args:
            api_key: YouTube Data API key (optional, may come from the CLI or the credential store)
            channel_url: Channel URL to extract (optional, may come from the CLI)
            api_endpoint: Override for the YouTube API root URL (None = library default)
            page_size: Items requested per playlist page (1 - 50)
            stats_batch_size: Video IDs per statistics request (1 - 50)
            request_delay: Fixed pause in seconds before every API request (>= 0)
            storage_root: Root directory for exports, logs and credentials (default: "./storage")
            export_formats: Export formats written after a run (default: ["csv"])
        """
        self._api_key = api_key
        self._channel_url = channel_url
        self._api_endpoint = api_endpoint
        self._page_size = page_size
        self._stats_batch_size = stats_batch_size
        self._request_delay = request_delay
        self._storage_root = storage_root
        self._export_formats = list(export_formats) if export_formats is not None else ["csv"]

    @property
    def api_key(self) -> Optional[str]:
        """YouTube Data API key."""
        return self._api_key

    @property
    def channel_url(self) -> Optional[str]:
        """Channel URL (/@handle, /channel/UC..., /c/name, /user/name)."""
        return self._channel_url

    @property
    def api_endpoint(self) -> Optional[str]:
        return self._api_endpoint

    @property
    def page_size(self) -> int:
        """Items requested per uploads playlist page."""
        return self._page_size

    @property
    def stats_batch_size(self) -> int:
        """Video IDs sent per videos.list statistics request."""
        return self._stats_batch_size

    @property
    def request_delay(self) -> float:
        """Polite delay in seconds before each paginated/batched request."""
        return self._request_delay

    @property
    def storage_root(self) -> str:
        """Root directory for storage."""
        return self._storage_root

    @property
    def export_formats(self) -> List[str]:
        return list(self._export_formats)

    def with_overrides(self, **overrides) -> "AppConfig":
        """Return a copy with the given non-None fields replaced (CLI flags win over YAML)."""
        values = {
            "api_key": self._api_key,
            "channel_url": self._channel_url,
            "api_endpoint": self._api_endpoint,
            "page_size": self._page_size,
            "stats_batch_size": self._stats_batch_size,
            "request_delay": self._request_delay,
            "storage_root": self._storage_root,
            "export_formats": self._export_formats,
        }
        for key, value in overrides.items():
            if key not in values:
                raise TypeError(f"Unknown configuration field: {key}")
            if value is not None:
                values[key] = value
        return AppConfig(**values)

    def __repr__(self) -> str:
        """String representation for debugging."""
        # api_key is never printed
        return (
            f"AppConfig(channel_url={self.channel_url!r}, "
            f"page_size={self.page_size}, "
            f"stats_batch_size={self.stats_batch_size}, "
            f"request_delay={self.request_delay}, "
            f"export_formats={self.export_formats!r})"
        )
