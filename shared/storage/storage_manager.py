"""
Storage Manager for the YouTube channel views extractor
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class StorageManager:
    """
    Service responsible for the local storage layout.

    Responsibilities:
    - Create and validate storage directory structure.
    - Provide canonical paths for exports, logs and the credentials file.
    """

    def __init__(self, storage_root: str = "./storage"):
        """
        Initialize the StorageManager.

        Args:
            storage_root (str): The base directory for all storage.
        """
        self._root = Path(storage_root).resolve()

        # Define subdirectories
        self._exports_dir = self._root / "exports"
        self._logs_dir = self._root / "logs"

        self._ensure_directories()

    def _ensure_directories(self):
        """Ensures that all required storage directories exist."""
        for d in (self._exports_dir, self._logs_dir):
            d.mkdir(parents=True, exist_ok=True)
            logger.debug(f"✓ Storage directory verified: {d}")

    @property
    def root(self) -> Path:
        return self._root

    @property
    def exports_path(self) -> Path:
        return self._exports_dir

    @property
    def logs_path(self) -> Path:
        return self._logs_dir

    @property
    def credentials_file(self) -> Path:
        return self._root / "credentials.yaml"

    def __repr__(self):
        return f"StorageManager(root={self._root})"
