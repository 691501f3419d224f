"""
Credential Store
Keeps the user's YouTube API key between runs in a small YAML file.
"""

import logging
import os
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

API_KEY_FIELD = "youtube_api_key"


class CredentialStore:
    """
    Persists a single API key under one well-known field.

    The extraction pipeline never reads this file; callers load the key and
    pass it explicitly to each run.
    """

    def __init__(self, credentials_file: Path):
        self._path = Path(credentials_file)

    @property
    def path(self) -> Path:
        return self._path

    def load_api_key(self) -> Optional[str]:
        """Return the saved key, or None when nothing (usable) is stored."""
        if not self._path.exists():
            return None

        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.warning(f"Ignoring unreadable credentials file {self._path}: {e}")
            return None

        if not isinstance(data, dict):
            logger.warning(f"Ignoring malformed credentials file {self._path}")
            return None

        api_key = data.get(API_KEY_FIELD)
        if not isinstance(api_key, str) or not api_key.strip():
            return None
        return api_key.strip()

    def save_api_key(self, api_key: str) -> bool:
        """
        Save the key. A blank key clears any stored key instead.

        Returns:
            bool: True if a key was saved, False if the store was cleared.
        """
        if not api_key or not api_key.strip():
            self.clear()
            return False

        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(self._path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            yaml.safe_dump({API_KEY_FIELD: api_key.strip()}, f)
        # O_CREAT leaves the mode of an existing file untouched
        try:
            os.chmod(self._path, 0o600)
        except OSError as e:
            logger.debug(f"Could not restrict permissions on {self._path}: {e}")

        logger.info(f"✓ API key saved to {self._path}")
        return True

    def clear(self) -> None:
        if self._path.exists():
            self._path.unlink()
            logger.info(f"✓ API key removed from {self._path}")
