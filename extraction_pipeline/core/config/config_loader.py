"""
Configuration Loader
Loads and validates YAML configuration files
"""

from pathlib import Path
from typing import Any, Dict, List, Optional
import yaml

from .app_config import (
    AppConfig,
    DEFAULT_PAGE_SIZE,
    DEFAULT_REQUEST_DELAY,
    DEFAULT_STATS_BATCH_SIZE,
    SUPPORTED_EXPORT_FORMATS,
)

# Hard limit of the YouTube Data API for maxResults and for ids per videos.list call
API_MAX_RESULTS = 50


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


class ConfigLoader:
    """
    Loads and validates configuration from YAML files.

    Responsibilities:
    - Read YAML configuration file
    - Validate all optional fields
    - Validate types and value ranges
    - Return validated AppConfig instance
    """

    def __init__(self, config_path: Path):
        """
        Initialize ConfigLoader with path to config file.

        Args:
            config_path: Path to YAML configuration file
        """
        self._config_path = config_path

    def load(self) -> AppConfig:
        """
        Load and validate configuration from YAML file.

        Returns:
            AppConfig: Validated configuration object

        Raises:
            ConfigValidationError: If configuration is invalid
            FileNotFoundError: If config file doesn't exist
        """
        config_data = self._load_yaml()
        return self.from_dict(config_data)

    def from_dict(self, config_data: Dict[str, Any]) -> AppConfig:
        """Validate an already parsed mapping into an AppConfig."""
        api_key = self._validate_optional_string(config_data, "api_key")
        channel_url = self._validate_optional_string(config_data, "channel_url")
        api_endpoint = self._validate_optional_string(config_data, "api_endpoint")
        page_size = self._validate_page_limit(config_data, "page_size", DEFAULT_PAGE_SIZE)
        stats_batch_size = self._validate_page_limit(
            config_data, "stats_batch_size", DEFAULT_STATS_BATCH_SIZE
        )
        request_delay = self._validate_request_delay(config_data)
        storage_root = self._validate_storage_config(config_data)
        export_formats = self._validate_export_config(config_data)

        return AppConfig(
            api_key=api_key,
            channel_url=channel_url,
            api_endpoint=api_endpoint,
            page_size=page_size,
            stats_batch_size=stats_batch_size,
            request_delay=request_delay,
            storage_root=storage_root,
            export_formats=export_formats
        )

    def _load_yaml(self) -> Dict[str, Any]:
        """Load YAML file and return parsed data."""
        if not self._config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self._config_path}"
            )

        try:
            with open(self._config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)

            # A file holding only comments means all defaults
            if data is None:
                return {}

            if not isinstance(data, dict):
                raise ConfigValidationError(
                    "Configuration must be a YAML mapping/dictionary"
                )

            return data

        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML syntax: {e}")

    def _validate_optional_string(self, config: Dict[str, Any], field: str) -> Optional[str]:
        """Validate a string field that may be missing or null."""
        value = config.get(field)
        if value is None:
            return None

        if not isinstance(value, str):
            raise ConfigValidationError(
                f"Field '{field}' must be a string, got {type(value).__name__}"
            )

        value = value.strip()
        return value or None

    def _validate_page_limit(self, config: Dict[str, Any], field: str, default: int) -> int:
        """Validate page_size / stats_batch_size (1 - 50)."""
        if field not in config or config[field] is None:
            return default

        value = config[field]

        # bool is a subclass of int
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigValidationError(
                f"Field '{field}' must be an integer, got {type(value).__name__}"
            )

        if not (1 <= value <= API_MAX_RESULTS):
            raise ConfigValidationError(
                f"Field '{field}' must be between 1 and {API_MAX_RESULTS}, got {value}"
            )

        return value

    def _validate_request_delay(self, config: Dict[str, Any]) -> float:
        """Validate request_delay field (seconds)."""
        if "request_delay" not in config or config["request_delay"] is None:
            return DEFAULT_REQUEST_DELAY

        request_delay = config["request_delay"]

        if isinstance(request_delay, bool) or not isinstance(request_delay, (int, float)):
            raise ConfigValidationError(
                f"Field 'request_delay' must be a number, got {type(request_delay).__name__}"
            )

        if request_delay < 0:
            raise ConfigValidationError(
                f"Field 'request_delay' must be >= 0, got {request_delay}"
            )

        return float(request_delay)

    def _validate_storage_config(self, config: Dict[str, Any]) -> str:
        """Validate storage section, returns the storage root."""
        default_root = "./storage"

        if "storage" not in config:
            return default_root

        storage = config["storage"]
        if not isinstance(storage, dict):
            return default_root

        root = storage.get("root", default_root)
        if not isinstance(root, str):
            raise ConfigValidationError(f"storage.root must be string, got {type(root).__name__}")

        return root.strip() or default_root

    def _validate_export_config(self, config: Dict[str, Any]) -> List[str]:
        """Validate export section, returns the list of export formats."""
        defaults = ["csv"]

        if "export" not in config:
            return defaults

        export = config["export"]
        if not isinstance(export, dict):
            return defaults

        formats = export.get("formats", defaults)
        if isinstance(formats, str):
            formats = [formats]
        if not isinstance(formats, list):
            raise ConfigValidationError(
                f"export.formats must be a list, got {type(formats).__name__}"
            )

        normalized = []
        for fmt in formats:
            if not isinstance(fmt, str) or fmt.strip().lower() not in SUPPORTED_EXPORT_FORMATS:
                raise ConfigValidationError(
                    f"export.formats entries must be one of {', '.join(SUPPORTED_EXPORT_FORMATS)}, got {fmt!r}"
                )
            fmt = fmt.strip().lower()
            if fmt not in normalized:
                normalized.append(fmt)

        return normalized
