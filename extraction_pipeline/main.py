"""
YouTube Channel Views Extractor - Command Line Entry Point
Extracts every upload of a channel with its view count and exports the sorted list.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from extraction_pipeline.core.config import AppConfig, ConfigLoader, ConfigValidationError
from extraction_pipeline.core.config.app_config import SUPPORTED_EXPORT_FORMATS
from extraction_pipeline.core.export import VideoExporter, sort_videos_by_views
from extraction_pipeline.core.export.video_exporter import format_video_line
from extraction_pipeline.core.extractor import ChannelVideoExtractor
from extraction_pipeline.core.youtube.progress import ExtractionProgress, progress_percentage
from shared.storage.credential_store import CredentialStore
from shared.storage.storage_manager import StorageManager

DEFAULT_CONFIG_PATH = Path("config.yaml")
SUMMARY_SIZE = 10


def setup_logging(logs_dir: Path, verbose: bool = False) -> logging.Logger:
    """Configure logging with file and console handlers."""
    log_file = logs_dir / "app.log"

    # Configure logging format
    log_format = "%(asctime)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    # Configure root logger
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=log_format,
        datefmt=date_format,
        handlers=[
            logging.FileHandler(log_file, mode='a', encoding='utf-8'),
            logging.StreamHandler()
        ]
    )
    # googleapiclient logs every request URL (with the key) at INFO
    logging.getLogger("googleapiclient.discovery").setLevel(logging.WARNING)

    return logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yt-channel-extractor",
        description="Extract every public upload of a YouTube channel with its view count."
    )
    parser.add_argument("channel_url", nargs="?", help="Channel URL (e.g. https://www.youtube.com/@handle)")
    parser.add_argument("--api-key", help="YouTube Data API v3 key (overrides config and saved key)")
    parser.add_argument("--save-key", action="store_true", help="Remember the given --api-key for later runs")
    parser.add_argument("--clear-key", action="store_true", help="Forget the saved API key and exit")
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="YAML configuration file")
    parser.add_argument(
        "--format", dest="formats", action="append", choices=SUPPORTED_EXPORT_FORMATS,
        help="Export format (repeatable). Defaults to export.formats from the config."
    )
    parser.add_argument("--output-dir", type=Path, help="Directory for exported files")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser


def load_configuration(config_path: Path) -> AppConfig:
    """Load and validate application configuration; a missing file means defaults."""
    if not config_path.exists():
        return AppConfig()
    return ConfigLoader(config_path).load()


def log_progress(logger: logging.Logger):
    """Progress callback that logs each message with the overall percentage."""
    last_message = {"value": None}

    def on_progress(progress: ExtractionProgress) -> None:
        if progress.message and progress.message != last_message["value"]:
            last_message["value"] = progress.message
            logger.info(f"[{progress_percentage(progress):3d}%] {progress.message}")

    return on_progress


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution entry for the extractor."""
    args = build_parser().parse_args(argv)

    try:
        config = load_configuration(args.config)
    except ConfigValidationError as e:
        print(f"Configuration validation failed: {e}", file=sys.stderr)
        return 1

    storage = StorageManager(config.storage_root)
    logger = setup_logging(storage.logs_path, args.verbose)
    credentials = CredentialStore(storage.credentials_file)

    if args.clear_key:
        credentials.clear()
        logger.info("Saved API key removed.")
        return 0

    if args.save_key:
        if credentials.save_api_key(args.api_key or ""):
            logger.info("API key saved. Ready to extract videos.")
        else:
            logger.info("Empty API key given; any previously saved key was removed.")

    config = config.with_overrides(channel_url=args.channel_url, export_formats=args.formats)
    if args.save_key and not config.channel_url:
        return 0

    api_key = args.api_key or config.api_key or credentials.load_api_key()
    if not api_key:
        logger.error("A YouTube Data API v3 key is required (--api-key, config api_key or --save-key).")
        return 1
    if not config.channel_url:
        logger.error("Please provide a YouTube channel URL.")
        return 1

    logger.info("=" * 60)
    logger.info("YouTube Channel Views Extractor")
    logger.info("=" * 60)
    logger.info(f"  Channel URL: {config.channel_url}")
    logger.info(f"  Export formats: {', '.join(config.export_formats) or 'none'}")

    extractor = ChannelVideoExtractor(config)
    result = extractor.extract(config.channel_url, api_key, on_progress=log_progress(logger))

    if not result.ok:
        logger.error(f"Extraction error: {result.error}")
        return 1

    videos = sort_videos_by_views(result.videos)

    logger.info("=" * 60)
    logger.info(f"Channel: {result.official_channel_title}")
    if not videos:
        logger.info("Extraction complete. No public videos found for this channel.")
        return 0
    logger.info(f"Extraction complete. {len(videos)} videos found and sorted by views.")
    for position, video in enumerate(videos[:SUMMARY_SIZE], start=1):
        logger.info(f"  {position:2d}. {format_video_line(video)}")
    logger.info("=" * 60)

    output_dir = args.output_dir or storage.exports_path
    exporter = VideoExporter(output_dir)
    for path in exporter.export(videos, config.export_formats):
        print(f"📂 {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
