"""
Video List Exporter
Writes the extracted (and sorted) video list as txt, md, csv or xlsx.
"""

import csv
import logging
from pathlib import Path
from typing import Iterable, List

import pandas as pd
from openpyxl.utils import get_column_letter

from .formatting import format_brazilian_number, format_iso_date_to_brazilian
from ..youtube.video_info import VideoRecord

logger = logging.getLogger(__name__)

DEFAULT_BASENAME = "videos_youtube"
SHEET_NAME = "Títulos YouTube"

COL_TITLE = "Título do Vídeo"
COL_VIEWS = "Visualizações"
COL_PUBLISHED = "Data de Publicação"

# (min, max) column widths in characters for the xlsx sheet
COLUMN_WIDTH_LIMITS = {
    COL_TITLE: (10, 80),
    COL_VIEWS: (10, 20),
    COL_PUBLISHED: (10, 20),
}


def format_video_line(video: VideoRecord) -> str:
    return (
        f"{video.title} (Publicado em: {format_iso_date_to_brazilian(video.published_at)}, "
        f"Visualizações: {format_brazilian_number(video.views)})"
    )


def to_text(videos: Iterable[VideoRecord]) -> str:
    """Plain list, one video per line (also what gets copied to the clipboard)."""
    return "\n".join(format_video_line(v) for v in videos)


def to_markdown(videos: Iterable[VideoRecord]) -> str:
    return "\n".join(f"- {format_video_line(v)}" for v in videos)


def to_dataframe(videos: Iterable[VideoRecord]) -> pd.DataFrame:
    """Tabular view with pt-BR formatted values, in the given order."""
    rows = [
        {
            COL_TITLE: v.title or "",
            COL_VIEWS: format_brazilian_number(v.views),
            COL_PUBLISHED: format_iso_date_to_brazilian(v.published_at),
        }
        for v in videos
    ]
    return pd.DataFrame(rows, columns=[COL_TITLE, COL_VIEWS, COL_PUBLISHED])


class VideoExporter:
    """
    Service responsible for writing video lists to the exports directory.

    Responsibilities:
    - Render txt / md lists.
    - Write CSV for Excel (all fields quoted, UTF-8 with BOM).
    - Write an xlsx workbook with sized columns.
    """

    WRITERS = ("txt", "md", "csv", "xlsx")

    def __init__(self, output_dir: Path):
        self._output_dir = Path(output_dir)
        self._output_dir.mkdir(parents=True, exist_ok=True)

    def export(
        self,
        videos: List[VideoRecord],
        formats: Iterable[str],
        basename: str = DEFAULT_BASENAME
    ) -> List[Path]:
        """Write one file per requested format. Returns the written paths."""
        written = []
        for fmt in formats:
            if fmt not in self.WRITERS:
                raise ValueError(f"Unsupported export format: {fmt}")
            writer = getattr(self, f"write_{fmt}")
            written.append(writer(videos, self._output_dir / f"{basename}.{fmt}"))
        return written

    def write_txt(self, videos: List[VideoRecord], path: Path) -> Path:
        path.write_text(to_text(videos), encoding="utf-8")
        logger.info(f"✓ {len(videos)} videos written to {path}")
        return path

    def write_md(self, videos: List[VideoRecord], path: Path) -> Path:
        path.write_text(to_markdown(videos), encoding="utf-8")
        logger.info(f"✓ {len(videos)} videos written to {path}")
        return path

    def write_csv(self, videos: List[VideoRecord], path: Path) -> Path:
        df = to_dataframe(videos)
        # utf-8-sig adds the BOM Excel needs to detect UTF-8
        df.to_csv(
            path,
            index=False,
            encoding="utf-8-sig",
            quoting=csv.QUOTE_ALL,
            lineterminator="\n"
        )
        logger.info(f"✓ {len(videos)} videos written to {path}")
        return path

    def write_xlsx(self, videos: List[VideoRecord], path: Path) -> Path:
        df = to_dataframe(videos)
        with pd.ExcelWriter(path, engine="openpyxl") as writer:
            df.to_excel(writer, sheet_name=SHEET_NAME, index=False)
            worksheet = writer.sheets[SHEET_NAME]
            for idx, column in enumerate(df.columns, start=1):
                low, high = COLUMN_WIDTH_LIMITS[column]
                longest = max([len(str(value)) for value in df[column]] + [len(column)])
                worksheet.column_dimensions[get_column_letter(idx)].width = min(max(longest, low), high)
        logger.info(f"✓ {len(videos)} videos written to {path}")
        return path
