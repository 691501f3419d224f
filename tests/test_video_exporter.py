import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from openpyxl import load_workbook

from extraction_pipeline.core.export.video_exporter import SHEET_NAME, VideoExporter, to_markdown, to_text
from extraction_pipeline.core.youtube.video_info import VideoRecord, VIEWS_API_ERROR

VIDEOS = [
    VideoRecord(video_id="a", title='Say "hi", world', views="1234567", published_at="2023-12-31T10:00:00Z"),
    VideoRecord(video_id="b", title="Ação", views=VIEWS_API_ERROR, published_at=None),
]


class TestTextRendering(unittest.TestCase):
    def test_text_and_markdown(self) -> None:
        expected_first = 'Say "hi", world (Publicado em: 31/12/2023, Visualizações: 1.234.567)'
        self.assertEqual(to_text(VIDEOS).splitlines()[0], expected_first)
        self.assertEqual(to_text(VIDEOS).splitlines()[1], f"Ação (Publicado em: N/A, Visualizações: {VIEWS_API_ERROR})")
        self.assertEqual(to_markdown(VIDEOS).splitlines()[0], f"- {expected_first}")


class TestVideoExporter(unittest.TestCase):
    def test_csv_is_quoted_with_bom(self) -> None:
        with TemporaryDirectory() as td:
            [path] = VideoExporter(Path(td)).export(VIDEOS, ["csv"])

            self.assertEqual(path.name, "videos_youtube.csv")
            raw = path.read_bytes()
            self.assertTrue(raw.startswith(b"\xef\xbb\xbf"))
            lines = raw.decode("utf-8-sig").splitlines()
            self.assertEqual(lines[0], '"Título do Vídeo","Visualizações","Data de Publicação"')
            self.assertEqual(lines[1], '"Say ""hi"", world","1.234.567","31/12/2023"')
            self.assertEqual(lines[2], f'"Ação","{VIEWS_API_ERROR}","N/A"')

    def test_xlsx_sheet_and_column_widths(self) -> None:
        with TemporaryDirectory() as td:
            [path] = VideoExporter(Path(td)).export(VIDEOS, ["xlsx"])

            sheet = load_workbook(path)[SHEET_NAME]
            rows = list(sheet.iter_rows(values_only=True))
            self.assertEqual(rows[0], ("Título do Vídeo", "Visualizações", "Data de Publicação"))
            self.assertEqual(rows[1], ('Say "hi", world', "1.234.567", "31/12/2023"))
            self.assertEqual(sheet.column_dimensions["A"].width, len("Título do Vídeo"))
            self.assertEqual(sheet.column_dimensions["B"].width, len("Visualizações"))

    def test_txt_md_and_unknown_format(self) -> None:
        with TemporaryDirectory() as td:
            exporter = VideoExporter(Path(td) / "nested")
            paths = exporter.export(VIDEOS, ["txt", "md"], basename="out")

            self.assertEqual([p.name for p in paths], ["out.txt", "out.md"])
            self.assertTrue(paths[1].read_text(encoding="utf-8").startswith("- "))
            with self.assertRaises(ValueError):
                exporter.export(VIDEOS, ["pdf"])


if __name__ == "__main__":
    unittest.main()
