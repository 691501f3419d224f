import json
import unittest
from http.client import IncompleteRead
from unittest.mock import patch

from fake_youtube import FakeYouTubeService, channel_response, http_error

from extraction_pipeline.core.youtube import channel_fetcher
from extraction_pipeline.core.youtube.channel_fetcher import ChannelInfoFetcher, UNKNOWN_CHANNEL_TITLE
from extraction_pipeline.core.youtube.channel_identifier import ChannelIdentifier, IdentifierKind
from extraction_pipeline.core.youtube.errors import (
    ChannelLookupFailed,
    ChannelNotFound,
    UploadsPlaylistMissing,
)
from extraction_pipeline.core.youtube.progress import ProgressReporter
from extraction_pipeline.core.youtube.youtube_client import YouTubeClient


class TestChannelInfoFetcher(unittest.TestCase):
    def _fetch(self, service: FakeYouTubeService, identifier: ChannelIdentifier):
        events = []
        fetcher = ChannelInfoFetcher(YouTubeClient("key", service=service), ProgressReporter(events.append))
        return fetcher.fetch(identifier), events

    def test_handle_lookup_sends_handle_without_at(self) -> None:
        service = FakeYouTubeService(channels=[channel_response()])
        channel, events = self._fetch(service, ChannelIdentifier(IdentifierKind.BY_HANDLE, "@ExampleChannel"))

        self.assertEqual(channel.title, "Example Channel")
        self.assertEqual(channel.uploads_playlist_id, "UUxyz")
        self.assertEqual(channel.channel_id, "UCxyz")
        self.assertEqual(
            service.calls_to("channels"),
            [{"part": "snippet,contentDetails", "forHandle": "ExampleChannel"}],
        )
        self.assertIn("Example Channel", events[-1].message)
        self.assertIn("UUxyz", events[-1].message)

    def test_query_parameter_per_kind(self) -> None:
        cases = [
            (ChannelIdentifier(IdentifierKind.BY_ID, "UC123"), {"id": "UC123"}),
            (ChannelIdentifier(IdentifierKind.BY_USERNAME, "legacy"), {"forUsername": "legacy"}),
        ]
        for identifier, expected in cases:
            with self.subTest(kind=identifier.kind):
                service = FakeYouTubeService(channels=[channel_response()])
                self._fetch(service, identifier)
                call = service.calls_to("channels")[0]
                call.pop("part")
                self.assertEqual(call, expected)

    def test_empty_items_is_channel_not_found(self) -> None:
        service = FakeYouTubeService(channels=[{"items": []}])
        with self.assertRaises(ChannelNotFound):
            self._fetch(service, ChannelIdentifier(IdentifierKind.BY_ID, "UC123"))

    def test_missing_uploads_playlist(self) -> None:
        service = FakeYouTubeService(channels=[channel_response(uploads=None)])
        with self.assertRaises(UploadsPlaylistMissing) as ctx:
            self._fetch(service, ChannelIdentifier(IdentifierKind.BY_ID, "UC123"))
        self.assertEqual(ctx.exception.channel_title, "Example Channel")

    def test_http_error_is_lookup_failure_with_api_message(self) -> None:
        service = FakeYouTubeService(channels=[http_error(400, "API key not valid. Please pass a valid API key.")])
        with self.assertRaises(ChannelLookupFailed) as ctx:
            self._fetch(service, ChannelIdentifier(IdentifierKind.BY_ID, "UC123"))
        self.assertIn("API key not valid", ctx.exception.message)

    def test_error_object_in_body_is_lookup_failure(self) -> None:
        service = FakeYouTubeService(channels=[{"error": {"code": 403, "message": "quotaExceeded"}}])
        with self.assertRaises(ChannelLookupFailed) as ctx:
            self._fetch(service, ChannelIdentifier(IdentifierKind.BY_ID, "UC123"))
        self.assertEqual(ctx.exception.message, "quotaExceeded")

    def test_network_error_is_lookup_failure(self) -> None:
        service = FakeYouTubeService(channels=[ConnectionResetError("connection reset")])
        with self.assertRaises(ChannelLookupFailed) as ctx:
            self._fetch(service, ChannelIdentifier(IdentifierKind.BY_ID, "UC123"))
        self.assertIn("connection reset", ctx.exception.message)

    def test_truncated_or_non_json_body_is_lookup_failure(self) -> None:
        for outcome in (IncompleteRead(b"partial"), json.JSONDecodeError("Expecting value", "<html>", 0)):
            with self.subTest(outcome=type(outcome).__name__):
                service = FakeYouTubeService(channels=[outcome])
                with self.assertRaises(ChannelLookupFailed) as ctx:
                    self._fetch(service, ChannelIdentifier(IdentifierKind.BY_ID, "UC123"))
                self.assertTrue(ctx.exception.message.startswith("Network error"))

    def test_handle_mismatch_is_logged(self) -> None:
        service = FakeYouTubeService(channels=[channel_response(custom_url="@someoneelse")])
        with self.assertLogs("extraction_pipeline.core.youtube.channel_fetcher", level="WARNING") as logs:
            self._fetch(service, ChannelIdentifier(IdentifierKind.BY_HANDLE, "@ExampleChannel"))
        self.assertIn("Handle mismatch", logs.output[0])

    def test_id_lookup_skips_handle_check(self) -> None:
        service = FakeYouTubeService(channels=[channel_response(custom_url="@someoneelse")])
        with patch.object(channel_fetcher.logger, "warning") as warning:
            self._fetch(service, ChannelIdentifier(IdentifierKind.BY_ID, "UCxyz"))
        warning.assert_not_called()

    def test_missing_title_gets_placeholder(self) -> None:
        response = channel_response()
        response["items"][0]["snippet"] = {}
        service = FakeYouTubeService(channels=[response])
        channel, _ = self._fetch(service, ChannelIdentifier(IdentifierKind.BY_ID, "UC123"))
        self.assertEqual(channel.title, UNKNOWN_CHANNEL_TITLE)


if __name__ == "__main__":
    unittest.main()
