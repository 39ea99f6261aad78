"""Tests for the yt-dlp backed downloader."""
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from yt_dlp.utils import DownloadError

from wavgrab.exceptions import DownloadFailedError
from wavgrab.media.downloader import YtDlpDownloader, ytdlp_log
from wavgrab.models.options import ExtractionOptions

URL = "https://example.com/video"


@pytest.fixture
def mock_ydl():
    """Patches YoutubeDL and yields (class mock, instance mock)."""
    with patch("wavgrab.media.downloader.YoutubeDL") as ydl_cls:
        instance = MagicMock()
        ydl_cls.return_value.__enter__.return_value = instance
        yield ydl_cls, instance


class TestYtDlpDownloader:
    def test_options_request_wav_extraction(self, mock_ydl):
        ydl_cls, instance = mock_ydl
        instance.extract_info.return_value = {
            "requested_downloads": [{"filepath": "song.wav"}]
        }

        YtDlpDownloader().fetch_audio(URL, "song.%(ext)s")

        opts = ydl_cls.call_args[0][0]
        assert opts["outtmpl"] == "song.%(ext)s"
        assert opts["format"] == "bestaudio/best"
        assert opts["postprocessors"] == [
            {"key": "FFmpegExtractAudio", "preferredcodec": "wav"}
        ]
        assert opts["logger"] is ytdlp_log
        assert len(opts["progress_hooks"]) == 1
        instance.extract_info.assert_called_once_with(URL, download=True)

    def test_returns_reported_filepath(self, mock_ydl):
        _, instance = mock_ydl
        instance.extract_info.return_value = {
            "requested_downloads": [{"filepath": "/tmp/work/song.wav"}]
        }

        path = YtDlpDownloader().fetch_audio(URL, "song.%(ext)s")

        assert path == Path("/tmp/work/song.wav")

    def test_falls_back_to_template(self, mock_ydl):
        _, instance = mock_ydl
        instance.extract_info.return_value = {"id": "abc", "ext": "webm"}

        path = YtDlpDownloader().fetch_audio(URL, "song.%(ext)s")

        assert path == Path("song.wav")

    def test_playlist_uses_first_entry(self, mock_ydl):
        _, instance = mock_ydl
        instance.extract_info.return_value = {
            "entries": [
                None,
                {"requested_downloads": [{"filepath": "song.wav"}]},
            ]
        }

        assert YtDlpDownloader().fetch_audio(URL, "song.%(ext)s") == Path("song.wav")

    def test_download_error_is_wrapped(self, mock_ydl):
        _, instance = mock_ydl
        instance.extract_info.side_effect = DownloadError("ERROR: Unsupported URL: x")

        with pytest.raises(DownloadFailedError) as excinfo:
            YtDlpDownloader().fetch_audio("x", "song.%(ext)s")

        assert str(excinfo.value) == "Unsupported URL: x"
        assert isinstance(excinfo.value.__cause__, DownloadError)

    def test_empty_result_is_a_failure(self, mock_ydl):
        _, instance = mock_ydl
        instance.extract_info.return_value = None

        with pytest.raises(DownloadFailedError, match="no result"):
            YtDlpDownloader().fetch_audio(URL, "song.%(ext)s")

    def test_custom_audio_format(self, mock_ydl):
        ydl_cls, instance = mock_ydl
        instance.extract_info.return_value = {"id": "abc"}

        downloader = YtDlpDownloader(ExtractionOptions(audio_format="flac"))
        path = downloader.fetch_audio(URL, "song.%(ext)s")

        opts = ydl_cls.call_args[0][0]
        assert opts["postprocessors"][0]["preferredcodec"] == "flac"
        assert path == Path("song.flac")
