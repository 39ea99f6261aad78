"""Test configuration and fixtures."""
import pytest

from tests.fakes import FakeDownloader
from wavgrab.exceptions import DownloadFailedError
from wavgrab.media.downloader import Downloader


@pytest.fixture
def fake_downloader():
    return FakeDownloader()


@pytest.fixture
def failing_downloader():
    return FakeDownloader(error=DownloadFailedError("Unsupported URL: nope"))


@pytest.fixture
def use_downloader(monkeypatch):
    """Makes the CLI build the given downloader instead of a real one."""

    def _use(downloader: Downloader) -> Downloader:
        monkeypatch.setattr("wavgrab.cli.app.build_downloader", lambda: downloader)
        return downloader

    return _use
