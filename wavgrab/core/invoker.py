"""
Validates the two command-line inputs and delegates the download.
"""

import logging
from pathlib import Path

from wavgrab.exceptions import MissingNameError, MissingSourceError
from wavgrab.media.downloader import Downloader
from wavgrab.models.options import build_output_template

log = logging.getLogger(__name__)


class DownloadInvoker:
    """
    Checks that a source and an output name were given, then asks the
    downloader to save the source's audio as `<name>.<ext>`.

    Every call reaches the downloader again; nothing is cached.
    """

    def __init__(self, downloader: Downloader):
        self.downloader = downloader

    def invoke(self, source: str | None, name: str | None) -> Path:
        """
        Runs a single download.

        Args:
            source: URL or identifier, passed through verbatim.
            name: Base name of the output file, without extension.

        Returns:
            Path of the audio file the downloader produced.

        Raises:
            MissingSourceError: If `source` is empty.
            MissingNameError: If `name` is empty.
            DownloadFailedError: If the downloader fails.
        """
        if not source:
            raise MissingSourceError()
        if not name:
            raise MissingNameError()

        output_template = build_output_template(name)
        log.info(f"Fetching audio from '{source}' as '{output_template}'")
        path = self.downloader.fetch_audio(source, output_template)
        log.debug(f"Downloader produced '{path}'")
        return path
