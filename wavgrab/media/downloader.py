"""
Handles the hand-off to the external downloader. yt-dlp fetches the media,
and its FFmpegExtractAudio post-processor keeps only the audio track.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from yt_dlp import YoutubeDL
from yt_dlp.utils import DownloadError, ExtractorError

from wavgrab.exceptions import DownloadFailedError
from wavgrab.models.options import EXT_PLACEHOLDER, ExtractionOptions

log = logging.getLogger(__name__)

# yt-dlp's own output is routed here so it follows the CLI verbosity
ytdlp_log = logging.getLogger("wavgrab.downloader")


class Downloader(ABC):
    """Fetches the audio of a source and saves it under an output template."""

    @abstractmethod
    def fetch_audio(self, source: str, output_template: str) -> Path:
        """
        Downloads `source`, extracts its audio and writes it to the path given
        by `output_template`.

        Returns:
            The path of the resulting audio file.

        Raises:
            DownloadFailedError: If the file could not be produced.
        """


class YtDlpDownloader(Downloader):
    """A `Downloader` backed by the yt-dlp library."""

    def __init__(self, options: ExtractionOptions | None = None):
        self.options = options or ExtractionOptions()

    def build_opts(self, output_template: str) -> dict[str, Any]:
        return self.options.to_ydl_opts(
            output_template,
            logger=ytdlp_log,
            progress_hooks=[self._progress_hook],
        )

    def fetch_audio(self, source: str, output_template: str) -> Path:
        log.debug(f"Handing '{source}' to yt-dlp with template '{output_template}'")
        try:
            with YoutubeDL(self.build_opts(output_template)) as ydl:
                info = ydl.extract_info(source, download=True)
        except (DownloadError, ExtractorError) as e:
            raise DownloadFailedError(_clean_message(e)) from e

        if info is None:
            raise DownloadFailedError(f"yt-dlp returned no result for '{source}'")

        return self._resolve_path(info, output_template)

    def _resolve_path(self, info: dict[str, Any], output_template: str) -> Path:
        """Finds the post-processed file yt-dlp reported for this download."""
        entries = info.get("entries")
        if entries:
            # Playlists report downloads per entry
            info = next((e for e in entries if e), info)

        for download in info.get("requested_downloads") or []:
            if filepath := download.get("filepath"):
                return Path(filepath)

        return Path(output_template.replace(EXT_PLACEHOLDER, self.options.audio_format))

    @staticmethod
    def _progress_hook(progress: dict[str, Any]) -> None:
        status = progress.get("status")
        if status == "finished":
            log.info(f"Downloaded '{progress.get('filename')}', extracting audio...")
        elif status == "error":
            log.warning(f"yt-dlp reported an error for '{progress.get('filename')}'")


def _clean_message(error: Exception) -> str:
    """Strips yt-dlp's own 'ERROR: ' prefix from an exception message."""
    message = str(error).strip()
    if message.startswith("ERROR: "):
        message = message[len("ERROR: ") :]
    return message or type(error).__name__
