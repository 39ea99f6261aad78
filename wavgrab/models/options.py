"""
Pydantic model for the directives handed to the downloader.
Provides validation for the audio format and format selector.
"""

import logging
from typing import Any

from pydantic import BaseModel, field_validator

# Codecs accepted by yt-dlp's FFmpegExtractAudio post-processor
SUPPORTED_AUDIO_FORMATS = (
    "best",
    "aac",
    "alac",
    "flac",
    "m4a",
    "mp3",
    "opus",
    "vorbis",
    "wav",
)

EXT_PLACEHOLDER = "%(ext)s"


def build_output_template(name: str) -> str:
    """Returns the yt-dlp output template that names the file after `name`."""
    return f"{name}.{EXT_PLACEHOLDER}"


class ExtractionOptions(BaseModel):
    """A validated set of audio extraction directives."""

    audio_format: str = "wav"
    format_selector: str = "bestaudio/best"
    quiet: bool = True

    class Config:
        """Pydantic model configuration."""

        validate_assignment = True
        str_strip_whitespace = True

    @field_validator("audio_format")
    @classmethod
    def validate_audio_format(cls, v: str) -> str:
        """Ensures the codec is one the extract-audio post-processor understands."""
        v = v.lower()
        if v not in SUPPORTED_AUDIO_FORMATS:
            raise ValueError(
                f"Audio format must be one of: {', '.join(SUPPORTED_AUDIO_FORMATS)}."
            )
        return v

    @field_validator("format_selector")
    @classmethod
    def validate_format_selector(cls, v: str) -> str:
        if not v:
            raise ValueError("Format selector cannot be empty.")
        return v

    def to_ydl_opts(
        self,
        output_template: str,
        logger: logging.Logger | None = None,
        progress_hooks: list | None = None,
    ) -> dict[str, Any]:
        """
        Builds the option dictionary for `yt_dlp.YoutubeDL`.

        Args:
            output_template: yt-dlp `outtmpl`, e.g. 'song.%(ext)s'.
            logger: Receives yt-dlp's own messages.
            progress_hooks: Callables invoked with yt-dlp progress dictionaries.
        """
        opts: dict[str, Any] = {
            "format": self.format_selector,
            "outtmpl": output_template,
            "postprocessors": [
                {
                    "key": "FFmpegExtractAudio",
                    "preferredcodec": self.audio_format,
                }
            ],
            "quiet": self.quiet,
            "noprogress": self.quiet,
            "ignoreerrors": False,
        }
        if logger is not None:
            opts["logger"] = logger
        if progress_hooks:
            opts["progress_hooks"] = list(progress_hooks)
        return opts
