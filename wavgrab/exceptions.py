"""
Defines custom exceptions for the application to allow for more specific error handling.
"""


class WavgrabError(Exception):
    """Base exception for all application-specific errors."""


class UsageError(WavgrabError):
    """Raised when a required command-line argument is missing."""


class MissingSourceError(UsageError):
    """Raised when no source URL was given."""

    def __init__(self, message: str = "please specify the source url"):
        super().__init__(message)


class MissingNameError(UsageError):
    """Raised when no output name was given."""

    def __init__(self, message: str = "please specify the name to save the file as"):
        super().__init__(message)


class DownloadFailedError(WavgrabError):
    """Raised when the external downloader could not produce the audio file."""
