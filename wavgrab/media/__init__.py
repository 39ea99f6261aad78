"""
Media Processing Layer.

This package wraps the external downloader that fetches media and extracts
its audio track.
"""

from .downloader import Downloader, YtDlpDownloader

__all__ = ["Downloader", "YtDlpDownloader"]
