"""
Data Models Layer.

This package contains the Pydantic model that describes how the downloader
is asked to extract and transcode audio.
"""

from .options import ExtractionOptions, build_output_template

__all__ = ["ExtractionOptions", "build_output_template"]
