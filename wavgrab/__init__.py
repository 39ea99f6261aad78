"""
wavgrab: fetch the audio track of a media URL and save it as a WAV file.
"""

__version__ = "0.1.0"
