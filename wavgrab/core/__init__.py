"""
Core application engine.

The `DownloadInvoker` validates the user's inputs and delegates the actual
work to a `Downloader`.
"""
