"""
Defines the command-line interface for the application using Typer.
"""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from wavgrab import __version__
from wavgrab.core.invoker import DownloadInvoker
from wavgrab.exceptions import WavgrabError
from wavgrab.media.downloader import Downloader, YtDlpDownloader
from wavgrab.models.options import ExtractionOptions

from .formatters import print_error, print_saved

console = Console()
err_console = Console(stderr=True)

logging.basicConfig(
    level="WARNING",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            console=err_console,
            rich_tracebacks=True,
            show_path=False,
            markup=False,
        )
    ],
)
log = logging.getLogger("wavgrab")

app = typer.Typer(
    name="wavgrab",
    help="Download the audio of a media URL and save it as <NAME>.wav.",
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    add_completion=False,
)


def build_downloader() -> Downloader:
    """Creates the downloader used by the command."""
    return YtDlpDownloader(ExtractionOptions())


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold]wavgrab[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()


def _set_verbosity(verbose: int) -> None:
    log_level = "WARNING"
    if verbose == 1:
        log_level = "INFO"
    elif verbose >= 2:
        log_level = "DEBUG"
    log.setLevel(log_level)


@app.command()
def download(
    source: str = typer.Argument(
        "", help="URL or identifier of the media to fetch.", show_default=False
    ),
    name: str = typer.Argument(
        "",
        help="Name to save the file as, without extension.",
        show_default=False,
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-vv for debug).",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        is_eager=True,
        callback=_version_callback,
    ),
):
    """Download the audio of SOURCE and save it as NAME.wav."""
    _set_verbosity(verbose)

    try:
        invoker = DownloadInvoker(build_downloader())
        path = invoker.invoke(source, name)
    except WavgrabError as e:
        print_error(err_console, str(e))
        log.debug("Full traceback:", exc_info=True)
        raise typer.Exit(code=1) from e

    print_saved(console, path)
