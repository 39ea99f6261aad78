"""
Functions for formatting and displaying results in the console using Rich.
"""

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


def print_error(console: Console, message: str) -> None:
    """Prints a single `error: <message>` line."""
    console.print(
        f"[bold red]error:[/bold red] {escape(message)}",
        highlight=False,
        soft_wrap=True,
    )


def print_saved(console: Console, path: Path) -> None:
    """Reports the file the downloader produced."""
    console.print(
        f"[green]✓ Saved[/green] [cyan]{escape(str(path))}[/cyan]", soft_wrap=True
    )


def format_error_with_suggestions(
    error: Exception, context: dict | None = None
) -> Panel:
    """Formats an error with actionable suggestions into a Rich Panel."""
    error_type = type(error).__name__
    error_msg = str(error)

    suggestions_map = {
        "DownloadFailedError": [
            "• Check that the URL is reachable and supported by yt-dlp.",
            "• Make sure ffmpeg is installed and on your PATH.",
            "• Update yt-dlp, sites change often.",
        ],
        "PermissionError": [
            "• The output file could not be written in the current directory.",
        ],
    }

    suggestions = suggestions_map.get(
        error_type, ["• Run the command with -vv for detailed logs."]
    )

    error_text = Text()
    error_text.append(f"{error_type}: ", style="bold red")
    error_text.append(error_msg)

    content = Table.grid(padding=(1, 0))
    content.add_row(error_text)
    content.add_row()
    content.add_row(Text("Suggestions", style="bold yellow"))
    content.add_row(Text("\n".join(suggestions)))

    if context:
        content.add_row()
        content.add_row(Text(f"Context: {context}", style="dim"))

    return Panel(
        content,
        title="[bold red]An Error Occurred[/bold red]",
        border_style="red",
        expand=False,
    )
