"""
Main entry point for the wavgrab application.
This module handles top-level setup, exception handling, and CLI invocation.
"""

import logging
import os
import sys

import typer
from rich.console import Console

from wavgrab.cli.app import app
from wavgrab.cli.formatters import format_error_with_suggestions
from wavgrab.exceptions import WavgrabError

# Typer either re-exports click's exceptions or ships its own copy of click;
# the usage-error base is whichever one its BadParameter derives from.
ClickException = next(
    cls for cls in typer.BadParameter.__mro__ if cls.__name__ == "ClickException"
)


def main() -> None:
    """Main entry point function."""
    if os.name == "nt":
        try:
            sys.stdout.reconfigure(encoding="utf-8")
            sys.stderr.reconfigure(encoding="utf-8")
        except (TypeError, AttributeError):
            pass

    log = logging.getLogger("wavgrab")
    console = Console(stderr=True)

    try:
        exit_code = app(standalone_mode=False)
    except (typer.Abort, KeyboardInterrupt):
        console.print("\n[yellow]⚠️  Download cancelled by user.[/yellow]")
        sys.exit(130)
    except ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except WavgrabError as e:
        console.print()
        console.print(format_error_with_suggestions(e))
        sys.exit(1)
    except Exception as e:
        console.print()
        console.print(format_error_with_suggestions(e, {"type": "Unexpected"}))
        log.debug("Full traceback:", exc_info=True)
        sys.exit(1)

    sys.exit(exit_code or 0)


if __name__ == "__main__":
    main()
