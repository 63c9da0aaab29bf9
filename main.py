#!/usr/bin/env python3
"""Mediator CLI - Main entry point."""

import sys
from typing import List, Optional

from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

load_dotenv()
# Banner and fatal errors go to stderr so command output can be piped.
console = Console(stderr=True)

EXIT_INTERRUPTED = 130


def banner() -> Panel:
    title = Text("Mediator", style="bold blue")
    title.append("\nunicast senders, multicast notifiers", style="dim")
    return Panel(title, title="Welcome", border_style="blue")


def run(argv: Optional[List[str]] = None) -> int:
    """Run the typer app on ``argv`` and return the process exit code."""
    from mediator.presentation.cli.commands import app

    try:
        app(args=argv, prog_name="mediator")
    except SystemExit as e:
        if e.code is None or isinstance(e.code, int):
            return e.code or 0
        console.print(str(e.code), style="bold red")
        return 1
    except KeyboardInterrupt:
        console.print("Interrupted", style="yellow")
        return EXIT_INTERRUPTED
    except Exception as e:
        console.print(f"{type(e).__name__}: {e}", style="bold red")
        return 1
    return 0


def main() -> None:
    console.print(banner())
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":  # pragma: no cover
    main()
