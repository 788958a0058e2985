#!/usr/bin/env python3
"""
Interactive wine collection manager.

Prompts for wines one at a time, then lists everything entered with
storage and aging recommendations.
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from cellarbook.shell import WineShell
from cellarbook.utils import set_log_level

console = Console()


def resolve_log_level(verbose: bool) -> int:
    """--verbose wins, then CELLARBOOK_LOG_LEVEL, then WARNING."""
    if verbose:
        return logging.DEBUG
    name = os.getenv("CELLARBOOK_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def main():
    parser = argparse.ArgumentParser(description="Manage a wine collection interactively")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--table", action="store_true", help="Show a summary table after the listing")
    args = parser.parse_args()

    load_dotenv()
    set_log_level(resolve_log_level(args.verbose))

    shell = WineShell(console=console)
    try:
        shell.run(show_table=args.table)
    except (KeyboardInterrupt, EOFError):
        console.print("\n[yellow]Cancelled[/yellow]")
        sys.exit(1)


if __name__ == "__main__":
    main()
