# progopts — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Host-side helper for command line programs built on `ProgramOptions`.

`parse_check()` is the "parse or print usage and exit" flow: it keeps process
exit and console output out of the parsing engine, which only reports errors
and renders usage text.
"""
from __future__ import annotations

import sys
from typing import Sequence

from rich.console import Console
from rich.markup import escape

from progopts.console import error_console
from progopts.logger import logger
from progopts.parser import ProgramOptions

HELP_OPTION = "help"
HELP_SHORT_NAME = "?"


def add_help(options: ProgramOptions) -> None:
    """Declare a `--help` flag (`-?` when free) unless one already exists."""
    if HELP_OPTION in options:
        return
    short_name = HELP_SHORT_NAME
    if options.registry.short_name_owners(HELP_SHORT_NAME):
        short_name = None
    options.add_flag(HELP_OPTION, short_name, "print this message")


def parse_check(
    options: ProgramOptions,
    args: str | Sequence[str] | None = None,
    console: Console | None = None,
) -> None:
    """
    Parse `args` (default `sys.argv`) and exit the process on help or failure.

    - Help requested, or no arguments at all and parsing failed: print usage
      and raise `SystemExit(0)`.
    - Any other failure: print the first error and usage, raise `SystemExit(1)`.

    Returns normally only when parsing succeeded and help was not requested.
    """
    console = console or error_console
    if args is None:
        args = sys.argv
    add_help(options)

    ok = options.parse(args)
    bare = not isinstance(args, str) and len(args) == 1
    if (bare and not ok) or options.exists(HELP_OPTION):
        console.print(options.usage(), end="", markup=False, highlight=False)
        raise SystemExit(0)
    if not ok:
        logger.debug("Command line rejected: %s", "; ".join(options.errors))
        console.print(f"[bold red]error:[/] {escape(options.error())}")
        console.print(options.usage(), end="", markup=False, highlight=False)
        raise SystemExit(1)
