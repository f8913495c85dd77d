# progopts — (c) 2025 rtj.dev LLC — MIT Licensed
"""Renders the usage/help block for a set of declared options."""
from __future__ import annotations

from typing import Iterable

from progopts.option import Option

NAME_PADDING = 4


def render_usage(program_name: str, footer: str, options: Iterable[Option]) -> str:
    """
    Render a usage line followed by one aligned line per option.

    The usage line lists the required options, then `[options] ...` and the
    footer. Option lines keep declaration order and pad long names to the
    longest name plus four spaces.

    Args:
        program_name (str): Name shown after `Usage:`.
        footer (str): Trailing text for the usage line (e.g. "filename ...").
        options (Iterable[Option]): Options in declaration order.

    Returns:
        str: The help text, newline terminated.
    """
    options = list(options)
    required = [option.short_description for option in options if option.is_required]
    usage_line = " ".join(
        part for part in ["Usage:", program_name, *required, "[options] ...", footer] if part
    )
    lines = [usage_line, "Options:"]

    width = max((len(option.name) for option in options), default=0) + NAME_PADDING
    for option in options:
        prefix = f"  -{option.short_name}, " if option.short_name else "      "
        lines.append(f"{prefix}--{option.name:<{width}}{option.full_description}".rstrip())
    return "\n".join(lines) + "\n"
