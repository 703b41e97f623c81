"""
CLI output helpers built on rich.

Environment handling:
- Automatically detects TTY vs pipe/CI
- Respects NO_COLOR and FORCE_COLOR environment variables
- Falls back to plain text in non-interactive environments
"""

from __future__ import annotations

import os
import sys

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.theme import Theme

# Nord color palette (https://www.nordtheme.com/)
TERRAGRADE_THEME = Theme(
    {
        "info": "#88C0D0",  # Nord frost - light blue
        "success": "#A3BE8C",  # Nord aurora - green
        "warning": "#EBCB8B",  # Nord aurora - yellow
        "error": "#BF616A bold",  # Nord aurora - red
        "highlight": "#B48EAD",  # Nord aurora - purple
        "muted": "#D8DEE9",  # Nord snow storm - light grey
    }
)


def _is_interactive() -> bool:
    """Check if we're in an interactive terminal environment."""
    ci_vars = ["CI", "GITHUB_ACTIONS", "JENKINS_URL", "GITLAB_CI", "CIRCLECI", "TRAVIS"]
    if any(os.environ.get(var) for var in ci_vars):
        return False
    return sys.stdout.isatty()


def _should_use_color() -> bool:
    """Check if we should use colored output."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    return _is_interactive()


console = Console(
    theme=TERRAGRADE_THEME,
    force_terminal=os.environ.get("FORCE_COLOR") is not None,
    no_color=os.environ.get("NO_COLOR") is not None,
)


def plain(message: str = "") -> None:
    """Print text verbatim: no markup, highlighting or wrapping."""
    console.print(message, markup=False, highlight=False, emoji=False, soft_wrap=True)


def _styled(style: str, glyph: str, message: str) -> None:
    console.print(
        f"[{style}]{glyph} {escape(message)}[/{style}]",
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )


def error(message: str) -> None:
    """Print an error message."""
    _styled("error", "✗", message)


def warning(message: str) -> None:
    """Print a warning message."""
    _styled("warning", "⚠", message)


def header(title: str) -> None:
    """Print a section header."""
    if _should_use_color():
        console.print()
        console.print(Panel(f"[bold]{escape(title)}[/bold]", border_style="cyan"))
    else:
        plain()
        plain(title)
        plain("=" * 40)


def rule(width: int = 60) -> None:
    plain("=" * width)


def is_interactive() -> bool:
    """Public function to check if running interactively."""
    return _is_interactive()
