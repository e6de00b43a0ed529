"""Themed console output for the filepaths command line.

Wraps a Rich console with the retro terminal themes and status lines the
CLI prints its results with.
"""

import os
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from ..core.models import Component


class StatusType(Enum):
    """Standard status types with associated symbols."""
    SUCCESS = ("[✓]", "success", "green")
    ERROR = ("[x]", "error", "red")
    WARNING = ("[!]", "warning", "yellow")
    INFO = ("[!]", "info", "cyan")


@dataclass
class ThemeColors:
    """Color definitions for a theme."""
    info: str
    warning: str
    error: str
    success: str
    highlight: str
    path: str
    number: str
    dim: str
    accent: str
    heading: str = "bright_yellow"


THEMES = {
    'manhattan': ThemeColors(
        info='cyan',
        warning='yellow',
        error='red',
        success='green',
        highlight='bright_cyan',
        path='white',
        number='bright_blue',
        dim='bright_black',
        accent='cyan',
    ),
    'green': ThemeColors(
        info='green',
        warning='yellow',
        error='red',
        success='bright_green',
        highlight='bold green',
        path='bright_green',
        number='green',
        dim='green',
        accent='bright_green',
        heading='bright_cyan',
    ),
    'matrix': ThemeColors(
        info='bright_green',
        warning='yellow',
        error='red',
        success='green',
        highlight='bold bright_green',
        path='green',
        number='bright_green',
        dim='green',
        accent='bright_green',
    ),
    'sunset': ThemeColors(
        info='orange3',
        warning='yellow',
        error='red3',
        success='green',
        highlight='bold orange1',
        path='wheat1',
        number='orange1',
        dim='grey50',
        accent='dark_orange3',
        heading='dark_orange3',
    ),
}


class ConsoleManager:
    """Rich console with theme support and status helpers."""

    def __init__(self, theme: str = "manhattan", file: Optional[Any] = None):
        """Initialize the console.

        Args:
            theme: Theme name from THEMES
            file: Output file (defaults to sys.stdout)
        """
        self.theme_name = theme
        self.theme_colors = THEMES.get(theme, THEMES['manhattan'])
        self.file = file or sys.stdout
        self.console = Console(
            theme=self._create_rich_theme(),
            file=self.file,
            no_color=bool(os.environ.get('NO_COLOR')),
            highlight=False,
        )

    def _create_rich_theme(self) -> Theme:
        """Create Rich theme from our theme colors."""
        colors = self.theme_colors
        return Theme({
            'info': colors.info,
            'warning': colors.warning,
            'error': colors.error,
            'success': colors.success,
            'highlight': colors.highlight,
            'path': colors.path,
            'number': colors.number,
            'dim': colors.dim,
            'accent': colors.accent,
            'heading': colors.heading,
        })

    def print(self, *args, **kwargs):
        self.console.print(*args, **kwargs)

    def print_path(self, text: str):
        """Print a path result; the empty path shows as '.'."""
        self.console.print(Text(text or ".", style="path"))

    def print_status(self, status: StatusType, message: str, prefix: str = ""):
        """Print a status line with icon."""
        icon, _, color = status.value
        status_text = Text()
        if prefix:
            status_text.append(prefix + " ")
        status_text.append(f"{icon} ", style=color)
        status_text.append(message)
        self.console.print(status_text)

    def print_error(self, message: str):
        self.print_status(StatusType.ERROR, message)

    def print_success(self, message: str):
        self.print_status(StatusType.SUCCESS, message)

    def print_info(self, message: str):
        self.print_status(StatusType.INFO, message)

    def print_components(self, components: Iterable[Component], title: str = ""):
        """Print a table of parsed components."""
        table = Table(title=title or None, header_style="heading", border_style="dim")
        table.add_column("#", style="number", justify="right")
        table.add_column("KIND", style="accent")
        table.add_column("TEXT", style="path")
        for index, component in enumerate(components):
            table.add_row(str(index), component.kind.name, component.text)
        self.console.print(table)

    def print_exception(self):
        self.console.print_exception()
