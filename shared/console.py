"""
CipherStep Console Interface
=============================

Rich-powered console abstraction shared by the CipherStep front ends.

The class wraps :class:`rich.console.Console` and adds helpers for the
banner, section rules, severity-coloured messages and generic tables, all
with one consistent theme.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from typing import Any, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_CIPHERSTEP_THEME = Theme(
    {
        "cs.banner": "bold bright_cyan",
        "cs.section": "bold bright_magenta",
        "cs.success": "bold green",
        "cs.warning": "bold yellow",
        "cs.error": "bold red",
        "cs.info": "bold bright_blue",
        "cs.dim": "dim white",
        "cs.highlight": "bold bright_white",
        "cs.letter": "bold bright_yellow",
        "cs.key": "bold bright_green",
    }
)

_BANNER_ART = r"""
[bright_cyan]
   ___ _      _               ___ _
  / __(_)_ __| |_  ___ _ _   / __| |_ ___ _ __
 | (__| | '_ \ ' \/ -_) '_|  \__ \  _/ -_) '_ \
  \___|_| .__/_||_\___|_|    |___/\__\___| .__/
        |_|                              |_|
[/bright_cyan]"""

_TAGLINE = "Classical Ciphers, One Step at a Time"


class CipherStepConsole:
    """Unified console interface for CipherStep output.

    Usage::

        con = CipherStepConsole()
        con.banner()
        con.section("Playfair")
        con.success("Encryption complete")
    """

    def __init__(self, *, quiet: bool = False, record: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output (useful in library / test mode).
            record: Enable Rich recording for HTML export.
        """
        self._console = Console(
            theme=_CIPHERSTEP_THEME,
            quiet=quiet,
            record=record,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner / sections
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the CipherStep banner with *version* beneath it."""
        subtitle = (
            f"[cs.highlight]{_TAGLINE}[/cs.highlight]\n"
            f"[cs.dim]Version: {version}[/cs.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(0, 2),
        )
        self._console.print(panel)

    def section(self, title: str) -> None:
        """Print a prominent section rule."""
        self._console.rule(f"  {title}  ", style="cs.section", characters="─")
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers (severity-coloured)
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._console.print(f"[cs.success][✔] SUCCESS:[/cs.success] {message}")

    def warning(self, message: str) -> None:
        self._console.print(f"[cs.warning][⚠] WARNING:[/cs.warning] {message}")

    def error(self, message: str) -> None:
        self._console.print(f"[cs.error][✘] ERROR:[/cs.error] {message}")

    def info(self, message: str) -> None:
        self._console.print(f"[cs.info][ℹ] INFO:[/cs.info] {message}")

    # ------------------------------------------------------------------ #
    #  Table display
    # ------------------------------------------------------------------ #

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        caption: str | None = None,
        styles: Sequence[str] | None = None,
    ) -> None:
        """Render a styled Rich table.

        Args:
            title:    Table title.
            columns:  Column header labels.
            rows:     Iterable of row tuples; each element is stringified.
            caption:  Optional footer caption.
            styles:   Optional per-column Rich style strings.
        """
        tbl = Table(
            title=title,
            caption=caption,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        for idx, col_name in enumerate(columns):
            style = styles[idx] if styles and idx < len(styles) else ""
            tbl.add_column(col_name, style=style)

        for row in rows:
            tbl.add_row(*(str(cell) for cell in row))

        self._console.print(tbl)

    # ------------------------------------------------------------------ #
    #  Utility
    # ------------------------------------------------------------------ #

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Proxy to :meth:`rich.console.Console.print`."""
        self._console.print(*args, **kwargs)

    def blank(self, count: int = 1) -> None:
        for _ in range(count):
            self._console.print()

    def export_text(self) -> str:
        """Export recorded console output as plain text (requires ``record=True``)."""
        return self._console.export_text()
