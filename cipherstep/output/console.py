"""
CipherStep Console Output
==========================

Rich-based console formatters for CipherStep results: transform
summaries, step-by-step trace tables, the Playfair key square, Hill key
matrices, transposition grids and Caesar brute-force listings.

Uses the shared :class:`~shared.console.CipherStepConsole` for consistent
styling.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

import time
from typing import Optional, Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import CipherStepConsole
from cipherstep.core.models import (
    BruteForceResult,
    Mode,
    StepInfo,
    TransformResult,
)


# ===================================================================== #
#  Colour Maps
# ===================================================================== #

_MODE_COLOURS: dict[str, str] = {
    "encrypt": "bold bright_green",
    "decrypt": "bold bright_blue",
}

_ERROR_TITLES: dict[str, str] = {
    "InvalidKeyError": "Invalid Key",
    "InvalidFormatError": "Invalid Input Format",
}


class CipherConsoleOutput:
    """Console output formatters for CipherStep results.

    Usage::

        console = CipherStepConsole()
        output = CipherConsoleOutput(console)
        output.display_result(result)
        output.display_steps(result.steps, delay=0.5)
        output.display_playfair_square(cipher.key_square)
    """

    def __init__(self, console: Optional[CipherStepConsole] = None) -> None:
        """Initialise the console output formatter.

        Args:
            console: CipherStepConsole instance. Creates one if not provided.
        """
        self.console = console or CipherStepConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Transform Results
    # ------------------------------------------------------------------ #

    def display_result(self, result: TransformResult) -> None:
        """Show the input, key and output of one transform.

        A rejected transform is shown as an error panel instead.
        """
        self.console.section(f"{result.cipher.label} -- {result.mode.value.title()}")

        if not result.ok:
            title = _ERROR_TITLES.get(result.error_type or "", "Error")
            self._rich.print(Panel(
                Text(result.error or "", style="cs.error"),
                title=title,
                border_style="red",
            ))
            return

        mode_colour = _MODE_COLOURS.get(result.mode.value, "white")
        in_label = "Plain Text" if result.mode is Mode.ENCRYPT else "Cipher Text"
        out_label = "Cipher Text" if result.mode is Mode.ENCRYPT else "Plain Text"

        body = Text()
        body.append(f"{in_label}: ", style="bold")
        body.append(f"{result.input}\n")
        if result.key:
            body.append("Key: ", style="bold")
            body.append(f"{result.key}\n", style="cs.key")
        body.append(f"{out_label}: ", style="bold")
        body.append(result.output, style=mode_colour)

        self._rich.print(Panel(body, title="Result", border_style="cyan"))

    # ------------------------------------------------------------------ #
    #  Step Traces
    # ------------------------------------------------------------------ #

    def display_steps(
        self, steps: Sequence[StepInfo], delay: float = 0.0
    ) -> None:
        """Display a step trace.

        With ``delay == 0`` the whole trace is printed as one table.
        A positive *delay* reveals steps one at a time, pausing *delay*
        seconds between them.
        """
        if not steps:
            self.console.info("No steps: the input was empty.")
            return

        if delay <= 0:
            self._rich.print(self._steps_table(steps))
            return

        for step in steps:
            self._rich.print(self._step_panel(step))
            time.sleep(delay)

    def _steps_table(self, steps: Sequence[StepInfo]) -> Table:
        tbl = Table(
            title="Step-by-Step Trace",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("#", justify="right", style="cs.dim")
        tbl.add_column("Step", style="bold")
        tbl.add_column("Input")
        tbl.add_column("Output", style="cs.letter")
        tbl.add_column("Explanation", style="cs.dim")

        for step in steps:
            tbl.add_row(
                str(step.step_number),
                Text(step.description),
                Text(step.input),
                Text(step.output),
                Text(step.explanation or ""),
            )
        return tbl

    @staticmethod
    def _step_panel(step: StepInfo) -> Panel:
        body = Text()
        body.append("Input:  ", style="bold")
        body.append(f"{step.input}\n")
        body.append("Output: ", style="bold")
        body.append(step.output, style="cs.letter")
        if step.explanation:
            body.append(f"\n{step.explanation}", style="cs.dim")
        return Panel(
            body,
            title=Text(f"Step {step.step_number}: {step.description}"),
            title_align="left",
            border_style="bright_cyan",
        )

    # ------------------------------------------------------------------ #
    #  Key Visualisations
    # ------------------------------------------------------------------ #

    def display_playfair_square(
        self, square: Sequence[Sequence[str]], keyword: str = ""
    ) -> None:
        """Render the 5x5 Playfair key square.

        Letters contributed by *keyword* are highlighted.
        """
        self.console.section("Playfair Key Square")
        keyword_letters = set(keyword.upper().replace("J", "I"))

        tbl = Table(show_header=False, show_lines=True, border_style="bright_cyan")
        for _ in range(len(square[0]) if square else 0):
            tbl.add_column(justify="center", width=3)
        for row in square:
            tbl.add_row(*(
                Text(ch, style="cs.key" if ch in keyword_letters else "cs.letter")
                for ch in row
            ))
        self._rich.print(tbl)
        if keyword:
            self.console.print(Text(f"Keyword: {keyword} (I and J share a cell)", style="cs.dim"))

    def display_matrix(
        self, matrix: Sequence[Sequence[int]], title: str = "Key Matrix"
    ) -> None:
        """Render an integer matrix such as a Hill key or its inverse."""
        self.console.section(title)
        tbl = Table(show_header=False, show_lines=True, border_style="bright_cyan")
        for _ in range(len(matrix[0]) if matrix else 0):
            tbl.add_column(justify="right")
        for row in matrix:
            tbl.add_row(*(str(v) for v in row))
        self._rich.print(tbl)

    def display_grid(self, grid: Sequence[Sequence[str]], title: str = "Transposition Grid") -> None:
        """Render a transposition grid with numbered columns."""
        self.console.section(title)
        width = len(grid[0]) if grid else 0
        tbl = Table(show_lines=True, border_style="bright_cyan", header_style="bold bright_magenta")
        for col in range(width):
            tbl.add_column(str(col + 1), justify="center")
        for row in grid:
            tbl.add_row(*(Text(ch, style="cs.letter") for ch in row))
        self._rich.print(tbl)
        self.console.print("[cs.dim]Written row by row, read column by column.[/cs.dim]")

    # ------------------------------------------------------------------ #
    #  Brute Force
    # ------------------------------------------------------------------ #

    def display_brute_force(self, result: BruteForceResult) -> None:
        """List all 25 Caesar decodings."""
        self.console.section("Caesar Brute Force")
        tbl = Table(
            title="All 25 Caesar Shifts",
            caption="Pick the line that reads as language",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
        )
        tbl.add_column("Key", justify="right", style="cs.key")
        tbl.add_column("Candidate Plain Text")
        for candidate in result.candidates:
            tbl.add_row(str(candidate.key), Text(candidate.text))
        self._rich.print(Text(f"Cipher text: {result.cipher_text}", style="cs.dim"))
        self._rich.print(tbl)
