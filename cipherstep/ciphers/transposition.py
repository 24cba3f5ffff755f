"""
Columnar Transposition Cipher
==============================

Letters keep their identity but change position: the text is written into
a grid row by row and read out column by column.

With 4 columns, ``"WEAREDISCOVERED"`` (15 characters) becomes a 4 x 4 grid
whose last cell is padded::

    W E A R
    E D I S
    C O V E
    R E D X      ->  "WECR" "EDOE" "AIVD" "RSEX"

Only spaces are removed before writing; digits and punctuation stay in the
text and take part in the grid geometry.

References:
    - Kahn, D. (1996). The Codebreakers. Scribner. Chapter 9.
"""

from __future__ import annotations

import math
from typing import Optional

from shared.math_utils import is_blank
from cipherstep.core.errors import InvalidKeyError
from cipherstep.core.models import StepInfo
from cipherstep.core.tracer import StepTracer

PADDING = "X"

Grid = list[list[str]]


def _render(grid: Grid) -> str:
    return "\n".join(" ".join(cell or "·" for cell in row) for row in grid)


class TranspositionCipher:
    """Columnar transposition with a fixed column count.

    Raises:
        InvalidKeyError: If the column count is zero or negative.
    """

    name = "Transposition"

    def __init__(self, columns: int) -> None:
        if isinstance(columns, bool) or not isinstance(columns, int) or columns <= 0:
            raise InvalidKeyError(self.name, "key must be a positive column count")
        self._columns = columns

    @property
    def columns(self) -> int:
        return self._columns

    @staticmethod
    def clean(text: str) -> str:
        """Uppercase *text* and remove spaces (other characters are kept)."""
        return text.upper().replace(" ", "")

    def shape(self, length: int) -> tuple[int, int]:
        """``(rows, columns)`` of the grid holding *length* characters."""
        return math.ceil(length / self._columns), self._columns

    def grid(self, plain_text: str) -> Grid:
        """Return the padded, row-major encryption grid for *plain_text*."""
        cleaned = self.clean(plain_text)
        rows, cols = self.shape(len(cleaned))
        padded = cleaned.ljust(rows * cols, PADDING)
        return [list(padded[r * cols:(r + 1) * cols]) for r in range(rows)]

    # ------------------------------------------------------------------ #
    #  Transforms
    # ------------------------------------------------------------------ #

    def encrypt(self, plain_text: str) -> str:
        return self._encrypt(plain_text)

    def decrypt(self, cipher_text: str) -> str:
        return self._decrypt(cipher_text)

    def encryption_steps(self, plain_text: str) -> list[StepInfo]:
        tracer = StepTracer()
        self._encrypt(plain_text, tracer)
        return tracer.steps

    def decryption_steps(self, cipher_text: str) -> list[StepInfo]:
        tracer = StepTracer()
        self._decrypt(cipher_text, tracer)
        return tracer.steps

    def _encrypt(self, text: str, tracer: Optional[StepTracer] = None) -> str:
        if is_blank(text):
            return ""

        cleaned = self.clean(text)
        rows, cols = self.shape(len(cleaned))
        grid = self.grid(text)
        columns = ["".join(grid[r][c] for r in range(rows)) for c in range(cols)]
        result = "".join(columns)

        if tracer is not None:
            tracer.add(
                "Input", "Plain Text", text,
                f"Starting transposition encryption with key = {cols}",
            )
            tracer.add("Clean Text", text.upper(), cleaned, "Uppercased and removed spaces")
            tracer.add(
                "Create Matrix", cleaned, f"Matrix: {rows}x{cols}",
                f"Created {rows} rows × {cols} columns matrix",
            )
            tracer.add(
                "Fill Matrix Row-wise", cleaned, _render(grid),
                f"Filled matrix row by row, padding empty cells with '{PADDING}'",
            )
            tracer.add(
                "Read Column-wise", _render(grid), " | ".join(columns),
                "Read matrix column by column",
            )
            tracer.finish(text, result, "Encryption complete")
        return result

    def _decrypt(self, text: str, tracer: Optional[StepTracer] = None) -> str:
        if is_blank(text):
            return ""

        upper = text.upper()
        rows, cols = self.shape(len(upper))
        grid: Grid = [[""] * cols for _ in range(rows)]
        it = iter(upper)
        for c in range(cols):
            for r in range(rows):
                grid[r][c] = next(it, "")

        row_strings = ["".join(row) for row in grid]
        decoded = "".join(row_strings)
        result = decoded.rstrip(PADDING)

        if tracer is not None:
            tracer.add(
                "Input", "Cipher Text", text,
                f"Starting transposition decryption with key = {cols}",
            )
            tracer.add(
                "Create Matrix", upper, f"Matrix: {rows}x{cols}",
                f"Created {rows} rows × {cols} columns matrix",
            )
            tracer.add(
                "Fill Matrix Column-wise", upper, _render(grid),
                "Filled matrix column by column",
            )
            tracer.add(
                "Read Row-wise", _render(grid), " ".join(row_strings),
                "Read matrix row by row",
            )
            if result != decoded:
                tracer.add(
                    "Remove Padding", decoded, result,
                    f"Trimmed trailing '{PADDING}' padding",
                )
            tracer.finish(text, result, "Decryption complete")
        return result
