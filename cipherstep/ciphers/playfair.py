"""
Playfair Cipher
================

Digraph substitution over a 5x5 key square (Wheatstone, 1854).

Key square construction:
    1. J is merged into I, leaving 25 letters.
    2. Distinct letters of the keyword go first, in reading order.
    3. The rest of the alphabet (without J) fills the remaining cells.

For the keyword ``PLAYFAIR``::

    P L A Y F
    I R B C D
    E G H K M
    N O Q S T
    U V W X Z

Digraph rules (encryption / decryption):
    - same row     -> letter to the right / left (wrapping)
    - same column  -> letter below / above (wrapping)
    - rectangle    -> each letter takes the other's column (self-inverse)

References:
    - Kahn, D. (1996). The Codebreakers. Scribner. pp. 198-202.
    - Gaines, H. F. (1956). Cryptanalysis. Dover. Chapter XX.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from shared.math_utils import ALPHABET, is_blank, letters_only
from cipherstep.core.errors import InvalidFormatError
from cipherstep.core.models import StepInfo
from cipherstep.core.tracer import StepTracer

SQUARE_SIZE = 5
FILLER = "X"
# Used instead of X when the letter being separated or padded is itself X.
ALT_FILLER = "Q"

_RULE_SAME_ROW = "row"
_RULE_SAME_COLUMN = "column"
_RULE_RECTANGLE = "rectangle"


def _fold(text: str) -> str:
    """Uppercase, fold J into I and keep letters only."""
    return letters_only(text).replace("J", "I")


def _filler_for(letter: str) -> str:
    return ALT_FILLER if letter == FILLER else FILLER


def _split_repeats(letters: str) -> str:
    """Insert a filler between equal letters that would share a digraph."""
    out = list(letters)
    i = 0
    while i < len(out) - 1:
        if out[i] == out[i + 1]:
            out.insert(i + 1, _filler_for(out[i]))
        i += 2
    return "".join(out)


def _pad(separated: str) -> str:
    """Make *separated* even length without ending on a doubled letter."""
    if len(separated) % 2 == 0:
        return separated
    return separated + _filler_for(separated[-1])


class PlayfairCipher:
    """Playfair digraph cipher.

    Any keyword is accepted, including an empty one (which yields the plain
    alphabetical square). Non-letters in the keyword are ignored.

    Usage::

        cipher = PlayfairCipher("PLAYFAIR")
        cipher.prepare_text("HELLO")   # 'HELXLO'
        cipher.encrypt("HELLO")         # 'KGYVRV'
    """

    name = "Playfair"

    def __init__(self, key: str = "") -> None:
        self._keyword = key or ""
        seen: dict[str, None] = {}
        for ch in _fold(self._keyword) + ALPHABET.replace("J", ""):
            seen.setdefault(ch, None)

        letters = list(seen)
        self._square: tuple[tuple[str, ...], ...] = tuple(
            tuple(letters[row * SQUARE_SIZE:(row + 1) * SQUARE_SIZE])
            for row in range(SQUARE_SIZE)
        )
        self._positions: Mapping[str, tuple[int, int]] = MappingProxyType({
            letter: (idx // SQUARE_SIZE, idx % SQUARE_SIZE)
            for idx, letter in enumerate(letters)
        })

    # ------------------------------------------------------------------ #
    #  Key square access
    # ------------------------------------------------------------------ #

    @property
    def keyword(self) -> str:
        return self._keyword

    @property
    def key_square(self) -> tuple[tuple[str, ...], ...]:
        """The 5x5 square as rows of single letters."""
        return self._square

    def position(self, letter: str) -> tuple[int, int]:
        """Return ``(row, col)`` of *letter* (J is looked up as I)."""
        return self._positions[letter.upper().replace("J", "I")]

    # ------------------------------------------------------------------ #
    #  Text preparation
    # ------------------------------------------------------------------ #

    @staticmethod
    def prepare_text(text: str) -> str:
        """Normalise plaintext into an even-length run of valid digraphs.

        Uppercases, folds J to I, drops non-letters, inserts ``X`` between
        two equal letters that would share a digraph, then pads a trailing
        ``X`` if the length is odd. When the letter being separated or padded
        is itself ``X`` the filler is ``Q``, so no digraph is ever a doubled
        letter.

        Example::

            >>> PlayfairCipher.prepare_text("balloon")
            'BALXLOON'
        """
        return _pad(_split_repeats(_fold(text)))

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

        if tracer is not None:
            tracer.add("Input", "Plain Text", text, "Starting Playfair encryption")

        separated = _split_repeats(_fold(text))
        prepared = _pad(separated)
        if tracer is not None:
            tracer.add(
                "Prepare Text",
                text,
                separated,
                "Removed non-letters, replaced J with I, "
                "inserted a filler (X, or Q after X) between repeated letters",
            )
            if prepared != separated:
                tracer.add(
                    "Add Padding", separated, prepared,
                    f"Added '{prepared[-1]}' to make even length",
                )

        result = self._process(prepared, +1, tracer)
        if tracer is not None:
            tracer.finish(text, result, "Encryption complete")
        return result

    def _decrypt(self, text: str, tracer: Optional[StepTracer] = None) -> str:
        if is_blank(text):
            return ""

        letters = _fold(text)
        if len(letters) % 2:
            raise InvalidFormatError(
                self.name,
                f"cipher text must contain an even number of letters, got {len(letters)}",
            )
        if not letters:
            return ""

        if tracer is not None:
            tracer.add("Input", "Cipher Text", text, "Starting Playfair decryption")
        result = self._process(letters, -1, tracer)
        if tracer is not None:
            tracer.finish(text, result, "Decryption complete")
        return result

    def _process(
        self, prepared: str, direction: int, tracer: Optional[StepTracer]
    ) -> str:
        out: list[str] = []
        for pair_no, i in enumerate(range(0, len(prepared), 2), start=1):
            a, b = prepared[i], prepared[i + 1]
            (r1, c1), (r2, c2) = self._positions[a], self._positions[b]

            if r1 == r2:
                rule = _RULE_SAME_ROW
                x = self._square[r1][(c1 + direction) % SQUARE_SIZE]
                y = self._square[r2][(c2 + direction) % SQUARE_SIZE]
            elif c1 == c2:
                rule = _RULE_SAME_COLUMN
                x = self._square[(r1 + direction) % SQUARE_SIZE][c1]
                y = self._square[(r2 + direction) % SQUARE_SIZE][c2]
            else:
                rule = _RULE_RECTANGLE
                x = self._square[r1][c2]
                y = self._square[r2][c1]

            out.extend((x, y))
            if tracer is not None:
                tracer.add(
                    f"Pair {pair_no}: {a}{b}",
                    f"{a} at ({r1},{c1}), {b} at ({r2},{c2})",
                    f"{x}{y}",
                    self._describe_rule(rule, direction),
                )
        return "".join(out)

    @staticmethod
    def _describe_rule(rule: str, direction: int) -> str:
        if rule == _RULE_SAME_ROW:
            return "Same row: shift right" if direction > 0 else "Same row: shift left"
        if rule == _RULE_SAME_COLUMN:
            return "Same column: shift down" if direction > 0 else "Same column: shift up"
        return "Rectangle: swap columns"
