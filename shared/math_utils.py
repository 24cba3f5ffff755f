"""
CipherStep Mathematical Utilities
==================================

Modular arithmetic over the 26-letter Latin alphabet and exact integer
matrix algebra used by every CipherStep cipher.

Letters are the ASCII ranges ``A-Z`` and ``a-z`` only; every other
character is treated as a non-letter and passes through the substitution
ciphers untouched.

Matrix helpers operate on small NumPy integer arrays and never go through
floating point, so determinants and inverses are exact.

References (master list):
    [1] Hill, L. S. (1929). Cryptography in an Algebraic Alphabet.
        The American Mathematical Monthly, 36(6), 306-312.
    [2] Knuth, D. E. (1997). The Art of Computer Programming, Vol. 2:
        Seminumerical Algorithms (3rd ed.), section 4.5.2.
    [3] Sinkov, A. (1966). Elementary Cryptanalysis: A Mathematical
        Approach. Mathematical Association of America.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
from numpy.typing import NDArray


# ---------------------------------------------------------------------------
#  Constants and type aliases
# ---------------------------------------------------------------------------
ALPHABET: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALPHABET_SIZE: int = 26

IntMatrix = NDArray[np.int64]


# ========================== Alphabet Arithmetic ============================


def mod(value: int, modulus: int = ALPHABET_SIZE) -> int:
    """Reduce *value* into ``[0, modulus)``.

    Equivalent to ``((value % m) + m) % m`` in languages whose remainder
    keeps the dividend's sign.
    """
    return ((value % modulus) + modulus) % modulus


def is_letter(ch: str) -> bool:
    """Return ``True`` for a single ASCII letter."""
    return len(ch) == 1 and ("A" <= ch <= "Z" or "a" <= ch <= "z")


def is_blank(text: str | None) -> bool:
    """Return ``True`` for ``None``, empty, or whitespace-only text."""
    return not text or not text.strip()


def letter_index(ch: str) -> int:
    """Return the 0-25 index of *ch* relative to its own case.

    Raises:
        ValueError: If *ch* is not an ASCII letter.
    """
    if not is_letter(ch):
        raise ValueError(f"Not an alphabet letter: {ch!r}")
    base = "A" if ch.isupper() else "a"
    return ord(ch) - ord(base)


def index_letter(index: int, upper: bool = True) -> str:
    """Map an integer to a letter, reducing it modulo 26 first."""
    base = "A" if upper else "a"
    return chr(ord(base) + mod(index))


def shift(ch: str, amount: int) -> str:
    """Shift a letter by *amount* positions, preserving its case.

    Non-letters are returned unchanged.

    Example::

        >>> shift("y", 3)
        'b'
        >>> shift("A", -1)
        'Z'
    """
    if not is_letter(ch):
        return ch
    return index_letter(letter_index(ch) + amount, upper=ch.isupper())


def match_case(template: str, letter: str) -> str:
    """Return *letter* in the case of *template*."""
    return letter.lower() if template.islower() else letter.upper()


def letters_only(text: str) -> str:
    """Uppercase *text* and keep only its ASCII letters."""
    return "".join(ch for ch in text.upper() if is_letter(ch))


# ========================== Number Theory ==================================


def gcd(a: int, b: int) -> int:
    """Greatest common divisor, always non-negative."""
    return math.gcd(a, b)


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Extended Euclidean algorithm.

    Returns ``(g, x, y)`` such that ``a*x + b*y == g == gcd(a, b)``.

    Reference:
        Knuth, D. E. (1997). TAOCP Vol. 2, Algorithm X (4.5.2).
    """
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y


def mod_inverse(a: int, modulus: int = ALPHABET_SIZE) -> int:
    """Return ``x`` in ``[1, modulus)`` with ``a*x = 1 (mod modulus)``.

    Raises:
        ValueError: If *a* is not invertible modulo *modulus*.
    """
    g, x, _ = extended_gcd(mod(a, modulus), modulus)
    if g != 1:
        raise ValueError(
            f"{a} has no inverse modulo {modulus} (gcd={g})"
        )
    return mod(x, modulus)


# ========================== Integer Matrices ===============================


def _is_integer(value: object) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def as_matrix(
    rows: Sequence[Sequence[int]] | IntMatrix, modulus: int | None = None
) -> IntMatrix:
    """Convert nested sequences into a 2-D ``int64`` array.

    Entries must be integers; floats and booleans are rejected rather than
    truncated. With *modulus* set, each entry is reduced as a Python int
    first, so arbitrarily large keys fit in ``int64``.

    Raises:
        ValueError: If the rows are ragged or contain non-integers.
    """
    if isinstance(rows, np.ndarray):
        rows = rows.tolist()
    if isinstance(rows, (str, bytes)):
        raise ValueError("Matrix must be a sequence of rows, got a string")
    try:
        entries = [list(row) for row in rows]
    except TypeError as exc:
        raise ValueError(f"Matrix must be a sequence of rows: {exc}") from exc

    for row in entries:
        for value in row:
            if not _is_integer(value):
                raise ValueError(f"Matrix must contain integers only, got {value!r}")
    if len({len(row) for row in entries}) > 1:
        raise ValueError("Matrix rows must all have the same length")
    if modulus is not None:
        entries = [[int(v) % modulus for v in row] for row in entries]

    try:
        arr = np.array(entries, dtype=np.int64)
    except (TypeError, ValueError, OverflowError) as exc:
        raise ValueError(f"Matrix entries out of range: {exc}") from exc
    if arr.ndim != 2:
        raise ValueError(f"Matrix must be two-dimensional, got ndim={arr.ndim}")
    return arr


def _minor(matrix: IntMatrix, row: int, col: int) -> IntMatrix:
    return np.delete(np.delete(matrix, row, axis=0), col, axis=1)


def matrix_determinant(matrix: IntMatrix) -> int:
    """Exact integer determinant by cofactor expansion along row 0.

    Suitable for the 2x2 and 3x3 matrices Hill keys use; the cost grows
    factorially with the order.
    """
    n = matrix.shape[0]
    if matrix.shape != (n, n):
        raise ValueError(f"Matrix must be square, got shape {matrix.shape}")
    if n == 0:
        return 1
    if n == 1:
        return int(matrix[0, 0])
    if n == 2:
        a, b = int(matrix[0, 0]), int(matrix[0, 1])
        c, d = int(matrix[1, 0]), int(matrix[1, 1])
        return a * d - b * c
    total = 0
    for col in range(n):
        sign = -1 if col % 2 else 1
        total += sign * int(matrix[0, col]) * matrix_determinant(_minor(matrix, 0, col))
    return total


def matrix_adjugate(matrix: IntMatrix) -> IntMatrix:
    """Return the adjugate (transpose of the cofactor matrix).

    For a 2x2 matrix ``[[a, b], [c, d]]`` this is ``[[d, -b], [-c, a]]``.
    """
    n = matrix.shape[0]
    if n == 1:
        return np.ones((1, 1), dtype=np.int64)
    cofactors = np.zeros((n, n), dtype=np.int64)
    for i in range(n):
        for j in range(n):
            sign = -1 if (i + j) % 2 else 1
            cofactors[i, j] = sign * matrix_determinant(_minor(matrix, i, j))
    return cofactors.T.copy()


def matrix_inverse_mod(
    matrix: IntMatrix, modulus: int = ALPHABET_SIZE
) -> IntMatrix:
    """Inverse of an integer matrix modulo *modulus*.

    Computed as ``adj(K) * det(K)^-1 (mod m)`` with every entry reduced
    into ``[0, m)``.

    Raises:
        ValueError: If the determinant is not coprime with *modulus*.
    """
    det = mod(matrix_determinant(matrix), modulus)
    det_inv = mod_inverse(det, modulus)
    return np.mod(matrix_adjugate(matrix) * det_inv, modulus).astype(np.int64)


def matrix_vector_mod(
    matrix: IntMatrix, vector: Sequence[int], modulus: int = ALPHABET_SIZE
) -> list[int]:
    """Multiply ``matrix @ vector`` and reduce each component mod *modulus*."""
    product = matrix @ np.array(vector, dtype=np.int64)
    return [int(v) for v in np.mod(product, modulus)]


def format_matrix(matrix: IntMatrix) -> str:
    """Render a matrix as ``[[a, b], [c, d]]`` for step descriptions."""
    return "[" + ", ".join(
        "[" + ", ".join(str(int(v)) for v in row) + "]" for row in matrix
    ) + "]"
