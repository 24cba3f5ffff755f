"""
Hill Cipher
============

Polygraphic block cipher over ``Z_26`` (Hill, 1929).  The message is split
into blocks of *n* letters, each block is read as a column vector of letter
indices, and multiplied by an invertible n x n key matrix:

    C = K . P (mod 26)          P = K^-1 . C (mod 26)

``K`` is invertible modulo 26 exactly when ``gcd(det K, 26) = 1``.  The
inverse is ``K^-1 = det(K)^-1 . adj(K) (mod 26)``.

Worked example with ``K = [[3, 3], [2, 5]]`` (det = 9, 9^-1 = 3)::

    "HELP" -> [7, 4], [11, 15]
    K . [7, 4]   = [33, 34] = [7, 8]  -> "HI"
    K . [11, 15] = [78, 97] = [0, 19] -> "AT"

References:
    - Hill, L. S. (1929). Cryptography in an Algebraic Alphabet.
      The American Mathematical Monthly, 36(6), 306-312.
    - Stinson, D. R. (2006). Cryptography: Theory and Practice (3rd ed.).
      Section 1.1.6.
"""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from shared.math_utils import (
    ALPHABET_SIZE,
    IntMatrix,
    as_matrix,
    format_matrix,
    gcd,
    index_letter,
    is_blank,
    letter_index,
    letters_only,
    matrix_determinant,
    matrix_inverse_mod,
    matrix_vector_mod,
    mod,
    mod_inverse,
)
from cipherstep.core.errors import InvalidFormatError, InvalidKeyError
from cipherstep.core.models import StepInfo
from cipherstep.core.tracer import StepTracer

PADDING = "X"
SUPPORTED_ORDERS = (2, 3)


class HillCipher:
    """Hill cipher with a 2x2 or 3x3 key matrix.

    Both orders encrypt and decrypt; the inverse matrix is computed once at
    construction. Entries may be any integers and are reduced modulo 26,
    so ``[[29, 3], [-24, 5]]`` is the same key as ``[[3, 3], [2, 5]]``.

    Raises:
        InvalidKeyError: If an entry is not an integer, the matrix is not
            square or not of order 2 or 3, or its determinant shares a
            factor with 26.
    """

    name = "Hill"

    def __init__(self, matrix: Sequence[Sequence[int]] | IntMatrix) -> None:
        try:
            key = as_matrix(matrix, modulus=ALPHABET_SIZE)
        except ValueError as exc:
            raise InvalidKeyError(self.name, str(exc)) from exc

        rows, cols = key.shape
        if rows != cols:
            raise InvalidKeyError(self.name, "key matrix must be square")
        if rows not in SUPPORTED_ORDERS:
            raise InvalidKeyError(self.name, "key matrix must be 2x2 or 3x3")

        det = mod(matrix_determinant(key))
        if gcd(det, ALPHABET_SIZE) != 1:
            raise InvalidKeyError(
                self.name,
                f"key matrix determinant ({det} mod 26) must be coprime with 26",
            )

        self._key = key
        self._key.setflags(write=False)
        self._determinant = det
        self._inverse = matrix_inverse_mod(key)
        self._inverse.setflags(write=False)

    # ------------------------------------------------------------------ #
    #  Key access
    # ------------------------------------------------------------------ #

    @property
    def order(self) -> int:
        return int(self._key.shape[0])

    @property
    def determinant(self) -> int:
        """Determinant of the key matrix reduced into ``[0, 26)``."""
        return self._determinant

    @property
    def key_matrix(self) -> list[list[int]]:
        return self._key.tolist()

    @property
    def inverse_matrix(self) -> list[list[int]]:
        """The key matrix inverse modulo 26."""
        return self._inverse.tolist()

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

        letters = letters_only(text)
        n = self.order
        padded = letters + PADDING * (-len(letters) % n)

        if tracer is not None:
            tracer.add(
                "Input", "Plain Text", text,
                f"Starting Hill encryption with key matrix {format_matrix(self._key)}",
            )
            tracer.add(
                "Prepare Text", text, padded,
                f"Uppercased, removed non-letters, padded with '{PADDING}' "
                f"to a multiple of {n}",
            )

        result = self._apply(padded, self._key, tracer)
        if tracer is not None:
            tracer.finish(text, result, "Encryption complete")
        return result

    def _decrypt(self, text: str, tracer: Optional[StepTracer] = None) -> str:
        if is_blank(text):
            return ""

        letters = letters_only(text)
        n = self.order
        if len(letters) % n:
            raise InvalidFormatError(
                self.name,
                f"cipher text must contain a multiple of {n} letters, got {len(letters)}",
            )

        if tracer is not None:
            tracer.add(
                "Input", "Cipher Text", text,
                f"Starting Hill decryption with key matrix {format_matrix(self._key)}",
            )
            det_inv = mod_inverse(self._determinant)
            tracer.add(
                "Inverse Matrix",
                f"det = {self._determinant}, det^-1 = {det_inv} (mod 26)",
                format_matrix(self._inverse),
                "K^-1 = det^-1 × adj(K) (mod 26)",
            )

        decoded = self._apply(letters, self._inverse, tracer)
        result = decoded.rstrip(PADDING)
        if tracer is not None:
            if result != decoded:
                tracer.add(
                    "Remove Padding", decoded, result,
                    f"Trimmed trailing '{PADDING}' padding",
                )
            tracer.finish(text, result, "Decryption complete")
        return result

    def _apply(
        self, letters: str, matrix: np.ndarray, tracer: Optional[StepTracer]
    ) -> str:
        n = self.order
        out: list[str] = []
        for block_no, start in enumerate(range(0, len(letters), n), start=1):
            block = letters[start:start + n]
            vector = [letter_index(ch) for ch in block]
            reduced = matrix_vector_mod(matrix, vector)
            chunk = "".join(index_letter(v) for v in reduced)
            out.append(chunk)

            if tracer is not None:
                raw = [int(v) for v in matrix @ np.array(vector, dtype=np.int64)]
                tracer.add(
                    f"Block {block_no}: {block}",
                    f"Vector {vector}",
                    f"{reduced} → {chunk}",
                    f"{format_matrix(matrix)} × {vector} = {raw} ≡ {reduced} (mod 26)",
                )
        return "".join(out)
