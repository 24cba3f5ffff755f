"""
Caesar Cipher
==============

Fixed-shift substitution: every letter moves *key* places along the
alphabet, wrapping from Z back to A.

    C = (P + K) mod 26        P = (C - K) mod 26 = (C + 26 - K) mod 26

Only 25 shifts change the text, so the cipher falls to exhaustive search;
:meth:`CaesarCipher.brute_force` lists every candidate for the student to
inspect.

References:
    - Suetonius, De Vita Caesarum, Divus Iulius LVI.
    - Singh, S. (1999). The Code Book. Fourth Estate. Chapter 1.
"""

from __future__ import annotations

from typing import Optional

from shared.math_utils import ALPHABET_SIZE, is_blank, is_letter, letter_index, shift
from cipherstep.core.errors import InvalidKeyError
from cipherstep.core.models import StepInfo
from cipherstep.core.tracer import StepTracer


class CaesarCipher:
    """Caesar shift cipher.

    Any integer key is accepted; only ``key mod 26`` matters.

    Usage::

        cipher = CaesarCipher(3)
        cipher.encrypt("HELLO")        # 'KHOOR'
        cipher.brute_force("KHOOR")[2]  # 'HELLO' (key 3)
    """

    name = "Caesar"

    def __init__(self, key: int = 3) -> None:
        if isinstance(key, bool) or not isinstance(key, int):
            raise InvalidKeyError(self.name, f"shift must be an integer, got {key!r}")
        self._key = key

    @property
    def key(self) -> int:
        return self._key

    @property
    def inverse_key(self) -> int:
        """The shift that undoes this cipher, in ``1..26``."""
        return ALPHABET_SIZE - (self._key % ALPHABET_SIZE)

    # ------------------------------------------------------------------ #
    #  Transforms
    # ------------------------------------------------------------------ #

    def encrypt(self, plain_text: str) -> str:
        return self._shift_text(plain_text, self._key)

    def decrypt(self, cipher_text: str) -> str:
        return self._shift_text(cipher_text, self.inverse_key)

    def brute_force(self, cipher_text: str) -> list[str]:
        """Decode *cipher_text* with every key from 1 to 25.

        Index ``i`` of the result holds the decoding for key ``i + 1``.
        Keys 0 and 26 are skipped because they leave the text unchanged.
        Picking the meaningful line is left to the reader.
        """
        return [
            self._shift_text(cipher_text, ALPHABET_SIZE - k)
            for k in range(1, ALPHABET_SIZE)
        ]

    # ------------------------------------------------------------------ #
    #  Step traces
    # ------------------------------------------------------------------ #

    def encryption_steps(self, plain_text: str) -> list[StepInfo]:
        tracer = StepTracer()
        self._shift_text(plain_text, self._key, tracer, decrypting=False)
        return tracer.steps

    def decryption_steps(self, cipher_text: str) -> list[StepInfo]:
        tracer = StepTracer()
        self._shift_text(cipher_text, self.inverse_key, tracer, decrypting=True)
        return tracer.steps

    # ------------------------------------------------------------------ #
    #  Internals
    # ------------------------------------------------------------------ #

    def _shift_text(
        self,
        text: str,
        amount: int,
        tracer: Optional[StepTracer] = None,
        decrypting: bool = False,
    ) -> str:
        if is_blank(text):
            return ""

        verb = "decryption" if decrypting else "encryption"
        if tracer is not None:
            label = "Cipher Text" if decrypting else "Plain Text"
            note = f"Starting {verb} with key = {self._key}"
            if decrypting:
                note += f" (shift forward by 26 - {self._key % ALPHABET_SIZE} = {amount})"
            tracer.add("Initialization", label, text, note)

        out: list[str] = []
        for ch in text:
            result = shift(ch, amount)
            out.append(result)
            if tracer is None:
                continue
            if is_letter(ch):
                old_pos = letter_index(ch)
                new_pos = letter_index(result)
                tracer.add(
                    f"Process '{ch}'",
                    f"Position: {old_pos} ({ch})",
                    f"New Position: {new_pos} ({result})",
                    f"{ch} → {result} (shift by {amount % ALPHABET_SIZE})",
                )
            else:
                tracer.add(
                    f"Process '{ch}'",
                    "Non-letter character",
                    ch,
                    "Non-letter characters remain unchanged",
                )

        joined = "".join(out)
        if tracer is not None:
            tracer.finish(text, joined, f"{verb.capitalize()} complete")
        return joined
