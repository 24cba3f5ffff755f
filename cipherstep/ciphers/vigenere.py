"""
Vigenère Cipher
================

Polyalphabetic shift cipher: the i-th *letter* of the message is shifted by
the i-th letter of a repeating keyword (A=0, B=1, ...).  Non-letters are
copied and do not advance the keyword.

    C_i = (P_i + K_(i mod m)) mod 26
    P_i = (C_i - K_(i mod m) + 26) mod 26

Short or repetitive keywords are accepted on purpose: the resulting period
is exactly what Kasiski examination exploits.

References:
    - Vigenère, B. de (1586). Traicté des chiffres.
    - Kasiski, F. W. (1863). Die Geheimschriften und die Dechiffrirkunst.
"""

from __future__ import annotations

from typing import Optional

from shared.math_utils import ALPHABET_SIZE, is_blank, is_letter, letter_index, mod, shift
from cipherstep.core.errors import InvalidKeyError
from cipherstep.core.models import StepInfo
from cipherstep.core.tracer import StepTracer


class VigenereCipher:
    """Repeating-keyword Vigenère cipher.

    The keyword is uppercased once at construction. A keyword character's
    shift is ``(ord(k) - ord('A')) mod 26``, so letters behave as usual and
    any other character still yields a defined shift.

    Raises:
        InvalidKeyError: If the keyword is empty.
    """

    name = "Vigenère"

    def __init__(self, key: str) -> None:
        if not key:
            raise InvalidKeyError(self.name, "keyword must not be empty")
        self._key = key.upper()
        self._shifts = tuple(mod(ord(k) - ord("A")) for k in self._key)

    @property
    def key(self) -> str:
        return self._key

    def encrypt(self, plain_text: str) -> str:
        return self._apply(plain_text, +1)

    def decrypt(self, cipher_text: str) -> str:
        return self._apply(cipher_text, -1)

    def encryption_steps(self, plain_text: str) -> list[StepInfo]:
        tracer = StepTracer()
        self._apply(plain_text, +1, tracer)
        return tracer.steps

    def decryption_steps(self, cipher_text: str) -> list[StepInfo]:
        tracer = StepTracer()
        self._apply(cipher_text, -1, tracer)
        return tracer.steps

    def _apply(
        self, text: str, direction: int, tracer: Optional[StepTracer] = None
    ) -> str:
        if is_blank(text):
            return ""

        decrypting = direction < 0
        if tracer is not None:
            tracer.add(
                "Initialization",
                "Cipher Text" if decrypting else "Plain Text",
                text,
                f"Starting {'decryption' if decrypting else 'encryption'} "
                f"with key: {self._key}",
            )

        out: list[str] = []
        key_index = 0
        for ch in text:
            if not is_letter(ch):
                out.append(ch)
                if tracer is not None:
                    tracer.add(
                        f"Process '{ch}'",
                        "Non-letter character",
                        ch,
                        "Non-letter characters remain unchanged",
                    )
                continue

            key_char = self._key[key_index % len(self._key)]
            key_shift = self._shifts[key_index % len(self._shifts)]
            result = shift(ch, direction * key_shift)
            out.append(result)
            key_index += 1

            if tracer is not None:
                pos = letter_index(ch)
                new_pos = letter_index(result)
                if decrypting:
                    tracer.add(
                        f"Process '{ch}'",
                        f"Cipher: {ch} (pos {pos}), Key: {key_char} (pos {key_shift})",
                        f"Plain: {result} (pos {new_pos})",
                        f"{ch} - {key_char} = {result} "
                        f"(({pos} - {key_shift} + {ALPHABET_SIZE}) mod 26)",
                    )
                else:
                    tracer.add(
                        f"Process '{ch}'",
                        f"Plain: {ch} (pos {pos}), Key: {key_char} (pos {key_shift})",
                        f"Cipher: {result} (pos {new_pos})",
                        f"{ch} + {key_char} = {result} (mod 26)",
                    )

        joined = "".join(out)
        if tracer is not None:
            tracer.finish(
                text, joined,
                "Decryption complete" if decrypting else "Encryption complete",
            )
        return joined
