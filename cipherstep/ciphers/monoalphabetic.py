"""
Monoalphabetic Substitution Cipher
===================================

Each plaintext letter is replaced by the letter at the same position in a
26-letter permutation key.  With ``26!`` (about ``4 * 10^26``) possible keys
exhaustive search is hopeless, yet the cipher preserves letter frequencies
and falls quickly to frequency analysis.

Example key::

    plain : ABCDEFGHIJKLMNOPQRSTUVWXYZ
    key   : QWERTYUIOPASDFGHJKLZXCVBNM

References:
    - Al-Kindi (c. 850). A Manuscript on Deciphering Cryptographic Messages.
    - Durstenfeld, R. (1964). Algorithm 235: Random permutation.
      Communications of the ACM, 7(7), 420.
"""

from __future__ import annotations

import random
from types import MappingProxyType
from typing import Mapping, Optional

from shared.math_utils import ALPHABET, is_blank, is_letter, match_case
from cipherstep.core.errors import InvalidKeyError
from cipherstep.core.models import StepInfo
from cipherstep.core.tracer import StepTracer


class MonoalphabeticCipher:
    """Substitution cipher driven by a 26-letter permutation.

    The key is case-insensitive. Output letters take the case of the
    input letter they replace; non-letters pass through.

    Raises:
        InvalidKeyError: If the key is not exactly 26 distinct letters A-Z.
    """

    name = "Monoalphabetic"

    def __init__(self, key: str) -> None:
        if not key or len(key) != len(ALPHABET):
            raise InvalidKeyError(
                self.name, "key must contain exactly 26 unique letters"
            )
        upper = key.upper()
        if len(upper) != len(ALPHABET) or set(upper) != set(ALPHABET):
            raise InvalidKeyError(
                self.name, "key must be a permutation of the letters A-Z"
            )

        self._key = upper
        self._encryption_map: Mapping[str, str] = MappingProxyType(
            dict(zip(ALPHABET, upper))
        )
        self._decryption_map: Mapping[str, str] = MappingProxyType(
            dict(zip(upper, ALPHABET))
        )

    @property
    def key(self) -> str:
        return self._key

    @property
    def encryption_map(self) -> Mapping[str, str]:
        """Read-only plaintext-letter -> cipher-letter table (uppercase)."""
        return self._encryption_map

    @property
    def decryption_map(self) -> Mapping[str, str]:
        """Read-only cipher-letter -> plaintext-letter table (uppercase)."""
        return self._decryption_map

    # ------------------------------------------------------------------ #
    #  Key generation
    # ------------------------------------------------------------------ #

    @staticmethod
    def generate_random_key(rng: Optional[random.Random] = None) -> str:
        """Return a uniformly random permutation of A-Z.

        Uses a Fisher-Yates shuffle driven by *rng*. Pass a seeded
        :class:`random.Random` for reproducible keys. The default source
        is a fresh, unseeded ``random.Random``; it is fine for classroom
        keys and unsuitable for real secrecy.
        """
        source = rng if rng is not None else random.Random()
        letters = list(ALPHABET)
        for i in range(len(letters) - 1, 0, -1):
            j = source.randint(0, i)
            letters[i], letters[j] = letters[j], letters[i]
        return "".join(letters)

    # ------------------------------------------------------------------ #
    #  Transforms
    # ------------------------------------------------------------------ #

    def encrypt(self, plain_text: str) -> str:
        return self._substitute(plain_text, self._encryption_map)

    def decrypt(self, cipher_text: str) -> str:
        return self._substitute(cipher_text, self._decryption_map)

    def encryption_steps(self, plain_text: str) -> list[StepInfo]:
        tracer = StepTracer()
        self._substitute(plain_text, self._encryption_map, tracer)
        return tracer.steps

    def decryption_steps(self, cipher_text: str) -> list[StepInfo]:
        tracer = StepTracer()
        self._substitute(cipher_text, self._decryption_map, tracer, decrypting=True)
        return tracer.steps

    def _substitute(
        self,
        text: str,
        table: Mapping[str, str],
        tracer: Optional[StepTracer] = None,
        decrypting: bool = False,
    ) -> str:
        if is_blank(text):
            return ""

        if tracer is not None:
            verb = "decryption" if decrypting else "encryption"
            tracer.add(
                "Initialization",
                "Cipher Text" if decrypting else "Plain Text",
                text,
                f"Starting {verb} with substitution key {self._key}",
            )

        out: list[str] = []
        for ch in text:
            if is_letter(ch):
                mapped = match_case(ch, table[ch.upper()])
                out.append(mapped)
                if tracer is not None:
                    which = "reverse substitution table" if decrypting else "substitution table"
                    tracer.add(
                        f"Map '{ch}'",
                        f"Input: {ch}",
                        f"Output: {mapped}",
                        f"{ch} → {mapped} (using {which})",
                    )
            else:
                out.append(ch)
                if tracer is not None:
                    tracer.add(
                        f"Process '{ch}'",
                        "Non-letter character",
                        ch,
                        "Non-letter characters remain unchanged",
                    )

        joined = "".join(out)
        if tracer is not None:
            tracer.finish(
                text, joined,
                "Decryption complete" if decrypting else "Encryption complete",
            )
        return joined
