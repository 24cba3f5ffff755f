"""
Cipher Errors
==============

The two failure kinds a cipher can report.

* :class:`InvalidKeyError` -- raised by a constructor when key material
  breaks the cipher's structural rules (wrong length, repeated letters,
  non-invertible matrix, non-positive column count, empty keyword).
* :class:`InvalidFormatError` -- raised while decoding when the cipher text
  itself is malformed (odd-length hex, bad Base64, odd Playfair letter
  count, incomplete Hill block).

Both derive from :class:`ValueError` so callers that only care about "bad
input" can catch that.
"""

from __future__ import annotations


class CipherError(ValueError):
    """Base class for cipher key and format errors.

    Attributes:
        cipher: Name of the cipher that raised the error.
        reason: Human-readable explanation.
    """

    def __init__(self, cipher: str, reason: str) -> None:
        self.cipher = cipher
        self.reason = reason
        super().__init__(f"{cipher}: {reason}")


class InvalidKeyError(CipherError):
    """Key material violates the cipher's structural invariant."""


class InvalidFormatError(CipherError):
    """Cipher text does not follow the expected encoding."""
