"""
XOR Cipher
===========

Byte-wise XOR of the UTF-8 message against a repeating UTF-8 key.
Because ``(p ^ k) ^ k == p`` the same loop encrypts and decrypts; only the
representation differs (text in, hex out, and the reverse).

Cipher text is shown as space-separated, upper-case, two-digit hex bytes,
for example ``"03 00 15 07 0A"``.

References:
    - Vernam, G. S. (1926). Cipher Printing Telegraph Systems for Secret
      Wire and Radio Telegraphic Communications. Journal of the AIEE, 45.
"""

from __future__ import annotations

import binascii
from typing import Optional

from shared.math_utils import is_blank
from cipherstep.core.errors import InvalidFormatError, InvalidKeyError
from cipherstep.core.models import StepInfo
from cipherstep.core.tracer import StepTracer


def to_hex(data: bytes) -> str:
    """Render bytes as ``"AB 01 FF"``."""
    return " ".join(f"{b:02X}" for b in data)


class XORCipher:
    """Repeating-key XOR over UTF-8 bytes.

    Raises:
        InvalidKeyError: If the key is empty.
    """

    name = "XOR"

    def __init__(self, key: str) -> None:
        if not key:
            raise InvalidKeyError(self.name, "key must not be empty")
        self._key = key
        self._key_bytes = key.encode("utf-8")

    @property
    def key(self) -> str:
        return self._key

    @property
    def key_bytes(self) -> bytes:
        return self._key_bytes

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

    def parse_hex(self, cipher_text: str) -> bytes:
        """Parse ``"0A 1B-2C"`` style hex into bytes.

        Raises:
            InvalidFormatError: On an odd digit count or non-hex content.
        """
        digits = cipher_text.replace(" ", "").replace("-", "")
        if len(digits) % 2:
            raise InvalidFormatError(
                self.name, "invalid hex format (must be even length)"
            )
        try:
            return binascii.unhexlify(digits)
        except (binascii.Error, ValueError) as exc:
            raise InvalidFormatError(self.name, f"invalid hex format: {exc}") from exc

    def _encrypt(self, text: str, tracer: Optional[StepTracer] = None) -> str:
        if is_blank(text):
            return ""
        if tracer is not None:
            tracer.add(
                "Initialization", "Plain Text", text,
                f"Starting XOR encryption with key: {self._key}",
            )
        data = self._xor(text.encode("utf-8"), tracer, label="Text")
        result = to_hex(data)
        if tracer is not None:
            tracer.add(
                "Final Result (Hex)", text, result,
                "Encryption complete - converted to hexadecimal",
            )
        return result

    def _decrypt(self, text: str, tracer: Optional[StepTracer] = None) -> str:
        if is_blank(text):
            return ""
        cipher_bytes = self.parse_hex(text)
        if tracer is not None:
            tracer.add(
                "Initialization", "Cipher Text (Hex)", text,
                f"Starting XOR decryption with key: {self._key}",
            )
        data = self._xor(cipher_bytes, tracer, label="Cipher")
        # A wrong key can produce invalid UTF-8; show replacement characters.
        result = data.decode("utf-8", errors="replace")
        if tracer is not None:
            tracer.finish(text, result, "Decryption complete")
        return result

    def _xor(
        self, data: bytes, tracer: Optional[StepTracer], label: str
    ) -> bytes:
        key = self._key_bytes
        out = bytearray(len(data))
        for i, byte in enumerate(data):
            key_byte = key[i % len(key)]
            out[i] = byte ^ key_byte
            if tracer is not None:
                tracer.add(
                    f"XOR byte {i + 1}",
                    f"{label}: {byte} (0x{byte:02X}), Key: {key_byte} (0x{key_byte:02X})",
                    f"Result: {out[i]} (0x{out[i]:02X})",
                    f"{byte} XOR {key_byte} = {out[i]}",
                )
        return bytes(out)
