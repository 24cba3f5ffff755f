"""
Base64 Codec
=============

RFC 4648 Base64: every 3 bytes (24 bits) become 4 characters of 6 bits
each, drawn from ``A-Z a-z 0-9 + /``; a final group of 1 or 2 bytes is
completed with ``=`` padding.

This is an encoding, not encryption. The codec is here so the step trace
can show how bytes regroup into 6-bit characters.

References:
    - Josefsson, S. (2006). RFC 4648: The Base16, Base32, and Base64 Data
      Encodings. IETF.
"""

from __future__ import annotations

import base64
import binascii
from typing import Optional

from shared.math_utils import is_blank
from cipherstep.core.errors import InvalidFormatError
from cipherstep.core.models import StepInfo
from cipherstep.core.tracer import StepTracer

BASE64_ALPHABET = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
)


def _hex_bytes(data: bytes) -> str:
    return " ".join(f"0x{b:02X}" for b in data)


def _bits(data: bytes) -> str:
    return " ".join(f"{b:08b}" for b in data)


class Base64Codec:
    """Standard-alphabet Base64 over UTF-8 text.

    Usage::

        codec = Base64Codec()
        codec.encode("Hello")      # 'SGVsbG8='
        codec.decode("SGVsbG8=")   # 'Hello'
    """

    name = "Base64"

    def encode(self, plain_text: str) -> str:
        return self._encode(plain_text)

    def decode(self, base64_text: str) -> str:
        return self._decode(base64_text)

    def encoding_steps(self, plain_text: str) -> list[StepInfo]:
        tracer = StepTracer()
        self._encode(plain_text, tracer)
        return tracer.steps

    def decoding_steps(self, base64_text: str) -> list[StepInfo]:
        tracer = StepTracer()
        self._decode(base64_text, tracer)
        return tracer.steps

    # Cipher-style aliases so every component shares one call surface.
    encrypt = encode
    decrypt = decode
    encryption_steps = encoding_steps
    decryption_steps = decoding_steps

    # ------------------------------------------------------------------ #
    #  Internals
    # ------------------------------------------------------------------ #

    def _encode(self, text: str, tracer: Optional[StepTracer] = None) -> str:
        if is_blank(text):
            return ""

        data = text.encode("utf-8")
        result = base64.b64encode(data).decode("ascii")

        if tracer is not None:
            tracer.add("Input", "Plain Text", text, "Starting Base64 encoding")
            tracer.add(
                "Convert to Bytes", text, _hex_bytes(data),
                f"Converted to {len(data)} bytes (UTF-8 encoding)",
            )
            for group_no, start in enumerate(range(0, len(data), 3), start=1):
                chunk = data[start:start + 3]
                encoded = result[(group_no - 1) * 4:group_no * 4]
                tracer.add(
                    f"Group {group_no}: {_hex_bytes(chunk)}",
                    _bits(chunk),
                    encoded,
                    self._describe_group(chunk),
                )
            tracer.finish(text, result, "Base64 encoding complete")
        return result

    def _decode(self, text: str, tracer: Optional[StepTracer] = None) -> str:
        if is_blank(text):
            return ""

        cleaned = "".join(text.split())
        try:
            data = base64.b64decode(cleaned, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise InvalidFormatError(self.name, f"invalid Base64 format: {exc}") from exc
        result = data.decode("utf-8", errors="replace")

        if tracer is not None:
            tracer.add("Input", "Base64 Text", text, "Starting Base64 decoding")
            for group_no, start in enumerate(range(0, len(cleaned), 4), start=1):
                quad = cleaned[start:start + 4]
                chunk = data[(group_no - 1) * 3:group_no * 3]
                indices = [BASE64_ALPHABET.index(ch) for ch in quad if ch != "="]
                tracer.add(
                    f"Group {group_no}: {quad}",
                    "6-bit values " + ", ".join(str(i) for i in indices),
                    _hex_bytes(chunk),
                    f"{len(indices)} × 6 bits → {len(chunk)} byte(s)",
                )
            tracer.add(
                "Convert to Text", _hex_bytes(data), result,
                "Converted bytes to UTF-8 text",
            )
            tracer.finish(text, result, "Base64 decoding complete")
        return result

    @staticmethod
    def _describe_group(chunk: bytes) -> str:
        value = int.from_bytes(chunk.ljust(3, b"\x00"), "big")
        sextets = [(value >> shift) & 0x3F for shift in (18, 12, 6, 0)]
        used = len(chunk) + 1
        parts = [
            f"{s} → {BASE64_ALPHABET[s]}" for s in sextets[:used]
        ]
        pad = "=" * (4 - used)
        note = f"; padded with '{pad}'" if pad else ""
        return "6-bit values: " + ", ".join(parts) + note
