"""
CipherStep Core Data Models
============================

Pydantic models for the CipherStep cipher library: the immutable
:class:`StepInfo` record produced by every trace operation, and the result
envelopes returned by :class:`~cipherstep.core.engine.CipherEngine`.

All models are serialisable to JSON and consumed by both the console
output layer and the report generators.
"""

from __future__ import annotations

import enum
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class CipherKind(str, enum.Enum):
    """The ciphers CipherStep implements."""

    CAESAR = "caesar"
    MONOALPHABETIC = "monoalphabetic"
    VIGENERE = "vigenere"
    PLAYFAIR = "playfair"
    HILL = "hill"
    TRANSPOSITION = "transposition"
    XOR = "xor"
    BASE64 = "base64"

    @property
    def label(self) -> str:
        return _KIND_LABELS[self]


_KIND_LABELS: dict[CipherKind, str] = {
    CipherKind.CAESAR: "Caesar",
    CipherKind.MONOALPHABETIC: "Monoalphabetic Substitution",
    CipherKind.VIGENERE: "Vigenère",
    CipherKind.PLAYFAIR: "Playfair",
    CipherKind.HILL: "Hill",
    CipherKind.TRANSPOSITION: "Columnar Transposition",
    CipherKind.XOR: "XOR",
    CipherKind.BASE64: "Base64",
}


class Mode(str, enum.Enum):
    """Direction of a transform."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


# ===================================================================== #
#  Step Trace
# ===================================================================== #


class StepInfo(BaseModel):
    """One observable unit of work in a cipher computation.

    Step 1 describes the input and configuration, middle steps describe
    one character, digraph, block or byte each, and the last step restates
    the complete output.

    Attributes:
        step_number: 1-based position within the trace.
        description: Short title of the step (e.g. ``"Pair 2: LX"``).
        input: What the step consumed.
        output: What the step produced.
        explanation: Optional teaching note (rule applied, arithmetic).
    """

    model_config = ConfigDict(frozen=True)

    step_number: int = Field(ge=1)
    description: str
    input: str
    output: str
    explanation: Optional[str] = None


# ===================================================================== #
#  Engine Results
# ===================================================================== #


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TransformResult(BaseModel):
    """Outcome of one engine transform.

    Exactly one of ``output`` (possibly empty) or ``error`` is meaningful:
    when ``error`` is set the transform was rejected by the cipher and
    ``output`` is empty.

    Attributes:
        cipher: Which cipher ran.
        mode: Encrypt or decrypt.
        key: Display form of the key material used.
        input: The text given to the cipher.
        output: The transformed text.
        steps: Step trace, empty unless tracing was requested.
        error: Human-readable reason when the cipher rejected the key or input.
        error_type: ``"InvalidKeyError"`` or ``"InvalidFormatError"``.
        started_at: UTC start time.
        finished_at: UTC end time.
    """

    cipher: CipherKind
    mode: Mode
    key: str = ""
    input: str = ""
    output: str = ""
    steps: list[StepInfo] = Field(default_factory=list)
    error: Optional[str] = None
    error_type: Optional[str] = None
    started_at: datetime = Field(default_factory=_utcnow)
    finished_at: Optional[datetime] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def duration_seconds(self) -> float | None:
        if self.finished_at is None:
            return None
        return (self.finished_at - self.started_at).total_seconds()

    def to_json_dict(self) -> dict[str, Any]:
        """JSON-safe dictionary (datetimes as ISO strings)."""
        return self.model_dump(mode="json")


class BruteForceCandidate(BaseModel):
    """One Caesar key tried during brute force."""

    key: int = Field(ge=1, le=25)
    text: str


class BruteForceResult(BaseModel):
    """All 25 non-trivial Caesar decodings of a cipher text."""

    cipher_text: str
    candidates: list[BruteForceCandidate] = Field(default_factory=list)
