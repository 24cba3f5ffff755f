"""
CipherStep Core Module
=======================

Data models, error types and the step tracer shared by every cipher.
The engine facade lives in :mod:`cipherstep.core.engine`.
"""

from cipherstep.core.errors import CipherError, InvalidFormatError, InvalidKeyError
from cipherstep.core.models import (
    BruteForceCandidate,
    BruteForceResult,
    CipherKind,
    Mode,
    StepInfo,
    TransformResult,
)
from cipherstep.core.tracer import StepTracer

__all__ = [
    "BruteForceCandidate",
    "BruteForceResult",
    "CipherError",
    "CipherKind",
    "InvalidFormatError",
    "InvalidKeyError",
    "Mode",
    "StepInfo",
    "StepTracer",
    "TransformResult",
]
