"""
CipherStep Engine
==================

Central facade over the CipherStep ciphers. The engine turns a
``(cipher, mode, text, key)`` request into a :class:`TransformResult`,
filling missing key material from configuration and translating
CLI-style key strings (``"7"``, ``"3,3;2,5"``) into the types each cipher
expects.

Architecture follows the Facade pattern (Gamma et al., 1994), providing
a simplified interface over the individual cipher classes.

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns: Elements of Reusable Object-Oriented Software.
      Addison-Wesley.
"""

from __future__ import annotations

import random
from datetime import datetime, timezone
from typing import Any, Optional, Protocol, Union

from shared.config import CipherStepConfig
from shared.logger import CipherStepLogger
from shared.math_utils import format_matrix

from cipherstep.ciphers import (
    Base64Codec,
    CaesarCipher,
    HillCipher,
    MonoalphabeticCipher,
    PlayfairCipher,
    TranspositionCipher,
    VigenereCipher,
    XORCipher,
)
from cipherstep.core.errors import CipherError, InvalidKeyError
from cipherstep.core.models import (
    BruteForceCandidate,
    BruteForceResult,
    CipherKind,
    Mode,
    StepInfo,
    TransformResult,
)


class Cipher(Protocol):
    """Call surface shared by every cipher class."""

    name: str

    def encrypt(self, plain_text: str) -> str: ...

    def decrypt(self, cipher_text: str) -> str: ...

    def encryption_steps(self, plain_text: str) -> list[StepInfo]: ...

    def decryption_steps(self, cipher_text: str) -> list[StepInfo]: ...


KeyInput = Union[str, int, list, None]


# ===================================================================== #
#  Key Parsing
# ===================================================================== #


def parse_int_key(cipher: str, key: Union[str, int]) -> int:
    """Parse an integer key such as a Caesar shift or a column count."""
    if isinstance(key, bool):
        raise InvalidKeyError(cipher, f"key must be an integer, got {key!r}")
    if isinstance(key, int):
        return key
    try:
        return int(str(key).strip())
    except ValueError as exc:
        raise InvalidKeyError(cipher, f"key must be an integer, got {key!r}") from exc


def parse_matrix_key(cipher: str, key: Union[str, list]) -> list[list[int]]:
    """Parse a matrix key.

    Rows are separated by ``;`` and entries by commas or whitespace, so
    ``"3,3;2,5"`` and ``"3 3; 2 5"`` both give ``[[3, 3], [2, 5]]``.
    Nested lists are passed through unchanged.
    """
    if not isinstance(key, str):
        return key
    rows: list[list[int]] = []
    for chunk in key.split(";"):
        entries = chunk.replace(",", " ").split()
        if not entries:
            continue
        try:
            rows.append([int(e) for e in entries])
        except ValueError as exc:
            raise InvalidKeyError(
                cipher, f"matrix entries must be integers, got {chunk.strip()!r}"
            ) from exc
    if not rows:
        raise InvalidKeyError(cipher, "matrix key must not be empty")
    return rows


def display_key(kind: CipherKind, key: Any) -> str:
    """Human-readable form of resolved key material."""
    if kind is CipherKind.BASE64 or key is None:
        return ""
    if kind is CipherKind.HILL:
        return format_matrix(key)
    return str(key)


# ===================================================================== #
#  Engine
# ===================================================================== #


class CipherEngine:
    """Builds ciphers and runs transforms for the CLI and report layers.

    Cipher errors (bad key, malformed cipher text) are caught, logged and
    recorded on the returned result; anything else propagates.

    Usage::

        engine = CipherEngine()
        result = engine.run("caesar", "encrypt", "HELLO", key="3")
        result.output                                   # 'KHOOR'
        result = engine.run("hill", "decrypt", "HIAT", key="3,3;2,5", trace=True)
        result.steps[-1].output                         # 'HELP'

    Attributes:
        config: CipherStep configuration instance.
        logger: Logger for the engine component.
    """

    def __init__(
        self,
        config: Optional[CipherStepConfig] = None,
        logger: Optional[CipherStepLogger] = None,
    ) -> None:
        self.config = config or CipherStepConfig()
        settings = self.config.global_settings
        self.logger = logger or CipherStepLogger(
            "engine",
            log_level="DEBUG" if settings.debug else settings.log_level,
            log_file=settings.log_file,
            json_logs=settings.log_json,
        )

    # ------------------------------------------------------------------ #
    #  Cipher Construction
    # ------------------------------------------------------------------ #

    def resolve_key(self, kind: Union[CipherKind, str], key: KeyInput = None) -> Any:
        """Return the key material *kind* will be built with.

        ``None`` or an empty string selects the configured default.
        """
        kind = CipherKind(kind)
        defaults = self.config.ciphers
        if key is None or (isinstance(key, str) and not key.strip()):
            key = {
                CipherKind.CAESAR: defaults.caesar_shift,
                CipherKind.MONOALPHABETIC: defaults.monoalphabetic_key,
                CipherKind.VIGENERE: defaults.vigenere_key,
                CipherKind.PLAYFAIR: defaults.playfair_key,
                CipherKind.HILL: defaults.hill_matrix,
                CipherKind.TRANSPOSITION: defaults.transposition_columns,
                CipherKind.XOR: defaults.xor_key,
                CipherKind.BASE64: None,
            }[kind]

        if kind in (CipherKind.CAESAR, CipherKind.TRANSPOSITION):
            return parse_int_key(kind.label, key)
        if kind is CipherKind.HILL:
            return parse_matrix_key(kind.label, key)
        if kind is CipherKind.BASE64:
            return None
        return str(key)

    def build(self, kind: Union[CipherKind, str], key: KeyInput = None) -> Cipher:
        """Construct the cipher for *kind*.

        Raises:
            InvalidKeyError: If the key material is rejected.
            ValueError: If *kind* is not a known cipher.
        """
        kind = CipherKind(kind)
        material = self.resolve_key(kind, key)
        self.logger.debug(f"Building {kind.label} cipher with key {display_key(kind, material)!r}")

        if kind is CipherKind.CAESAR:
            return CaesarCipher(material)
        if kind is CipherKind.MONOALPHABETIC:
            return MonoalphabeticCipher(material)
        if kind is CipherKind.VIGENERE:
            return VigenereCipher(material)
        if kind is CipherKind.PLAYFAIR:
            return PlayfairCipher(material)
        if kind is CipherKind.HILL:
            return HillCipher(material)
        if kind is CipherKind.TRANSPOSITION:
            return TranspositionCipher(material)
        if kind is CipherKind.XOR:
            return XORCipher(material)
        return Base64Codec()

    # ------------------------------------------------------------------ #
    #  Transforms
    # ------------------------------------------------------------------ #

    def run(
        self,
        kind: Union[CipherKind, str],
        mode: Union[Mode, str],
        text: str,
        key: KeyInput = None,
        trace: bool = False,
    ) -> TransformResult:
        """Encrypt or decrypt *text*, optionally collecting the step trace.

        With ``trace=True`` the output is the final step's output, which
        always equals the untraced result.

        Returns:
            TransformResult; ``error`` is set when the cipher rejected the
            key or the input.
        """
        kind = CipherKind(kind)
        mode = Mode(mode)
        result = TransformResult(cipher=kind, mode=mode, input=text)

        with self.logger.operation(f"{kind.value}.{mode.value}"):
            self.logger.info(
                f"Starting {kind.label} {mode.value} ({len(text)} chars, trace={trace})"
            )
            with self.logger.timed(f"{kind.label} {mode.value}"):
                try:
                    material = self.resolve_key(kind, key)
                    result.key = display_key(kind, material)
                    cipher = self.build(kind, material)

                    if trace:
                        steps = (
                            cipher.encryption_steps(text)
                            if mode is Mode.ENCRYPT
                            else cipher.decryption_steps(text)
                        )
                        result.steps = steps
                        result.output = steps[-1].output if steps else ""
                    else:
                        result.output = (
                            cipher.encrypt(text)
                            if mode is Mode.ENCRYPT
                            else cipher.decrypt(text)
                        )
                except CipherError as exc:
                    self.logger.warning(f"{kind.label} {mode.value} rejected: {exc}")
                    result.error = exc.reason
                    result.error_type = type(exc).__name__
                except Exception as exc:
                    self.logger.exception(f"{kind.label} {mode.value} failed: {exc}")
                    raise

        result.finished_at = datetime.now(timezone.utc)
        return result

    def encrypt(self, kind: Union[CipherKind, str], text: str, key: KeyInput = None,
                trace: bool = False) -> TransformResult:
        return self.run(kind, Mode.ENCRYPT, text, key=key, trace=trace)

    def decrypt(self, kind: Union[CipherKind, str], text: str, key: KeyInput = None,
                trace: bool = False) -> TransformResult:
        return self.run(kind, Mode.DECRYPT, text, key=key, trace=trace)

    # ------------------------------------------------------------------ #
    #  Caesar Brute Force
    # ------------------------------------------------------------------ #

    def brute_force(self, cipher_text: str) -> BruteForceResult:
        """Decode *cipher_text* under every Caesar key from 1 to 25."""
        with self.logger.operation("caesar.brute_force"):
            self.logger.info(f"Brute forcing {len(cipher_text)} chars of Caesar text")
            decodings = CaesarCipher(0).brute_force(cipher_text)
        return BruteForceResult(
            cipher_text=cipher_text,
            candidates=[
                BruteForceCandidate(key=k, text=text)
                for k, text in enumerate(decodings, start=1)
            ],
        )

    # ------------------------------------------------------------------ #
    #  Key Generation
    # ------------------------------------------------------------------ #

    def generate_key(self, seed: Optional[int] = None) -> str:
        """Random monoalphabetic key.

        *seed* falls back to ``ciphers.random_seed`` from configuration;
        with neither set every call draws a fresh key.
        """
        if seed is None:
            seed = self.config.ciphers.random_seed
        rng = random.Random(seed) if seed is not None else None
        key = MonoalphabeticCipher.generate_random_key(rng)
        self.logger.debug(f"Generated monoalphabetic key (seeded={seed is not None})")
        return key
