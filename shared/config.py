"""
CipherStep Configuration Management
====================================

Centralized configuration for CipherStep using Python dataclasses and
TOML-based persistence.

Two sections are recognised in the TOML file::

    [global]
    log_level = "DEBUG"

    [ciphers]
    caesar_shift = 7
    hill_matrix = [[3, 3], [2, 5]]

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[no-redef]


# ---------------------------------------------------------------------------
# Default configuration file path relative to the CipherStep root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"


# ========================== Cipher Defaults ================================


@dataclass(frozen=False, slots=True)
class CiphersConfig:
    """Default key material used when a caller does not supply one.

    Every value here must satisfy the structural rules of its cipher;
    the engine still validates them at construction time.
    """

    caesar_shift: int = 3
    monoalphabetic_key: str = "QWERTYUIOPASDFGHJKLZXCVBNM"
    vigenere_key: str = "LEMON"
    playfair_key: str = "PLAYFAIR"
    hill_matrix: list[list[int]] = field(
        default_factory=lambda: [[3, 3], [2, 5]]
    )
    transposition_columns: int = 4
    xor_key: str = "KEY"

    # Seed for monoalphabetic key generation; None draws a fresh one.
    random_seed: Optional[int] = None

    # Seconds between steps when the CLI reveals a trace one step at a time.
    step_delay: float = 0.0


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings: logging verbosity, output locations, debug mode."""

    log_level: str = "WARNING"
    log_file: Optional[str] = None
    log_json: bool = False
    output_dir: str = "output"
    debug: bool = False
    version: str = "1.0.0"


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class CipherStepConfig:
    """Master configuration aggregating global and cipher settings.

    Usage:
        >>> config = CipherStepConfig.load()               # from default path
        >>> config = CipherStepConfig.load("custom.toml")  # from custom path
        >>> config.ciphers.caesar_shift
        3
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    ciphers: CiphersConfig = field(default_factory=CiphersConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> CipherStepConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root.  Missing keys fall back to dataclass defaults.

        Args:
            path: Filesystem path to a TOML configuration file.

        Returns:
            A fully-populated :class:`CipherStepConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            ciphers=cls._build_section(CiphersConfig, raw.get("ciphers", {})),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are ignored.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)


# ========================= Module-level convenience ========================

def get_config(path: str | Path | None = None) -> CipherStepConfig:
    """Module-level convenience wrapper around :meth:`CipherStepConfig.load`.

    Caches the result so that repeated calls share one instance.
    """
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = CipherStepConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]
