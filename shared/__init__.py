"""
CipherStep Shared Module
========================

Common utilities and configuration management shared across the
CipherStep packages: alphabet and matrix arithmetic, TOML configuration,
structured logging, and the Rich console wrapper.
"""

from shared.config import CipherStepConfig, get_config

__all__ = ["CipherStepConfig", "get_config"]
