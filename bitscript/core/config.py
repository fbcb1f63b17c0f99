"""
Runtime options for the script decoder
"""
import os
from dataclasses import dataclass

__all__ = ["DecoderConfig", "TRAILING_DATA_ENV"]

TRAILING_DATA_ENV = "BITSCRIPT_ALLOW_TRAILING_DATA"

_TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class DecoderConfig:
    """
    allow_trailing_data: accept bytes left over after a complete template instead of raising TrailingData
    """
    allow_trailing_data: bool = False

    @classmethod
    def from_env(cls) -> "DecoderConfig":
        flag = os.environ.get(TRAILING_DATA_ENV, "")
        return cls(allow_trailing_data=flag.strip().lower() in _TRUTHY)
