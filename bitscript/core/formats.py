"""
The Bitcoin standard formats
"""
from typing import Final

__all__ = ["DATA", "TX", "SCRIPT"]


class DATA:
    """
    Constants used in data manipulation
    """
    MAX_COMPACTSIZE: Final[int] = 0xffffffffffffffff


class TX:
    """
    Transaction byte sizes
    """
    TXID: Final[int] = 32
    VOUT: Final[int] = 4
    SEQUENCE: Final[int] = 4
    AMOUNT: Final[int] = 8
    VERSION: Final[int] = 4
    LOCKTIME: Final[int] = 4
    MARKER: Final[int] = 0x00
    FLAG: Final[int] = 0x01
    STANDARD_VERSIONS: Final[tuple] = (1, 2)


class SCRIPT:
    """
    Byte lengths and limits for the standard locking script templates
    """
    UNCOMPRESSED_PUBKEY: Final[int] = 65
    PUBKEY_HASH: Final[int] = 20
    SCRIPT_HASH: Final[int] = 20
    WITNESS_SCRIPT_HASH: Final[int] = 32
    TAPROOT_KEY: Final[int] = 32
    MAX_PUSHBYTES: Final[int] = 75
    MIN_SMALL_INT: Final[int] = 2
    MAX_SMALL_INT: Final[int] = 16
