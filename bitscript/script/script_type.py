"""
ScriptType enum class
"""
from enum import Enum

__all__ = ["ScriptType"]


class ScriptType(Enum):
    P2PK = "P2PK"
    P2PKH = "P2PKH"
    P2SH = "P2SH"
    P2WPKH = "P2WPKH"
    P2WSH = "P2WSH"
    P2TR = "P2TR"
    MULTISIG = "MULTISIG"
    DATA_CARRIER = "DATA_CARRIER"
