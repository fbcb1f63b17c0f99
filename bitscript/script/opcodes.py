"""
The opcode model for standard locking scripts

Every byte maps to exactly one Opcode. Named opcodes are module-level singletons; push and small-integer opcodes
carry their integer value.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from bitscript.core import SCRIPT, UnsupportedOpcode

__all__ = ["OpKind", "Opcode", "decode_opcode", "encode_opcode", "encode_mnemonic", "push_bytes", "small_int",
           "OP_0", "OP_1", "OP_DUP", "OP_HASH160", "OP_EQUAL", "OP_EQUALVERIFY", "OP_CHECKSIG", "OP_CHECKMULTISIG",
           "OP_RETURN", "OP_UNSUPPORTED"]


class OpKind(Enum):
    ZERO = "ZERO"
    ONE = "ONE"
    PUSHBYTES = "PUSHBYTES"
    SMALLINT = "SMALLINT"
    DUP = "DUP"
    HASH160 = "HASH160"
    EQUAL = "EQUAL"
    EQUALVERIFY = "EQUALVERIFY"
    CHECKSIG = "CHECKSIG"
    CHECKMULTISIG = "CHECKMULTISIG"
    RETURN = "RETURN"
    UNSUPPORTED = "UNSUPPORTED"


@dataclass(frozen=True)
class Opcode:
    kind: OpKind
    value: Optional[int] = None

    @property
    def is_push(self) -> bool:
        return self.kind is OpKind.PUSHBYTES

    @property
    def small_int(self) -> Optional[int]:
        """
        The integer pushed by OP_1 through OP_16, None for every other opcode
        """
        if self.kind is OpKind.ONE:
            return 1
        if self.kind is OpKind.SMALLINT:
            return self.value
        return None

    def __str__(self):
        if self.kind is OpKind.UNSUPPORTED:
            return "UNSUPPORTED"
        return encode_mnemonic(self)


# --- NAMED OPCODES --- #
OP_0 = Opcode(OpKind.ZERO)
OP_1 = Opcode(OpKind.ONE)
OP_DUP = Opcode(OpKind.DUP)
OP_HASH160 = Opcode(OpKind.HASH160)
OP_EQUAL = Opcode(OpKind.EQUAL)
OP_EQUALVERIFY = Opcode(OpKind.EQUALVERIFY)
OP_CHECKSIG = Opcode(OpKind.CHECKSIG)
OP_CHECKMULTISIG = Opcode(OpKind.CHECKMULTISIG)
OP_RETURN = Opcode(OpKind.RETURN)
OP_UNSUPPORTED = Opcode(OpKind.UNSUPPORTED)

# --- BYTE VALUES --- #
_SMALL_INT_OFFSET = 0x50  # OP_n == 0x50 + n

_NAMED_BYTES = {
    0x00: OP_0,
    0x51: OP_1,
    0x6a: OP_RETURN,
    0x76: OP_DUP,
    0x87: OP_EQUAL,
    0x88: OP_EQUALVERIFY,
    0xa9: OP_HASH160,
    0xac: OP_CHECKSIG,
    0xae: OP_CHECKMULTISIG,
}
_NAMED_OPCODES = {op: byte for byte, op in _NAMED_BYTES.items()}

_MNEMONICS = {
    OpKind.ZERO: "OP_0",
    OpKind.ONE: "OP_1",
    OpKind.DUP: "OP_DUP",
    OpKind.HASH160: "OP_HASH160",
    OpKind.EQUAL: "OP_EQUAL",
    OpKind.EQUALVERIFY: "OP_EQUALVERIFY",
    OpKind.CHECKSIG: "OP_CHECKSIG",
    OpKind.CHECKMULTISIG: "OP_CHECKMULTISIG",
    OpKind.RETURN: "OP_RETURN",
}


def push_bytes(n: int) -> Opcode:
    """OP_PUSHBYTES_n for n in [1, 75]"""
    if not 1 <= n <= SCRIPT.MAX_PUSHBYTES:
        raise ValueError(f"Push length out of range: {n}")
    return Opcode(OpKind.PUSHBYTES, n)


def small_int(n: int) -> Opcode:
    """
    OP_n for n in [1, 16]. OP_1 is returned as its named opcode.
    """
    if n == 1:
        return OP_1
    if not SCRIPT.MIN_SMALL_INT <= n <= SCRIPT.MAX_SMALL_INT:
        raise ValueError(f"Small integer out of range: {n}")
    return Opcode(OpKind.SMALLINT, n)


def decode_opcode(byte: int) -> Opcode:
    """
    Map a single byte to its Opcode. Total over [0, 255].
    """
    if not 0 <= byte <= 0xff:
        raise ValueError(f"Not a byte value: {byte}")

    named = _NAMED_BYTES.get(byte)
    if named is not None:
        return named

    if 0x01 <= byte <= SCRIPT.MAX_PUSHBYTES:
        return Opcode(OpKind.PUSHBYTES, byte)

    if SCRIPT.MIN_SMALL_INT <= byte - _SMALL_INT_OFFSET <= SCRIPT.MAX_SMALL_INT:
        return Opcode(OpKind.SMALLINT, byte - _SMALL_INT_OFFSET)

    return OP_UNSUPPORTED


def encode_opcode(op: Opcode) -> int:
    """
    Return the byte value for a supported opcode
    """
    if op.kind is OpKind.PUSHBYTES:
        return op.value
    if op.kind is OpKind.SMALLINT:
        return _SMALL_INT_OFFSET + op.value
    if op.kind is OpKind.UNSUPPORTED:
        raise UnsupportedOpcode("Unsupported opcode has no byte value")
    return _NAMED_OPCODES[op]


def encode_mnemonic(op: Opcode) -> str:
    """
    Return the canonical ASM name for the opcode
    """
    if op.kind is OpKind.PUSHBYTES:
        return f"OP_PUSHBYTES_{op.value}"
    if op.kind is OpKind.SMALLINT:
        return f"OP_{op.value}"
    if op.kind is OpKind.UNSUPPORTED:
        raise UnsupportedOpcode("Unsupported opcode has no mnemonic")
    return _MNEMONICS[op.kind]
