"""
Decoders for the fixed-shape standard locking scripts

P2PK    | OP_PUSHBYTES_65 || pubkey || OP_CHECKSIG
P2PKH   | OP_DUP || OP_HASH160 || OP_PUSHBYTES_20 || pubkeyhash || OP_EQUALVERIFY || OP_CHECKSIG
P2SH    | OP_HASH160 || OP_PUSHBYTES_20 || scripthash || OP_EQUAL
P2WPKH  | OP_0 || OP_PUSHBYTES_20 || pubkeyhash
P2WSH   | OP_0 || OP_PUSHBYTES_32 || scripthash
P2TR    | OP_1 || OP_PUSHBYTES_32 || tweaked pubkey
OP_RETURN | OP_RETURN || OP_PUSHBYTES_n || data
"""
from abc import ABC, abstractmethod

from bitscript.core import SCRIPT, ByteCursor, TemplateMismatch, UnsupportedOpcode
from bitscript.script.asm import AsmBuilder
from bitscript.script.opcodes import Opcode, decode_opcode, encode_mnemonic, push_bytes, OP_0, OP_1, OP_DUP, \
    OP_HASH160, OP_EQUAL, OP_EQUALVERIFY, OP_CHECKSIG, OP_RETURN
from bitscript.script.script_type import ScriptType

__all__ = ["TemplateDecoder", "FixedTemplate", "P2PK_Template", "P2PKH_Template", "P2SH_Template",
           "P2WPKH_Template", "P2WSH_Template", "P2TR_Template", "DataCarrier_Template", "read_opcode",
           "expect_opcode", "read_push"]


# --- STEPS --- #

def read_opcode(cursor: ByteCursor) -> tuple[int, Opcode]:
    """Consume one byte and return it with its Opcode"""
    byte = cursor.read_byte()
    return byte, decode_opcode(byte)


def expect_opcode(cursor: ByteCursor, asm: AsmBuilder, expected: Opcode):
    byte, op = read_opcode(cursor)
    if op != expected:
        raise TemplateMismatch(encode_mnemonic(expected), byte)
    asm.push_opcode(op)


def read_push(cursor: ByteCursor, asm: AsmBuilder, length: int) -> bytes:
    """
    Expect OP_PUSHBYTES_<length> followed by exactly length bytes of data
    """
    expect_opcode(cursor, asm, push_bytes(length))
    data = cursor.read_exact(length)
    asm.push_bytes(data)
    return data


# --- TEMPLATES --- #

class TemplateDecoder(ABC):
    """
    Base class for template decoders. A decoder starts at the first byte of the script and either consumes the
    whole template, emitting its ASM tokens, or raises.
    """
    script_type: ScriptType

    @abstractmethod
    def decode(self, cursor: ByteCursor, asm: AsmBuilder):
        raise NotImplementedError

    def __repr__(self):
        return f"{self.__class__.__name__}({self.script_type.value})"


class FixedTemplate(TemplateDecoder, ABC):
    """
    A template described as a sequence of steps: an Opcode must match exactly, an int is a data push of that
    many bytes.
    """
    PATTERN: tuple = ()

    def decode(self, cursor: ByteCursor, asm: AsmBuilder):
        for step in self.PATTERN:
            if isinstance(step, Opcode):
                expect_opcode(cursor, asm, step)
            else:
                read_push(cursor, asm, step)


class P2PK_Template(FixedTemplate):
    script_type = ScriptType.P2PK
    PATTERN = (SCRIPT.UNCOMPRESSED_PUBKEY, OP_CHECKSIG)


class P2PKH_Template(FixedTemplate):
    script_type = ScriptType.P2PKH
    PATTERN = (OP_DUP, OP_HASH160, SCRIPT.PUBKEY_HASH, OP_EQUALVERIFY, OP_CHECKSIG)


class P2SH_Template(FixedTemplate):
    script_type = ScriptType.P2SH
    PATTERN = (OP_HASH160, SCRIPT.SCRIPT_HASH, OP_EQUAL)


class P2WPKH_Template(FixedTemplate):
    script_type = ScriptType.P2WPKH
    PATTERN = (OP_0, SCRIPT.PUBKEY_HASH)


class P2WSH_Template(FixedTemplate):
    script_type = ScriptType.P2WSH
    PATTERN = (OP_0, SCRIPT.WITNESS_SCRIPT_HASH)


class P2TR_Template(FixedTemplate):
    script_type = ScriptType.P2TR
    PATTERN = (OP_1, SCRIPT.TAPROOT_KEY)


class DataCarrier_Template(TemplateDecoder):
    """
    OP_RETURN followed by a single direct push of 1-75 bytes
    """
    script_type = ScriptType.DATA_CARRIER

    def decode(self, cursor: ByteCursor, asm: AsmBuilder):
        expect_opcode(cursor, asm, OP_RETURN)

        byte, op = read_opcode(cursor)
        if not op.is_push:
            raise UnsupportedOpcode(f"Expected a data push after OP_RETURN but found byte 0x{byte:02x}", byte)
        asm.push_opcode(op)
        asm.push_bytes(cursor.read_exact(op.value))
