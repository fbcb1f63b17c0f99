"""
Tests for the opcode model
"""
from random import randint

import pytest

from bitscript.core import UnsupportedOpcode
from bitscript.script import OpKind, Opcode, decode_opcode, encode_opcode, encode_mnemonic, push_bytes, small_int, \
    OP_0, OP_1, OP_DUP, OP_HASH160, OP_EQUAL, OP_EQUALVERIFY, OP_CHECKSIG, OP_CHECKMULTISIG, OP_RETURN, \
    OP_UNSUPPORTED


def test_decode_is_total():
    """
    Every byte decodes to exactly one opcode without raising
    """
    for byte in range(256):
        op = decode_opcode(byte)
        assert isinstance(op, Opcode), f"Byte {byte} did not decode to an Opcode"


@pytest.mark.parametrize("byte, expected", [
    (0x00, OP_0),
    (0x51, OP_1),
    (0x6a, OP_RETURN),
    (0x76, OP_DUP),
    (0x87, OP_EQUAL),
    (0x88, OP_EQUALVERIFY),
    (0xa9, OP_HASH160),
    (0xac, OP_CHECKSIG),
    (0xae, OP_CHECKMULTISIG),
])
def test_named_opcodes(byte, expected):
    assert decode_opcode(byte) == expected


def test_push_range():
    for byte in range(1, 76):
        op = decode_opcode(byte)
        assert op.kind is OpKind.PUSHBYTES
        assert op.value == byte
        assert encode_mnemonic(op) == f"OP_PUSHBYTES_{byte}"


def test_small_int_range():
    for n in range(2, 17):
        op = decode_opcode(0x50 + n)
        assert op.kind is OpKind.SMALLINT
        assert op.small_int == n
        assert encode_mnemonic(op) == f"OP_{n}"


def test_one_is_named():
    assert decode_opcode(0x51).kind is OpKind.ONE
    assert OP_1.small_int == 1
    assert small_int(1) == OP_1
    assert encode_mnemonic(OP_1) == "OP_1"
    assert encode_mnemonic(OP_0) == "OP_0"


@pytest.mark.parametrize("byte", [0x4c, 0x4d, 0x4e, 0x4f, 0x50, 0x61, 0x86, 0xaa, 0xff])
def test_unsupported_bytes(byte):
    assert decode_opcode(byte) == OP_UNSUPPORTED


def test_unsupported_has_no_mnemonic():
    with pytest.raises(UnsupportedOpcode):
        encode_mnemonic(OP_UNSUPPORTED)
    with pytest.raises(UnsupportedOpcode):
        encode_opcode(OP_UNSUPPORTED)


def test_encode_inverts_decode():
    """
    Every supported byte encodes back to itself
    """
    supported = [b for b in range(256) if decode_opcode(b) != OP_UNSUPPORTED]
    assert len(supported) == 1 + 75 + 1 + 15 + 7
    for byte in supported:
        assert encode_opcode(decode_opcode(byte)) == byte


def test_constructor_ranges():
    n = randint(1, 75)
    assert push_bytes(n) == decode_opcode(n)
    with pytest.raises(ValueError):
        push_bytes(0)
    with pytest.raises(ValueError):
        push_bytes(76)
    with pytest.raises(ValueError):
        small_int(0)
    with pytest.raises(ValueError):
        small_int(17)


def test_non_byte_rejected():
    with pytest.raises(ValueError):
        decode_opcode(256)
    with pytest.raises(ValueError):
        decode_opcode(-1)
