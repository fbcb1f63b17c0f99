"""
Tests for the fixed-shape template decoders
"""
from random import randint
from secrets import token_bytes

import pytest

from bitscript.core import ByteCursor, TemplateMismatch, UnsupportedOpcode, UnexpectedEOF
from bitscript.script import P2PK_Template, P2PKH_Template, P2SH_Template, P2WPKH_Template, P2WSH_Template, \
    P2TR_Template, DataCarrier_Template, ScriptType, parse_script
from tests.utility import random_pubkey, p2pk_script, p2pkh_script, p2sh_script


def test_p2pk_zero_key():
    """
    41 || 65 zero bytes || ac
    """
    script = b'\x41' + bytes(65) + b'\xac'
    assert parse_script(script) == "OP_PUSHBYTES_65 " + "0" * 130 + " OP_CHECKSIG"


def test_p2pk(pubkey):
    assert parse_script(p2pk_script(pubkey)) == f"OP_PUSHBYTES_65 {pubkey.hex()} OP_CHECKSIG"


def test_p2pk_missing_checksig(pubkey):
    with pytest.raises(UnexpectedEOF):
        parse_script(b'\x41' + pubkey)


def test_p2pk_wrong_last_opcode(pubkey):
    with pytest.raises(TemplateMismatch) as exc:
        parse_script(b'\x41' + pubkey + b'\x87')
    assert exc.value.expected == "OP_CHECKSIG"
    assert exc.value.found_byte == 0x87


def test_p2pkh():
    pubkeyhash = token_bytes(20)
    assert parse_script(p2pkh_script(pubkeyhash)) == \
           f"OP_DUP OP_HASH160 OP_PUSHBYTES_20 {pubkeyhash.hex()} OP_EQUALVERIFY OP_CHECKSIG"


@pytest.mark.parametrize("index, bad_byte, expected", [
    (1, 0x87, "OP_HASH160"),
    (2, 0x15, "OP_PUSHBYTES_20"),
    (23, 0x87, "OP_EQUALVERIFY"),
    (24, 0xad, "OP_CHECKSIG"),
])
def test_p2pkh_mismatch(index, bad_byte, expected):
    script = bytearray(p2pkh_script(token_bytes(20)))
    script[index] = bad_byte
    with pytest.raises(TemplateMismatch) as exc:
        parse_script(bytes(script))
    assert exc.value.expected == expected
    assert exc.value.found_byte == bad_byte


def test_p2sh():
    scripthash = token_bytes(20)
    assert parse_script(p2sh_script(scripthash)) == f"OP_HASH160 OP_PUSHBYTES_20 {scripthash.hex()} OP_EQUAL"


def test_p2sh_wrong_push():
    with pytest.raises(TemplateMismatch):
        parse_script(b'\xa9\x20' + token_bytes(32) + b'\x87')


def test_p2wpkh():
    program = token_bytes(20)
    assert parse_script(b'\x00\x14' + program) == f"OP_0 OP_PUSHBYTES_20 {program.hex()}"


def test_p2wsh():
    program = token_bytes(32)
    assert parse_script(b'\x00\x20' + program) == f"OP_0 OP_PUSHBYTES_32 {program.hex()}"


def test_p2tr():
    program = token_bytes(32)
    assert parse_script(b'\x51\x20' + program) == f"OP_1 OP_PUSHBYTES_32 {program.hex()}"


def test_witness_program_truncated():
    with pytest.raises(UnexpectedEOF):
        parse_script(b'\x00\x20' + token_bytes(31))


def test_data_carrier():
    length = randint(1, 75)
    data = token_bytes(length)
    script = b'\x6a' + bytes([length]) + data
    assert parse_script(script) == f"OP_RETURN OP_PUSHBYTES_{length} {data.hex()}"


@pytest.mark.parametrize("second_byte", [0x00, 0x4c, 0x51, 0x76, 0xff])
def test_data_carrier_requires_push(second_byte):
    with pytest.raises(UnsupportedOpcode) as exc:
        parse_script(bytes([0x6a, second_byte]) + token_bytes(4))
    assert exc.value.found_byte == second_byte


def test_data_carrier_push_longer_than_script():
    with pytest.raises(UnexpectedEOF):
        parse_script(b'\x6a\x4b' + token_bytes(10))


def test_empty_data_carrier():
    with pytest.raises(UnexpectedEOF):
        parse_script(b'\x6a')


@pytest.mark.parametrize("template, script_type", [
    (P2PK_Template(), ScriptType.P2PK),
    (P2PKH_Template(), ScriptType.P2PKH),
    (P2SH_Template(), ScriptType.P2SH),
    (P2WPKH_Template(), ScriptType.P2WPKH),
    (P2WSH_Template(), ScriptType.P2WSH),
    (P2TR_Template(), ScriptType.P2TR),
    (DataCarrier_Template(), ScriptType.DATA_CARRIER),
])
def test_template_types(template, script_type):
    assert template.script_type is script_type


def test_template_decodes_from_start(asm):
    """
    A decoder used directly consumes exactly its template
    """
    program = token_bytes(32)
    cursor = ByteCursor(b'\x51\x20' + program + b'\xff')
    P2TR_Template().decode(cursor, asm)
    assert cursor.remaining == 1
    assert asm.tokens == ["OP_1", "OP_PUSHBYTES_32", program.hex()]
