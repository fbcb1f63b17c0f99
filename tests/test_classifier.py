"""
Tests for choosing the template from the leading opcodes
"""
from secrets import token_bytes

import pytest

from bitscript.core import ByteCursor, TemplateMismatch, UnrecognizedTemplate, UnexpectedEOF
from bitscript.script import ScriptType, classify, classify_script
from tests.utility import random_multisig, random_pubkey, p2pk_script, p2pkh_script, p2sh_script


@pytest.mark.parametrize("script, expected", [
    (p2pk_script(random_pubkey()), ScriptType.P2PK),
    (p2pkh_script(token_bytes(20)), ScriptType.P2PKH),
    (p2sh_script(token_bytes(20)), ScriptType.P2SH),
    (b'\x00\x14' + token_bytes(20), ScriptType.P2WPKH),
    (b'\x00\x20' + token_bytes(32), ScriptType.P2WSH),
    (b'\x51\x20' + token_bytes(32), ScriptType.P2TR),
    (b'\x6a\x04' + token_bytes(4), ScriptType.DATA_CARRIER),
    (random_multisig(2, 3)[0], ScriptType.MULTISIG),
    (random_multisig(1, 1)[0], ScriptType.MULTISIG),
])
def test_classify(script, expected):
    assert classify_script(script) == expected


def test_classify_does_not_move_cursor():
    cursor = ByteCursor(b'\x51\x20' + token_bytes(32))
    classify(cursor)
    assert cursor.position == 0


def test_zero_needs_witness_push():
    with pytest.raises(TemplateMismatch) as exc:
        classify_script(b'\x00\x15' + token_bytes(21))
    assert exc.value.found_byte == 0x15


def test_one_without_taproot_push_is_multisig():
    """
    OP_1 followed by anything other than OP_PUSHBYTES_32 is handed to the multisig decoder
    """
    assert classify_script(b'\x51\x41' + random_pubkey() + b'\x51\xae') == ScriptType.MULTISIG
    assert classify_script(b'\x52\x20' + token_bytes(32)) == ScriptType.MULTISIG


@pytest.mark.parametrize("first_byte", [0xff, 0x4c, 0x87, 0xac, 0x14, 0x21])
def test_unrecognized(first_byte):
    with pytest.raises(UnrecognizedTemplate) as exc:
        classify_script(bytes([first_byte]) + token_bytes(40))
    assert exc.value.found_byte == first_byte


@pytest.mark.parametrize("script", [b'', b'\x00', b'\x51', b'\x53'])
def test_truncated_lookahead(script):
    with pytest.raises(UnexpectedEOF):
        classify_script(script)
