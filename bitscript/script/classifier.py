"""
Choose the template decoder for a locking script from its first one or two opcodes
"""
from bitscript.core import SCRIPT, ByteCursor, TemplateMismatch, UnrecognizedTemplate
from bitscript.script.opcodes import OpKind, decode_opcode, push_bytes, OP_1, OP_DUP, OP_HASH160, OP_RETURN
from bitscript.script.script_type import ScriptType

__all__ = ["classify"]

# Single-opcode dispatch
_LEADING = {
    push_bytes(SCRIPT.UNCOMPRESSED_PUBKEY): ScriptType.P2PK,
    OP_DUP: ScriptType.P2PKH,
    OP_HASH160: ScriptType.P2SH,
    OP_RETURN: ScriptType.DATA_CARRIER,
}

# Second opcode after OP_0
_WITNESS_V0 = {
    push_bytes(SCRIPT.PUBKEY_HASH): ScriptType.P2WPKH,
    push_bytes(SCRIPT.WITNESS_SCRIPT_HASH): ScriptType.P2WSH,
}


def classify(cursor: ByteCursor) -> ScriptType:
    """
    Return the ScriptType for the script at the cursor. The cursor is peeked, never advanced.
    """
    first = cursor.peek(1)[0]
    op1 = decode_opcode(first)

    script_type = _LEADING.get(op1)
    if script_type is not None:
        return script_type

    if op1.kind is OpKind.ZERO:
        second = cursor.peek(2)[1]
        script_type = _WITNESS_V0.get(decode_opcode(second))
        if script_type is None:
            raise TemplateMismatch("OP_PUSHBYTES_20 or OP_PUSHBYTES_32 after OP_0", second)
        return script_type

    if op1.small_int is not None:
        op2 = decode_opcode(cursor.peek(2)[1])
        if op1 == OP_1 and op2 == push_bytes(SCRIPT.TAPROOT_KEY):
            return ScriptType.P2TR
        return ScriptType.MULTISIG

    raise UnrecognizedTemplate(first)
