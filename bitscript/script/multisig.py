"""
Pay 2 multisig | format:
    - a number k indicating number of required signatures
    - repeated OP_PUSHBYTES_65 || pubkey for all available keys
    - a number n indicating total number of keys
    - OP_CHECKMULTISIG

The key count is only known once it is reached, so every opcode after the threshold is read before deciding
whether it starts a key or ends the key list.
"""
from bitscript.core import SCRIPT, ByteCursor, TemplateMismatch, InvalidMultisigBody, MultisigKeyCountMismatch, \
    MultisigThresholdExceedsKeys
from bitscript.script.asm import AsmBuilder
from bitscript.script.opcodes import OP_CHECKMULTISIG
from bitscript.script.script_type import ScriptType
from bitscript.script.templates import TemplateDecoder, read_opcode, expect_opcode

__all__ = ["Multisig_Template"]


class Multisig_Template(TemplateDecoder):
    script_type = ScriptType.MULTISIG

    def decode(self, cursor: ByteCursor, asm: AsmBuilder):
        # Threshold
        byte, op = read_opcode(cursor)
        threshold = op.small_int
        if threshold is None:
            raise TemplateMismatch("OP_1..OP_16", byte)
        asm.push_opcode(op)

        # Keys until the key count
        observed = 0
        while True:
            byte, op = read_opcode(cursor)
            if op.is_push and op.value == SCRIPT.UNCOMPRESSED_PUBKEY:
                asm.push_opcode(op)
                asm.push_bytes(cursor.read_exact(op.value))
                observed += 1
            elif op.small_int is not None:
                declared = op.small_int
                asm.push_opcode(op)
                break
            else:
                raise InvalidMultisigBody(byte)

        if observed != declared:
            raise MultisigKeyCountMismatch(declared, observed)
        if declared < threshold:
            raise MultisigThresholdExceedsKeys(threshold, declared)

        expect_opcode(cursor, asm, OP_CHECKMULTISIG)
