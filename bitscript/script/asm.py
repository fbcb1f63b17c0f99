"""
The AsmBuilder collects ASM tokens in script order and joins them once the script is fully decoded
"""
from bitscript.script.opcodes import Opcode, encode_mnemonic

__all__ = ["AsmBuilder"]


class AsmBuilder:
    __slots__ = ("_tokens",)

    def __init__(self):
        self._tokens: list[str] = []

    def push_opcode(self, op: Opcode) -> "AsmBuilder":
        self._tokens.append(encode_mnemonic(op))
        return self

    def push_bytes(self, data: bytes) -> "AsmBuilder":
        self._tokens.append(data.hex())
        return self

    @property
    def tokens(self) -> list[str]:
        return list(self._tokens)

    def finish(self) -> str:
        return " ".join(self._tokens).strip()

    def __len__(self):
        return len(self._tokens)
