"""
The transaction envelope decoder

Extracts the signature scripts and locking scripts from a serialized transaction. Locking scripts are handed to the
script parser for classification and ASM rendering.
"""
from io import SEEK_CUR

from bitscript.core import Serializable, SERIALIZED, ScriptDecodeError, get_stream, read_little_int, read_stream, \
    ReadError, TX, DecoderConfig, get_logger
from bitscript.crypto import hash256
from bitscript.data import read_compact_size, write_compact_size
from bitscript.script import ScriptType, classify_script, parse_script

logger = get_logger(__name__)

__all__ = ["TxInput", "TxOutput", "WitnessField", "Transaction", "is_standard_version"]


def is_standard_version(version: int) -> bool:
    """
    Versions 1 and 2 are relayed by default. Anything else is a custom version set by the node operator.
    """
    return version in TX.STANDARD_VERSIONS


class TxInput(Serializable):
    """
    =============================================================================
    |   name            |   data type   |   format              |   byte size   |
    =============================================================================
    |   txid            |   bytes       |   natural byte order  |   32          |
    |   vout            |   int         |   little-endian       |   4           |
    |   scriptsig_size  |               |   compactSize         |   var         |
    |   scriptsig       |   bytes       |   script bytes        |   var         |
    |   sequence        |   int         |   little-endian       |   4           |
    =============================================================================
    """
    __slots__ = ("txid", "vout", "scriptsig", "sequence")

    def __init__(self, txid: bytes, vout: int, scriptsig: bytes, sequence: int):
        self.txid = txid
        self.vout = vout
        self.scriptsig = scriptsig
        self.sequence = sequence

    @property
    def signature_script(self) -> bytes:
        return self.scriptsig

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        txid = read_stream(stream, TX.TXID, "txid")
        vout = read_little_int(stream, TX.VOUT, "vout")
        scriptsig_size = read_compact_size(stream)
        scriptsig = read_stream(stream, scriptsig_size, "scriptsig")
        sequence = read_little_int(stream, TX.SEQUENCE, "sequence")

        return cls(txid, vout, scriptsig, sequence)

    def to_bytes(self) -> bytes:
        """
        txid || vout || scriptsig_size || scriptsig || sequence
        """
        parts = [
            self.txid,
            self.vout.to_bytes(TX.VOUT, "little"),
            write_compact_size(len(self.scriptsig)),
            self.scriptsig,
            self.sequence.to_bytes(TX.SEQUENCE, "little")
        ]
        return b''.join(parts)

    def to_dict(self) -> dict:
        return {
            "txid": self.txid[::-1].hex(),  # Display byte order
            "vout": self.vout,
            "scriptsig": self.scriptsig.hex(),
            "sequence": self.sequence
        }


class TxOutput(Serializable):
    """
    -----------------------------------------------------------------
    |   Field               |   Byte Size   |   Format              |
    -----------------------------------------------------------------
    |   Amount              |   8           |   little-endian       |
    |   scriptpubkey_size   |   var         |   CompactSize         |
    |   scriptpubkey        |   var         |   Script              |
    -----------------------------------------------------------------
    """
    __slots__ = ("amount", "scriptpubkey")

    def __init__(self, amount: int, scriptpubkey: bytes):
        self.amount = amount
        self.scriptpubkey = scriptpubkey

    @property
    def locking_script(self) -> bytes:
        return self.scriptpubkey

    def asm(self, config: DecoderConfig | None = None) -> str:
        return parse_script(self.scriptpubkey, config)

    def script_type(self) -> ScriptType:
        return classify_script(self.scriptpubkey)

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        amount = read_little_int(stream, TX.AMOUNT, "amount")
        scriptpubkey_size = read_compact_size(stream)
        scriptpubkey = read_stream(stream, scriptpubkey_size, "scriptpubkey")

        return cls(amount, scriptpubkey)

    def to_bytes(self) -> bytes:
        """
        amount || scriptpubkey_size || scriptpubkey
        """
        return self.amount.to_bytes(TX.AMOUNT, "little") + write_compact_size(len(self.scriptpubkey)) + \
            self.scriptpubkey

    def to_dict(self) -> dict:
        output_dict = {
            "amount": self.amount,
            "scriptpubkey": self.scriptpubkey.hex()
        }
        try:
            output_dict.update({
                "type": self.script_type().value,
                "asm": self.asm()
            })
        except ScriptDecodeError as e:
            logger.debug(f"Output script {self.scriptpubkey.hex()} is not standard: {e}")
            output_dict["error"] = str(e)
        return output_dict


class WitnessField(Serializable):
    """
    -------------------------------------------------------------
    |   Field           |   Byte Size   |   Format              |
    -------------------------------------------------------------
    |   Stack Items     |   var         |   CompactSize         |
    =============================================================
    |   Size            |   var         |   CompactSize         |
    |   Item            |   var         |   bytes               |
    -------------------------------------------------------------
    """
    __slots__ = ("items",)

    def __init__(self, items: list[bytes]):
        self.items = items

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        stack_items = read_compact_size(stream)
        witness_items = []
        for _ in range(stack_items):
            item_len = read_compact_size(stream)
            witness_items.append(read_stream(stream, item_len, "witness item"))
        return cls(witness_items)

    def to_bytes(self) -> bytes:
        parts = [write_compact_size(len(self.items))]
        for item in self.items:
            parts.append(write_compact_size(len(item)))
            parts.append(item)
        return b''.join(parts)

    def to_dict(self) -> dict:
        return {"items": [item.hex() for item in self.items]}


class Transaction(Serializable):
    """
    -------------------------------------------------------------
    |   Field           |   Byte Size   |   Format              |
    -------------------------------------------------------------
    |   Version         |   4           |   little-endian       |
    |   Marker*         |   1           |   fixed byte          |
    |   Flag*           |   1           |   fixed byte          |
    |   input_count     |   var         |   CompactSize         |
    |   inputs          |   var         |   TxInput             |
    |   output_count    |   var         |   CompactSize         |
    |   outputs         |   var         |   TxOutput            |
    |   witness*        |   var         |   WitnessField        |
    |   locktime        |   4           |   little-endian       |
    -------------------------------------------------------------
    * indicates optional segwit specific fields
    """
    __slots__ = ("version", "inputs", "outputs", "witness", "locktime")

    def __init__(self, inputs: list[TxInput] = None, outputs: list[TxOutput] = None,
                 witness: list[WitnessField] = None, locktime: int = 0, version: int = 1):
        self.inputs = inputs or []
        self.outputs = outputs or []
        self.witness = witness or []
        self.locktime = locktime
        self.version = version

    @property
    def is_segwit(self) -> bool:
        return len(self.witness) > 0

    @property
    def txid(self) -> bytes:
        """
        hash256 of the serialization without marker, flag and witness
        """
        parts = [
            self.version.to_bytes(TX.VERSION, "little"),
            self._get_input_bytes(),
            self._get_output_bytes(),
            self.locktime.to_bytes(TX.LOCKTIME, "little")
        ]
        return hash256(b''.join(parts))

    @property
    def wtxid(self) -> bytes:
        return hash256(self.to_bytes())

    def _get_input_bytes(self) -> bytes:
        return write_compact_size(len(self.inputs)) + b''.join([i.to_bytes() for i in self.inputs])

    def _get_output_bytes(self) -> bytes:
        return write_compact_size(len(self.outputs)) + b''.join([o.to_bytes() for o in self.outputs])

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        version = read_little_int(stream, TX.VERSION, "version")

        # Marker/Flag
        marker = read_stream(stream, 1, "marker or input count")
        if marker[0] == TX.MARKER:
            flag = read_little_int(stream, 1, "flag")
            if flag != TX.FLAG:
                raise ReadError(f"Invalid SegWit flag: {hex(flag)}")
            segwit = True
        else:
            segwit = False
            stream.seek(-1, SEEK_CUR)  # Rewind the input count byte

        num_inputs = read_compact_size(stream)
        inputs = [TxInput.from_bytes(stream) for _ in range(num_inputs)]

        num_outputs = read_compact_size(stream)
        outputs = [TxOutput.from_bytes(stream) for _ in range(num_outputs)]

        witness = []
        if segwit:
            witness = [WitnessField.from_bytes(stream) for _ in range(num_inputs)]

        locktime = read_little_int(stream, TX.LOCKTIME, "locktime")

        if not is_standard_version(version):
            logger.debug(f"Transaction uses custom version {version}")

        return cls(inputs, outputs, witness, locktime, version)

    @classmethod
    def from_hex(cls, tx_hex: str):
        try:
            raw = bytes.fromhex(tx_hex)
        except ValueError as e:
            raise ReadError(f"Transaction is not valid hex: {e}") from e
        return cls.from_bytes(raw)

    def to_bytes(self) -> bytes:
        parts = [self.version.to_bytes(TX.VERSION, "little")]

        if self.is_segwit:
            parts.append(bytes([TX.MARKER, TX.FLAG]))

        parts.append(self._get_input_bytes())
        parts.append(self._get_output_bytes())

        if self.is_segwit:
            parts.extend([w.to_bytes() for w in self.witness])

        parts.append(self.locktime.to_bytes(TX.LOCKTIME, "little"))
        return b''.join(parts)

    def to_dict(self) -> dict:
        tx_dict = {
            "txid": self.txid[::-1].hex(),  # Reverse byte order for display
            "version": self.version,
            "standard_version": is_standard_version(self.version),
            "is_segwit": self.is_segwit,
            "inputs": [i.to_dict() for i in self.inputs],
            "outputs": [o.to_dict() for o in self.outputs],
        }
        if self.is_segwit:
            tx_dict.update({
                "wtxid": self.wtxid[::-1].hex(),
                "witness": [w.to_dict() for w in self.witness]
            })
        tx_dict["locktime"] = self.locktime
        return tx_dict
