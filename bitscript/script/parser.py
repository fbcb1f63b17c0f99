"""
Methods for parsing standard locking scripts into ASM
"""
from bitscript.core import ByteCursor, DecoderConfig, ScriptDecodeError, TrailingData, get_logger
from bitscript.script.asm import AsmBuilder
from bitscript.script.classifier import classify
from bitscript.script.multisig import Multisig_Template
from bitscript.script.script_type import ScriptType
from bitscript.script.templates import TemplateDecoder, P2PK_Template, P2PKH_Template, P2SH_Template, \
    P2WPKH_Template, P2WSH_Template, P2TR_Template, DataCarrier_Template

logger = get_logger(__name__)

__all__ = ["TEMPLATES", "classify_script", "to_asm", "parse_script", "parse_script_hex"]

TEMPLATES: dict[ScriptType, TemplateDecoder] = {
    ScriptType.P2PK: P2PK_Template(),
    ScriptType.P2PKH: P2PKH_Template(),
    ScriptType.P2SH: P2SH_Template(),
    ScriptType.P2WPKH: P2WPKH_Template(),
    ScriptType.P2WSH: P2WSH_Template(),
    ScriptType.P2TR: P2TR_Template(),
    ScriptType.MULTISIG: Multisig_Template(),
    ScriptType.DATA_CARRIER: DataCarrier_Template(),
}


def classify_script(script: bytes) -> ScriptType:
    """
    Return the ScriptType a locking script would be decoded as
    """
    return classify(ByteCursor(script))


def _decode(script: bytes, config: DecoderConfig | None) -> AsmBuilder:
    config = config or DecoderConfig()
    cursor = ByteCursor(script)
    asm = AsmBuilder()

    try:
        script_type = classify(cursor)
        logger.debug(f"Decoding {len(cursor)}-byte script as {script_type.value}")
        TEMPLATES[script_type].decode(cursor, asm)
    except ScriptDecodeError as e:
        logger.debug(f"Failed to decode script {script.hex()}: {e}")
        raise

    if not cursor.at_end and not config.allow_trailing_data:
        raise TrailingData(cursor.remaining)

    return asm


def to_asm(script: bytes, config: DecoderConfig | None = None) -> list[str]:
    """
    Given a locking script, we return the associated ASM tokens
    """
    return _decode(script, config).tokens


def parse_script(script: bytes, config: DecoderConfig | None = None) -> str:
    """
    Given a locking script, we return its ASM string
    """
    return _decode(script, config).finish()


def parse_script_hex(script_hex: str, config: DecoderConfig | None = None) -> str:
    try:
        script = bytes.fromhex(script_hex)
    except ValueError as e:
        raise ScriptDecodeError(f"Script is not valid hex: {e}") from e
    return parse_script(script, config)
