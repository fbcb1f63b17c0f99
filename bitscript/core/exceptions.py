"""
The custom exceptions used throughout bitscript
"""
__all__ = ["StreamError", "ReadError", "WriteError", "ScriptDecodeError", "UnexpectedEOF", "UnsupportedOpcode",
           "TemplateMismatch", "UnrecognizedTemplate", "InvalidMultisigBody", "MultisigKeyCountMismatch",
           "MultisigThresholdExceedsKeys", "TrailingData"]


class StreamError(Exception):
    """
    Catchall for stream errors
    """
    pass


class ReadError(StreamError):
    """
    For when trying to read data of length n from the stream and receiving data of length < n
    """
    pass


class WriteError(StreamError):
    """
    For when writing data that would be otherwise out of bounds
    """
    pass


class ScriptDecodeError(Exception):
    """
    Parent class for every failure raised while classifying or decoding a locking script
    """
    pass


class UnexpectedEOF(ScriptDecodeError, ReadError):
    """
    The script ended before an expected opcode or data field
    """

    def __init__(self, needed: int, position: int, available: int):
        self.needed = needed
        self.position = position
        self.available = available
        super().__init__(f"Unexpected end of script: needed {needed} byte(s) at offset {position}, "
                         f"{available} available")


class UnsupportedOpcode(ScriptDecodeError):
    """
    A byte outside the recognized grammar was found where an opcode was expected
    """

    def __init__(self, message: str, found_byte: int | None = None):
        self.found_byte = found_byte
        super().__init__(message)


class TemplateMismatch(ScriptDecodeError):
    """
    An opcode at a fixed position does not match the template chosen by the classifier
    """

    def __init__(self, expected: str, found_byte: int):
        self.expected = expected
        self.found_byte = found_byte
        super().__init__(f"Expected {expected} but found byte 0x{found_byte:02x}")


class UnrecognizedTemplate(ScriptDecodeError):
    """
    The leading opcode does not start any known template
    """

    def __init__(self, found_byte: int):
        self.found_byte = found_byte
        super().__init__(f"No standard template starts with byte 0x{found_byte:02x}")


class InvalidMultisigBody(ScriptDecodeError):
    """
    Something other than a 65-byte key push or a key count was found inside a multisig script
    """

    def __init__(self, found_byte: int):
        self.found_byte = found_byte
        super().__init__(f"Expected OP_PUSHBYTES_65 or a key count in multisig body but found byte "
                         f"0x{found_byte:02x}")


class MultisigKeyCountMismatch(ScriptDecodeError):
    """
    The declared key count differs from the number of keys present
    """

    def __init__(self, declared: int, observed: int):
        self.declared = declared
        self.observed = observed
        super().__init__(f"Multisig declares {declared} key(s) but contains {observed}")


class MultisigThresholdExceedsKeys(ScriptDecodeError):
    """
    The number of required signatures is larger than the number of keys
    """

    def __init__(self, threshold: int, declared: int):
        self.threshold = threshold
        self.declared = declared
        super().__init__(f"Multisig threshold {threshold} exceeds key count {declared}")


class TrailingData(ScriptDecodeError):
    """
    Bytes remain after a complete template has been decoded
    """

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"{count} unconsumed byte(s) after the end of the script template")
