"""
Contains the core elements that are used within bitscript

Core:
    -Provides the byte cursor and stream helpers used for decoding
    -Provides the reference formats and decoder configuration
    -Provides custom exceptions for the script and transaction decoders
"""
# core/__init__.py
from bitscript.core.byte_stream import *
from bitscript.core.config import *
from bitscript.core.exceptions import *
from bitscript.core.formats import *
from bitscript.core.logging import *
from bitscript.core.serializable import *
