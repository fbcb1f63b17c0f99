"""
bitscript - standard Bitcoin locking script classification and ASM decoding
"""
# bitscript/__init__.py
from bitscript.core import *
from bitscript.script import *

__version__ = "0.1.0"
