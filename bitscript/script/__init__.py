"""
All methods for classifying and decoding standard locking scripts
"""
# script/__init__.py
from bitscript.script.asm import *
from bitscript.script.classifier import *
from bitscript.script.multisig import *
from bitscript.script.opcodes import *
from bitscript.script.parser import *
from bitscript.script.script_type import *
from bitscript.script.templates import *
