"""
Transaction decoding
"""
# tx/__init__.py
from bitscript.tx.tx import *
