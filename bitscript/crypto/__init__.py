"""
Hash functions used for transaction identifiers
"""
# crypto/__init__.py
from bitscript.crypto.hash_functions import *
