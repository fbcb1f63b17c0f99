"""
Methods for encoding and decoding the data fields used in transactions
"""
# data/__init__.py
from bitscript.data.compact_size import *
