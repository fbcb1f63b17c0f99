"""
Fixtures used in the tests
"""
import pytest

from bitscript.core import DecoderConfig
from bitscript.script import AsmBuilder
from tests.utility import random_pubkey


@pytest.fixture()
def asm():
    return AsmBuilder()


@pytest.fixture()
def pubkey():
    return random_pubkey()


@pytest.fixture()
def permissive_config():
    return DecoderConfig(allow_trailing_data=True)
