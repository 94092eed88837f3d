"""Pytest configuration and fixtures."""

import os

import pytest

# Set test environment
os.environ["ICAN_DEFAULT_NETWORK"] = "mainnet"
os.environ["ICAN_LOG_LEVEL"] = "DEBUG"

from icanaddr.config import get_settings
from icanaddr.types import Address, IcanAddress


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop cached settings so each test sees its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def caller() -> IcanAddress:
    """Caller account used throughout the known test vectors."""
    return IcanAddress.from_hex("cb72e8cF4629ACB360350399B6CFF367A97CF36E62B9")


@pytest.fixture
def raw_address() -> Address:
    return Address.from_hex("e8cF4629ACB360350399B6CFF367A97CF36E62B9")
