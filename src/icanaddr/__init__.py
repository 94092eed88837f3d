"""Deterministic contract addresses in checksummed ICAN format."""

from icanaddr.create import create2_address, create_address
from icanaddr.hashing import KECCAK_EMPTY, keccak256
from icanaddr.ican import to_ican
from icanaddr.networks import NetworkType
from icanaddr.types import Address, Hash256, IcanAddress

__all__ = [
    "Address",
    "Hash256",
    "IcanAddress",
    "KECCAK_EMPTY",
    "NetworkType",
    "create_address",
    "create2_address",
    "keccak256",
    "to_ican",
]
