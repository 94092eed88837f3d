"""Keccak-256 digest."""

from eth_utils import keccak

from icanaddr.types import Hash256

# keccak256(b"")
KECCAK_EMPTY = Hash256.from_hex(
    "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
)


def keccak256(data: bytes) -> Hash256:
    return Hash256(keccak(bytes(data)))
