"""Contract address derivation.

Two schemes, both ending in an ICAN-encoded address:

    CREATE   keccak256(rlp([caller, nonce]))[12:]
    CREATE2  keccak256(0xff ++ caller ++ salt ++ code_hash)[12:]

The caller is hashed as the full 22-byte ICAN value stored for the account,
prefix and checksum included.

Both functions default to mainnet encoding. The network parameter lets a
caller deploying on another network get that network's prefix instead.
"""

import logging

from icanaddr.encoding import encode_list
from icanaddr.hashing import keccak256
from icanaddr.ican import to_ican
from icanaddr.networks import NetworkType
from icanaddr.types import (
    Address,
    Hash256,
    IcanAddress,
    check_uint64,
    uint256_to_bytes,
)

logger = logging.getLogger(__name__)

CREATE2_MARKER = b"\xff"


def _last_20_bytes(digest: Hash256) -> Address:
    return Address(digest.value[12:])


def create_address(
    caller: IcanAddress,
    nonce: int,
    network: NetworkType = NetworkType.MAINNET,
) -> IcanAddress:
    """Derive the address for the legacy CREATE scheme.

    Args:
        caller: Deploying account
        nonce: Deploying account's nonce (uint64)
        network: Network whose prefix the result carries

    Returns:
        Checksummed address of the new account
    """
    nonce = check_uint64(nonce)
    digest = keccak256(encode_list([caller, nonce]))
    address = _last_20_bytes(digest)

    logger.debug(f"CREATE caller={caller} nonce={nonce} -> {address.hex()}")
    return to_ican(address, network)


def create2_address(
    caller: IcanAddress,
    code_hash: Hash256,
    salt: int,
    network: NetworkType = NetworkType.MAINNET,
) -> IcanAddress:
    """Derive the address for the salted CREATE2 scheme.

    Args:
        caller: Deploying account
        code_hash: keccak-256 of the init code
        salt: uint256 salt, hashed as 32 big-endian bytes
        network: Network whose prefix the result carries

    Returns:
        Checksummed address of the new account
    """
    preimage = b"".join([
        CREATE2_MARKER,
        bytes(caller),
        uint256_to_bytes(salt),
        bytes(code_hash),
    ])
    address = _last_20_bytes(keccak256(preimage))

    logger.debug(f"CREATE2 caller={caller} salt={salt} -> {address.hex()}")
    return to_ican(address, network)
