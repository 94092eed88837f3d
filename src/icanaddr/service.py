"""Derivation service.

Turns validated request contracts into derived addresses, filling in the
configured default network when a request leaves it unset.
"""

import logging
from typing import Optional, Union

from icanaddr.config import Settings, get_settings
from icanaddr.contracts import (
    Create2Request,
    CreateRequest,
    DerivationScheme,
    DerivedAddress,
)
from icanaddr.create import create2_address, create_address
from icanaddr.types import Hash256

logger = logging.getLogger(__name__)

DerivationRequest = Union[CreateRequest, Create2Request]


def derive(
    request: DerivationRequest,
    settings: Optional[Settings] = None,
) -> DerivedAddress:
    """Derive the address described by ``request``.

    Args:
        request: CREATE or CREATE2 request
        settings: Settings to use (defaults to the cached settings)

    Returns:
        DerivedAddress with the checksummed address

    Raises:
        TypeError: If request is not a known request contract
    """
    if not isinstance(request, (CreateRequest, Create2Request)):
        raise TypeError(f"Unsupported derivation request: {type(request).__name__}")

    if settings is None:
        settings = get_settings()
    network = request.network or settings.default_network

    if isinstance(request, CreateRequest):
        scheme = DerivationScheme.CREATE
        address = create_address(request.caller_address, request.nonce, network)
    else:
        scheme = DerivationScheme.CREATE2
        address = create2_address(
            request.caller_address,
            Hash256(request.code_hash),
            request.salt,
            network,
        )

    logger.debug(f"{scheme.value} on {network.value}: {request.caller} -> {address}")
    return DerivedAddress(address=str(address), scheme=scheme, network=network)
