"""ICAN checksum encoding.

A raw 20-byte address becomes a 44-character string:

    <network prefix:2><checksum:2><address hex:40>

The checksum follows the IBAN scheme (ISO 7064 mod 97-10). The address hex,
the network prefix and a "00" placeholder are concatenated, every character
is replaced by its hex digit value written in decimal ("a" -> "10"), and the
resulting numeral is reduced mod 97 one digit at a time. The checksum is
98 minus the remainder, which always falls in [2, 98].

Encoding is one-way; there is no decode or verify routine.
"""

import logging

from icanaddr.networks import NetworkType
from icanaddr.types import Address, IcanAddress

logger = logging.getLogger(__name__)

CHECKSUM_PLACEHOLDER = "00"


def number_string(address: Address, network: NetworkType) -> str:
    """Build the decimal numeral the checksum is computed over.

    Example:
        >>> addr = Address.from_hex("e8cF4629ACB360350399B6CFF367A97CF36E62B9")
        >>> number_string(addr, NetworkType.MAINNET)
        '1481215462910121136035039911612151536710971215361462119121100'
    """
    text = f"{address.hex()}{network.prefix}{CHECKSUM_PLACEHOLDER}"
    return "".join(str(int(ch, 16)) for ch in text)


def calculate_checksum(number_str: str) -> int:
    """Return 98 - (number_str mod 97), folding digit by digit."""
    remainder = 0
    for ch in number_str:
        remainder = (remainder * 10 + int(ch)) % 97
    return 98 - remainder


def construct_ican_address(prefix: str, checksum: int, address: Address) -> IcanAddress:
    """Assemble prefix, zero-padded checksum and address hex."""
    return IcanAddress.from_hex(f"{prefix}{checksum:02d}{address.hex()}")


def to_ican(address: Address, network: NetworkType) -> IcanAddress:
    """Encode a raw address as a checksummed ICAN address for ``network``."""
    checksum = calculate_checksum(number_string(address, network))
    ican = construct_ican_address(network.prefix, checksum, address)
    logger.debug(f"Encoded {address.hex()} for {network.value}: {ican}")
    return ican
