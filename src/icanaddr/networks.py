"""Network registry.

Each network is bound to the 2-character prefix that leads its ICAN
addresses. The table is closed: adding a network is a code change.
"""

from enum import Enum


class NetworkType(str, Enum):
    """Ledger networks an address can be encoded for."""

    MAINNET = "mainnet"
    TESTNET = "testnet"
    PRIVATE = "private"

    @property
    def prefix(self) -> str:
        return NETWORK_PREFIXES[self]

    @classmethod
    def from_prefix(cls, prefix: str) -> "NetworkType":
        """Look up a network by its address prefix (case-insensitive)."""
        network = _PREFIX_TO_NETWORK.get(prefix.lower())
        if network is None:
            raise ValueError(
                f"Unknown network prefix {prefix!r}. "
                f"Expected one of {sorted(_PREFIX_TO_NETWORK)}"
            )
        return network


NETWORK_PREFIXES: dict[NetworkType, str] = {
    NetworkType.MAINNET: "cb",
    NetworkType.TESTNET: "ab",
    NetworkType.PRIVATE: "ce",
}

_PREFIX_TO_NETWORK = {prefix: network for network, prefix in NETWORK_PREFIXES.items()}
