"""Derivation request and result contracts.

Requests carry hex text as it arrives from callers (JSON, command line) and
validate it into the fixed-width types before anything is hashed.
"""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from icanaddr.hexbytes import HexBytes
from icanaddr.networks import NetworkType
from icanaddr.types import UINT64_MAX, UINT256_MAX, Hash256, IcanAddress


class DerivationScheme(str, Enum):
    """Address derivation schemes."""

    CREATE = "create"
    CREATE2 = "create2"


class CreateRequest(BaseModel):
    """Request a CREATE (nonce based) address."""

    caller: str = Field(..., description="Deploying account, 44 hex chars")
    nonce: int = Field(..., description="Deploying account nonce (uint64)")
    network: Optional[NetworkType] = Field(
        None, description="Target network (None = configured default)"
    )

    @field_validator("caller")
    @classmethod
    def validate_caller(cls, v: str) -> str:
        """Caller must be a 22-byte ICAN address."""
        return str(IcanAddress.from_hex(v))

    @field_validator("nonce")
    @classmethod
    def validate_nonce(cls, v: int) -> int:
        if not 0 <= v <= UINT64_MAX:
            raise ValueError(f"nonce must fit in 64 bits, got {v}")
        return v

    @property
    def caller_address(self) -> IcanAddress:
        return IcanAddress.from_hex(self.caller)


class Create2Request(BaseModel):
    """Request a CREATE2 (salted) address."""

    caller: str = Field(..., description="Deploying account, 44 hex chars")
    code_hash: HexBytes = Field(..., description="keccak-256 of the init code")
    salt: int = Field(..., description="uint256 salt, int or 0x hex")
    network: Optional[NetworkType] = Field(
        None, description="Target network (None = configured default)"
    )

    @field_validator("caller")
    @classmethod
    def validate_caller(cls, v: str) -> str:
        """Caller must be a 22-byte ICAN address."""
        return str(IcanAddress.from_hex(v))

    @field_validator("code_hash")
    @classmethod
    def validate_code_hash(cls, v: bytes) -> bytes:
        return bytes(Hash256(v))

    @field_validator("salt", mode="before")
    @classmethod
    def parse_salt(cls, v: Union[int, str]):
        """Accept decimal text or 0x hex text as well as ints."""
        if isinstance(v, str):
            v = v.strip()
            if v.lower().startswith("0x"):
                return int(v, 16)
            return int(v)
        return v

    @field_validator("salt")
    @classmethod
    def validate_salt(cls, v: int) -> int:
        if not 0 <= v <= UINT256_MAX:
            raise ValueError(f"salt must fit in 256 bits, got {v}")
        return v

    @property
    def caller_address(self) -> IcanAddress:
        return IcanAddress.from_hex(self.caller)


class DerivedAddress(BaseModel):
    """A derived, checksummed address."""

    model_config = ConfigDict(use_enum_values=True)

    address: str = Field(..., description="ICAN address, 44 lowercase hex chars")
    scheme: DerivationScheme
    network: NetworkType
