"""Fixed-width byte value types.

Every type here checks its width on construction, so code that receives an
``Address`` or ``Hash256`` never has to re-check it.

    Address      20 bytes  raw account identifier
    IcanAddress  22 bytes  network prefix + checksum + raw address
    Hash256      32 bytes  keccak-256 digest
"""

from dataclasses import dataclass
from typing import ClassVar, Union

from eth_utils import decode_hex

UINT64_MAX = 2**64 - 1
UINT256_MAX = 2**256 - 1


class IcanAddressError(ValueError):
    """Base error for malformed address material."""


class InvalidLengthError(IcanAddressError):
    """Raised when a value does not have the required byte width."""

    def __init__(self, type_name: str, expected: int, actual: int):
        self.type_name = type_name
        self.expected = expected
        self.actual = actual
        super().__init__(f"{type_name} must be {expected} bytes, got {actual}")


class InvalidHexError(IcanAddressError):
    """Raised when text cannot be decoded as hexadecimal."""


def parse_hex(text: str) -> bytes:
    """Decode hex text with or without a ``0x`` prefix."""
    if not isinstance(text, str):
        raise InvalidHexError(f"Expected hex text, got {type(text).__name__}")
    try:
        return decode_hex(text)
    except ValueError as e:
        raise InvalidHexError(f"Invalid hex string {text!r}: {e}") from e


@dataclass(frozen=True)
class FixedBytes:
    """Immutable byte string of exactly ``SIZE`` bytes."""

    SIZE: ClassVar[int] = 0

    value: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.value, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"{type(self).__name__} expects bytes, got {type(self.value).__name__}"
            )
        value = bytes(self.value)
        if len(value) != self.SIZE:
            raise InvalidLengthError(type(self).__name__, self.SIZE, len(value))
        object.__setattr__(self, "value", value)

    @classmethod
    def from_hex(cls, text: str):
        return cls(parse_hex(text))

    @classmethod
    def repeat_byte(cls, byte: int):
        """Build a value with every byte set to ``byte``."""
        return cls(bytes([byte]) * cls.SIZE)

    def hex(self) -> str:
        return self.value.hex()

    def __bytes__(self) -> bytes:
        return self.value

    def __len__(self) -> int:
        return self.SIZE

    def __str__(self) -> str:
        return self.hex()


@dataclass(frozen=True)
class Address(FixedBytes):
    """Raw 20-byte account identifier, before checksum encoding."""

    SIZE: ClassVar[int] = 20


@dataclass(frozen=True)
class Hash256(FixedBytes):
    """32-byte digest."""

    SIZE: ClassVar[int] = 32


@dataclass(frozen=True)
class IcanAddress(FixedBytes):
    """22-byte checksummed address.

    Text form is 44 lowercase hex characters: a 2-character network prefix,
    2 decimal checksum digits and the 40 hex digits of the raw address.
    """

    SIZE: ClassVar[int] = 22

    @property
    def prefix(self) -> str:
        return self.hex()[:2]

    @property
    def checksum(self) -> int:
        """Checksum digits as an int.

        Raises:
            InvalidHexError: If the checksum slot holds hex letters, which
                encoder output never does
        """
        digits = self.hex()[2:4]
        if not digits.isdigit():
            raise InvalidHexError(f"Checksum slot {digits!r} is not decimal")
        return int(digits)


def uint256_to_bytes(value: int) -> bytes:
    """Big-endian 32-byte form of an unsigned 256-bit integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"uint256 must be an int, got {type(value).__name__}")
    if not 0 <= value <= UINT256_MAX:
        raise ValueError(f"uint256 out of range: {value}")
    return value.to_bytes(32, "big")


def check_uint64(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"uint64 must be an int, got {type(value).__name__}")
    if not 0 <= value <= UINT64_MAX:
        raise ValueError(f"uint64 out of range: {value}")
    return value


BytesLike = Union[bytes, bytearray, FixedBytes]
