"""Serialize opaque byte buffers as ``0x``-prefixed hex strings.

``HexBytes`` plugs the two helpers into pydantic models, so a field declared
as ``HexBytes`` accepts ``"0xdeadbeef"`` (or bare ``"deadbeef"``) on input and
dumps back to ``"0xdeadbeef"``.
"""

from typing import Annotated, Union

from pydantic import BeforeValidator, PlainSerializer

from icanaddr.types import BytesLike, parse_hex


def serialize_hex_bytes(value: BytesLike) -> str:
    return f"0x{bytes(value).hex()}"


def deserialize_hex_bytes(value: Union[str, bytes]) -> bytes:
    """Decode hex text, with or without a ``0x`` prefix.

    Raw bytes pass through unchanged.

    Raises:
        InvalidHexError: If the text is not valid hex
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    return parse_hex(value)


HexBytes = Annotated[
    bytes,
    BeforeValidator(deserialize_hex_bytes),
    PlainSerializer(serialize_hex_bytes, return_type=str),
]
