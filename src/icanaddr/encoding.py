"""Canonical list encoding used as the CREATE pre-image.

Fields are RLP encoded: byte strings as RLP strings, unsigned integers as
minimal big-endian strings, the whole sequence wrapped as an RLP list.
"""

from typing import Sequence, Union

import rlp

from icanaddr.types import BytesLike, FixedBytes

Field = Union[BytesLike, int]


def _to_rlp_item(field: Field) -> Union[bytes, int]:
    if isinstance(field, FixedBytes):
        return bytes(field)
    if isinstance(field, bytearray):
        return bytes(field)
    if isinstance(field, bool):
        raise TypeError("bool is not a valid list field")
    if isinstance(field, int) and field < 0:
        raise ValueError(f"Cannot encode negative integer {field}")
    return field


def encode_list(fields: Sequence[Field]) -> bytes:
    """RLP-encode an ordered list of byte strings and unsigned integers."""
    return rlp.encode([_to_rlp_item(field) for field in fields])
