"""
Wire frame layout.

    offset 0  1 byte   magic byte, always 0x00
    offset 1  4 bytes  schema version, big-endian unsigned
    offset 5  N bytes  Avro binary payload
"""
import struct
from typing import NamedTuple

from avro_wire.exceptions import FrameTooShortError, InvalidWireFormatError

MAGIC_BYTE = 0
HEADER_SIZE = 5
MAX_VERSION = 0xFFFFFFFF

_VERSION = struct.Struct(">I")


class Frame(NamedTuple):
    """A destructured wire frame."""
    version: int
    payload: bytes


def unpack_frame(data: bytes) -> Frame:
    """
    Split raw message bytes into version and payload.

    Args:
        data: Framed message bytes

    Returns:
        Frame with the embedded version and the payload bytes

    Raises:
        FrameTooShortError: If data is shorter than the header
        InvalidWireFormatError: If the magic byte is not zero
    """
    if len(data) < HEADER_SIZE:
        raise FrameTooShortError(len(data), HEADER_SIZE)

    magic = data[0]
    if magic != MAGIC_BYTE:
        raise InvalidWireFormatError(
            f"Unknown magic byte {magic:#04x}", magic_byte=magic, length=len(data)
        )

    (version,) = _VERSION.unpack_from(data, 1)
    return Frame(version, bytes(data[HEADER_SIZE:]))


def pack_frame(version: int, payload: bytes) -> bytes:
    """Prefix payload with the magic byte and big-endian version."""
    if not 0 <= version <= MAX_VERSION:
        raise InvalidWireFormatError(f"Version {version} does not fit in 4 bytes")
    return bytes((MAGIC_BYTE,)) + _VERSION.pack(version) + payload
