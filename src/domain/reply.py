"""
Binary reply codec - length-delimited string fields.

A creation reply carries the created denom as a single length-delimited
field (field number 1). The layout of one field is::

    tag byte | varint length | payload bytes

The tag byte stores the field number in its upper bits (tag >> 3) and
the wire type in its low bits (tag & 0b11). Only wire type 2
(length-delimited) is accepted. The varint is base-128, least
significant group first, with 0x80 as the continuation bit.

The decoder walks an explicit offset over an immutable bytes object and
bounds-checks before every read. It stops after the first field; any
trailing bytes are ignored.
"""

from .exceptions import (
    FieldMismatch,
    InvalidUtf8,
    PayloadTooShort,
    VarintTooLong,
    VarintTooShort,
    WireTypeMismatch,
)

WIRE_TYPE_LENGTH_DELIMITED = 2

# Maximum number of bytes scanned for a length prefix
VARINT_MAX_BYTES = 9

DENOM_FIELD_NUMBER = 1


def decode_string_field(buffer: bytes, field_number: int) -> str:
    """
    Decode one length-delimited string field.

    An empty buffer decodes to an empty string (zero-length replies
    are accepted).

    Args:
        buffer: Raw reply bytes
        field_number: Field number the caller expects

    Returns:
        Decoded UTF-8 payload

    Raises:
        FieldMismatch: Tag names another field
        WireTypeMismatch: Field is not length-delimited
        VarintTooShort: Buffer ended inside the length prefix
        VarintTooLong: Length prefix exceeds VARINT_MAX_BYTES
        PayloadTooShort: Fewer bytes remain than the length prefix claims
        InvalidUtf8: Payload is not valid UTF-8
    """
    data = bytes(buffer)
    if not data:
        return ""

    tag = data[0]
    wire_type = tag & 0b11
    field = tag >> 3
    if field != field_number:
        raise FieldMismatch(field_number, f"invalid field #{field} for field #{field_number}")
    if wire_type != WIRE_TYPE_LENGTH_DELIMITED:
        raise WireTypeMismatch(field_number, f"invalid wire type {wire_type}")

    length, offset = _decode_varint(data, 1, field_number)

    remaining = len(data) - offset
    if remaining < length:
        raise PayloadTooShort(
            field_number, f"message too short, expected {length} bytes, got {remaining}"
        )

    payload = data[offset : offset + length]
    try:
        return payload.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidUtf8(field_number, f"invalid utf-8: {e.reason}") from e


def _decode_varint(data: bytes, offset: int, field_number: int) -> tuple[int, int]:
    """
    Decode a varint starting at offset.

    Returns:
        (value, offset of the first byte after the varint)
    """
    value = 0
    for i in range(VARINT_MAX_BYTES):
        position = offset + i
        if position >= len(data):
            raise VarintTooShort(field_number, "varint data too short")
        byte = data[position]
        value |= (byte & 0x7F) << (7 * i)
        if not byte & 0x80:
            return value, position + 1
    raise VarintTooLong(field_number, "varint data too long")


def encode_varint(value: int) -> bytes:
    """Encode a non-negative integer as a base-128 varint."""
    if value < 0:
        raise ValueError(f"varint value must be non-negative, got {value}")
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def encode_string_field(value: str, field_number: int = DENOM_FIELD_NUMBER) -> bytes:
    """
    Encode value as one length-delimited field.

    Args:
        value: String payload
        field_number: Field number written into the tag byte

    Returns:
        tag byte + varint length + UTF-8 payload
    """
    payload = value.encode("utf-8")
    tag = (field_number << 3) | WIRE_TYPE_LENGTH_DELIMITED
    if tag > 0xFF:
        raise ValueError(f"field number {field_number} does not fit in a single tag byte")
    return bytes([tag]) + encode_varint(len(payload)) + payload


def denom_from_reply(data: bytes) -> str:
    """Recover the created denom from a CreateDenom reply payload."""
    return decode_string_field(data, DENOM_FIELD_NUMBER)
