"""
Clarity value serialization.

Read-only call arguments are sent as hex-serialized Clarity values, and nodes
may answer with one. ``deserialize`` turns such a reply into the same typed
envelope shape (``{"type": ..., "value": ...}``) that JSON clients produce, so
the decoder unwraps both the same way.
"""
import hashlib
import re
from typing import Any, Dict

from ..exceptions import ClarityDecodeError

TYPE_INT = 0x00
TYPE_UINT = 0x01
TYPE_BUFFER = 0x02
TYPE_TRUE = 0x03
TYPE_FALSE = 0x04
TYPE_STANDARD_PRINCIPAL = 0x05
TYPE_CONTRACT_PRINCIPAL = 0x06
TYPE_RESPONSE_OK = 0x07
TYPE_RESPONSE_ERR = 0x08
TYPE_OPTIONAL_NONE = 0x09
TYPE_OPTIONAL_SOME = 0x0A
TYPE_LIST = 0x0B
TYPE_TUPLE = 0x0C
TYPE_STRING_ASCII = 0x0D
TYPE_STRING_UTF8 = 0x0E

UINT128_MAX = 2 ** 128 - 1

C32_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"

_HEX_RE = re.compile(r"[0-9a-fA-F]*")

# Nesting depth of optionals, responses, lists and tuples
MAX_DEPTH = 64


def serialize_uint(value: int) -> str:
    """
    Serialize an unsigned integer as a hex Clarity ``uint``.

    Args:
        value: Integer in [0, 2**128)

    Returns:
        ``0x01`` followed by the 16-byte big-endian value

    Raises:
        ValueError: If value is out of range
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"uint must be an int, got {type(value).__name__}")
    if value < 0 or value > UINT128_MAX:
        raise ValueError(f"uint out of range: {value}")
    return "0x" + bytes([TYPE_UINT]).hex() + value.to_bytes(16, "big").hex()


def c32_encode(data: bytes) -> str:
    """Crockford base32 encoding as used by c32check, one '0' per leading zero byte."""
    value = int.from_bytes(data, "big")
    digits = []
    while value:
        value, rem = divmod(value, 32)
        digits.append(C32_ALPHABET[rem])
    leading_zeros = len(data) - len(data.lstrip(b"\x00"))
    return "0" * leading_zeros + "".join(reversed(digits))


def principal_to_address(version: int, hash160: bytes) -> str:
    """
    Encode a standard principal as a c32check Stacks address.

    Args:
        version: Address version byte (22 mainnet single-sig, 26 testnet single-sig)
        hash160: 20-byte public key hash

    Returns:
        Address such as ``SP000000000000000000002Q6VF78``
    """
    if not 0 <= version < 32:
        raise ValueError(f"Invalid c32 address version: {version}")
    if len(hash160) != 20:
        raise ValueError(f"hash160 must be 20 bytes, got {len(hash160)}")
    checksum = hashlib.sha256(hashlib.sha256(bytes([version]) + hash160).digest()).digest()[:4]
    return "S" + C32_ALPHABET[version] + c32_encode(hash160 + checksum)


class _Reader:
    def __init__(self, data: bytes):
        self.data = data
        self.pos = 0

    def take(self, count: int) -> bytes:
        end = self.pos + count
        if end > len(self.data):
            raise ClarityDecodeError(
                f"Truncated Clarity value: need {count} bytes at offset {self.pos}, "
                f"have {len(self.data) - self.pos}"
            )
        chunk = self.data[self.pos:end]
        self.pos = end
        return chunk

    def byte(self) -> int:
        return self.take(1)[0]

    def u32(self) -> int:
        return int.from_bytes(self.take(4), "big")


def _read_value(reader: _Reader, depth: int = 0) -> Dict[str, Any]:
    if depth > MAX_DEPTH:
        raise ClarityDecodeError(f"Clarity value nested deeper than {MAX_DEPTH} levels")
    type_id = reader.byte()

    if type_id == TYPE_INT:
        return {"type": "int", "value": int.from_bytes(reader.take(16), "big", signed=True)}
    if type_id == TYPE_UINT:
        return {"type": "uint", "value": int.from_bytes(reader.take(16), "big")}
    if type_id == TYPE_BUFFER:
        return {"type": "buffer", "value": "0x" + reader.take(reader.u32()).hex()}
    if type_id == TYPE_TRUE:
        return {"type": "bool", "value": True}
    if type_id == TYPE_FALSE:
        return {"type": "bool", "value": False}
    if type_id in (TYPE_STANDARD_PRINCIPAL, TYPE_CONTRACT_PRINCIPAL):
        version = reader.byte()
        address = principal_to_address(version, reader.take(20))
        if type_id == TYPE_CONTRACT_PRINCIPAL:
            name = reader.take(reader.byte()).decode("ascii", errors="replace")
            address = f"{address}.{name}"
        return {"type": "principal", "value": address}
    if type_id == TYPE_RESPONSE_OK:
        return {"type": "ok", "value": _read_value(reader, depth + 1)}
    if type_id == TYPE_RESPONSE_ERR:
        return {"type": "err", "value": _read_value(reader, depth + 1)}
    if type_id == TYPE_OPTIONAL_NONE:
        return {"type": "none", "value": None}
    if type_id == TYPE_OPTIONAL_SOME:
        return {"type": "some", "value": _read_value(reader, depth + 1)}
    if type_id == TYPE_LIST:
        count = reader.u32()
        return {"type": "list", "value": [_read_value(reader, depth + 1) for _ in range(count)]}
    if type_id == TYPE_TUPLE:
        count = reader.u32()
        fields = {}
        for _ in range(count):
            name = reader.take(reader.byte()).decode("ascii", errors="replace")
            fields[name] = _read_value(reader, depth + 1)
        return {"type": "tuple", "value": fields}
    if type_id == TYPE_STRING_ASCII:
        return {"type": "string-ascii", "value": reader.take(reader.u32()).decode("ascii", errors="replace")}
    if type_id == TYPE_STRING_UTF8:
        return {"type": "string-utf8", "value": reader.take(reader.u32()).decode("utf-8", errors="replace")}

    raise ClarityDecodeError(f"Unknown Clarity type id 0x{type_id:02x} at offset {reader.pos - 1}")


def deserialize(hex_value: str) -> Dict[str, Any]:
    """
    Deserialize a hex Clarity value into a typed envelope.

    Args:
        hex_value: Serialized value, with or without ``0x`` prefix

    Returns:
        Nested ``{"type": ..., "value": ...}`` dictionaries

    Raises:
        ClarityDecodeError: If the hex is malformed, truncated, has trailing
            bytes or uses an unknown type id
    """
    if hex_value.startswith("0x"):
        hex_value = hex_value[2:]
    if len(hex_value) % 2 or not _HEX_RE.fullmatch(hex_value):
        raise ClarityDecodeError(f"Invalid hex string for Clarity value (length {len(hex_value)})")

    reader = _Reader(bytes.fromhex(hex_value))
    value = _read_value(reader)
    if reader.pos != len(reader.data):
        raise ClarityDecodeError(
            f"Trailing bytes after Clarity value: {len(reader.data) - reader.pos}"
        )
    return value
