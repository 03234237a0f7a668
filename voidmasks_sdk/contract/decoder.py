"""
Decoder for read-only contract replies.

A reply's ``result`` arrives in one of three forms (see ``ReplyForm``):

* ``0x``-prefixed hex bytes, usually a serialized Clarity value wrapping an
  SVG document;
* a textual Clarity expression such as ``(ok u42)`` or ``(ok "<svg ...>")``;
* a typed-value envelope (``{"type": ..., "value": ...}``), possibly nested.

``decode`` is strict: it returns an ``int`` or a ``str`` or raises a
``DecodeError`` subclass. The lenient zero-default used by the UI lives in
``parse_ok_uint`` and is an explicit caller choice.
"""
import logging
import re
from typing import Any, Dict, Optional, Tuple, Union

from ..exceptions import (
    ContractCallRejectedError,
    DecodeError,
    InvalidPayloadError,
    MalformedHexError,
    NoPayloadFoundError,
    UnrecognizedEnvelopeError,
)
from .clarity import deserialize
from .reply import ContractReply, ReplyForm

logger = logging.getLogger(__name__)

ReplyLike = Union[ContractReply, Dict[str, Any], str]

# Fixed substitution table; anything else (e.g. %41) is left as is
ESCAPES = {
    "%23": "#",
    "%27": "'",
    "%22": '"',
    "%3C": "<",
    "%3E": ">",
    "%20": " ",
    "%2F": "/",
    "%3D": "=",
    "+": " ",
}

MARKUP_OPEN = "<svg"
MARKUP_CLOSE = "</svg>"

_ESCAPE_RE = re.compile("|".join(re.escape(k) for k in ESCAPES))
_HEX_RE = re.compile(r"[0-9a-fA-F]*")
_OK_UINT_RE = re.compile(r"\(ok u(\d+)\)")
_QUOTED_RE = re.compile(r'"((?:[^"\\]|\\.)*?)"', re.DOTALL)
_BACKSLASH_RE = re.compile(r'\\(["\\])')
_ERR_RE = re.compile(r"^\s*\(err\b")
_NONE_RE = re.compile(r"\bnone\b")
_PRINCIPAL_RE = re.compile(r"'?\b(S[0-9A-HJKMNP-TV-Z]{28,40}(?:\.[A-Za-z][A-Za-z0-9_-]*)?)")


def unescape(text: str) -> str:
    """Apply the fixed escape table in a single pass."""
    return _ESCAPE_RE.sub(lambda m: ESCAPES[m.group(0)], text)


def is_markup(text: str) -> bool:
    """Sanity check: the payload opens and closes an SVG document."""
    return MARKUP_OPEN in text and MARKUP_CLOSE in text


# ─────────────────────────────────────────────────────────────────────────
#  Hex path
# ─────────────────────────────────────────────────────────────────────────

def hex_to_bytes(value: str) -> bytes:
    """
    Convert a ``0x``-prefixed hex string to bytes.

    Raises:
        MalformedHexError: On odd length or non-hex characters
    """
    body = value[2:] if value.startswith("0x") else value
    if len(body) % 2:
        raise MalformedHexError(f"Hex payload has odd length ({len(body)} digits)")
    if not _HEX_RE.fullmatch(body):
        raise MalformedHexError("Hex payload contains non-hex characters")
    return bytes.fromhex(body)


def _chars(data: bytes) -> str:
    # Zero bytes are padding
    return "".join(chr(b) for b in data if b)


def _marker_seek(data: bytes) -> Optional[str]:
    start = data.find(b"<")
    if start < 0:
        return None
    return _chars(data[start:])


def _direct_charcode(data: bytes) -> str:
    text = _chars(data)
    if len(text) >= 2 and text.startswith('"') and text.endswith('"'):
        text = text[1:-1]
    return text


def _decode_hex(value: str) -> str:
    data = hex_to_bytes(value)

    sought = _marker_seek(data)
    if sought is not None:
        candidate = unescape(sought)
        if is_markup(candidate):
            logger.debug(f"Hex payload decoded by marker seek ({len(candidate)} chars)")
            return candidate
        logger.debug("Marker seek result failed the sanity check, trying direct decode")

    direct = unescape(_direct_charcode(data))
    if is_markup(direct):
        logger.debug(f"Hex payload decoded by direct charcode ({len(direct)} chars)")
        return direct

    if sought is None and not direct:
        raise NoPayloadFoundError(f"No characters in hex payload of {len(data)} bytes")
    raise InvalidPayloadError("Hex payload does not contain an SVG document")


# ─────────────────────────────────────────────────────────────────────────
#  Typed-value path
# ─────────────────────────────────────────────────────────────────────────

def unwrap_typed(envelope: Any) -> Tuple[Any, Optional[str]]:
    """
    Unwrap nested ``{"value": ...}`` mappings down to a primitive.

    Returns:
        Tuple of the innermost value and the innermost ``type`` tag seen

    Raises:
        ContractCallRejectedError: If any level is an ``err`` response
    """
    node = envelope
    type_tag = None
    while isinstance(node, dict) and "value" in node:
        tag = node.get("type")
        if isinstance(tag, str):
            if tag.startswith("err") or tag == "responseError":
                raise ContractCallRejectedError(f"Contract returned an error response: {node['value']!r}")
            type_tag = tag
        node = node["value"]
    return node, type_tag


def _is_integer_tag(tag: Optional[str]) -> bool:
    return tag is not None and (tag.startswith("uint") or tag.startswith("int"))


def _decode_typed(envelope: Any, require_markup: bool = True) -> Union[int, str]:
    value, tag = unwrap_typed(envelope)

    if value is None:
        raise NoPayloadFoundError(f"Typed value of type {tag!r} carries no payload")
    if isinstance(value, bool):
        raise UnrecognizedEnvelopeError(f"Typed value of type {tag!r} is a boolean")
    if isinstance(value, int):
        if value < 0:
            raise UnrecognizedEnvelopeError(f"Typed value is a negative integer: {value}")
        return value
    if isinstance(value, str):
        if _is_integer_tag(tag) and value.isdigit():
            return int(value)
        text = unescape(value)
        if require_markup and not is_markup(text):
            raise InvalidPayloadError(f"Typed string of type {tag!r} is not an SVG document")
        return text

    raise UnrecognizedEnvelopeError(f"Typed value unwraps to unsupported {type(value).__name__}")


# ─────────────────────────────────────────────────────────────────────────
#  Text path
# ─────────────────────────────────────────────────────────────────────────

def _decode_text(text: str, require_markup: bool = True) -> Union[int, str]:
    match = _OK_UINT_RE.search(text)
    if match:
        return int(match.group(1))

    match = _QUOTED_RE.search(text)
    if match:
        payload = unescape(_BACKSLASH_RE.sub(r"\1", match.group(1)))
        if require_markup and not is_markup(payload):
            raise InvalidPayloadError("Quoted string is not an SVG document")
        return payload

    if _ERR_RE.match(text):
        raise ContractCallRejectedError(f"Contract returned an error response: {text}")
    if _NONE_RE.search(text):
        raise NoPayloadFoundError("Reply is an empty optional")

    raise UnrecognizedEnvelopeError(f"Unrecognized reply text: {text[:80]!r}")


# ─────────────────────────────────────────────────────────────────────────
#  Entry points
# ─────────────────────────────────────────────────────────────────────────

def _accepted(reply: ReplyLike) -> ContractReply:
    reply = ContractReply.coerce(reply)
    if not reply.okay:
        raise ContractCallRejectedError(
            f"Read-only call failed: {reply.cause or 'no cause given'}", cause=reply.cause
        )
    return reply


def decode(reply: ReplyLike, *, require_markup: bool = True) -> Union[int, str]:
    """
    Decode a read-only contract reply.

    Args:
        reply: ContractReply, its raw JSON mapping, or a bare result string
        require_markup: Apply the SVG sanity check to string payloads. When
            False, hex replies are read as serialized Clarity values instead
            of being scanned for markup.

    Returns:
        An unsigned integer or a string payload

    Raises:
        MalformedHexError: Hex payload is not valid hex
        NoPayloadFoundError: Nothing could be extracted
        InvalidPayloadError: Extracted string is not an SVG document
        UnrecognizedEnvelopeError: Reply matches none of the known forms
        ContractCallRejectedError: The call or the contract reported an error
    """
    reply = _accepted(reply)
    form = reply.form
    logger.debug(f"Decoding {form.value} reply")

    if form == ReplyForm.HEX:
        if require_markup:
            return _decode_hex(reply.result)
        return _decode_typed(deserialize(reply.result), require_markup=False)
    if form == ReplyForm.TYPED:
        return _decode_typed(reply.result, require_markup)
    return _decode_text(reply.result, require_markup)


def decode_uint(reply: ReplyLike) -> int:
    """
    Decode a reply expected to hold an unsigned integer, e.g. ``(ok u42)``.

    Raises:
        DecodeError: If the reply does not hold an unsigned integer
    """
    reply = _accepted(reply)
    form = reply.form

    if form == ReplyForm.HEX:
        value = _decode_typed(deserialize(reply.result), require_markup=False)
    elif form == ReplyForm.TYPED:
        value = _decode_typed(reply.result, require_markup=False)
    else:
        match = _OK_UINT_RE.search(reply.result)
        if not match:
            if _ERR_RE.match(reply.result):
                raise ContractCallRejectedError(f"Contract returned an error response: {reply.result}")
            raise UnrecognizedEnvelopeError(f"No (ok u<digits>) in reply: {reply.result[:80]!r}")
        value = int(match.group(1))

    if not isinstance(value, int):
        raise UnrecognizedEnvelopeError(f"Expected an unsigned integer, got {type(value).__name__}")
    return value


def parse_ok_uint(reply: ReplyLike) -> int:
    """
    Lenient integer decode that returns 0 when the reply cannot be decoded.

    Only for display paths (total supply, last token id) where zero is an
    acceptable stand-in; use ``decode_uint`` to tell zero from failure.
    """
    try:
        return decode_uint(reply)
    except DecodeError as e:
        logger.warning(f"Could not decode integer reply, defaulting to 0: {e}")
        return 0


def decode_svg(reply: ReplyLike) -> str:
    """
    Decode a reply expected to hold an SVG document.

    Raises:
        InvalidPayloadError: If the reply holds an integer or a non-SVG string
        DecodeError: For any other decode failure
    """
    value = decode(reply)
    if not isinstance(value, str):
        raise InvalidPayloadError(f"Expected an SVG document, got integer {value}")
    return value


def decode_token_uri(reply: ReplyLike) -> Optional[str]:
    """
    Decode a ``get-token-uri`` reply.

    Returns:
        The URI, or None when the contract returned ``none``
    """
    try:
        value = decode(reply, require_markup=False)
    except NoPayloadFoundError:
        return None
    if not isinstance(value, str):
        raise UnrecognizedEnvelopeError(f"Expected a token URI string, got integer {value}")
    return value


def decode_owner(reply: ReplyLike) -> Optional[str]:
    """
    Decode a ``get-owner`` reply into a Stacks address.

    Returns:
        The owner's address, or None when the token has no owner
    """
    reply = _accepted(reply)
    form = reply.form

    if form == ReplyForm.TEXT:
        match = _PRINCIPAL_RE.search(reply.result)
        if match:
            return match.group(1)
        if _ERR_RE.match(reply.result):
            raise ContractCallRejectedError(f"Contract returned an error response: {reply.result}")
        if _NONE_RE.search(reply.result):
            return None
        raise UnrecognizedEnvelopeError(f"No principal in reply: {reply.result[:80]!r}")

    envelope = deserialize(reply.result) if form == ReplyForm.HEX else reply.result
    value, _ = unwrap_typed(envelope)
    if value is None:
        return None
    if not isinstance(value, str):
        raise UnrecognizedEnvelopeError(f"Expected a principal, got {type(value).__name__}")
    return value
