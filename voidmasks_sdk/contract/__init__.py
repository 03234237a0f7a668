"""
Contract reply decoding for the VOIDMASKS SDK.
"""
from .calls import (
    READ_ONLY_SENDER,
    ReadOnlyCall,
    get_last_token_id_call,
    get_owner_call,
    get_svg_call,
    get_token_uri_call,
    get_total_supply_call,
)
from .clarity import deserialize, principal_to_address, serialize_uint
from .decoder import (
    decode,
    decode_owner,
    decode_svg,
    decode_token_uri,
    decode_uint,
    is_markup,
    parse_ok_uint,
    unescape,
)
from .reply import ContractReply, ReplyForm, sniff_form

__all__ = [
    "READ_ONLY_SENDER",
    "ContractReply",
    "ReadOnlyCall",
    "ReplyForm",
    "decode",
    "decode_owner",
    "decode_svg",
    "decode_token_uri",
    "decode_uint",
    "deserialize",
    "get_last_token_id_call",
    "get_owner_call",
    "get_svg_call",
    "get_token_uri_call",
    "get_total_supply_call",
    "is_markup",
    "parse_ok_uint",
    "principal_to_address",
    "serialize_uint",
    "sniff_form",
    "unescape",
]
