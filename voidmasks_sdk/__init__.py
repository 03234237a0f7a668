"""
VOIDMASKS SDK - deterministic token artwork and contract reply decoding.
"""
from .version import __version__
from .art import VectorImage, generate_image, generate_preview_tokens, to_svg
from .config import NetworkConfig, NetworkSettings
from .contract import ContractReply, ReplyForm, decode, decode_svg, decode_uint, parse_ok_uint
from .exceptions import (
    ClarityDecodeError,
    ContractCallRejectedError,
    DecodeError,
    DecodeFailure,
    InvalidPayloadError,
    MalformedHexError,
    NetworkConfigError,
    NoPayloadFoundError,
    UnrecognizedEnvelopeError,
    VoidmasksError,
)
from .fallback import svg_for_token
from .metadata import contract_traits, inspect_svg, token_metadata

__all__ = [
    "__version__",
    "ClarityDecodeError",
    "ContractCallRejectedError",
    "ContractReply",
    "DecodeError",
    "DecodeFailure",
    "InvalidPayloadError",
    "MalformedHexError",
    "NetworkConfig",
    "NetworkConfigError",
    "NetworkSettings",
    "NoPayloadFoundError",
    "ReplyForm",
    "UnrecognizedEnvelopeError",
    "VectorImage",
    "VoidmasksError",
    "contract_traits",
    "decode",
    "decode_svg",
    "decode_uint",
    "generate_image",
    "generate_preview_tokens",
    "inspect_svg",
    "parse_ok_uint",
    "svg_for_token",
    "to_svg",
    "token_metadata",
]
