"""
Exceptions for the VOIDMASKS SDK.
"""
from enum import Enum
from typing import Optional


class DecodeFailure(str, Enum):
    """
    Reason codes carried by every DecodeError.
    """
    MALFORMED_HEX = "MALFORMED_HEX"
    NO_PAYLOAD_FOUND = "NO_PAYLOAD_FOUND"
    INVALID_PAYLOAD = "INVALID_PAYLOAD"
    UNRECOGNIZED_ENVELOPE = "UNRECOGNIZED_ENVELOPE"
    CALL_REJECTED = "CALL_REJECTED"


class VoidmasksError(Exception):
    """Base exception for all SDK errors."""
    pass


class DecodeError(VoidmasksError):
    """Raised when a contract reply cannot be decoded."""

    reason = DecodeFailure.UNRECOGNIZED_ENVELOPE

    def __init__(self, message: str, reason: Optional[DecodeFailure] = None):
        if reason is not None:
            self.reason = reason
        super().__init__(message)


class MalformedHexError(DecodeError):
    """Raised for odd-length or non-hex input on the hex path."""
    reason = DecodeFailure.MALFORMED_HEX


class ClarityDecodeError(MalformedHexError):
    """Raised when a hex string is not a well-formed Clarity value."""
    pass


class NoPayloadFoundError(DecodeError):
    """Raised when no payload can be extracted from a reply."""
    reason = DecodeFailure.NO_PAYLOAD_FOUND


class InvalidPayloadError(DecodeError):
    """Raised when an extracted string fails the SVG sanity check."""
    reason = DecodeFailure.INVALID_PAYLOAD


class UnrecognizedEnvelopeError(DecodeError):
    """Raised when a reply matches none of the known forms."""
    reason = DecodeFailure.UNRECOGNIZED_ENVELOPE


class ContractCallRejectedError(DecodeError):
    """Raised when the node reports the read-only call itself failed."""

    reason = DecodeFailure.CALL_REJECTED

    def __init__(self, message: str, cause: Optional[str] = None):
        self.cause = cause
        super().__init__(message)


class NetworkConfigError(VoidmasksError, ValueError):
    """Raised when a network preset is unknown or incomplete."""
    pass
