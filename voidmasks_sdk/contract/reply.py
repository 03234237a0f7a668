"""
Data models for read-only contract replies.
"""
from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from ..exceptions import UnrecognizedEnvelopeError


class ReplyForm(str, Enum):
    """Syntactic form of a reply's ``result`` field."""
    HEX = "hex"
    TEXT = "text"
    TYPED = "typed"


def sniff_form(result: Any) -> ReplyForm:
    """
    Classify a raw ``result`` value.

    Args:
        result: The reply's ``result`` field

    Returns:
        HEX for a ``0x``-prefixed string, TYPED for a mapping carrying a
        ``value`` key, TEXT for any other string

    Raises:
        UnrecognizedEnvelopeError: For anything else
    """
    if isinstance(result, str):
        if result.startswith("0x"):
            return ReplyForm.HEX
        return ReplyForm.TEXT
    if isinstance(result, dict) and "value" in result:
        return ReplyForm.TYPED
    raise UnrecognizedEnvelopeError(
        f"Unrecognized reply payload of type {type(result).__name__}"
    )


class ContractReply(BaseModel):
    """Reply of a ``/v2/contracts/call-read`` request"""
    model_config = ConfigDict(frozen=True, extra="ignore")

    okay: bool = True
    result: Optional[Union[str, Dict[str, Any]]] = None
    cause: Optional[str] = None

    @property
    def form(self) -> ReplyForm:
        return sniff_form(self.result)

    @classmethod
    def coerce(cls, reply: Union["ContractReply", Dict[str, Any], str]) -> "ContractReply":
        """Accept a model, the raw JSON mapping, or a bare ``result`` string."""
        if isinstance(reply, ContractReply):
            return reply
        if isinstance(reply, str):
            return cls(result=reply)
        try:
            return cls.model_validate(reply)
        except ValidationError as e:
            raise UnrecognizedEnvelopeError(f"Invalid contract reply: {e}") from e
