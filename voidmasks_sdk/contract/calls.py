"""
Builders for read-only contract call requests.

Only the request is built here; sending it, timeouts and retries belong to
the caller.
"""
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..config import NetworkSettings
from .clarity import serialize_uint

# Standard principal with an all-zero hash, accepted by nodes as a read-only sender
READ_ONLY_SENDER = "SP000000000000000000002Q6VF78"


class ReadOnlyCall(BaseModel):
    """A ``/v2/contracts/call-read`` request"""
    model_config = ConfigDict(frozen=True)

    contract_address: str
    contract_name: str
    function_name: str
    arguments: List[str] = Field(default_factory=list)
    sender: str = READ_ONLY_SENDER

    @field_validator("arguments")
    @classmethod
    def validate_arguments(cls, v: List[str]) -> List[str]:
        for arg in v:
            if not arg.startswith("0x"):
                raise ValueError(f"Arguments must be 0x-prefixed hex Clarity values, got {arg!r}")
        return v

    def path(self) -> str:
        return (
            f"/v2/contracts/call-read/{self.contract_address}/"
            f"{self.contract_name}/{self.function_name}"
        )

    def url(self, api_url: str) -> str:
        return api_url.rstrip("/") + self.path()

    def body(self) -> Dict[str, Any]:
        return {"sender": self.sender, "arguments": list(self.arguments)}


def _call(settings: NetworkSettings, function_name: str, *args: str) -> ReadOnlyCall:
    address, name = settings.contract
    return ReadOnlyCall(
        contract_address=address,
        contract_name=name,
        function_name=function_name,
        arguments=list(args),
    )


def get_svg_call(settings: NetworkSettings, token_id: int) -> ReadOnlyCall:
    return _call(settings, "get-svg", serialize_uint(token_id))


def get_token_uri_call(settings: NetworkSettings, token_id: int) -> ReadOnlyCall:
    return _call(settings, "get-token-uri", serialize_uint(token_id))


def get_owner_call(settings: NetworkSettings, token_id: int) -> ReadOnlyCall:
    return _call(settings, "get-owner", serialize_uint(token_id))


def get_last_token_id_call(settings: NetworkSettings) -> ReadOnlyCall:
    return _call(settings, "get-last-token-id")


def get_total_supply_call(settings: NetworkSettings) -> ReadOnlyCall:
    return _call(settings, "get-total-supply")
