"""
Token metadata and trait helpers.
"""
from typing import List, Union

from pydantic import BaseModel, Field

COLLECTION_NAME = "VOIDMASK"
COLLECTION_DESCRIPTION = (
    "VOIDMASKS is a Phase-8 schizocore PFP collection. Each mask is generated fully "
    "on-chain using deterministic Clarity logic and rendered as SVG."
)


class Attribute(BaseModel):
    trait_type: str
    value: Union[int, str]


class TokenMetadata(BaseModel):
    """SIP-009 token metadata document"""
    name: str
    description: str
    image: str
    attributes: List[Attribute] = Field(default_factory=list)


class Traits(BaseModel):
    """Traits computed by the contract from the token id (mixed radix)"""
    expression: int
    mouth: int
    aura: int
    corruption: int
    symbol: int
    palette: int
    background: int


class SvgReport(BaseModel):
    """Structural summary of an SVG document"""
    length: int
    has_opening_tag: bool
    has_closing_tag: bool

    @property
    def is_complete(self) -> bool:
        return self.has_opening_tag and self.has_closing_tag


def _require_token_id(token_id: int) -> None:
    if isinstance(token_id, bool) or not isinstance(token_id, int) or token_id < 1:
        raise ValueError(f"Invalid token ID: {token_id!r}")


def token_metadata(token_id: int, base_url: str) -> TokenMetadata:
    """
    Build the SIP-009 metadata for a token.

    Args:
        token_id: Token id, at least 1
        base_url: Public site URL the image endpoint is served from

    Returns:
        TokenMetadata whose image points at ``<base_url>/api/svg/<id>``

    Raises:
        ValueError: If token_id is not a positive integer
    """
    _require_token_id(token_id)
    return TokenMetadata(
        name=f"{COLLECTION_NAME} #{token_id}",
        description=COLLECTION_DESCRIPTION,
        image=f"{base_url.rstrip('/')}/api/svg/{token_id}",
        attributes=[
            Attribute(trait_type="Edition", value=token_id),
            Attribute(trait_type="Generation", value="Phase-8"),
            Attribute(trait_type="Storage", value="On-Chain"),
        ],
    )


def contract_traits(token_id: int) -> Traits:
    _require_token_id(token_id)
    return Traits(
        expression=token_id % 10,
        mouth=token_id // 10 % 9,
        aura=token_id // 90 % 8,
        corruption=token_id // 720 % 6,
        symbol=token_id // 4320 % 6,
        palette=token_id // 25920 % 8,
        background=token_id // 207360 % 8,
    )


def inspect_svg(svg: str) -> SvgReport:
    return SvgReport(
        length=len(svg),
        has_opening_tag="<svg" in svg,
        has_closing_tag="</svg>" in svg,
    )
