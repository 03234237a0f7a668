"""
On-chain first, local generator second.
"""
import logging
from typing import Optional

from ._rate_limited_log import rate_limited_log
from .art import generate_image, to_svg
from .contract import decode_svg
from .contract.decoder import ReplyLike
from .exceptions import DecodeError

logger = logging.getLogger(__name__)


def svg_for_token(token_id: int, reply: Optional[ReplyLike] = None) -> str:
    """
    SVG markup for a token.

    The contract reply is decoded when one is given; if there is none, or it
    does not decode to an SVG document, the artwork is generated locally.

    Args:
        token_id: Token id the reply belongs to
        reply: Reply of the contract's ``get-svg`` call, if the caller has one

    Returns:
        SVG markup
    """
    if reply is not None:
        try:
            return decode_svg(reply)
        except DecodeError as e:
            rate_limited_log(
                f"Falling back to local artwork for token {token_id}: "
                f"{e.reason.value}: {e}",
                logger_instance=logger,
            )
    return to_svg(generate_image(token_id))
