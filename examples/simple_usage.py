#!/usr/bin/env python3
"""
Simple example of using the VOIDMASKS SDK.
"""
import json
import os
import sys

from voidmasks_sdk import NetworkConfig, svg_for_token, token_metadata
from voidmasks_sdk.contract import get_svg_call


def main():
    """
    Demonstrate basic usage of the SDK.

    This example shows how to:
    1. Build the read-only request for a token's on-chain SVG
    2. Decode a saved reply, falling back to local generation
    3. Build the token's SIP-009 metadata
    """
    NETWORK = os.environ.get("VOIDMASKS_NETWORK", "testnet")
    TOKEN_ID = int(os.environ.get("TOKEN_ID", "1"))
    REPLY_FILE = sys.argv[1] if len(sys.argv) > 1 else None

    # The request a caller would POST to the node
    settings = NetworkConfig.get_settings(NETWORK)
    call = get_svg_call(settings, TOKEN_ID)
    print(f"POST {call.url(NetworkConfig.get_api_url(NETWORK))}")
    print(json.dumps(call.body()))

    # Decode a reply saved from that request, if any
    reply = None
    if REPLY_FILE:
        with open(REPLY_FILE) as f:
            reply = json.load(f)

    svg = svg_for_token(TOKEN_ID, reply)
    out_path = f"voidmask-{TOKEN_ID}.svg"
    with open(out_path, "w") as f:
        f.write(svg)
    print(f"Wrote {len(svg)} characters to {out_path}")

    meta = token_metadata(TOKEN_ID, "https://voidmasks.vercel.app")
    print(meta.model_dump_json(indent=2))


if __name__ == "__main__":
    main()
