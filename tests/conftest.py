"""
Pytest fixtures for the VOIDMASKS SDK tests.
"""
import pytest

from voidmasks_sdk import _rate_limited_log
from voidmasks_sdk.config import NetworkConfig

SAMPLE_SVG = (
    "<svg xmlns='http://www.w3.org/2000/svg' viewBox='0 0 64 64'>"
    "<rect width='64' height='64' fill='#000'/>"
    "<rect x='22' y='24' width='4' height='4' fill='#eee'/>"
    "</svg>"
)

# Sample network configuration
MOCK_NETWORKS = {
    "test-network": {
        "network": "test-network",
        "contractAddress": "ST1HCWN2BWA7HKY61AVPC0EKRB4TH84TMV26A4VRZ",
        "contractName": "masks",
        "stacksApi": "https://api.test.example.com/",
        "mintFee": 0,
    },
    "dotted-network": {
        "network": "dotted-network",
        "contractAddress": "SP3ZQXJPR493FCYNAVFX1YSK7EMT6JF909EZHVE9A.voidmasks-v2",
        "stacksApi": "https://api.example.com",
    },
}


def clarity_string_hex(text: str, wrap_ok: bool = True) -> str:
    """Hex of a serialized Clarity string-ascii, optionally inside (ok ...)."""
    raw = text.encode("ascii")
    body = bytes([0x0D]) + len(raw).to_bytes(4, "big") + raw
    if wrap_ok:
        body = bytes([0x07]) + body
    return "0x" + body.hex()


@pytest.fixture
def sample_svg():
    return SAMPLE_SVG


@pytest.fixture
def mock_networks():
    """Install MOCK_NETWORKS as the preset cache for the duration of a test."""
    NetworkConfig._networks_cache = MOCK_NETWORKS
    yield MOCK_NETWORKS
    NetworkConfig._networks_cache = None


@pytest.fixture(autouse=True)
def _reset_rate_limited_log():
    _rate_limited_log.reset()
    yield
    _rate_limited_log.reset()
