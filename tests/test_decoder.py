"""
Tests for the contract reply decoder.
"""
import logging

import pytest

from voidmasks_sdk.contract import (
    ContractReply,
    ReplyForm,
    decode,
    decode_owner,
    decode_svg,
    decode_token_uri,
    decode_uint,
    parse_ok_uint,
    serialize_uint,
    unescape,
)
from voidmasks_sdk.contract.decoder import hex_to_bytes, is_markup
from voidmasks_sdk.exceptions import (
    ClarityDecodeError,
    ContractCallRejectedError,
    DecodeError,
    DecodeFailure,
    InvalidPayloadError,
    MalformedHexError,
    NoPayloadFoundError,
    UnrecognizedEnvelopeError,
)
from conftest import SAMPLE_SVG, clarity_string_hex


class TestEscapes:
    """Test the fixed escape table."""

    @pytest.mark.parametrize("raw, expected", [
        ("%23", "#"),
        ("%27", "'"),
        ("%22", '"'),
        ("%3C", "<"),
        ("%3E", ">"),
        ("%20", " "),
        ("%2F", "/"),
        ("%3D", "="),
        ("+", " "),
    ])
    def test_table(self, raw, expected):
        assert unescape(raw) == expected

    def test_mixed(self):
        assert unescape("fill=%27%23eee%27") == "fill='#eee'"

    def test_unlisted_sequences_untouched(self):
        assert unescape("%41%2B%3c") == "%41%2B%3c"

    def test_single_pass(self):
        # "%25" is not in the table, so "%2523" must not become "%#"
        assert unescape("%2523") == "%2523"


class TestSanityCheck:

    def test_markup(self):
        assert is_markup(SAMPLE_SVG)

    @pytest.mark.parametrize("text", ["", "hello", "<svg>", "</svg>", "<html></html>"])
    def test_not_markup(self, text):
        assert not is_markup(text)


class TestHexPath:
    """Test decoding of 0x-prefixed replies."""

    def test_marker_seek_skips_leading_bytes(self):
        reply = ContractReply(result=clarity_string_hex(SAMPLE_SVG))
        assert reply.form == ReplyForm.HEX
        assert decode(reply) == SAMPLE_SVG

    def test_marker_seek_recovers_from_first_marker(self):
        data = b"\x07\x0d\x00\x00\x01\x00junk" + SAMPLE_SVG.encode()
        assert decode("0x" + data.hex()) == SAMPLE_SVG

    def test_zero_bytes_are_padding(self):
        padded = b"\x00".join(bytes([c]) for c in SAMPLE_SVG.encode())
        assert decode("0x" + (b"\x07" + padded + b"\x00\x00").hex()) == SAMPLE_SVG

    def test_escapes_applied(self):
        escaped = SAMPLE_SVG.replace("#", "%23").replace("'", "%27")
        assert decode(clarity_string_hex(escaped)) == SAMPLE_SVG

    def test_direct_charcode_with_quotes(self):
        # Escaped markers defeat marker seek; direct decode unwraps the quotes
        escaped = '"%3Csvg%3E%3C/svg%3E"'
        assert decode("0x" + escaped.encode().hex()) == "<svg></svg>"

    def test_uppercase_hex_digits(self):
        assert decode("0x" + SAMPLE_SVG.encode().hex().upper()) == SAMPLE_SVG

    def test_plain_text_is_invalid_payload(self):
        with pytest.raises(InvalidPayloadError) as exc_info:
            decode("0x" + b"hello world".hex())
        assert exc_info.value.reason == DecodeFailure.INVALID_PAYLOAD

    def test_truncated_markup_is_invalid_payload(self):
        with pytest.raises(InvalidPayloadError):
            decode("0x" + b"\x07<svg><rect/>".hex())

    @pytest.mark.parametrize("value", ["0x", "0x0000", "0x000000"])
    def test_empty_is_no_payload(self, value):
        with pytest.raises(NoPayloadFoundError):
            decode(value)

    def test_odd_length(self):
        with pytest.raises(MalformedHexError) as exc_info:
            decode("0x3c7")
        assert exc_info.value.reason == DecodeFailure.MALFORMED_HEX

    @pytest.mark.parametrize("value", ["0x3cZZ", "0x3c 73", "0x3c-7", "0x3c7376a\n"])
    def test_non_hex(self, value):
        with pytest.raises(MalformedHexError):
            decode(value)

    def test_hex_to_bytes(self):
        assert hex_to_bytes("0x3c73") == b"<s"
        assert hex_to_bytes("3c73") == b"<s"


class TestTextPath:
    """Test decoding of textual Clarity replies."""

    def test_ok_uint(self):
        assert decode("(ok u4200)") == 4200

    def test_ok_uint_zero_is_not_missing(self):
        assert decode("(ok u0)") == 0

    def test_quoted_svg(self):
        reply = ContractReply(result=f'(ok "{SAMPLE_SVG}")')
        assert reply.form == ReplyForm.TEXT
        assert decode(reply) == SAMPLE_SVG

    def test_some_quoted_svg(self):
        assert decode(f'(some "{SAMPLE_SVG}")') == SAMPLE_SVG

    def test_escape_table_on_text(self):
        assert decode('(ok "%3Csvg%3E%23%27%3C%41</svg>")') == "<svg>#'<%41</svg>"

    def test_backslash_escaped_quotes(self):
        text = r'(ok "<svg xmlns=\"http://www.w3.org/2000/svg\"></svg>")'
        assert decode(text) == '<svg xmlns="http://www.w3.org/2000/svg"></svg>'

    def test_first_quoted_span_only(self):
        assert decode('(ok "<svg></svg>") "trailing"') == "<svg></svg>"

    def test_quoted_non_markup_is_invalid(self):
        with pytest.raises(InvalidPayloadError):
            decode('(ok "data:application/json,{}")')

    def test_quoted_non_markup_without_check(self):
        assert decode('(ok "a+b")', require_markup=False) == "a b"

    def test_none(self):
        with pytest.raises(NoPayloadFoundError):
            decode("(ok none)")

    def test_err(self):
        with pytest.raises(ContractCallRejectedError):
            decode("(err u404)")

    @pytest.mark.parametrize("text", ["", "(ok true)", "garbage", "(ok u)"])
    def test_unrecognized(self, text):
        with pytest.raises(UnrecognizedEnvelopeError) as exc_info:
            decode(text)
        assert exc_info.value.reason == DecodeFailure.UNRECOGNIZED_ENVELOPE


class TestTypedPath:
    """Test decoding of typed-value envelopes."""

    def test_nested_string(self):
        envelope = {"type": "ok", "value": {"type": "string-ascii", "value": SAMPLE_SVG}}
        reply = ContractReply(result=envelope)
        assert reply.form == ReplyForm.TYPED
        assert decode(reply) == SAMPLE_SVG

    def test_integer(self):
        assert decode({"result": {"type": "ok", "value": {"type": "uint", "value": 7}}}) == 7

    def test_integer_as_digit_string(self):
        assert decode({"result": {"type": "uint", "value": "4200"}}) == 4200

    def test_digit_string_without_integer_tag_is_text(self):
        with pytest.raises(InvalidPayloadError):
            decode({"result": {"type": "string-ascii", "value": "4200"}})

    def test_escapes_applied(self):
        envelope = {"value": {"value": "%3Csvg%3E%3C/svg%3E"}}
        assert decode({"result": envelope}) == "<svg></svg>"

    def test_none_leaf(self):
        with pytest.raises(NoPayloadFoundError):
            decode({"result": {"type": "none", "value": None}})

    def test_err_envelope(self):
        with pytest.raises(ContractCallRejectedError):
            decode({"result": {"type": "err", "value": {"type": "uint", "value": 1}}})

    @pytest.mark.parametrize("leaf", [True, [1, 2], -3, 1.5])
    def test_unsupported_leaf(self, leaf):
        with pytest.raises(UnrecognizedEnvelopeError):
            decode({"result": {"type": "x", "value": leaf}})


class TestEnvelope:
    """Test reply-level handling."""

    def test_call_rejected(self):
        with pytest.raises(ContractCallRejectedError) as exc_info:
            decode({"okay": False, "cause": "NoSuchContract"})
        assert exc_info.value.cause == "NoSuchContract"
        assert exc_info.value.reason == DecodeFailure.CALL_REJECTED

    @pytest.mark.parametrize("raw", [{"result": None}, {"result": 12}, {"result": {"type": "uint"}}, 42])
    def test_unrecognized_payloads(self, raw):
        with pytest.raises(UnrecognizedEnvelopeError):
            decode(raw)

    def test_errors_share_base(self):
        with pytest.raises(DecodeError):
            decode("0x3")

    def test_extra_fields_ignored(self):
        reply = ContractReply.coerce({"okay": True, "result": "(ok u1)", "extra": 1})
        assert decode(reply) == 1


class TestConvenience:
    """Test caller-level wrappers."""

    def test_decode_uint_text(self):
        assert decode_uint("(ok u12)") == 12

    def test_decode_uint_hex(self):
        assert decode_uint("0x07" + serialize_uint(4200)[2:]) == 4200

    def test_decode_uint_hex_zero(self):
        assert decode_uint("0x07" + serialize_uint(0)[2:]) == 0

    def test_decode_uint_typed(self):
        assert decode_uint({"result": {"type": "uint", "value": "9"}}) == 9

    def test_decode_uint_rejects_strings(self):
        with pytest.raises(UnrecognizedEnvelopeError):
            decode_uint(clarity_string_hex("hello"))

    def test_decode_uint_rejects_quoted_text(self):
        with pytest.raises(UnrecognizedEnvelopeError):
            decode_uint('(ok "12")')

    def test_decode_uint_err(self):
        with pytest.raises(ContractCallRejectedError):
            decode_uint("(err u1)")

    def test_parse_ok_uint_defaults_to_zero(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert parse_ok_uint("garbage") == 0
        assert "defaulting to 0" in caplog.text

    def test_decode_uint_trailing_newline(self):
        with pytest.raises(MalformedHexError):
            decode_uint("0x070\n")

    def test_decode_uint_deep_nesting(self):
        with pytest.raises(ClarityDecodeError):
            decode_uint("0x" + "0a" * 1500 + "09")

    def test_parse_ok_uint_deep_nesting(self):
        assert parse_ok_uint("0x" + "0a" * 1500 + "09") == 0

    def test_parse_ok_uint_success(self):
        assert parse_ok_uint({"okay": True, "result": "(ok u33)"}) == 33

    def test_decode_svg(self):
        assert decode_svg(clarity_string_hex(SAMPLE_SVG)) == SAMPLE_SVG

    def test_decode_svg_rejects_integer(self):
        with pytest.raises(InvalidPayloadError):
            decode_svg("(ok u5)")

    def test_token_uri_text(self):
        assert decode_token_uri('(ok (some "data:application/json,{}"))') == "data:application/json,{}"

    def test_token_uri_hex(self):
        raw = b"https://voidmasks.vercel.app/api/metadata/1"
        hex_value = "0x070a0d" + len(raw).to_bytes(4, "big").hex() + raw.hex()
        assert decode_token_uri(hex_value) == raw.decode()

    def test_token_uri_none(self):
        assert decode_token_uri("(ok none)") is None
        assert decode_token_uri("0x0709") is None

    def test_owner_text(self):
        text = "(ok (some 'ST1HCWN2BWA7HKY61AVPC0EKRB4TH84TMV26A4VRZ))"
        assert decode_owner(text) == "ST1HCWN2BWA7HKY61AVPC0EKRB4TH84TMV26A4VRZ"

    def test_owner_hex(self):
        hex_value = "0x070a0516" + bytes(20).hex()
        assert decode_owner(hex_value) == "SP000000000000000000002Q6VF78"

    def test_owner_none(self):
        assert decode_owner("(ok none)") is None
        assert decode_owner("0x0709") is None

    def test_owner_unrecognized(self):
        with pytest.raises(UnrecognizedEnvelopeError):
            decode_owner("(ok u5)")
