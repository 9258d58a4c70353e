"""Unit tests for payload token parsing."""

import itertools

import pytest

from ocr_payload.errors import (
    BitWidthExceededError,
    DuplicateKeyError,
    IncompletePayloadError,
    MalformedChunkError,
    MissingIndexError,
    ParseError,
    PayloadError,
    UnrecognizedKeyError,
)
from ocr_payload.pipeline.payload_parser import parse_payload, parse_payload_buffer

FULL_TOKEN = "p27l50n13x131y527w879h053"


def test_parse_full_token():
    box = parse_payload(FULL_TOKEN, word_bits=8, line_bits=8, page_bits=8)

    assert box.page_index == 27
    assert box.line_index == 50
    assert box.word_index == 13
    assert box.x == 0.131
    assert box.y == 0.527
    assert box.width == 0.879
    assert box.height == 0.053


def test_parse_geometry_only():
    box = parse_payload("x1y1w1h1", 0, 0, 0)

    assert (box.x, box.y, box.width, box.height) == (0.1, 0.1, 0.1, 0.1)
    assert box.page_index is None
    assert box.line_index is None
    assert box.word_index is None


def test_leading_zeros_are_fractional_places():
    box = parse_payload("x0001y05w5h000")

    assert box.x == 0.0001
    assert box.y == 0.05
    assert box.width == 0.5
    assert box.height == 0.0


def test_keys_are_case_insensitive():
    assert parse_payload("P27L50N13X131Y527W879H053", 8, 8, 8) == parse_payload(FULL_TOKEN, 8, 8, 8)


def test_chunk_order_is_irrelevant():
    """Every permutation of the seven chunks decodes identically."""
    chunks = ["p27", "l50", "n13", "x131", "y527", "w879", "h053"]
    expected = parse_payload(FULL_TOKEN, 8, 8, 8)

    for perm in itertools.permutations(chunks):
        assert parse_payload("".join(perm), 8, 8, 8) == expected


@pytest.mark.parametrize("token,missing", [
    ("x1y1w1", ("h",)),
    ("y1w1h1", ("x",)),
    ("x1w1h1", ("y",)),
    ("x1y1", ("w", "h")),
    ("", ("x", "y", "w", "h")),
])
def test_missing_geometry(token, missing):
    with pytest.raises(IncompletePayloadError) as excinfo:
        parse_payload(token, 0, 0, 0)

    assert excinfo.value.missing == missing
    assert excinfo.value.token == token


def test_missing_geometry_reported_regardless_of_bit_widths():
    with pytest.raises(IncompletePayloadError):
        parse_payload("p1l1n1x1y1w1", 8, 8, 8)


def test_bit_width_exceeded():
    with pytest.raises(BitWidthExceededError) as excinfo:
        parse_payload("p16x1y1w1h1", page_bits=4)

    error = excinfo.value
    assert error.value == 16
    assert error.bits == 4
    assert error.max_value == 15
    assert "0 to 15" in str(error)
    assert "p16x1y1w1h1" in str(error)


def test_bit_width_upper_bound_accepted():
    assert parse_payload("p15x1y1w1h1", page_bits=4).page_index == 15


def test_very_long_index_exceeds_bit_width():
    """Index values of any length are checked against the bit width."""
    digits = "9" * 5000

    with pytest.raises(BitWidthExceededError) as excinfo:
        parse_payload("p" + digits + "x1y1w1h1", page_bits=8)

    assert excinfo.value.value == digits
    assert excinfo.value.max_value == 255


def test_index_leading_zeros_ignored():
    token = "n" + "0" * 5000 + "7x1y1w1h1"

    assert parse_payload(token, word_bits=3).word_index == 7


@pytest.mark.parametrize("token,kwargs", [
    ("l8x1y1w1h1", {"line_bits": 3}),
    ("n2x1y1w1h1", {"word_bits": 1}),
])
def test_bit_width_applies_per_dimension(token, kwargs):
    with pytest.raises(BitWidthExceededError):
        parse_payload(token, **kwargs)


def test_zero_bit_width_only_accepts_zero():
    """A present index key under bit width 0 may only carry 0."""
    assert parse_payload("p0x1y1w1h1", page_bits=0).page_index == 0
    with pytest.raises(BitWidthExceededError):
        parse_payload("p1x1y1w1h1", page_bits=0)


def test_duplicate_key():
    with pytest.raises(DuplicateKeyError, match="duplicate key 'x'") as excinfo:
        parse_payload("x1x2y1w1h1")

    assert excinfo.value.key == "x"


def test_duplicate_key_is_case_insensitive():
    with pytest.raises(DuplicateKeyError):
        parse_payload("x1X2y1w1h1")


def test_unrecognized_key():
    with pytest.raises(UnrecognizedKeyError) as excinfo:
        parse_payload("z1x1y1w1h1")

    assert excinfo.value.key == "z"
    assert "z1x1y1w1h1" in str(excinfo.value)


@pytest.mark.parametrize("token", ["x1 y1w1h1", "x1-y1w1h1", "x1.5y1w1h1"])
def test_separators_are_unrecognized_keys(token):
    with pytest.raises(UnrecognizedKeyError):
        parse_payload(token)


@pytest.mark.parametrize("token", ["xy1w1h1", "x1y1w1h", "p", "5x1y1w1h1"])
def test_malformed_chunks(token):
    with pytest.raises(MalformedChunkError):
        parse_payload(token)


class TestMissingIndex:
    """Index keys are required exactly when their bit width is nonzero."""

    @pytest.mark.parametrize("kwargs,dimension", [
        ({"page_bits": 8}, "page"),
        ({"line_bits": 8}, "line"),
        ({"word_bits": 8}, "word"),
    ])
    def test_nonzero_bits_require_key(self, kwargs, dimension):
        with pytest.raises(MissingIndexError) as excinfo:
            parse_payload("x1y1w1h1", **kwargs)

        assert excinfo.value.dimension == dimension
        assert f"{dimension}_bits" in str(excinfo.value)

    def test_zero_bits_allow_absence(self):
        box = parse_payload("l3x1y1w1h1", word_bits=0, line_bits=4, page_bits=0)

        assert box.page_index is None
        assert box.line_index == 3
        assert box.word_index is None


def test_error_hierarchy():
    """Token errors are ParseErrors, PayloadErrors and ValueErrors."""
    for error_class in (
        BitWidthExceededError,
        DuplicateKeyError,
        IncompletePayloadError,
        MalformedChunkError,
        MissingIndexError,
        UnrecognizedKeyError,
    ):
        assert issubclass(error_class, ParseError)
        assert issubclass(error_class, PayloadError)
        assert issubclass(error_class, ValueError)


def test_negative_bit_width_rejected():
    with pytest.raises(ValueError, match="page_bits"):
        parse_payload("x1y1w1h1", page_bits=-1)


class TestParseBuffer:
    """Test decoding tokens embedded in a larger buffer."""

    def test_str_buffer_window(self):
        buffer = "kaiser|" + FULL_TOKEN + " trailing"

        box = parse_payload_buffer(buffer, 7, len(FULL_TOKEN), 8, 8, 8)

        assert box == parse_payload(FULL_TOKEN, 8, 8, 8)

    def test_bytes_buffer_window(self):
        buffer = b"##" + FULL_TOKEN.encode("ascii") + b"##"

        box = parse_payload_buffer(buffer, 2, len(FULL_TOKEN), 8, 8, 8)

        assert box.page_index == 27
        assert box.height == 0.053

    def test_bytearray_and_memoryview(self):
        data = bytearray(b"x5y5w5h5")

        assert parse_payload_buffer(data, 0, len(data)).x == 0.5
        assert parse_payload_buffer(memoryview(data), 0, len(data)).y == 0.5

    def test_error_reports_window_token(self):
        buffer = "aaaa" + "x1x1y1w1h1" + "bbbb"

        with pytest.raises(DuplicateKeyError) as excinfo:
            parse_payload_buffer(buffer, 4, 10)

        assert excinfo.value.token == "x1x1y1w1h1"

    @pytest.mark.parametrize("offset,length", [(-1, 3), (0, -1), (5, 10)])
    def test_invalid_window(self, offset, length):
        with pytest.raises(ValueError, match="Invalid payload window"):
            parse_payload_buffer("x1y1w1h1", offset, length)

    def test_non_ascii_bytes_rejected(self):
        with pytest.raises(ValueError):
            parse_payload_buffer("x1y1w1h1é".encode("utf-8"), 0, 10)
