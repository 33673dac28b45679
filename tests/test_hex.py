"""
Tests for the Hex Codec

Covers encoding, variable and fixed-size decoding, the error taxonomy and
the lazy HexIterator.
"""

import io

import pytest

from sha256t import hex as hexcodec
from sha256t.errors import HashError, InvalidChar, InvalidLength, OddLengthString
from sha256t.hex import FIXED_SIZES, HexIterator


EXPECTED = "0123456789abcdef"
EXPECTED_UP = "0123456789ABCDEF"
EXPECTED_BYTES = bytes([0x01, 0x23, 0x45, 0x67, 0x89, 0xab, 0xcd, 0xef])

ODD_LEN = "0123456789abcdef0"
BAD_CHAR_1 = "Z123456789abcdef"
BAD_CHAR_2 = "012Y456789abcdeb"
BAD_CHAR_3 = "«23456789abcdef"


# =============================================================================
# ENCODING
# =============================================================================

class TestEncode:
    """Encoding is lowercase, two characters per byte, input order."""

    def test_encode(self):
        assert hexcodec.encode(EXPECTED_BYTES) == EXPECTED

    def test_encode_empty(self):
        assert hexcodec.encode(b"") == ""

    def test_encode_reversed(self):
        assert hexcodec.encode_reversed(EXPECTED_BYTES) == "efcdab8967452301"

    def test_encode_bytearray(self):
        assert hexcodec.encode(bytearray(b"\x00\xff")) == "00ff"

    def test_format_hex(self):
        out = io.StringIO()
        hexcodec.format_hex(EXPECTED_BYTES, out)
        assert out.getvalue() == EXPECTED

    def test_format_hex_reverse(self):
        out = io.StringIO()
        hexcodec.format_hex_reverse(EXPECTED_BYTES, out)
        assert out.getvalue() == hexcodec.encode_reversed(EXPECTED_BYTES)


# =============================================================================
# DECODING
# =============================================================================

class TestDecode:
    """Round trip and case handling."""

    def test_lowercase_roundtrip(self):
        parsed = hexcodec.decode(EXPECTED)
        assert parsed == EXPECTED_BYTES
        assert hexcodec.encode(parsed) == EXPECTED

    def test_uppercase_roundtrip(self):
        parsed = hexcodec.decode(EXPECTED_UP)
        assert parsed == EXPECTED_BYTES
        assert hexcodec.encode(parsed) == EXPECTED

    def test_mixed_case(self):
        assert hexcodec.decode("aBcD") == b"\xab\xcd"

    def test_empty(self):
        assert hexcodec.decode("") == b""

    def test_fixed_uppercase(self):
        parsed = hexcodec.decode_fixed(EXPECTED_UP, 8)
        assert parsed == EXPECTED_BYTES
        assert hexcodec.encode(parsed) == EXPECTED

    def test_result_is_bytes(self):
        assert isinstance(hexcodec.decode("00"), bytes)
        assert isinstance(hexcodec.decode_fixed("00", 1), bytes)


class TestDecodeErrors:
    """Each malformed input maps to exactly one error kind."""

    def test_odd_length(self):
        with pytest.raises(OddLengthString) as exc:
            hexcodec.decode(ODD_LEN)
        assert exc.value == OddLengthString(17)
        assert exc.value.length == 17

    @pytest.mark.parametrize("size", [4, 8])
    def test_odd_length_fixed(self, size):
        """Odd length wins over the size mismatch."""
        with pytest.raises(OddLengthString) as exc:
            hexcodec.decode_fixed(ODD_LEN, size)
        assert exc.value == OddLengthString(17)

    def test_invalid_char_first(self):
        with pytest.raises(InvalidChar) as exc:
            hexcodec.decode(BAD_CHAR_1)
        assert exc.value == InvalidChar('Z')

    def test_invalid_char_low_digit(self):
        with pytest.raises(InvalidChar) as exc:
            hexcodec.decode(BAD_CHAR_2)
        assert exc.value.char == 'Y'

    def test_invalid_char_non_ascii(self):
        """A multi-byte character is reported whole, not as an odd length."""
        with pytest.raises(InvalidChar) as exc:
            hexcodec.decode(BAD_CHAR_3)
        assert exc.value == InvalidChar('«')

    def test_both_digits_invalid_reports_high(self):
        with pytest.raises(InvalidChar) as exc:
            hexcodec.decode("00ZY")
        assert exc.value.char == 'Z'

    def test_lone_surrogate(self):
        """Surrogates from escaped input are invalid characters, not encode errors."""
        with pytest.raises(InvalidChar) as exc:
            hexcodec.decode("\ud800" + "0" * 15)
        assert exc.value.char == "\ud800"
        with pytest.raises(HashError):
            hexcodec.decode_fixed("\udcff" + "0" * 13, 8)

    def test_non_ascii_digits_rejected(self):
        """Unicode digits other than ASCII are not hex digits."""
        with pytest.raises(InvalidChar) as exc:
            hexcodec.decode("００")
        assert exc.value.char == '０'

    def test_prefix_rejected(self):
        with pytest.raises(InvalidChar) as exc:
            hexcodec.decode("0x00")
        assert exc.value.char == 'x'

    def test_fixed_wrong_length(self):
        with pytest.raises(InvalidLength) as exc:
            hexcodec.decode_fixed(EXPECTED, 4)
        assert exc.value == InvalidLength(8, 16)
        assert exc.value.expected == 8
        assert exc.value.actual == 16

    def test_fixed_invalid_char(self):
        with pytest.raises(InvalidChar):
            hexcodec.decode_fixed(BAD_CHAR_1, 8)

    def test_errors_are_value_errors(self):
        for text in (ODD_LEN, BAD_CHAR_1):
            with pytest.raises(ValueError):
                hexcodec.decode(text)
            with pytest.raises(HashError):
                hexcodec.decode(text)


class TestErrorModel:
    """Errors carry enough context for a precise message."""

    def test_messages(self):
        assert str(OddLengthString(17)) == "odd hex string length 17"
        assert str(InvalidChar('Z')) == "invalid hex character 'Z'"
        assert str(InvalidLength(32, 31)) == "expected 32 bytes, got 31"
        assert str(InvalidLength(64, 62, "hex characters")) == "expected 64 hex characters, got 62"

    def test_equality(self):
        assert OddLengthString(3) == OddLengthString(3)
        assert OddLengthString(3) != OddLengthString(5)
        assert InvalidLength(64, 62, "hex characters") == InvalidLength(64, 62)
        assert InvalidChar('a') != OddLengthString(1)

    def test_hashable(self):
        assert len({InvalidChar('Z'), InvalidChar('Z'), InvalidChar('Y')}) == 2

    def test_repr(self):
        assert repr(InvalidLength(32, 33)) == "InvalidLength(32, 33)"


# =============================================================================
# FIXED SIZES
# =============================================================================

class TestFixedSizes:
    """decode_fixed works for every common digest/key/signature size."""

    @pytest.mark.parametrize("size", FIXED_SIZES)
    def test_exact(self, size):
        text = "ab" * size
        assert hexcodec.decode_fixed(text, size) == b"\xab" * size

    @pytest.mark.parametrize("size", FIXED_SIZES)
    def test_short(self, size):
        text = "ab" * (size - 1)
        with pytest.raises(InvalidLength) as exc:
            hexcodec.decode_fixed(text, size)
        assert exc.value == InvalidLength(2 * size, 2 * size - 2)

    @pytest.mark.parametrize("size", FIXED_SIZES)
    def test_long_odd(self, size):
        text = "ab" * size + "a"
        with pytest.raises(OddLengthString):
            hexcodec.decode_fixed(text, size)

    def test_arbitrary_size(self):
        assert hexcodec.decode_fixed("00" * 3, 3) == b"\x00\x00\x00"

    def test_size_set(self):
        assert FIXED_SIZES == (
            2, 4, 6, 8, 10, 12, 14, 16, 20, 24, 28, 32, 33, 64, 65, 128, 256, 384, 512
        )


# =============================================================================
# LAZY ITERATION
# =============================================================================

class TestHexIterator:
    """HexIterator decodes pair by pair and restarts on each iter()."""

    def test_yields_bytes(self):
        assert list(HexIterator("0aff")) == [10, 255]

    def test_len(self):
        assert len(HexIterator(EXPECTED)) == 8
        assert len(HexIterator("")) == 0

    def test_error_after_valid_prefix(self):
        it = iter(HexIterator("00ffZZ"))
        assert next(it) == 0x00
        assert next(it) == 0xff
        with pytest.raises(InvalidChar):
            next(it)

    def test_len_odd_length(self):
        with pytest.raises(OddLengthString) as exc:
            len(HexIterator("abc"))
        assert exc.value.length == 3

    def test_odd_length_on_first_step(self):
        it = iter(HexIterator("abc"))
        with pytest.raises(OddLengthString) as exc:
            next(it)
        assert exc.value.length == 3

    def test_restartable(self):
        decoder = HexIterator("0102")
        assert list(decoder) == [1, 2]
        assert list(decoder) == [1, 2]

    def test_stops_at_first_error(self):
        """Nothing after the bad pair is looked at."""
        seen = []
        with pytest.raises(InvalidChar) as exc:
            for byte in HexIterator("0102gg««"):
                seen.append(byte)
        assert seen == [1, 2]
        assert exc.value.char == 'g'
