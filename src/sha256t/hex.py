"""
Hex Codec

Bidirectional transform between raw bytes and ASCII hex text.

Encoding always emits lowercase, two characters per byte, no prefix.
Decoding accepts either case and fails on the first problem it meets:

- OddLengthString when the text length is odd (checked before anything else)
- InvalidChar for the first non-hex character, high digit before low digit
- InvalidLength when a fixed-size decode gets the wrong number of characters

Lengths are counted in UTF-8 bytes. For hex text that is the character
count; for anything else it keeps a stray non-ASCII character from being
misreported as an odd length instead of as the invalid character it is.
"""

from __future__ import annotations
from typing import Dict, Iterator, TextIO

from .errors import InvalidChar, InvalidLength, OddLengthString


# Byte sizes that show up as digests, keys and signatures.
# decode_fixed() accepts any size; these are the ones we test against.
FIXED_SIZES = (2, 4, 6, 8, 10, 12, 14, 16, 20, 24, 28, 32, 33, 64, 65, 128, 256, 384, 512)

_DIGITS: Dict[str, int] = {c: int(c, 16) for c in "0123456789abcdefABCDEF"}


def text_length(text: str) -> int:
    """
    Length of `text` as the codec counts it (UTF-8 bytes).

    Lone surrogates count as the three bytes they would take, so they come
    out of decoding as InvalidChar like any other non-hex character.
    """
    if text.isascii():
        return len(text)
    return len(text.encode("utf-8", "surrogatepass"))


# =============================================================================
# ENCODING
# =============================================================================

def encode(data: bytes) -> str:
    """Lowercase hex of `data`, in input order."""
    return bytes(data).hex()


def encode_reversed(data: bytes) -> str:
    """Lowercase hex of `data` with the byte order reversed."""
    return bytes(data)[::-1].hex()


def format_hex(data: bytes, out: TextIO) -> None:
    """Write the hex encoding of `data` into a text writer."""
    for byte in data:
        out.write(f"{byte:02x}")


def format_hex_reverse(data: bytes, out: TextIO) -> None:
    """Write the hex encoding of `data`, last byte first, into a text writer."""
    for byte in reversed(data):
        out.write(f"{byte:02x}")


# =============================================================================
# DECODING
# =============================================================================

class HexIterator:
    """
    Lazy decoder over a hex string.

    Iterating yields one byte per pair of characters, left to right, and
    raises at the first bad pair without touching anything after it.
    Every call to iter() starts again from the beginning of the text.

    Example:
        >>> list(HexIterator("0aff"))
        [10, 255]
    """

    __slots__ = ("text",)

    def __init__(self, text: str):
        self.text = text

    def __iter__(self) -> Iterator[int]:
        text = self.text
        length = text_length(text)
        if length % 2 == 1:
            raise OddLengthString(length)

        chars = iter(text)
        for hi_char in chars:
            hi = _DIGITS.get(hi_char)
            if hi is None:
                raise InvalidChar(hi_char)
            lo_char = next(chars, None)
            if lo_char is None:
                # Only reachable when multi-byte text made the length even
                raise OddLengthString(length)
            lo = _DIGITS.get(lo_char)
            if lo is None:
                raise InvalidChar(lo_char)
            yield (hi << 4) + lo

    def __len__(self) -> int:
        """Number of bytes a successful decode produces; odd text raises."""
        length = text_length(self.text)
        if length % 2 == 1:
            raise OddLengthString(length)
        return length // 2

    def __repr__(self) -> str:
        return f"HexIterator({self.text!r})"


def decode(text: str) -> bytes:
    """Decode hex text of any even length."""
    length = text_length(text)
    if length % 2 == 1:
        raise OddLengthString(length)
    return bytes(HexIterator(text))


def decode_fixed(text: str, size: int) -> bytes:
    """
    Decode hex text that must describe exactly `size` bytes.

    An odd length is reported as such even when it is also the wrong length.
    """
    length = text_length(text)
    if length != 2 * size:
        if length % 2 == 1:
            raise OddLengthString(length)
        raise InvalidLength(2 * size, length, "hex characters")
    return bytes(HexIterator(text))
