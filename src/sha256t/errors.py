"""
Error Taxonomy for sha256t

Closed set of failures shared by the hex codec and the hash types:

- OddLengthString: hex text has an odd length
- InvalidChar: a character is not a hex digit
- InvalidLength: a fixed-length decode or construction got the wrong length

All three are ValueErrors: they describe bad external data, never a bug.
Misusing an accumulator is a bug and raises EngineConsumedError instead.
"""

from __future__ import annotations
from typing import Tuple


class HashError(ValueError):
    """Base class for codec and hash construction failures."""

    def _key(self) -> Tuple:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self).__name__,) + self._key())


class OddLengthString(HashError):
    """Hex text whose length is odd."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"odd hex string length {length}")

    def _key(self) -> Tuple:
        return (self.length,)

    def __repr__(self) -> str:
        return f"OddLengthString({self.length})"


class InvalidChar(HashError):
    """A character that is not a hexadecimal digit."""

    def __init__(self, char: str):
        self.char = char
        super().__init__(f"invalid hex character {char!r}")

    def _key(self) -> Tuple:
        return (self.char,)

    def __repr__(self) -> str:
        return f"InvalidChar({self.char!r})"


class InvalidLength(HashError):
    """
    Length mismatch against a fixed expected length.

    `unit` only shapes the message; equality looks at the lengths alone.
    """

    def __init__(self, expected: int, actual: int, unit: str = "bytes"):
        self.expected = expected
        self.actual = actual
        self.unit = unit
        super().__init__(f"expected {expected} {unit}, got {actual}")

    def _key(self) -> Tuple:
        return (self.expected, self.actual)

    def __repr__(self) -> str:
        return f"InvalidLength({self.expected}, {self.actual})"


class EngineConsumedError(RuntimeError):
    """A hash engine was used after it had been finalized."""
