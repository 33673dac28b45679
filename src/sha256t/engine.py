"""
SHA-256 Hash Engine

A consumable accumulator: absorb bytes with input(), then finalize()
exactly once. The compression function itself is hashlib's.
"""

from __future__ import annotations
import hashlib
from typing import Any, Optional

from .errors import EngineConsumedError


class HashEngine:
    """
    Streaming SHA-256 accumulator.

    Example:
        >>> engine = HashEngine()
        >>> engine.input(b"hello ").input(b"world")
        >>> digest = engine.finalize()

    Once finalized the engine is spent; further use raises
    EngineConsumedError.
    """

    BLOCK_SIZE = 64
    DIGEST_SIZE = 32

    __slots__ = ("_state", "_length", "_finalized")

    def __init__(self, state: Optional[Any] = None, length: int = 0):
        # `state` is a hashlib sha256 object; `length` counts bytes it already holds
        self._state = state if state is not None else hashlib.sha256()
        self._length = length
        self._finalized = False

    def input(self, data: bytes) -> 'HashEngine':
        """Absorb data."""
        if self._finalized:
            raise EngineConsumedError("Cannot absorb into finalized engine")
        self._state.update(data)
        self._length += len(data)
        return self

    absorb = input

    def finalize(self) -> bytes:
        """Consume the engine and return the digest."""
        if self._finalized:
            raise EngineConsumedError("Engine already finalized")
        self._finalized = True
        digest = self._state.digest()
        self._state = None
        return digest

    @property
    def n_bytes_hashed(self) -> int:
        """Bytes absorbed so far, seed included."""
        return self._length

    @property
    def finalized(self) -> bool:
        return self._finalized

    def __repr__(self) -> str:
        status = "finalized" if self._finalized else f"{self._length} bytes"
        return f"HashEngine({status})"
