"""
sha256t: Tagged SHA-256 Hashes

A tagged hash absorbs a domain-separation prefix before any caller data,
so the same payload hashed under two tags gives unrelated digests.

TaggedHash[T] = SHA256(prefix(T) ‖ data), 32 bytes, displayed byte-reversed

Usage:
    from sha256t import NamedTag, TaggedHash

    class VoteTag(NamedTag):
        NAME = "example/vote"

    class VoteHash(TaggedHash[VoteTag]):
        pass

    h = VoteHash.hash(b"ballot")
    h.to_hex()                      # 64 hex chars, reversed byte order
    VoteHash.from_hex(h.to_hex())   # == h

    # Incremental hashing
    engine = VoteHash.engine()
    engine.input(b"bal").input(b"lot")
    VoteHash.from_engine(engine)    # == h

    # Plain hex codec
    from sha256t import hex
    hex.decode("0123abcd")          # b'\\x01#\\xab\\xcd'
"""

import logging

# Errors
from .errors import (
    HashError,
    OddLengthString,
    InvalidChar,
    InvalidLength,
    EngineConsumedError,
)

# Hex codec
from . import hex
from .hex import HexIterator, FIXED_SIZES

# Engine and tags
from .engine import HashEngine
from .tags import Tag, SeededTag, NamedTag, make_tag

# Hash type
from .hash import TaggedHash, hash_type

# Serialization
from .serde import serialize, deserialize

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Errors
    "HashError",
    "OddLengthString",
    "InvalidChar",
    "InvalidLength",
    "EngineConsumedError",
    # Hex
    "hex",
    "HexIterator",
    "FIXED_SIZES",
    # Engine and tags
    "HashEngine",
    "Tag",
    "SeededTag",
    "NamedTag",
    "make_tag",
    # Hash type
    "TaggedHash",
    "hash_type",
    # Serialization
    "serialize",
    "deserialize",
]
