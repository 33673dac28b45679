"""
Tagged SHA-256 Hash Type

TaggedHash[T] is a 32-byte digest produced under tag T. Declare one hash
class per tag:

    class TapLeafHash(TaggedHash[TapLeafTag]):
        pass

    h = TapLeafHash.hash(b"payload")

Storage order and display order are separate conventions:

- storage: the digest bytes as finalized; used by from_slice(), bytes(h),
  indexing and compact serialization
- display: the same bytes reversed; used by to_hex(), from_hex() and str()

Two hashes are equal iff they have the same class and the same bytes.
Hashes of different tags are different classes, so they never compare
equal and cannot be ordered against each other.
"""

from __future__ import annotations
import types
from dataclasses import dataclass
from typing import (
    Any, ClassVar, Dict, Generic, Iterator, Optional, Type, TypeVar, Union,
    get_args, get_origin,
)

from . import hex as hexcodec
from .engine import HashEngine
from .errors import InvalidLength
from .tags import Tag

T = TypeVar('T', bound=Tag)
H = TypeVar('H', bound='TaggedHash')


@dataclass(frozen=True, order=True)
class TaggedHash(Generic[T]):
    """Output of a tagged SHA-256 hash."""

    inner: bytes

    LEN: ClassVar[int] = 32
    # If this changes, serde.serialize() still has to emit to_hex()
    DISPLAY_BACKWARD: ClassVar[bool] = True
    tag: ClassVar[Optional[Type[Tag]]] = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        for base in cls.__dict__.get('__orig_bases__', ()):
            if get_origin(base) is TaggedHash:
                (arg,) = get_args(base)
                if isinstance(arg, type) and issubclass(arg, Tag):
                    cls.tag = arg
                    _HASH_TYPES.setdefault(arg, cls)

    def __post_init__(self):
        if not isinstance(self.inner, bytes):
            object.__setattr__(self, 'inner', bytes(self.inner))
        if len(self.inner) != self.LEN:
            raise InvalidLength(self.LEN, len(self.inner))

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def engine(cls) -> HashEngine:
        """Fresh engine seeded by this hash type's tag."""
        if cls.tag is None:
            raise TypeError(f"{cls.__name__} is not bound to a tag")
        return cls.tag.engine()

    @classmethod
    def from_engine(cls: Type[H], engine: HashEngine) -> H:
        """Finalize `engine` (consuming it) and wrap the digest."""
        digest = engine.finalize()
        if len(digest) != cls.LEN:
            raise RuntimeError(
                f"Tag engine produced {len(digest)}-byte digest, expected {cls.LEN}"
            )
        return cls(digest)

    @classmethod
    def hash(cls: Type[H], data: bytes) -> H:
        """Hash `data` under this type's tag."""
        return cls.from_engine(cls.engine().input(data))

    @classmethod
    def from_slice(cls: Type[H], data: bytes) -> H:
        """Wrap exactly 32 bytes, kept in the given order."""
        if len(data) != cls.LEN:
            raise InvalidLength(cls.LEN, len(data))
        return cls(bytes(data))

    @classmethod
    def from_inner(cls: Type[H], inner: bytes) -> H:
        return cls(inner)

    @classmethod
    def all_zeros(cls: Type[H]) -> H:
        return cls(bytes(cls.LEN))

    def into_inner(self) -> bytes:
        return self.inner

    # -------------------------------------------------------------------------
    # Hex
    # -------------------------------------------------------------------------

    @classmethod
    def from_hex(cls: Type[H], text: str) -> H:
        """Parse display-order hex (64 characters)."""
        length = hexcodec.text_length(text)
        if length != 2 * cls.LEN:
            raise InvalidLength(2 * cls.LEN, length, "hex characters")
        data = hexcodec.decode(text)
        if cls.DISPLAY_BACKWARD:
            data = data[::-1]
        return cls.from_slice(data)

    def to_hex(self) -> str:
        """Display-order hex (64 lowercase characters)."""
        if self.DISPLAY_BACKWARD:
            return hexcodec.encode_reversed(self.inner)
        return hexcodec.encode(self.inner)

    def __str__(self) -> str:
        return self.to_hex()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_hex()})"

    def __format__(self, spec: str) -> str:
        if spec in ('', 'x'):
            return self.to_hex()
        return format(self.to_hex(), spec)

    # -------------------------------------------------------------------------
    # Byte view (storage order)
    # -------------------------------------------------------------------------

    def __bytes__(self) -> bytes:
        return self.inner

    def __len__(self) -> int:
        return self.LEN

    def __getitem__(self, index: Union[int, slice]) -> Union[int, bytes]:
        return self.inner[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self.inner)

    # -------------------------------------------------------------------------
    # pydantic
    # -------------------------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: Any) -> Any:
        from .serde import pydantic_core_schema
        return pydantic_core_schema(cls)

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: Any, handler: Any) -> Dict[str, Any]:
        return {
            'type': 'string',
            'pattern': f'^[0-9a-fA-F]{{{2 * cls.LEN}}}$',
            'description': f'{cls.__name__}, hex in display (reversed) byte order',
        }


_HASH_TYPES: Dict[Type[Tag], Type[TaggedHash]] = {}


def hash_type(tag: Type[Tag]) -> Type[TaggedHash]:
    """
    Hash class bound to `tag`.

    Returns the first class declared as TaggedHash[tag], creating one if
    there is none yet.
    """
    cls = _HASH_TYPES.get(tag)
    if cls is None:
        name = tag.__name__[:-3] if tag.__name__.endswith('Tag') else tag.__name__
        cls = types.new_class(f"{name}Hash", (TaggedHash[tag],))
        cls.__module__ = tag.__module__
    return cls
