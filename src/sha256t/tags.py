"""
Hash Tags (Domain Separation)

A tag is a class, never an instance. Its only job is to hand out a hash
engine that has already absorbed the tag's domain-separation prefix, so
that hashing one payload under two tags gives unrelated digests.

Seeded engines are copied from a template built once when the tag class
is created. Templates are never written to after that.
"""

from __future__ import annotations
import hashlib
import logging
import re
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Optional, Type

from .engine import HashEngine

logger = logging.getLogger(__name__)


class Tag(ABC):
    """Capability that produces a pre-seeded hash engine."""

    @classmethod
    @abstractmethod
    def engine(cls) -> HashEngine:
        """Return a fresh engine seeded with this tag's prefix."""
        raise TypeError(f"{cls.__name__} does not provide an engine")


class SeededTag(Tag):
    """
    Tag seeded with a fixed byte prefix.

    Subclasses set PREFIX, or override prefix() to derive it. Classes whose
    prefix() returns None are treated as abstract and get no template.
    """

    PREFIX: ClassVar[Optional[bytes]] = None

    _template: ClassVar[Optional[Any]] = None
    _seed_length: ClassVar[int] = 0

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        seed = cls.prefix()
        if seed is None:
            cls._template = None
            return
        cls._template = hashlib.sha256(seed)
        cls._seed_length = len(seed)
        logger.debug("Seeded tag %s with %d-byte prefix", cls.__name__, len(seed))

    @classmethod
    def prefix(cls) -> Optional[bytes]:
        """Domain-separation bytes absorbed before any caller data."""
        return cls.PREFIX

    @classmethod
    def engine(cls) -> HashEngine:
        if cls._template is None:
            raise TypeError(f"{cls.__name__} has no prefix to seed an engine with")
        return HashEngine(cls._template.copy(), cls._seed_length)


class NamedTag(SeededTag):
    """
    BIP-340 style tag: the prefix is SHA256(NAME) || SHA256(NAME).

    The prefix is exactly one SHA-256 block, so the seeded template is
    the midstate after that block. The first class declared for a NAME
    is the one make_tag() hands back for it.
    """

    NAME: ClassVar[Optional[str]] = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.NAME is not None:
            _NAMED_TAGS.setdefault(cls.NAME, cls)

    @classmethod
    def prefix(cls) -> Optional[bytes]:
        if cls.NAME is None:
            return None
        tag_hash = hashlib.sha256(cls.NAME.encode('utf-8')).digest()
        return tag_hash + tag_hash


_NAMED_TAGS: Dict[str, Type[NamedTag]] = {}


def make_tag(name: str) -> Type[NamedTag]:
    """
    Tag class for `name`.

    One name always maps to one class: hashes compare by tag class, so two
    classes for the same name would never match.
    """
    tag = _NAMED_TAGS.get(name)
    if tag is None:
        parts = re.split(r'[^0-9A-Za-z]+', name)
        class_name = ''.join(p[:1].upper() + p[1:] for p in parts) + 'Tag'
        tag = type(class_name, (NamedTag,), {'NAME': name, '__module__': __name__})
    return tag
