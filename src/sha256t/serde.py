"""
Serialization Adapter

Two external forms, picked by the target format being human readable:

- human readable: display-order hex text, the same string as to_hex()
- compact: the 32 raw bytes in storage order, no reversal

pydantic models get both through the core schema below: JSON mode is the
human-readable form, python mode the compact one.
"""

from __future__ import annotations
from typing import Any, Type, TypeVar, Union

from pydantic_core import PydanticCustomError, core_schema

from .errors import InvalidLength
from .hash import TaggedHash

H = TypeVar('H', bound=TaggedHash)

_BYTES_TYPES = (bytes, bytearray, memoryview)


def serialize(value: TaggedHash, human_readable: bool) -> Union[str, bytes]:
    """External form of a hash."""
    if human_readable:
        return value.to_hex()
    return bytes(value)


def deserialize(cls: Type[H], value: Any, human_readable: bool) -> H:
    """
    Rebuild a `cls` hash from its external form.

    Human readable accepts hex text, or a byte string: 32 bytes are taken
    as raw storage-order bytes, anything else as UTF-8 hex text.
    Compact accepts exactly 32 raw bytes.
    """
    if human_readable:
        if isinstance(value, str):
            return cls.from_hex(value)
        if isinstance(value, _BYTES_TYPES):
            data = bytes(value)
            if len(data) == cls.LEN:
                return cls.from_slice(data)
            try:
                text = data.decode('utf-8')
            except UnicodeDecodeError:
                raise InvalidLength(cls.LEN, len(data)) from None
            return cls.from_hex(text)
        raise TypeError(f"expected an ASCII hex string, got {type(value).__name__}")

    if isinstance(value, _BYTES_TYPES):
        # from_slice only fails on length
        return cls.from_slice(bytes(value))
    raise TypeError(f"expected a bytestring, got {type(value).__name__}")


def pydantic_core_schema(cls: Type[TaggedHash]) -> core_schema.CoreSchema:
    """Core schema used by TaggedHash.__get_pydantic_core_schema__."""

    def validate(value: Any, info: core_schema.ValidationInfo) -> TaggedHash:
        if isinstance(value, cls):
            return value
        try:
            return deserialize(cls, value, human_readable=info.mode == 'json')
        except TypeError:
            raise PydanticCustomError(
                'tagged_hash_type',
                'expected {expected}, got {type_name}',
                {
                    'expected': 'hex string' if info.mode == 'json' else 'bytes',
                    'type_name': type(value).__name__,
                },
            ) from None

    def dump(value: TaggedHash, info: core_schema.SerializationInfo) -> Union[str, bytes]:
        return serialize(value, human_readable=info.mode_is_json())

    return core_schema.with_info_plain_validator_function(
        validate,
        serialization=core_schema.plain_serializer_function_ser_schema(dump, info_arg=True),
    )
