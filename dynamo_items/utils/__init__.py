"""Conversion and debugging helpers for DynamoDB items."""

from .pretty import pretty_print
from .serialization import (
    deserialize_item,
    deserialize_items,
    serialize_item,
    serialize_value,
    validate_item,
)

__all__ = [
    "deserialize_item",
    "deserialize_items",
    "pretty_print",
    "serialize_item",
    "serialize_value",
    "validate_item",
]
