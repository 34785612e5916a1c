"""
Conversion between plain Python values and DynamoDB attribute values.

This module provides shared functions for:
- Serializing Python mappings into low-level DynamoDB items
- Deserializing low-level items back into Python values
- Checking that a caller-built item has a valid attribute-value shape
"""

from typing import Any, Dict, List, Mapping

from boto3.dynamodb.types import TypeDeserializer, TypeSerializer

from dynamo_items.constants import ATTRIBUTE_TYPES
from dynamo_items.data._base import AttributeMap, AttributeMaps
from dynamo_items.data.shared_exceptions import ConversionError

_serializer = TypeSerializer()
_deserializer = TypeDeserializer()

# botocore also accepts text for blob members and encodes it itself
_BINARY_TYPES = (bytes, bytearray, str)


def serialize_value(value: Any) -> Dict[str, Any]:
    """
    Convert a single Python value to DynamoDB attribute-value format.

    Args:
        value: Any value TypeSerializer understands (str, int, Decimal,
            bytes, bool, None, set, list, dict)

    Returns:
        A DynamoDB value in the format {"S": "value"} or {"N": "123"}

    Raises:
        ConversionError: If the value has no DynamoDB representation
            (floats included, use Decimal instead)
    """
    try:
        return _serializer.serialize(value)
    except (TypeError, ValueError) as e:
        raise ConversionError(
            f"Cannot convert {type(value).__name__} to a DynamoDB value: {e}"
        ) from e


def serialize_item(data: Mapping[str, Any]) -> AttributeMap:
    """
    Convert a Python mapping to a DynamoDB item.

    Args:
        data: Mapping of attribute name to Python value

    Returns:
        The item in low-level client format

    Raises:
        ConversionError: If the mapping or any of its values cannot be
            converted
    """
    if not isinstance(data, Mapping):
        raise ConversionError(
            f"item must be a mapping, got {type(data).__name__}"
        )
    item: AttributeMap = {}
    for name, value in data.items():
        if not isinstance(name, str) or not name:
            raise ConversionError(
                f"attribute names must be non-empty strings, got {name!r}"
            )
        item[name] = serialize_value(value)
    return item


def deserialize_item(item: AttributeMap) -> Dict[str, Any]:
    """Convert a low-level DynamoDB item to plain Python values."""
    validate_item(item)
    return {name: _deserializer.deserialize(value) for name, value in item.items()}


def deserialize_items(items: AttributeMaps) -> List[Dict[str, Any]]:
    return [deserialize_item(item) for item in items]


def _validate_value(path: str, value: Any) -> None:
    if not isinstance(value, dict) or len(value) != 1:
        raise ConversionError(
            f"{path} must be a single-entry dict such as {{'S': 'text'}}"
        )
    ((type_name, inner),) = value.items()
    if type_name not in ATTRIBUTE_TYPES:
        raise ConversionError(
            f"{path} has unknown type descriptor {type_name!r}"
        )
    if type_name in ("S", "N"):
        if not isinstance(inner, str):
            raise ConversionError(
                f"{path} {type_name} value must be a str, got "
                f"{type(inner).__name__}"
            )
    elif type_name == "B":
        if not isinstance(inner, _BINARY_TYPES):
            raise ConversionError(
                f"{path} B value must be bytes, got {type(inner).__name__}"
            )
    elif type_name in ("BOOL", "NULL"):
        if not isinstance(inner, bool):
            raise ConversionError(
                f"{path} {type_name} value must be a bool, got "
                f"{type(inner).__name__}"
            )
    elif type_name in ("SS", "NS", "BS"):
        member_types = _BINARY_TYPES if type_name == "BS" else str
        if not isinstance(inner, list) or not all(
            isinstance(member, member_types) for member in inner
        ):
            raise ConversionError(
                f"{path} {type_name} value must be a list of "
                f"{'bytes' if type_name == 'BS' else 'str'}"
            )
    elif type_name == "M":
        if not isinstance(inner, dict):
            raise ConversionError(f"{path} map value must be a dict")
        for name, nested in inner.items():
            _validate_value(f"{path}.{name}", nested)
    elif type_name == "L":
        if not isinstance(inner, list):
            raise ConversionError(f"{path} list value must be a list")
        for index, nested in enumerate(inner):
            _validate_value(f"{path}[{index}]", nested)


def validate_item(item: Any) -> None:
    """
    Check that an item has the low-level DynamoDB attribute-value shape.

    Args:
        item: The candidate item

    Raises:
        ConversionError: If the item is not a dict of non-empty string
            names to type-tagged values
    """
    if not isinstance(item, dict):
        raise ConversionError(
            f"item must be a dict of attribute values, got "
            f"{type(item).__name__}"
        )
    if not item:
        raise ConversionError("item must contain at least one attribute")
    for name, value in item.items():
        if not isinstance(name, str) or not name:
            raise ConversionError(
                f"attribute names must be non-empty strings, got {name!r}"
            )
        _validate_value(name, value)
