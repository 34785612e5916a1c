"""Helpers for writing, batch writing, querying and counting DynamoDB items."""

__version__ = "0.1.0"

from dynamo_items.config import DynamoSettings
from dynamo_items.data import (
    BackendError,
    ConversionError,
    DynamoItemsError,
    ItemAccess,
    add_number,
    create_client,
    query_records,
    query_records_with_filter,
    write_payloads,
    write_record,
    write_records,
)
from dynamo_items.entities import Payload, Payloads
from dynamo_items.utils import (
    deserialize_item,
    deserialize_items,
    pretty_print,
    serialize_item,
    validate_item,
)

__all__ = [
    # Version
    "__version__",
    # Configuration
    "DynamoSettings",
    "create_client",
    # Item access
    "ItemAccess",
    "add_number",
    "query_records",
    "query_records_with_filter",
    "write_payloads",
    "write_record",
    "write_records",
    # Conversion contract
    "Payload",
    "Payloads",
    "deserialize_item",
    "deserialize_items",
    "serialize_item",
    "validate_item",
    # Errors
    "BackendError",
    "ConversionError",
    "DynamoItemsError",
    # Debugging
    "pretty_print",
]
