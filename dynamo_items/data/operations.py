"""
Item access helpers for the DynamoDB low-level client.

Each function takes the boto3 client as its first argument and performs
one DynamoDB operation (or a bounded sequential loop of them). Nothing is
cached or retried here; botocore failures surface as ``BackendError`` and
bad caller data as ``ConversionError`` before any request is sent.
"""

import logging
from typing import Any, Dict, Iterable, Optional

from boto3.dynamodb.conditions import (
    ConditionBase,
    ConditionExpressionBuilder,
    Key,
)
from boto3.exceptions import (
    DynamoDBNeedsConditionError,
    DynamoDBNeedsKeyConditionError,
    DynamoDBOperationNotSupportedError,
)

from dynamo_items.constants import BATCH_WRITE_CHUNK_SIZE
from dynamo_items.data._base import (
    AttributeMap,
    AttributeMaps,
    DynamoDBClient,
    QueryInputTypeDef,
    UpdateItemInputTypeDef,
)
from dynamo_items.data.base_operations import handle_dynamodb_errors
from dynamo_items.data.shared_exceptions import ConversionError
from dynamo_items.entities.payload import Payload, Payloads
from dynamo_items.utils.serialization import serialize_value, validate_item

logger = logging.getLogger(__name__)


def _payload_item(data: Payload) -> AttributeMap:
    to_item = getattr(data, "to_item", None)
    if not callable(to_item):
        raise ConversionError(
            f"{type(data).__name__} does not provide a to_item() method"
        )
    try:
        item = to_item()
    except (TypeError, ValueError, KeyError, AttributeError) as e:
        raise ConversionError(
            f"Could not convert {type(data).__name__} to an item: {e}"
        ) from e
    validate_item(item)
    return item


def _payload_items(data: Payloads) -> AttributeMaps:
    to_items = getattr(data, "to_items", None)
    if not callable(to_items):
        raise ConversionError(
            f"{type(data).__name__} does not provide a to_items() method"
        )
    try:
        items = to_items()
    except (TypeError, ValueError, KeyError, AttributeError) as e:
        raise ConversionError(
            f"Could not convert {type(data).__name__} to items: {e}"
        ) from e
    if not isinstance(items, list):
        raise ConversionError(
            f"to_items() must return a list, got {type(items).__name__}"
        )
    return items


@handle_dynamodb_errors("put_item")
def write_record(client: DynamoDBClient, data: Payload, table: str) -> None:
    """
    Writes a single record to a table.

    Args:
        client: The DynamoDB client
        data: Object implementing the Payload protocol
        table: Name of the DynamoDB table

    Raises:
        ConversionError: If ``data.to_item()`` fails or returns an invalid
            item. No request is sent.
        BackendError: If PutItem fails
    """
    item = _payload_item(data)
    logger.debug("Putting item into %s", table)
    client.put_item(TableName=table, Item=item)


@handle_dynamodb_errors("batch_write_item")
def write_records(
    client: DynamoDBClient, items: Iterable[AttributeMap], table: str
) -> AttributeMaps:
    """
    Writes records in chunks of 25, one BatchWriteItem request per chunk.

    Chunks are sent strictly in order and the first failing chunk aborts
    the whole operation. Chunks already written stay written.

    Args:
        client: The DynamoDB client
        items: Items already in DynamoDB attribute-value format
        table: Name of the DynamoDB table

    Returns:
        The items DynamoDB reported as unprocessed, in chunk order. Empty
        when every item was written. These are not retried.

    Raises:
        ConversionError: If any item is malformed. No request is sent.
        BackendError: If a BatchWriteItem request fails
    """
    items = list(items)
    for item in items:
        validate_item(item)

    unprocessed: AttributeMaps = []
    for start in range(0, len(items), BATCH_WRITE_CHUNK_SIZE):
        chunk = items[start : start + BATCH_WRITE_CHUNK_SIZE]
        logger.debug(
            "Batch writing %d items to %s (offset %d)", len(chunk), table, start
        )
        response = client.batch_write_item(
            RequestItems={
                table: [{"PutRequest": {"Item": item}} for item in chunk]
            }
        )

        leftover = response.get("UnprocessedItems", {}).get(table, [])
        if leftover:
            logger.warning(
                "%d of %d items unprocessed writing to %s (offset %d)",
                len(leftover),
                len(chunk),
                table,
                start,
            )
            unprocessed.extend(
                request["PutRequest"]["Item"]
                for request in leftover
                if "PutRequest" in request
            )
    return unprocessed


def write_payloads(
    client: DynamoDBClient, data: Payloads, table: str
) -> AttributeMaps:
    """
    Converts a Payloads object and writes its items with ``write_records``.

    Returns:
        The unprocessed items, see ``write_records``
    """
    return write_records(client, _payload_items(data), table)


def _build_query_input(
    table: str,
    key_condition: ConditionBase,
    filter_condition: Optional[ConditionBase] = None,
    index: Optional[str] = None,
    page_size: Optional[int] = None,
) -> QueryInputTypeDef:
    # One builder for both expressions keeps placeholder names unique
    builder = ConditionExpressionBuilder()
    try:
        key_expression = builder.build_expression(
            key_condition, is_key_condition=True
        )
        filter_expression = (
            builder.build_expression(filter_condition)
            if filter_condition is not None
            else None
        )
    except (
        DynamoDBNeedsConditionError,
        DynamoDBNeedsKeyConditionError,
        DynamoDBOperationNotSupportedError,
    ) as e:
        raise ConversionError(f"Invalid query expression: {e}") from e

    names: Dict[str, str] = dict(key_expression.attribute_name_placeholders)
    raw_values: Dict[str, Any] = dict(
        key_expression.attribute_value_placeholders
    )

    query_input: Dict[str, Any] = {
        "TableName": table,
        "KeyConditionExpression": key_expression.condition_expression,
    }
    if filter_expression is not None:
        query_input["FilterExpression"] = filter_expression.condition_expression
        names.update(filter_expression.attribute_name_placeholders)
        raw_values.update(filter_expression.attribute_value_placeholders)
    if names:
        query_input["ExpressionAttributeNames"] = names
    if raw_values:
        query_input["ExpressionAttributeValues"] = {
            placeholder: serialize_value(value)
            for placeholder, value in raw_values.items()
        }
    if index is not None:
        query_input["IndexName"] = index
    if page_size is not None:
        if not isinstance(page_size, int) or isinstance(page_size, bool):
            raise ConversionError("page_size must be an integer")
        if page_size <= 0:
            raise ConversionError("page_size must be greater than 0")
        query_input["Limit"] = page_size
    return query_input  # type: ignore[return-value]


def _query_all_pages(
    client: DynamoDBClient, query_input: QueryInputTypeDef
) -> AttributeMaps:
    items: AttributeMaps = []
    pages = 0
    while True:
        response = client.query(**query_input)
        pages += 1
        items.extend(response.get("Items", []))

        last_evaluated_key = response.get("LastEvaluatedKey")
        if not last_evaluated_key:
            break
        query_input["ExclusiveStartKey"] = last_evaluated_key

    logger.debug(
        "Queried %d items from %s in %d pages",
        len(items),
        query_input["TableName"],
        pages,
    )
    return items


@handle_dynamodb_errors("query")
def query_records(
    client: DynamoDBClient,
    table: str,
    index: str,
    key_name: str,
    key_value: Any,
    filter_condition: Optional[ConditionBase] = None,
    page_size: Optional[int] = None,
) -> AttributeMaps:
    """
    Returns every record of an index whose key equals ``key_value``.

    Pages are fetched sequentially until DynamoDB stops returning a
    LastEvaluatedKey.

    Args:
        client: The DynamoDB client
        table: Name of the DynamoDB table
        index: Name of the secondary index to query
        key_name: Partition key attribute of the index
        key_value: Value the partition key must equal
        filter_condition: Optional ``Attr(...)`` condition applied after
            the key condition
        page_size: Optional per-request Limit, does not cap the total

    Returns:
        All matching items in the order DynamoDB returned them

    Raises:
        ConversionError: If an expression cannot be built
        BackendError: If any page request fails, partial results are
            discarded
    """
    if not isinstance(key_name, str) or not key_name:
        raise ConversionError("key_name must be a non-empty string")
    query_input = _build_query_input(
        table,
        Key(key_name).eq(key_value),
        filter_condition,
        index=index,
        page_size=page_size,
    )
    return _query_all_pages(client, query_input)


@handle_dynamodb_errors("query")
def query_records_with_filter(
    client: DynamoDBClient,
    table: str,
    key_condition: ConditionBase,
    filter_condition: Optional[ConditionBase] = None,
    page_size: Optional[int] = None,
) -> AttributeMaps:
    """
    Returns every record of a table matching a caller-built key condition.

    Args:
        client: The DynamoDB client
        table: Name of the DynamoDB table
        key_condition: ``Key(...)`` condition, e.g.
            ``Key("PK").eq("USER#1") & Key("SK").begins_with("ORDER#")``
        filter_condition: Optional ``Attr(...)`` condition
        page_size: Optional per-request Limit, does not cap the total

    Returns:
        All matching items in the order DynamoDB returned them

    Raises:
        ConversionError: If an expression cannot be built
        BackendError: If any page request fails
    """
    query_input = _build_query_input(
        table, key_condition, filter_condition, page_size=page_size
    )
    return _query_all_pages(client, query_input)


@handle_dynamodb_errors("update_item")
def add_number(
    client: DynamoDBClient,
    table: str,
    key: AttributeMap,
    name: str,
    number: int,
    must_exist: bool = False,
) -> Optional[int]:
    """
    Atomically adds ``number`` to a numeric attribute.

    DynamoDB applies the ADD server side, so concurrent callers never lose
    an increment. A missing item or attribute starts from zero unless
    ``must_exist`` is set.

    Args:
        client: The DynamoDB client
        table: Name of the DynamoDB table
        key: Primary key of the item in attribute-value format
        name: Attribute to increment
        number: Amount to add, negative to decrement
        must_exist: If True, fail instead of creating a missing item

    Returns:
        The attribute's new value

    Raises:
        ConversionError: If the key, name or number is invalid
        BackendError: If UpdateItem fails, including
            ConditionalCheckFailedException when ``must_exist`` is set and
            the item is missing
    """
    validate_item(key)
    if not isinstance(name, str) or not name:
        raise ConversionError("name must be a non-empty string")
    if not isinstance(number, int) or isinstance(number, bool):
        raise ConversionError(
            f"number must be an integer, got {type(number).__name__}"
        )

    update_input: Dict[str, Any] = {
        "TableName": table,
        "Key": key,
        "UpdateExpression": "ADD #n0 :v0",
        "ExpressionAttributeNames": {"#n0": name},
        "ExpressionAttributeValues": {":v0": {"N": str(number)}},
        "ReturnValues": "UPDATED_NEW",
    }
    if must_exist:
        update_input["ExpressionAttributeNames"]["#k0"] = next(iter(key))
        update_input["ConditionExpression"] = "attribute_exists(#k0)"

    logger.debug("Adding %d to %s in %s", number, name, table)
    params: UpdateItemInputTypeDef = update_input  # type: ignore[assignment]
    response = client.update_item(**params)

    new_value = response.get("Attributes", {}).get(name, {}).get("N")
    return int(new_value) if new_value is not None else None
