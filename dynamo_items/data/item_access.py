from typing import Any, Iterable, Optional

from boto3.dynamodb.conditions import ConditionBase

from dynamo_items.config import DynamoSettings
from dynamo_items.data import operations
from dynamo_items.data._base import (
    AttributeMap,
    AttributeMaps,
    DynamoClientProtocol,
    DynamoDBClient,
)
from dynamo_items.data.dynamo_client import create_client
from dynamo_items.entities.payload import Payload, Payloads


class ItemAccess(DynamoClientProtocol):
    """Binds an injected DynamoDB client to the item access helpers.

    Holds no state besides the client, so one instance can be shared by
    any number of callers as long as the client itself is shared safely.
    """

    def __init__(self, client: DynamoDBClient):
        """Initializes an ItemAccess instance.

        Args:
            client (DynamoDBClient): A pre-configured Boto3 DynamoDB client.
        """
        self._client = client

    @classmethod
    def from_settings(
        cls, settings: Optional[DynamoSettings] = None
    ) -> "ItemAccess":
        """Builds the client with ``create_client`` and wraps it."""
        return cls(create_client(settings))

    @property
    def client(self) -> DynamoDBClient:
        return self._client

    def write_record(self, data: Payload, table: str) -> None:
        operations.write_record(self._client, data, table)

    def write_records(
        self, items: Iterable[AttributeMap], table: str
    ) -> AttributeMaps:
        return operations.write_records(self._client, items, table)

    def write_payloads(self, data: Payloads, table: str) -> AttributeMaps:
        return operations.write_payloads(self._client, data, table)

    def query_records(
        self,
        table: str,
        index: str,
        key_name: str,
        key_value: Any,
        filter_condition: Optional[ConditionBase] = None,
        page_size: Optional[int] = None,
    ) -> AttributeMaps:
        return operations.query_records(
            self._client,
            table,
            index,
            key_name,
            key_value,
            filter_condition=filter_condition,
            page_size=page_size,
        )

    def query_records_with_filter(
        self,
        table: str,
        key_condition: ConditionBase,
        filter_condition: Optional[ConditionBase] = None,
        page_size: Optional[int] = None,
    ) -> AttributeMaps:
        return operations.query_records_with_filter(
            self._client,
            table,
            key_condition,
            filter_condition=filter_condition,
            page_size=page_size,
        )

    def add_number(
        self,
        table: str,
        key: AttributeMap,
        name: str,
        number: int,
        must_exist: bool = False,
    ) -> Optional[int]:
        return operations.add_number(
            self._client, table, key, name, number, must_exist=must_exist
        )
