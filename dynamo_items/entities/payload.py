from typing import Protocol, runtime_checkable

from dynamo_items.data._base import AttributeMap, AttributeMaps


@runtime_checkable
class Payload(Protocol):
    """Protocol for objects that can be converted to a single DynamoDB item."""

    def to_item(self) -> AttributeMap:
        """Convert the object to DynamoDB item format."""
        ...


@runtime_checkable
class Payloads(Protocol):
    """Protocol for objects that can be converted to many DynamoDB items."""

    def to_items(self) -> AttributeMaps:
        """Convert the object to a list of DynamoDB items."""
        ...
