"""Custom exceptions for dynamo_items data layer operations."""

from typing import Optional


class DynamoItemsError(Exception):
    """Base exception for all dynamo_items errors."""


class ConversionError(DynamoItemsError):
    """
    Raised when caller-supplied data cannot be turned into DynamoDB
    attribute values.

    The operation is never attempted when this is raised, so no request
    reaches DynamoDB.
    """


class BackendError(DynamoItemsError):
    """
    Raised when the underlying DynamoDB call fails for any reason.

    The backend's own classification is kept as-is in ``code`` (for example
    ``ConditionalCheckFailedException`` or
    ``ProvisionedThroughputExceededException``). Transport failures that
    never reached the service carry the botocore exception class name. The
    original exception is always chained as ``__cause__``.
    """

    def __init__(
        self,
        operation: str,
        code: str,
        message: str,
        table_name: Optional[str] = None,
    ):
        self.operation = operation
        self.code = code
        self.message = message
        self.table_name = table_name
        super().__init__(f"{operation} failed ({code}): {message}")
