"""
Shared error handling for DynamoDB operations.

Every public operation in dynamo_items is wrapped with
``handle_dynamodb_errors`` so that botocore failures surface as a single
``BackendError`` type carrying the backend's own error code.
"""

import inspect
import logging
from functools import wraps
from typing import Any, Callable, Optional, TypeVar

from botocore.exceptions import BotoCoreError, ClientError

from dynamo_items.data.shared_exceptions import BackendError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def backend_error_from(
    error: Exception, operation: str, table_name: Optional[str] = None
) -> BackendError:
    """
    Build a BackendError from a botocore exception without reinterpreting it.

    Args:
        error: The ClientError or BotoCoreError raised by boto3
        operation: Name of the DynamoDB operation that failed
        table_name: Table the operation targeted, if known

    Returns:
        BackendError carrying the original code and message
    """
    if isinstance(error, ClientError):
        details = error.response.get("Error", {})
        code = details.get("Code", "Unknown")
        message = details.get("Message", str(error))
    else:
        code = type(error).__name__
        message = str(error)
    return BackendError(operation, code, message, table_name=table_name)


def _table_argument(
    signature: inspect.Signature, args: tuple, kwargs: dict
) -> Optional[str]:
    try:
        bound = signature.bind_partial(*args, **kwargs)
    except TypeError:
        return None
    table = bound.arguments.get("table")
    return table if isinstance(table, str) else None


def handle_dynamodb_errors(operation_name: str) -> Callable[[F], F]:
    """
    Decorator to handle DynamoDB errors consistently across all operations.

    Args:
        operation_name: Name of the DynamoDB operation for error context
    """

    def decorator(func: F) -> F:
        signature = inspect.signature(func)

        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except (ClientError, BotoCoreError) as e:
                table_name = _table_argument(signature, args, kwargs)
                error = backend_error_from(e, operation_name, table_name)
                logger.error(
                    "%s on table %s failed: %s",
                    operation_name,
                    table_name,
                    error.code,
                )
                raise error from e

        return wrapper  # type: ignore[return-value]

    return decorator
