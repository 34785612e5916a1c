from typing import TYPE_CHECKING, Any, Dict, List, Protocol

if TYPE_CHECKING:
    from mypy_boto3_dynamodb import DynamoDBClient
    from mypy_boto3_dynamodb.type_defs import (
        QueryInputTypeDef,
        UpdateItemInputTypeDef,
    )
else:
    # Runtime fallback
    DynamoDBClient = object
    QueryInputTypeDef = dict
    UpdateItemInputTypeDef = dict

# A single DynamoDB item in low-level client form: {"name": {"S": "..."}}
AttributeMap = Dict[str, Any]
AttributeMaps = List[AttributeMap]


class DynamoClientProtocol(Protocol):
    """Protocol defining attributes shared by classes wrapping a client."""

    _client: DynamoDBClient
