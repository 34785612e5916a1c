import logging
from typing import TYPE_CHECKING, Optional

import boto3
from botocore.config import Config

from dynamo_items.config import DynamoSettings

if TYPE_CHECKING:
    from mypy_boto3_dynamodb import DynamoDBClient

logger = logging.getLogger(__name__)


def create_client(settings: Optional[DynamoSettings] = None) -> "DynamoDBClient":
    """Creates a low-level DynamoDB client.

    Args:
        settings (DynamoSettings, optional): Region, profile, endpoint and
            timeouts. Read from the environment when omitted.

    Returns:
        DynamoDBClient: The Boto3 DynamoDB client. Retries stay at the
            botocore defaults.
    """
    if settings is None:
        settings = DynamoSettings.from_env()

    session = boto3.Session(
        profile_name=settings.profile, region_name=settings.region
    )
    logger.debug(
        "Creating DynamoDB client in %s (endpoint=%s)",
        settings.region,
        settings.endpoint_url or "default",
    )
    return session.client(
        "dynamodb",
        endpoint_url=settings.endpoint_url,
        config=Config(
            connect_timeout=settings.connect_timeout,
            read_timeout=settings.read_timeout,
        ),
    )
