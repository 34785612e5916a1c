"""Client configuration resolved from the environment."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dynamo_items.constants import (
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_READ_TIMEOUT,
    DEFAULT_REGION,
)


def _int_setting(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e
    if value <= 0:
        raise ValueError(f"{name} must be greater than 0, got {value}")
    return value


@dataclass(frozen=True)
class DynamoSettings:
    """
    Settings used to build a DynamoDB client.

    Attributes:
        region (str): AWS region of the tables.
        profile (Optional[str]): Named AWS profile, SDK default chain if None.
        endpoint_url (Optional[str]): Override endpoint, e.g. DynamoDB Local.
        connect_timeout (int): Seconds to wait for a connection.
        read_timeout (int): Seconds to wait for a response.
    """

    region: str = DEFAULT_REGION
    profile: Optional[str] = None
    endpoint_url: Optional[str] = None
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT
    read_timeout: int = DEFAULT_READ_TIMEOUT

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None
    ) -> "DynamoSettings":
        """Read settings from ``environ`` (defaults to ``os.environ``).

        Raises:
            ValueError: If a timeout variable is not a positive integer
        """
        if environ is None:
            environ = os.environ
        region = (
            environ.get("DYNAMO_ITEMS_REGION")
            or environ.get("AWS_REGION")
            or environ.get("AWS_DEFAULT_REGION")
            or DEFAULT_REGION
        )
        return cls(
            region=region,
            profile=environ.get("AWS_PROFILE") or None,
            endpoint_url=environ.get("DYNAMO_ITEMS_ENDPOINT_URL") or None,
            connect_timeout=_int_setting(
                environ, "DYNAMO_ITEMS_CONNECT_TIMEOUT", DEFAULT_CONNECT_TIMEOUT
            ),
            read_timeout=_int_setting(
                environ, "DYNAMO_ITEMS_READ_TIMEOUT", DEFAULT_READ_TIMEOUT
            ),
        )
