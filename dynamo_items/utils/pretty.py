"""Human-readable dumps of items and query results for debugging."""

import base64
import dataclasses
import json
import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Any

logger = logging.getLogger(__name__)


def _json_default(value: Any) -> Any:
    # Decimal is what TypeDeserializer hands back for every number
    if isinstance(value, Decimal):
        if not value.is_finite():
            return str(value)
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, (set, frozenset)):
        return list(value)
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def pretty_print(data: Any) -> None:
    """
    Output any value as indented JSON to stdout.

    Serialization failures are logged and swallowed so that a debugging
    aid can never break the caller.

    Args:
        data: Value to print
    """
    try:
        text = json.dumps(data, indent=2, default=_json_default)
    except (TypeError, ValueError, ArithmeticError, RecursionError) as e:
        logger.error("Could not serialize %s for printing: %s", type(data).__name__, e)
        return
    print(text)
