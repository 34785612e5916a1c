"""
Shared pytest configuration for dynamo_items tests.

Unit tests run against a MagicMock client. Integration tests run against
an in-memory DynamoDB provided by moto.
"""

from dataclasses import dataclass
from typing import Any, Dict, List

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with a mocked client")
    config.addinivalue_line(
        "markers", "integration: tests against a moto DynamoDB table"
    )


@dataclass
class Order:
    """Small entity implementing the Payload protocol."""

    customer_id: str
    order_id: str
    status: str
    total: int

    def to_item(self) -> Dict[str, Any]:
        return {
            "PK": {"S": f"CUSTOMER#{self.customer_id}"},
            "SK": {"S": f"ORDER#{self.order_id}"},
            "GSI1PK": {"S": f"STATUS#{self.status}"},
            "GSI1SK": {"S": f"ORDER#{self.order_id}"},
            "status": {"S": self.status},
            "total": {"N": str(self.total)},
        }


@dataclass
class OrderBook:
    """Entity implementing the Payloads protocol."""

    orders: List[Order]

    def to_items(self) -> List[Dict[str, Any]]:
        return [order.to_item() for order in self.orders]


@pytest.fixture
def aws_credentials(monkeypatch):
    """Set up mock AWS credentials for moto."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.delenv("AWS_PROFILE", raising=False)


@pytest.fixture
def sample_order():
    """Provides a sample Order for testing."""
    return Order("42", "0001", "OPEN", 1250)


@pytest.fixture
def make_orders():
    """Returns a factory building ``count`` orders for one customer."""

    def _make(count: int, customer_id: str = "42", status: str = "OPEN"):
        return [
            Order(customer_id, f"{index:04d}", status, index * 10)
            for index in range(count)
        ]

    return _make


@pytest.fixture
def order_book(make_orders):
    return OrderBook(make_orders(3))
