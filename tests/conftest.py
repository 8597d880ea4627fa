"""Shared fixtures for validator tests."""

from __future__ import annotations

from typing import Any
from uuid import uuid4

import pytest


@pytest.fixture
def user_id() -> str:
    """A freshly generated UUID v4 string."""
    return str(uuid4())


@pytest.fixture
def payment_request() -> dict[str, Any]:
    """A request to pay that passes every rule."""
    return {
        "amount": "1000",
        "currency": "UGX",
        "externalId": "order-42",
        "payer": {"partyId": "256772123456", "partyIdType": "MSISDN"},
        "payerMessage": "Payment for order 42",
        "payeeNote": "order 42",
    }
