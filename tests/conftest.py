"""Pytest fixtures for testing"""

import httpx
import pytest
from typing import Any, Callable, Dict
from charge_fee_reporter.domain.models import Charge, ChargeReport, FeeDetail
from charge_fee_reporter.infrastructure.clients.stripe import StripeClient


TEST_API_KEY = "sk_test_123"
TEST_API_BASE = "https://api.stripe.test"


@pytest.fixture
def charge_payload() -> Dict[str, Any]:
    """Stripe charge object as returned by GET /v1/charges/{id}"""
    return {
        "id": "ch_test123",
        "object": "charge",
        "amount": 1000,
        "currency": "usd",
        "status": "succeeded",
        "balance_transaction": "txn_test123",
    }


@pytest.fixture
def balance_transaction_payload() -> Dict[str, Any]:
    """Stripe balance transaction for a $10.00 charge with a $0.59 fee"""
    return {
        "id": "txn_test123",
        "object": "balance_transaction",
        "amount": 1000,
        "currency": "usd",
        "fee": 59,
        "net": 941,
        "fee_details": [
            {"type": "stripe_fee", "amount": 30, "currency": "usd", "description": "Stripe processing fees"},
            {"type": "application_fee", "amount": 29, "currency": "usd", "description": "Platform fee"},
        ],
    }


@pytest.fixture
def sample_charge() -> Charge:
    return Charge(id="ch_test123", amount=1000, balance_transaction_id="txn_test123")


@pytest.fixture
def sample_report() -> ChargeReport:
    """Report matching the sample charge and balance transaction"""
    return ChargeReport(
        id="ch_test123",
        amount=1000,
        fee=59,
        net=941,
        fee_details=[
            FeeDetail(type="stripe_fee", amount=30),
            FeeDetail(type="application_fee", amount=29),
        ],
    )


@pytest.fixture
def make_stripe_client() -> Callable[..., StripeClient]:
    """Build a StripeClient whose requests are answered by a handler function"""

    def _make(handler: Callable[[httpx.Request], httpx.Response], **kwargs: Any) -> StripeClient:
        return StripeClient(
            TEST_API_KEY,
            base_url=TEST_API_BASE,
            transport=httpx.MockTransport(handler),
            **kwargs,
        )

    return _make
