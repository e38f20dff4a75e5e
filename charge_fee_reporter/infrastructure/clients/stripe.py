"""Stripe REST API client for charges and balance transactions"""

import httpx
from typing import Any, Callable, Dict, List, TypeVar
from urllib.parse import quote
from charge_fee_reporter.domain.models import Charge, FeeDetail, SettlementTransaction
from charge_fee_reporter.domain.exceptions import (
    AuthError,
    MalformedResponseError,
    NotFoundError,
    TransportError,
)
from charge_fee_reporter.config import settings
from charge_fee_reporter.infrastructure.observability.metrics import (
    stripe_request_failures_counter,
    stripe_request_latency_histogram,
)

T = TypeVar("T")


class StripeClient:
    """Read-only client for the Stripe charges and balance transactions APIs"""

    def __init__(
        self,
        api_key: str,
        base_url: str | None = None,
        timeout: float | None = None,
        api_version: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.api_key = api_key
        self.base_url = (base_url or settings.stripe_api_base).rstrip("/")
        self.timeout = timeout or settings.http_timeout_seconds
        self.api_version = api_version or settings.stripe_api_version
        self.transport = transport

    def get_charge(self, charge_id: str) -> Charge:
        """
        Retrieve a single charge by ID.

        Raises:
            NotFoundError: No charge with this ID
            AuthError: API key rejected
            TransportError: On timeout, network or other HTTP errors
            MalformedResponseError: Charge payload missing required fields
        """
        data = self._get("charges.retrieve", f"/v1/charges/{quote(charge_id, safe='')}")
        return self._parse("charges.retrieve", _parse_charge, data)

    def list_charges(self, limit: int = 1) -> List[Charge]:
        """List the most recent charges, newest first (Stripe's default ordering)"""
        data = self._get("charges.list", "/v1/charges", params={"limit": limit})
        return self._parse(
            "charges.list",
            lambda payload: [_parse_charge(item) for item in payload["data"]],
            data,
        )

    def get_balance_transaction(self, transaction_id: str) -> SettlementTransaction:
        """Retrieve the balance transaction holding a charge's fee breakdown"""
        data = self._get(
            "balance_transactions.retrieve",
            f"/v1/balance_transactions/{quote(transaction_id, safe='')}",
        )
        return self._parse("balance_transactions.retrieve", _parse_balance_transaction, data)

    def _headers(self) -> Dict[str, str]:
        headers = {"Authorization": f"Bearer {self.api_key}"}
        if self.api_version:
            headers["Stripe-Version"] = self.api_version
        return headers

    def _get(self, endpoint: str, path: str, params: Dict[str, Any] | None = None) -> Dict[str, Any]:
        with httpx.Client(
            base_url=self.base_url,
            headers=self._headers(),
            timeout=self.timeout,
            transport=self.transport,
        ) as client:
            try:
                with stripe_request_latency_histogram.labels(endpoint=endpoint).time():
                    response = client.get(path, params=params)
                    response.raise_for_status()
                    return response.json()

            except httpx.TimeoutException as e:
                stripe_request_failures_counter.labels(endpoint=endpoint, reason="timeout").inc()
                raise TransportError(f"Stripe API timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise self._status_error(endpoint, e.response) from e
            except httpx.RequestError as e:
                stripe_request_failures_counter.labels(endpoint=endpoint, reason="network").inc()
                raise TransportError(f"Stripe API request failed: {e}") from e
            except ValueError as e:
                stripe_request_failures_counter.labels(endpoint=endpoint, reason="malformed").inc()
                raise MalformedResponseError(f"Stripe API returned invalid JSON: {e}") from e

    def _status_error(self, endpoint: str, response: httpx.Response) -> Exception:
        status = response.status_code
        detail = _error_message(response)
        message = f"Stripe API error: {status}" + (f" ({detail})" if detail else "")

        if status == 401:
            stripe_request_failures_counter.labels(endpoint=endpoint, reason="auth").inc()
            return AuthError(message, status_code=status)
        if status == 404:
            stripe_request_failures_counter.labels(endpoint=endpoint, reason="not_found").inc()
            return NotFoundError(message, status_code=status)

        stripe_request_failures_counter.labels(endpoint=endpoint, reason="http").inc()
        return TransportError(message, status_code=status)

    def _parse(self, endpoint: str, parser: Callable[[Any], T], data: Any) -> T:
        try:
            return parser(data)
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            stripe_request_failures_counter.labels(endpoint=endpoint, reason="malformed").inc()
            raise MalformedResponseError(f"Invalid {endpoint} data from Stripe: {e!r}") from e


def _error_message(response: httpx.Response) -> str | None:
    """Pull error.message out of a Stripe error body, if there is one"""
    try:
        return response.json()["error"]["message"]
    except (KeyError, ValueError, TypeError, AttributeError):
        return None


def _require_int(value: Any) -> int:
    # bool is an int subclass; Stripe never sends one for an amount
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected integer amount, got {value!r}")
    return value


def _parse_charge(data: Dict[str, Any]) -> Charge:
    # balance_transaction is an ID, an expanded object, or null for uncaptured charges
    balance_transaction = data.get("balance_transaction")
    if isinstance(balance_transaction, dict):
        balance_transaction = balance_transaction["id"]
    if balance_transaction is not None and not isinstance(balance_transaction, str):
        raise TypeError(f"expected balance_transaction ID, got {balance_transaction!r}")

    return Charge(
        id=str(data["id"]),
        amount=_require_int(data["amount"]),
        balance_transaction_id=balance_transaction or None,
    )


def _parse_balance_transaction(data: Dict[str, Any]) -> SettlementTransaction:
    return SettlementTransaction(
        id=str(data["id"]),
        fee=_require_int(data["fee"]),
        net=_require_int(data["net"]),
        fee_details=[
            FeeDetail(type=str(fee["type"]), amount=_require_int(fee["amount"]))
            for fee in data.get("fee_details") or []
        ],
    )
