"""Domain models - immutable snapshots of Stripe objects"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class FeeDetail:
    """Single labeled component of a processor fee"""

    type: str  # e.g. "stripe_fee", "application_fee"
    amount: int


@dataclass(frozen=True)
class Charge:
    """Stripe charge as returned by the API"""

    id: str
    amount: int
    balance_transaction_id: Optional[str]


@dataclass(frozen=True)
class SettlementTransaction:
    """Stripe balance transaction describing how a charge was settled"""

    id: str
    fee: int
    net: int
    fee_details: List[FeeDetail] = field(default_factory=list)


@dataclass(frozen=True)
class ChargeReport:
    """Flattened charge + fee data ready for display"""

    id: str
    amount: int
    fee: int
    net: int
    fee_details: List[FeeDetail] = field(default_factory=list)
