"""Charge report projection and text rendering"""

from charge_fee_reporter.domain.models import Charge, ChargeReport, FeeDetail, SettlementTransaction
from charge_fee_reporter.utils.money import format_cents


def build_charge_report(charge: Charge, transaction: SettlementTransaction) -> ChargeReport:
    """Join a charge with its balance transaction, keeping fee detail order"""
    return ChargeReport(
        id=charge.id,
        amount=charge.amount,
        fee=transaction.fee,
        net=transaction.net,
        fee_details=[FeeDetail(type=fee.type, amount=fee.amount) for fee in transaction.fee_details],
    )


def render_report(report: ChargeReport, symbol: str = "$") -> str:
    """
    Render the summary and itemized fee breakdown.

    The "Fee Breakdown:" header is always present, even with no fee details.
    """
    lines = [
        f"Charge ID: {report.id}",
        f"Amount Charged: {format_cents(report.amount, symbol)}",
        f"Stripe Fee: {format_cents(report.fee, symbol)}",
        f"Net Amount: {format_cents(report.net, symbol)}",
        "",
        "Fee Breakdown:",
    ]
    lines.extend(f"- {fee.type}: {format_cents(fee.amount, symbol)}" for fee in report.fee_details)
    return "\n".join(lines) + "\n"
