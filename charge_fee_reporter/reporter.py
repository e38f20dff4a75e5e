"""Charge fee reporting pipeline: resolve charge → resolve fees → present"""

import logging
import sys
from typing import Optional, TextIO

from charge_fee_reporter.domain.exceptions import MalformedResponseError, NoChargesFoundError, StripeAPIError
from charge_fee_reporter.domain.models import Charge, ChargeReport
from charge_fee_reporter.domain.reporting import build_charge_report, render_report
from charge_fee_reporter.infrastructure.clients.stripe import StripeClient

logger = logging.getLogger(__name__)


class ChargeFeeReporter:
    """Looks up a Stripe charge and prints its fee breakdown"""

    def __init__(self, client: StripeClient, out: Optional[TextIO] = None):
        self.client = client
        self.out = out or sys.stdout

    def resolve_charge(self, charge_id: Optional[str] = None) -> Charge:
        """
        Fetch the given charge, or the most recent one when no ID is given.

        Raises:
            NoChargesFoundError: No ID given and the account has no charges
            StripeAPIError: Lookup or listing failed
        """
        if charge_id:
            return self.client.get_charge(charge_id)

        charges = self.client.list_charges(limit=1)
        if not charges:
            raise NoChargesFoundError("no charges found in your Stripe account")

        latest = charges[0]
        logger.info("Using latest charge", extra={"charge_id": latest.id, "step": "resolve_charge"})
        print(f"No charge ID provided, using latest charge: {latest.id}", file=self.out)
        return latest

    def resolve_fee_details(self, charge: Charge) -> ChargeReport:
        """
        Fetch the charge's balance transaction and build the report.

        Stripe errors keep their type and gain a
        "failed to retrieve balance transaction" prefix.
        """
        if not charge.balance_transaction_id:
            raise MalformedResponseError(f"charge {charge.id} has no balance transaction")

        try:
            transaction = self.client.get_balance_transaction(charge.balance_transaction_id)
        except StripeAPIError as e:
            raise type(e)(
                f"failed to retrieve balance transaction: {e}",
                status_code=e.status_code,
            ) from e

        return build_charge_report(charge, transaction)

    def present(self, report: ChargeReport) -> str:
        """Write the formatted report to the output stream and return it"""
        text = render_report(report)
        self.out.write(text)
        return text
