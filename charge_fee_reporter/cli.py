#!/usr/bin/env python3
"""
Stripe charge fee report

Shows the gross amount, Stripe fee, net amount and itemized fee breakdown
for a single charge.
"""

import argparse
import logging
import sys
import time
from typing import List, NoReturn, Optional

from charge_fee_reporter.config import Settings, require_api_key
from charge_fee_reporter.domain.exceptions import ChargeFeeError, MissingCredentialError
from charge_fee_reporter.infrastructure.clients.stripe import StripeClient
from charge_fee_reporter.infrastructure.observability.logging import log_charge_report, setup_logging
from charge_fee_reporter.infrastructure.observability.metrics import record_report, write_metrics
from charge_fee_reporter.reporter import ChargeFeeReporter

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="charge-fees",
        description="Show Stripe fees for a charge",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Fee breakdown for the most recent charge
  STRIPE_SECRET_KEY=sk_test_... charge-fees

  # Fee breakdown for a specific charge
  charge-fees --charge ch_3Nabc123
        """
    )

    parser.add_argument(
        '--charge',
        default="",
        help='Stripe charge ID (e.g., ch_123abc). If not provided, uses the latest charge.'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable INFO-level JSON logs on stderr'
    )

    return parser


def _fail(message: str) -> NoReturn:
    record_report(success=False)
    logger.error(message)
    raise SystemExit(message)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    config = Settings()
    setup_logging("INFO" if args.verbose else config.log_level, service_name=config.service_name)
    start_time = time.time()

    try:
        # Fail before any client exists when the key is missing
        try:
            api_key = require_api_key(config)
        except MissingCredentialError as e:
            _fail(str(e))

        client = StripeClient(
            api_key,
            base_url=config.stripe_api_base,
            timeout=config.http_timeout_seconds,
            api_version=config.stripe_api_version,
        )
        reporter = ChargeFeeReporter(client)

        try:
            charge = reporter.resolve_charge(args.charge)
        except ChargeFeeError as e:
            _fail(f"Failed to retrieve charge: {e}")

        try:
            report = reporter.resolve_fee_details(charge)
        except ChargeFeeError as e:
            _fail(f"Failed to get charge info: {e}")

        reporter.present(report)

        duration_ms = (time.time() - start_time) * 1000
        record_report(success=True)
        log_charge_report(report.id, len(report.fee_details), duration_ms)
    finally:
        if config.metrics_textfile:
            write_metrics(config.metrics_textfile)

    return 0


if __name__ == "__main__":
    sys.exit(main())
