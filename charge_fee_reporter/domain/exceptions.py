"""Domain-specific exceptions"""


class ChargeFeeError(Exception):
    """Base exception for the charge fee reporter"""

    pass


class MissingCredentialError(ChargeFeeError):
    """Stripe secret key is not configured"""

    pass


class NoChargesFoundError(ChargeFeeError):
    """Account has no charges to fall back on"""

    pass


class StripeAPIError(ChargeFeeError):
    """Stripe API returned an error or is unavailable"""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(StripeAPIError):
    """Requested Stripe object does not exist"""

    pass


class AuthError(StripeAPIError):
    """Stripe rejected the API key"""

    pass


class TransportError(StripeAPIError):
    """Network failure, timeout, or unexpected HTTP status"""

    pass


class MalformedResponseError(StripeAPIError):
    """Stripe payload is missing fields or has unexpected types"""

    pass
