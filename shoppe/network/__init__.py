"""Remote API clients for the commerce backend and payment provider."""

from .commerce_client import CommerceClient
from .payment_client import PaymentClient

__all__ = ["CommerceClient", "PaymentClient"]
