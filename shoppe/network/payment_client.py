"""HTTP client for the payment provider's hosted checkout."""

from typing import Optional

import httpx
import structlog

from ..config import settings
from ..models import CheckoutSession, CheckoutSessionCreate
from .base_client import BaseAPIClient

logger = structlog.get_logger(__name__)


class PaymentClient(BaseAPIClient):
    """
    Client for creating checkout sessions.

    Requests are form-encoded and authenticated with a bearer secret key;
    the API version is pinned through the ``Stripe-Version`` header.
    """

    service_name = "payment"

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        api_version: Optional[str] = None,
        success_url: Optional[str] = None,
        cancel_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        api_key = api_key if api_key is not None else settings.PAYMENT_API_KEY
        headers = {"Stripe-Version": api_version or settings.PAYMENT_API_VERSION}
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"

        self.success_url = success_url or settings.SUCCESS_URL
        self.cancel_url = cancel_url or settings.CANCEL_URL

        super().__init__(
            base_url or settings.PAYMENT_API_URL,
            timeout=timeout,
            headers=headers,
            transport=transport,
        )

    async def create_checkout_session(self, request: CheckoutSessionCreate) -> CheckoutSession:
        """
        Create a hosted checkout session for a single line item.

        Args:
            request: Checkout details; redirect URLs default to the configured ones

        Returns:
            The created session, whose ``url`` the buyer is sent to
        """
        payload = await self._request(
            "POST",
            "v1/checkout/sessions",
            resource="CheckoutSession",
            data=request.to_form(self.success_url, self.cancel_url),
        )
        session = self._decode(payload, "checkout_session", CheckoutSession)
        logger.info(
            "checkout_session_created",
            session_id=session.id,
            amount_total=session.amount_total,
            currency=session.currency,
        )
        return session
