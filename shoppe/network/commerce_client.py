"""
HTTP client for the commerce backend's admin REST API.

Provides one coroutine per remote operation on customers, addresses,
draft orders, catalog, discounts and orders. Every call is a single round
trip; failures are raised as ``NetworkFailure`` subclasses.
"""

from typing import List, Optional

import httpx
import structlog

from ..config import settings
from ..exceptions import NotFoundError
from ..models import (
    Address,
    Brand,
    Customer,
    CustomerCreate,
    CustomerUpdate,
    DraftOrder,
    Order,
    OrderCreate,
    PriceRule,
    Product,
)
from .base_client import BaseAPIClient

logger = structlog.get_logger(__name__)


class CommerceClient(BaseAPIClient):
    """
    Client for the commerce admin API.

    Authenticates with basic auth (API key and password) or, when an access
    token is configured, with the ``X-Shopify-Access-Token`` header.
    """

    service_name = "commerce"

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        password: Optional[str] = None,
        access_token: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize the commerce client.

        Args:
            base_url: Admin API base URL (defaults to settings)
            api_key: Basic-auth user (defaults to settings)
            password: Basic-auth password (defaults to settings)
            access_token: Access token (defaults to settings)
            timeout: Transport timeout in seconds (defaults to settings)
            transport: Custom transport for tests
        """
        api_key = api_key if api_key is not None else settings.STORE_API_KEY
        password = password if password is not None else settings.STORE_API_PASSWORD
        access_token = (
            access_token if access_token is not None else settings.STORE_ACCESS_TOKEN
        )

        auth = httpx.BasicAuth(api_key, password) if api_key and password else None
        headers = {"X-Shopify-Access-Token": access_token} if access_token else {}

        super().__init__(
            base_url or settings.STORE_API_URL,
            timeout=timeout,
            auth=auth,
            headers=headers,
            transport=transport,
        )

    # Customers

    async def get_customer(self, customer_id: int) -> Customer:
        """
        Fetch a customer by id.

        Raises:
            NotFoundError: If no customer has this id
        """
        payload = await self._request(
            "GET",
            f"customers/{customer_id}.json",
            resource="Customer",
            identifier=customer_id,
        )
        return self._decode(payload, "customer", Customer)

    async def create_customer(self, request: CustomerCreate) -> Customer:
        """
        Create a customer; the server assigns the id.

        Raises:
            ValidationError: If the payload is rejected (e.g. duplicate email)
        """
        payload = await self._request(
            "POST",
            "customers.json",
            resource="Customer",
            json={"customer": request.model_dump(mode="json", exclude_none=True)},
        )
        customer = self._decode(payload, "customer", Customer)
        logger.info("customer_created", customer_id=customer.id)
        return customer

    async def update_customer(self, customer_id: int, request: CustomerUpdate) -> Customer:
        """
        Update the fields set on ``request``.

        Raises:
            NotFoundError: If no customer has this id
        """
        body = request.model_dump(mode="json", exclude_unset=True)
        body["id"] = customer_id
        payload = await self._request(
            "PUT",
            f"customers/{customer_id}.json",
            resource="Customer",
            identifier=customer_id,
            json={"customer": body},
        )
        return self._decode(payload, "customer", Customer)

    async def get_customer_by_email(self, email: str) -> Customer:
        """
        Look a customer up by email.

        Raises:
            NotFoundError: If no customer matches
        """
        payload = await self._request(
            "GET",
            "customers/search.json",
            resource="Customer",
            params={"email": email},
        )
        customers = self._decode_list(payload, "customers", Customer)
        if not customers:
            raise NotFoundError("Customer", email)

        # The search endpoint may return unrelated customers
        wanted = email.strip().lower()
        for customer in customers:
            if customer.email and customer.email.strip().lower() == wanted:
                return customer

        logger.warning("customer_search_without_match", results=len(customers))
        raise NotFoundError("Customer", email)

    # Addresses

    async def add_customer_address(self, customer_id: int, address: Address) -> Address:
        """Add an address to a customer."""
        payload = await self._request(
            "POST",
            f"customers/{customer_id}/addresses.json",
            resource="Customer",
            identifier=customer_id,
            json={"address": address.model_dump(mode="json", exclude_none=True)},
        )
        return self._decode(payload, "customer_address", Address)

    async def update_customer_address(
        self, customer_id: int, address_id: int, address: Address
    ) -> Address:
        """Replace the fields of an existing address."""
        payload = await self._request(
            "PUT",
            f"customers/{customer_id}/addresses/{address_id}.json",
            resource="Address",
            identifier=address_id,
            json={"address": address.model_dump(mode="json", exclude_none=True)},
        )
        return self._decode(payload, "customer_address", Address)

    async def set_default_address(self, customer_id: int, address_id: int) -> Address:
        """Mark an address as the customer's default."""
        payload = await self._request(
            "PUT",
            f"customers/{customer_id}/addresses/{address_id}.json",
            resource="Address",
            identifier=address_id,
            json={"address": {"default": True}},
        )
        return self._decode(payload, "customer_address", Address)

    async def delete_customer_address(self, customer_id: int, address_id: int) -> None:
        """Delete an address."""
        await self._request(
            "DELETE",
            f"customers/{customer_id}/addresses/{address_id}.json",
            resource="Address",
            identifier=address_id,
        )

    # Draft orders

    async def create_draft_order(self, draft: DraftOrder) -> DraftOrder:
        """Create a draft order."""
        payload = await self._request(
            "POST",
            "draft_orders.json",
            resource="DraftOrder",
            json={"draft_order": draft.model_dump(mode="json", exclude_none=True)},
        )
        return self._decode(payload, "draft_order", DraftOrder)

    async def get_draft_order(self, draft_order_id: int) -> DraftOrder:
        """
        Fetch a draft order by id.

        Raises:
            NotFoundError: If no draft order has this id
        """
        payload = await self._request(
            "GET",
            f"draft_orders/{draft_order_id}.json",
            resource="DraftOrder",
            identifier=draft_order_id,
        )
        return self._decode(payload, "draft_order", DraftOrder)

    async def update_draft_order(self, draft_order_id: int, draft: DraftOrder) -> DraftOrder:
        """
        Replace a draft order's contents.

        Raises:
            NotFoundError: If no draft order has this id
        """
        body = draft.model_dump(mode="json", exclude_none=True)
        body["id"] = draft_order_id
        payload = await self._request(
            "PUT",
            f"draft_orders/{draft_order_id}.json",
            resource="DraftOrder",
            identifier=draft_order_id,
            json={"draft_order": body},
        )
        return self._decode(payload, "draft_order", DraftOrder)

    # Catalog

    async def get_brands(self) -> List[Brand]:
        payload = await self._request("GET", "smart_collections.json", resource="Brand")
        return self._decode_list(payload, "smart_collections", Brand)

    async def get_brand_products(self, vendor: str) -> List[Product]:
        payload = await self._request(
            "GET", "products.json", resource="Product", params={"vendor": vendor}
        )
        return self._decode_list(payload, "products", Product)

    async def get_product_by_id(self, product_id: int) -> Product:
        """
        Fetch a product by id.

        Raises:
            NotFoundError: If no product has this id
        """
        payload = await self._request(
            "GET",
            f"products/{product_id}.json",
            resource="Product",
            identifier=product_id,
        )
        return self._decode(payload, "product", Product)

    async def get_discount_codes(self) -> List[PriceRule]:
        payload = await self._request("GET", "price_rules.json", resource="PriceRule")
        return self._decode_list(payload, "price_rules", PriceRule)

    # Orders

    async def create_order(self, order: OrderCreate) -> Order:
        payload = await self._request(
            "POST",
            "orders.json",
            resource="Order",
            json={"order": order.model_dump(mode="json", exclude_none=True)},
        )
        return self._decode(payload, "order", Order)

    async def get_order(self, order_id: int) -> Order:
        payload = await self._request(
            "GET", f"orders/{order_id}.json", resource="Order", identifier=order_id
        )
        return self._decode(payload, "order", Order)

    async def get_customer_orders(self, customer_id: int) -> List[Order]:
        payload = await self._request(
            "GET",
            f"customers/{customer_id}/orders.json",
            resource="Customer",
            identifier=customer_id,
        )
        return self._decode_list(payload, "orders", Order)
