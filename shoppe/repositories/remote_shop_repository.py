"""
Remote shop repository.

Pass-through facade over the commerce and payment clients. It adds no
caching, retry or transformation; errors propagate unchanged.
"""

from typing import List

from ..models import (
    Address,
    Brand,
    CheckoutSession,
    CheckoutSessionCreate,
    Customer,
    CustomerCreate,
    CustomerUpdate,
    DraftOrder,
    Order,
    OrderCreate,
    PriceRule,
    Product,
)
from ..network.commerce_client import CommerceClient
from ..network.payment_client import PaymentClient
from .shop_repository import IShopRepository


class RemoteShopRepository(IShopRepository):
    """Repository backed directly by the remote APIs."""

    def __init__(self, commerce_client: CommerceClient, payment_client: PaymentClient):
        self._commerce = commerce_client
        self._payment = payment_client

    async def get_customer(self, customer_id: int) -> Customer:
        return await self._commerce.get_customer(customer_id)

    async def create_customer(self, request: CustomerCreate) -> Customer:
        return await self._commerce.create_customer(request)

    async def update_customer(self, customer_id: int, request: CustomerUpdate) -> Customer:
        return await self._commerce.update_customer(customer_id, request)

    async def get_customer_by_email(self, email: str) -> Customer:
        return await self._commerce.get_customer_by_email(email)

    async def add_customer_address(self, customer_id: int, address: Address) -> Address:
        return await self._commerce.add_customer_address(customer_id, address)

    async def update_customer_address(
        self, customer_id: int, address_id: int, address: Address
    ) -> Address:
        return await self._commerce.update_customer_address(customer_id, address_id, address)

    async def set_default_address(self, customer_id: int, address_id: int) -> Address:
        return await self._commerce.set_default_address(customer_id, address_id)

    async def delete_customer_address(self, customer_id: int, address_id: int) -> None:
        await self._commerce.delete_customer_address(customer_id, address_id)

    async def create_draft_order(self, draft: DraftOrder) -> DraftOrder:
        return await self._commerce.create_draft_order(draft)

    async def get_draft_order(self, draft_order_id: int) -> DraftOrder:
        return await self._commerce.get_draft_order(draft_order_id)

    async def update_draft_order(self, draft_order_id: int, draft: DraftOrder) -> DraftOrder:
        return await self._commerce.update_draft_order(draft_order_id, draft)

    async def get_brands(self) -> List[Brand]:
        return await self._commerce.get_brands()

    async def get_brand_products(self, vendor: str) -> List[Product]:
        return await self._commerce.get_brand_products(vendor)

    async def get_product_by_id(self, product_id: int) -> Product:
        return await self._commerce.get_product_by_id(product_id)

    async def get_discount_codes(self) -> List[PriceRule]:
        return await self._commerce.get_discount_codes()

    async def create_order(self, order: OrderCreate) -> Order:
        return await self._commerce.create_order(order)

    async def get_order(self, order_id: int) -> Order:
        return await self._commerce.get_order(order_id)

    async def get_customer_orders(self, customer_id: int) -> List[Order]:
        return await self._commerce.get_customer_orders(customer_id)

    async def create_checkout_session(self, request: CheckoutSessionCreate) -> CheckoutSession:
        return await self._payment.create_checkout_session(request)
