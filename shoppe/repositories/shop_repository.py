"""
Shop repository interface (Abstract Base Class).

Defines the data-access contract the UI layer consumes. Every method is a
coroutine that yields exactly one value or raises exactly one
``NetworkFailure``.
"""

from abc import ABC, abstractmethod
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


class IShopRepository(ABC):
    """
    Abstract repository for customers, draft orders, catalog and checkout.

    Implementations must not cache, retry or translate errors.
    """

    @abstractmethod
    async def get_customer(self, customer_id: int) -> Customer:
        """
        Fetch a customer by id.

        Raises:
            NotFoundError: If no customer has this id
        """
        pass

    @abstractmethod
    async def create_customer(self, request: CustomerCreate) -> Customer:
        """
        Create a customer.

        Raises:
            ValidationError: If the server rejects the payload
        """
        pass

    @abstractmethod
    async def update_customer(self, customer_id: int, request: CustomerUpdate) -> Customer:
        """
        Update a customer.

        Raises:
            NotFoundError: If no customer has this id
        """
        pass

    @abstractmethod
    async def get_customer_by_email(self, email: str) -> Customer:
        """
        Look a customer up by email.

        Raises:
            NotFoundError: If no customer matches
        """
        pass

    @abstractmethod
    async def add_customer_address(self, customer_id: int, address: Address) -> Address:
        pass

    @abstractmethod
    async def update_customer_address(
        self, customer_id: int, address_id: int, address: Address
    ) -> Address:
        pass

    @abstractmethod
    async def set_default_address(self, customer_id: int, address_id: int) -> Address:
        pass

    @abstractmethod
    async def delete_customer_address(self, customer_id: int, address_id: int) -> None:
        pass

    @abstractmethod
    async def create_draft_order(self, draft: DraftOrder) -> DraftOrder:
        pass

    @abstractmethod
    async def get_draft_order(self, draft_order_id: int) -> DraftOrder:
        """
        Fetch a draft order by id.

        Raises:
            NotFoundError: If no draft order has this id
        """
        pass

    @abstractmethod
    async def update_draft_order(self, draft_order_id: int, draft: DraftOrder) -> DraftOrder:
        pass

    @abstractmethod
    async def get_brands(self) -> List[Brand]:
        pass

    @abstractmethod
    async def get_brand_products(self, vendor: str) -> List[Product]:
        pass

    @abstractmethod
    async def get_product_by_id(self, product_id: int) -> Product:
        """
        Fetch a product by id.

        Raises:
            NotFoundError: If no product has this id
        """
        pass

    @abstractmethod
    async def get_discount_codes(self) -> List[PriceRule]:
        pass

    @abstractmethod
    async def create_order(self, order: OrderCreate) -> Order:
        pass

    @abstractmethod
    async def get_order(self, order_id: int) -> Order:
        pass

    @abstractmethod
    async def get_customer_orders(self, customer_id: int) -> List[Order]:
        pass

    @abstractmethod
    async def create_checkout_session(self, request: CheckoutSessionCreate) -> CheckoutSession:
        pass
