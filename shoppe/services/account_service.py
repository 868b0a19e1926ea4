"""
Account service - sign-up and sign-in sequences.

Each customer owns two draft orders on the backend, one holding favorites
and one holding the cart. Their ids are stored on the customer record
(``note`` and ``multipass_identifier``) so any device can find them again.
"""

from decimal import Decimal

import structlog

from ..models import Customer, CustomerCreate, CustomerUpdate, DraftOrder, LineItem
from ..repositories.shop_repository import IShopRepository
from ..session import CustomerSession

logger = structlog.get_logger(__name__)

# The backend rejects draft orders without line items
PLACEHOLDER_TITLE = "placeholder"


def empty_list_draft() -> DraftOrder:
    """Draft order used as an empty favorites or cart list."""
    return DraftOrder(
        line_items=[LineItem(title=PLACEHOLDER_TITLE, quantity=1, price=Decimal("0.00"))]
    )


class AccountService:
    """Runs the multi-call account flows over the repository."""

    def __init__(self, repository: IShopRepository, session: CustomerSession) -> None:
        self.repository = repository
        self.session = session

    async def register(self, request: CustomerCreate) -> Customer:
        """
        Create a customer together with its favorites and cart lists.

        Args:
            request: Sign-up details

        Returns:
            The customer, updated with both list ids

        Raises:
            NetworkFailure: From whichever call failed; nothing is rolled back
        """
        customer = await self.repository.create_customer(request)
        favorites = await self.repository.create_draft_order(empty_list_draft())
        cart = await self.repository.create_draft_order(empty_list_draft())

        updated = await self.repository.update_customer(
            customer.id,
            CustomerUpdate(note=str(favorites.id), multipass_identifier=str(cart.id)),
        )
        logger.info(
            "customer_registered",
            customer_id=updated.id,
            fav_list_id=favorites.id,
            cart_list_id=cart.id,
        )
        return updated

    async def sign_in(self, email: str) -> Customer:
        """
        Load a customer by email and make it the active session.

        Raises:
            NotFoundError: If no customer has this email
        """
        customer = await self.repository.get_customer_by_email(email)
        self.session.login(customer)
        return customer

    def sign_out(self) -> None:
        self.session.logout()
