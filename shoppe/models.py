"""Pydantic models for commerce backend resources and request payloads."""

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Resource(BaseModel):
    """Base for server-owned resources; unknown fields are ignored."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Address(Resource):
    """Customer postal address."""

    id: Optional[int] = None
    customer_id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    name: Optional[str] = None
    company: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    province_code: Optional[str] = None
    country: Optional[str] = None
    country_code: Optional[str] = None
    country_name: Optional[str] = None
    zip: Optional[str] = None
    phone: Optional[str] = None
    default: bool = False


class Customer(Resource):
    """
    Customer account on the commerce backend.

    The favorites and cart draft-order ids live in ``note`` and
    ``multipass_identifier`` respectively.
    """

    id: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    currency: Optional[str] = None
    note: Optional[str] = None
    multipass_identifier: Optional[str] = None
    tags: Optional[str] = None
    verified_email: Optional[bool] = None
    state: Optional[str] = None
    orders_count: Optional[int] = None
    total_spent: Optional[Decimal] = None
    addresses: List[Address] = Field(default_factory=list)
    default_address: Optional[Address] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def display_name(self) -> str:
        """First and last name, falling back to ``name`` then email."""
        full = " ".join(part for part in (self.first_name, self.last_name) if part)
        return full or self.name or self.email or ""


class CustomerCreate(BaseModel):
    """Payload for creating a customer."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: str
    phone: Optional[str] = None
    verified_email: bool = True
    password: Optional[str] = None
    password_confirmation: Optional[str] = None
    send_email_welcome: bool = False
    addresses: List[Address] = Field(default_factory=list)


class CustomerUpdate(BaseModel):
    """Partial update payload; only fields that were set are sent."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    note: Optional[str] = None
    multipass_identifier: Optional[str] = None
    tags: Optional[str] = None


class LineItem(Resource):
    """Line item of a draft order or order."""

    id: Optional[int] = None
    variant_id: Optional[int] = None
    product_id: Optional[int] = None
    title: Optional[str] = None
    variant_title: Optional[str] = None
    sku: Optional[str] = None
    vendor: Optional[str] = None
    quantity: int = 1
    price: Optional[Decimal] = None
    properties: List[Dict[str, Any]] = Field(default_factory=list)


class AppliedDiscount(Resource):
    """Discount applied to a draft order."""

    title: Optional[str] = None
    description: Optional[str] = None
    value: Optional[Decimal] = None
    value_type: Optional[str] = None
    amount: Optional[Decimal] = None


class DraftOrder(Resource):
    """Uncommitted order, editable until completed."""

    id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    status: Optional[str] = None
    currency: Optional[str] = None
    note: Optional[str] = None
    line_items: List[LineItem] = Field(default_factory=list)
    applied_discount: Optional[AppliedDiscount] = None
    subtotal_price: Optional[Decimal] = None
    total_tax: Optional[Decimal] = None
    total_price: Optional[Decimal] = None
    customer: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Image(Resource):
    """Product or collection image."""

    id: Optional[int] = None
    src: Optional[str] = None
    alt: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None


class Brand(Resource):
    """Brand, served by the backend as a smart collection."""

    id: int
    title: str
    handle: Optional[str] = None
    body_html: Optional[str] = None
    image: Optional[Image] = None

    @property
    def vendor(self) -> str:
        """Vendor tag used to filter the brand's products."""
        return self.title


class Variant(Resource):
    """Purchasable variant of a product."""

    id: Optional[int] = None
    product_id: Optional[int] = None
    title: Optional[str] = None
    price: Optional[Decimal] = None
    sku: Optional[str] = None
    inventory_quantity: Optional[int] = None
    option1: Optional[str] = None
    option2: Optional[str] = None


class ProductOption(Resource):
    """Option axis of a product (size, color)."""

    id: Optional[int] = None
    name: Optional[str] = None
    values: List[str] = Field(default_factory=list)


class Product(Resource):
    """Catalog product."""

    id: int
    title: Optional[str] = None
    vendor: Optional[str] = None
    product_type: Optional[str] = None
    body_html: Optional[str] = None
    tags: Optional[str] = None
    status: Optional[str] = None
    variants: List[Variant] = Field(default_factory=list)
    options: List[ProductOption] = Field(default_factory=list)
    images: List[Image] = Field(default_factory=list)
    image: Optional[Image] = None

    @property
    def price(self) -> Optional[Decimal]:
        """Price of the first variant, if any."""
        return self.variants[0].price if self.variants else None


class PriceRule(Resource):
    """Discount code and its terms."""

    id: int
    title: str
    value: Optional[Decimal] = None
    value_type: Optional[str] = None
    target_type: Optional[str] = None
    allocation_method: Optional[str] = None
    usage_limit: Optional[int] = None
    once_per_customer: bool = False
    starts_at: Optional[datetime] = None
    ends_at: Optional[datetime] = None

    @property
    def code(self) -> str:
        return self.title


class Order(Resource):
    """Completed order."""

    id: Optional[int] = None
    name: Optional[str] = None
    order_number: Optional[int] = None
    email: Optional[str] = None
    financial_status: Optional[str] = None
    fulfillment_status: Optional[str] = None
    currency: Optional[str] = None
    line_items: List[LineItem] = Field(default_factory=list)
    subtotal_price: Optional[Decimal] = None
    total_discounts: Optional[Decimal] = None
    total_tax: Optional[Decimal] = None
    total_price: Optional[Decimal] = None
    shipping_address: Optional[Address] = None
    customer: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None


class OrderCreate(BaseModel):
    """Payload for creating an order."""

    line_items: List[LineItem]
    email: Optional[str] = None
    customer: Optional[Dict[str, Any]] = None
    shipping_address: Optional[Address] = None
    financial_status: Optional[str] = None
    currency: Optional[str] = None
    send_receipt: bool = False
    discount_codes: List[Dict[str, Any]] = Field(default_factory=list)


class CheckoutSession(Resource):
    """Hosted checkout session on the payment provider."""

    id: str
    url: Optional[str] = None
    status: Optional[str] = None
    payment_status: Optional[str] = None
    currency: Optional[str] = None
    amount_subtotal: Optional[int] = None
    amount_total: Optional[int] = None
    customer_email: Optional[str] = None
    mode: Optional[str] = None
    success_url: Optional[str] = None
    cancel_url: Optional[str] = None
    expires_at: Optional[int] = None


class CheckoutSessionCreate(BaseModel):
    """Single-item checkout request; amounts are in the currency's minor unit."""

    customer_email: str
    currency: str
    product_name: str
    product_description: str = ""
    unit_amount: int = Field(..., ge=0)
    quantity: int = Field(default=1, ge=1)
    mode: str = "payment"
    payment_method_type: str = "card"
    success_url: Optional[str] = None
    cancel_url: Optional[str] = None

    def to_form(self, success_url: str, cancel_url: str) -> Dict[str, str]:
        """
        Flatten into the provider's bracketed form-field encoding.

        Args:
            success_url: Redirect target used when the request sets none
            cancel_url: Redirect target used when the request sets none

        Returns:
            Form fields ready for a urlencoded POST
        """
        prefix = "line_items[0]"
        form = {
            "success_url": self.success_url or success_url,
            "cancel_url": self.cancel_url or cancel_url,
            "customer_email": self.customer_email,
            f"{prefix}[price_data][currency]": self.currency.lower(),
            f"{prefix}[price_data][product_data][name]": self.product_name,
            f"{prefix}[price_data][unit_amount_decimal]": str(self.unit_amount),
            f"{prefix}[quantity]": str(self.quantity),
            "mode": self.mode,
            "payment_method_types[0]": self.payment_method_type,
        }
        # The provider rejects an empty description
        if self.product_description:
            form[f"{prefix}[price_data][product_data][description]"] = (
                self.product_description
            )
        return form
