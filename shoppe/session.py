"""
Typed view of the signed-in customer's session preferences.

Values are read through to the preference store on every access, so
several ``CustomerSession`` objects over one store always agree.
"""

from typing import Optional

import structlog

from .localization import language_name, resolve_locale
from .models import Customer
from .preferences import PreferenceKey, PreferenceStore

logger = structlog.get_logger(__name__)

DEFAULT_CURRENCY = "EGY"


def _to_int(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        return 0


class CustomerSession:
    """Session state of the device's single active customer."""

    def __init__(self, store: PreferenceStore) -> None:
        self._store = store

    def _get(self, key: PreferenceKey, default: str = "") -> str:
        return self._store.retrieve(key, default)

    def _set(self, key: PreferenceKey, value: str) -> None:
        self._store.save(key, value)

    @property
    def id(self) -> int:
        return _to_int(self._get(PreferenceKey.ID, "0"))

    @property
    def name(self) -> str:
        return self._get(PreferenceKey.NAME)

    @property
    def email(self) -> str:
        return self._get(PreferenceKey.EMAIL)

    @property
    def phone(self) -> str:
        return self._get(PreferenceKey.PHONE)

    @property
    def currency(self) -> str:
        return self._get(PreferenceKey.CURRENCY, DEFAULT_CURRENCY)

    @currency.setter
    def currency(self, value: str) -> None:
        self._set(PreferenceKey.CURRENCY, value)

    @property
    def is_logged_in(self) -> bool:
        return self._get(PreferenceKey.IS_LOGGED_IN, "false") == "true"

    @property
    def fav_list_id(self) -> int:
        return _to_int(self._get(PreferenceKey.FAV_LIST_ID, "0"))

    @fav_list_id.setter
    def fav_list_id(self, value: int) -> None:
        self._set(PreferenceKey.FAV_LIST_ID, str(value))

    @property
    def cart_list_id(self) -> int:
        return _to_int(self._get(PreferenceKey.CART_LIST_ID, "0"))

    @cart_list_id.setter
    def cart_list_id(self, value: int) -> None:
        self._set(PreferenceKey.CART_LIST_ID, str(value))

    @property
    def language(self) -> str:
        return self._get(PreferenceKey.LANGUAGE)

    @property
    def language_code(self) -> str:
        return self._get(PreferenceKey.LANGUAGE_CODE, "en")

    @property
    def onboarding_shown(self) -> bool:
        return self._get(PreferenceKey.ONBOARDING_SHOWN, "false") == "true"

    def mark_onboarding_shown(self) -> None:
        self._set(PreferenceKey.ONBOARDING_SHOWN, "true")

    def login(self, customer: Customer) -> None:
        """
        Store a signed-in customer in one atomic write.

        An existing non-empty currency choice is kept; list ids come from the
        customer's ``note`` (favorites) and ``multipass_identifier`` (cart).
        """
        fav_list_id = _parse_list_id(customer.note)
        cart_list_id = _parse_list_id(customer.multipass_identifier)
        values = {
            PreferenceKey.ID: str(customer.id),
            PreferenceKey.NAME: customer.first_name or customer.name or "",
            PreferenceKey.EMAIL: customer.email or "",
            PreferenceKey.PHONE: customer.phone or "",
            PreferenceKey.FAV_LIST_ID: str(fav_list_id),
            PreferenceKey.CART_LIST_ID: str(cart_list_id),
            PreferenceKey.IS_LOGGED_IN: "true",
        }
        if not self._get(PreferenceKey.CURRENCY):
            values[PreferenceKey.CURRENCY] = customer.currency or DEFAULT_CURRENCY
        self._store.save_many(values)

        logger.info(
            "customer_logged_in",
            customer_id=customer.id,
            fav_list_id=fav_list_id,
            cart_list_id=cart_list_id,
        )

    def logout(self) -> None:
        """Reset the customer fields; currency and language survive."""
        self._store.save_many(
            {
                PreferenceKey.ID: "0",
                PreferenceKey.NAME: "",
                PreferenceKey.EMAIL: "",
                PreferenceKey.PHONE: "",
                PreferenceKey.IS_LOGGED_IN: "false",
                PreferenceKey.FAV_LIST_ID: "0",
                PreferenceKey.CART_LIST_ID: "0",
            }
        )
        logger.info("customer_logged_out")

    def apply_language(self, language_code: str) -> str:
        """
        Persist the user's language choice.

        Returns:
            The effective locale code that was stored
        """
        code = resolve_locale(language_code)
        self._store.save_many(
            {
                PreferenceKey.LANGUAGE_CODE: code,
                PreferenceKey.LANGUAGE: language_name(code),
            }
        )
        return code


def _parse_list_id(raw: Optional[str]) -> int:
    """Draft-order id stored in a free-text customer field, or 0."""
    if not raw:
        return 0
    return _to_int(raw.strip())
