"""
Shoppe client tests - customer session tests.
"""

from typing import Any, Dict
from unittest.mock import patch

import pytest

from shoppe.models import Customer
from shoppe.preferences import PreferenceKey, PreferenceStore
from shoppe.session import DEFAULT_CURRENCY, CustomerSession


@pytest.fixture
def session(preference_store: PreferenceStore) -> CustomerSession:
    return CustomerSession(preference_store)


def test_defaults_for_a_fresh_install(session: CustomerSession) -> None:
    assert session.id == 0
    assert session.name == ""
    assert session.email == ""
    assert session.currency == DEFAULT_CURRENCY == "EGY"
    assert session.is_logged_in is False
    assert session.fav_list_id == 0
    assert session.cart_list_id == 0
    assert session.language_code == "en"
    assert session.onboarding_shown is False


def test_login_stores_customer_and_list_ids(
    session: CustomerSession, customer_payload: Dict[str, Any]
) -> None:
    """The favorites id comes from note, the cart id from multipass_identifier."""
    session.login(Customer.model_validate(customer_payload))

    assert session.id == 42
    assert session.name == "Alice"
    assert session.email == "alice@example.com"
    assert session.phone == "+201000000000"
    assert session.is_logged_in is True
    assert session.fav_list_id == 1001
    assert session.cart_list_id == 1002
    assert session.currency == "EGP"


def test_login_keeps_an_existing_currency_choice(
    session: CustomerSession, customer_payload: Dict[str, Any]
) -> None:
    session.currency = "USD"

    session.login(Customer.model_validate(customer_payload))

    assert session.currency == "USD"


def test_login_without_list_ids(session: CustomerSession) -> None:
    session.login(Customer(id=7, email="bare@example.com", note="not a number"))

    assert session.fav_list_id == 0
    assert session.cart_list_id == 0
    assert session.currency == DEFAULT_CURRENCY


def test_logout_resets_customer_but_keeps_preferences(
    session: CustomerSession, customer_payload: Dict[str, Any]
) -> None:
    session.login(Customer.model_validate(customer_payload))
    session.apply_language("ar")

    session.logout()

    assert session.id == 0
    assert session.name == ""
    assert session.email == ""
    assert session.is_logged_in is False
    assert session.fav_list_id == 0
    assert session.cart_list_id == 0
    assert session.currency == "EGP"
    assert session.language_code == "ar"


def test_sessions_over_one_store_agree(preference_store: PreferenceStore) -> None:
    first = CustomerSession(preference_store)
    second = CustomerSession(preference_store)

    first.fav_list_id = 555

    assert second.fav_list_id == 555
    assert preference_store.retrieve(PreferenceKey.FAV_LIST_ID, "0") == "555"


def test_apply_language(session: CustomerSession, preference_store: PreferenceStore) -> None:
    assert session.apply_language("AR") == "ar"
    assert session.language_code == "ar"
    assert session.language == "Arabic"

    assert session.apply_language("fr") == "en"
    assert preference_store.retrieve(PreferenceKey.LANGUAGE_CODE, "") == "en"
    assert session.language == "English"


def test_mark_onboarding_shown(session: CustomerSession) -> None:
    session.mark_onboarding_shown()

    assert session.onboarding_shown is True


def test_session_survives_a_restart(tmp_path, customer_payload: Dict[str, Any]) -> None:
    CustomerSession(PreferenceStore(directory=tmp_path, namespace="UserInfo")).login(
        Customer.model_validate(customer_payload)
    )

    restored = CustomerSession(PreferenceStore(directory=tmp_path, namespace="UserInfo"))

    assert restored.is_logged_in is True
    assert restored.cart_list_id == 1002


def test_login_and_logout_are_single_writes(
    session: CustomerSession,
    preference_store: PreferenceStore,
    customer_payload: Dict[str, Any],
) -> None:
    """A reader never observes a half-written login or logout."""
    with patch.object(preference_store, "_persist", wraps=preference_store._persist) as persist:
        session.login(Customer.model_validate(customer_payload))
        assert persist.call_count == 1

        session.logout()
        assert persist.call_count == 2


def test_session_survives_store_replacement(tmp_path, customer_payload: Dict[str, Any]) -> None:
    """A session on an old store does not wipe writes made through a new one."""
    old_session = CustomerSession(PreferenceStore(directory=tmp_path, namespace="UserInfo"))
    new_session = CustomerSession(PreferenceStore(directory=tmp_path, namespace="UserInfo"))

    new_session.apply_language("ar")
    old_session.login(Customer.model_validate(customer_payload))

    assert new_session.language_code == "ar"
    assert new_session.id == 42
