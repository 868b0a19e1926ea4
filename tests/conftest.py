"""
Shoppe client tests - test configuration.

Provides sample backend payloads and a per-test preference store.
Client builders live in ``fakes.py``.
"""

from typing import Any, Dict, List

import pytest
import structlog

from shoppe.preferences import PreferenceStore


@pytest.fixture(autouse=True)
def clear_log_context() -> None:
    """Drop request ids bound by a previous test."""
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def customer_payload() -> Dict[str, Any]:
    """
    Sample customer as the backend returns it.

    Returns:
        Dictionary with customer fields, without envelope
    """
    return {
        "id": 42,
        "first_name": "Alice",
        "last_name": "Nader",
        "email": "alice@example.com",
        "phone": "+201000000000",
        "currency": "EGP",
        "note": "1001",
        "multipass_identifier": "1002",
        "tags": "",
        "verified_email": True,
        "orders_count": 2,
        "total_spent": "199.90",
        "addresses": [],
        "created_at": "2024-05-01T10:00:00+02:00",
    }


@pytest.fixture
def product_payload() -> Dict[str, Any]:
    """Sample product with two variants."""
    return {
        "id": 5,
        "title": "ADIDAS | CLASSIC BACKPACK",
        "vendor": "ADIDAS",
        "product_type": "ACCESSORIES",
        "tags": "adidas, backpack, egnition-sample-data",
        "variants": [
            {"id": 501, "product_id": 5, "title": "OS / black", "price": "70.00"},
            {"id": 502, "product_id": 5, "title": "OS / blue", "price": "75.00"},
        ],
        "images": [{"id": 9, "src": "https://cdn.test/backpack.jpg"}],
    }


@pytest.fixture
def brands_payload() -> List[Dict[str, Any]]:
    """Sample brands (smart collections)."""
    return [
        {"id": 1, "title": "ADIDAS", "handle": "adidas"},
        {"id": 2, "title": "NIKE", "handle": "nike"},
    ]


@pytest.fixture
def preference_store(tmp_path) -> PreferenceStore:
    """Preference store in a per-test directory."""
    return PreferenceStore(directory=tmp_path, namespace="UserInfo")


def pytest_configure(config: Any) -> None:
    """
    Configure pytest with custom markers.

    Args:
        config: Pytest configuration object
    """
    config.addinivalue_line(
        "markers",
        "asyncio: mark test as async",
    )
