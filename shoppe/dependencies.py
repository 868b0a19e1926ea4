"""
Shared dependencies for the application.

The composition root: owns the single commerce client, payment client,
repository and preference store of the process. Each is constructed on
first request under a lock; an application or test may install its own
instance with the ``set_*`` functions instead.
"""

import threading
from typing import Optional

import structlog

from .network.commerce_client import CommerceClient
from .network.payment_client import PaymentClient
from .preferences import PreferenceStore
from .repositories.remote_shop_repository import RemoteShopRepository
from .repositories.shop_repository import IShopRepository
from .session import CustomerSession

logger = structlog.get_logger(__name__)

_lock = threading.Lock()

_commerce_client: Optional[CommerceClient] = None
_payment_client: Optional[PaymentClient] = None
_repository: Optional[IShopRepository] = None
_preference_store: Optional[PreferenceStore] = None


def get_commerce_client() -> CommerceClient:
    """Get the process-wide commerce client, creating it on first use."""
    global _commerce_client
    if _commerce_client is None:
        with _lock:
            if _commerce_client is None:
                _commerce_client = CommerceClient()
    return _commerce_client


def get_payment_client() -> PaymentClient:
    """Get the process-wide payment client, creating it on first use."""
    global _payment_client
    if _payment_client is None:
        with _lock:
            if _payment_client is None:
                _payment_client = PaymentClient()
    return _payment_client


def get_repository() -> IShopRepository:
    """
    Get the repository instance for dependency injection.

    Builds a ``RemoteShopRepository`` over the shared clients on first use.
    """
    global _repository
    if _repository is None:
        commerce_client = get_commerce_client()
        payment_client = get_payment_client()
        with _lock:
            if _repository is None:
                _repository = RemoteShopRepository(commerce_client, payment_client)
                logger.info("repository_initialized")
    return _repository


def set_repository(repository: IShopRepository) -> None:
    """Install a repository instance, replacing any existing one."""
    global _repository
    with _lock:
        _repository = repository


def get_preference_store() -> PreferenceStore:
    """Get the process-wide preference store, opening it on first use."""
    global _preference_store
    if _preference_store is None:
        with _lock:
            if _preference_store is None:
                _preference_store = PreferenceStore()
    return _preference_store


def set_preference_store(store: PreferenceStore) -> None:
    """Install a preference store, replacing any existing one."""
    global _preference_store
    with _lock:
        _preference_store = store


def get_session() -> CustomerSession:
    """Session view over the shared preference store."""
    return CustomerSession(get_preference_store())


async def shutdown() -> None:
    """
    Close the HTTP clients and forget every instance.

    Called during application shutdown.
    """
    global _commerce_client, _payment_client, _repository, _preference_store
    with _lock:
        clients = [_commerce_client, _payment_client]
        _commerce_client = None
        _payment_client = None
        _repository = None
        _preference_store = None

    for client in clients:
        if client is not None:
            await client.close()
    logger.info("dependencies_shut_down")
