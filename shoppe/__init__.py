"""
Shoppe client package.

Data-access layer of the Shoppe shopping application: HTTP clients for
the commerce backend and payment provider, the repository the UI layer
consumes, and the device-local preference store.
"""

__version__ = "1.0.0"
__description__ = "Data-access layer for the Shoppe shopping application"

from .config import settings
from .exceptions import (
    DecodeFailure,
    NetworkFailure,
    NotFoundError,
    ServerError,
    TransportFailure,
    ValidationError,
)
from .repositories import IShopRepository, RemoteShopRepository

__all__ = [
    "DecodeFailure",
    "IShopRepository",
    "NetworkFailure",
    "NotFoundError",
    "RemoteShopRepository",
    "ServerError",
    "TransportFailure",
    "ValidationError",
    "settings",
    "__version__",
]
