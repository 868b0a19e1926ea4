"""
Repository layer - data access abstractions.

The UI layer depends on ``IShopRepository``; ``RemoteShopRepository`` is
the implementation backed by the remote APIs.
"""

from .remote_shop_repository import RemoteShopRepository
from .shop_repository import IShopRepository

__all__ = ["IShopRepository", "RemoteShopRepository"]
