"""Application services built on the repository."""

from .account_service import AccountService

__all__ = ["AccountService"]
