from __future__ import annotations

from typing import Optional, Protocol

from .model import Account


class AccountRepository(Protocol):
    """Credential store used by signup and login.

    Services depend on this interface, not on a concrete database.
    """

    def get_by_email(self, email: str) -> Optional[Account]:
        raise NotImplementedError

    def create_account(self, *, email: str, password_hash: str) -> int:
        raise NotImplementedError
