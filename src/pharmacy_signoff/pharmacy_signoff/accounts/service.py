from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import normalize_email, parse_allowed_emails, require_non_empty, require_text
from ..core.exceptions import AuthenticationError, ValidationError
from .repository import AccountRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password."


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: int
    email: str


class AuthService:
    """Use case: authenticate a staff account (login)."""

    def __init__(self, accounts: AccountRepository):
        self._accounts = accounts

    def authenticate(self, email: str, password: str) -> SessionUser:
        # Unknown email and wrong password share one message so callers
        # cannot tell which addresses have accounts.
        account = self._accounts.get_by_email(normalize_email(email))
        if not account:
            raise AuthenticationError(INVALID_CREDENTIALS)

        try:
            ok = check_password_hash(account.password_hash, require_text(password, "Password"))
        except ValueError:
            # unknown hash method stored in the row
            ok = False

        if not ok:
            raise AuthenticationError(INVALID_CREDENTIALS)

        return SessionUser(user_id=account.account_id, email=account.email)


class AccountService:
    """Use case: create an account for an allow-listed email (signup)."""

    def __init__(self, accounts: AccountRepository, allowed_emails: Iterable[str]):
        self._accounts = accounts
        self._allowed = parse_allowed_emails(allowed_emails)

    @property
    def allowed_emails(self) -> frozenset[str]:
        return self._allowed

    def create_account(self, *, email: str, password: str) -> int:
        email = normalize_email(email)
        if email not in self._allowed:
            logger.warning("Signup refused for %s: not on the allow-list", email or "<blank>")
            raise ValidationError("Email not allowed to create an account")

        require_non_empty(password, "Password")

        if self._accounts.get_by_email(email):
            raise ValidationError("An account already exists for that email")

        account_id = self._accounts.create_account(
            email=email,
            password_hash=generate_password_hash(password),
        )
        logger.info("Created account %s for %s", account_id, email)
        return account_id
