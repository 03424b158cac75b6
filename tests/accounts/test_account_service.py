from __future__ import annotations

import pytest
from werkzeug.security import check_password_hash

from src.pharmacy_signoff.pharmacy_signoff.accounts.service import INVALID_CREDENTIALS
from src.pharmacy_signoff.pharmacy_signoff.core.exceptions import AuthenticationError, ValidationError


def test_signup_stores_salted_hash(container, accounts_repo):
    account_id = container.account_service.create_account(email=" Manager@Example.com ", password="s3cret")

    account = accounts_repo.get_by_email("manager@example.com")
    assert account.account_id == account_id
    assert account.password_hash != "s3cret"
    assert check_password_hash(account.password_hash, "s3cret")


@pytest.mark.parametrize("password", ["s3cret", "", "a much longer valid passphrase"])
def test_signup_outside_allow_list_always_fails(container, accounts_repo, password):
    with pytest.raises(ValidationError, match="not allowed"):
        container.account_service.create_account(email="intruder@example.com", password=password)

    assert accounts_repo.get_by_email("intruder@example.com") is None


def test_signup_requires_password(container):
    with pytest.raises(ValidationError):
        container.account_service.create_account(email="manager@example.com", password="  ")


def test_signup_twice_is_rejected(container):
    container.account_service.create_account(email="manager@example.com", password="s3cret")
    with pytest.raises(ValidationError, match="already exists"):
        container.account_service.create_account(email="manager@example.com", password="other")


def test_login_success(container):
    account_id = container.account_service.create_account(email="director@example.com", password="s3cret")

    s_user = container.auth_service.authenticate("director@example.com", "s3cret")
    assert s_user.user_id == account_id
    assert s_user.email == "director@example.com"


def test_login_wrong_password_and_unknown_email_look_the_same(container):
    container.account_service.create_account(email="director@example.com", password="s3cret")

    with pytest.raises(AuthenticationError) as wrong_password:
        container.auth_service.authenticate("director@example.com", "nope")
    with pytest.raises(AuthenticationError) as unknown:
        container.auth_service.authenticate("nobody@example.com", "s3cret")

    assert str(wrong_password.value) == str(unknown.value) == INVALID_CREDENTIALS
