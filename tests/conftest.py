from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional

import pytest

from src.pharmacy_signoff.pharmacy_signoff.accounts.model import Account
from src.pharmacy_signoff.pharmacy_signoff.container import assemble
from src.pharmacy_signoff.pharmacy_signoff.core.enums import ChecklistType
from src.pharmacy_signoff.pharmacy_signoff.core.exceptions import NotificationError
from src.pharmacy_signoff.pharmacy_signoff.signoffs.model import SignoffRecord, UpsertResult
from src.pharmacy_signoff.pharmacy_signoff.signoffs.policy import apply_submission

ALLOWED = ["manager@example.com", "director@example.com"]


class InMemoryAccounts:
    def __init__(self):
        self._by_email: dict[str, Account] = {}
        self._id = 0

    def get_by_email(self, email: str) -> Optional[Account]:
        return self._by_email.get(email)

    def create_account(self, *, email: str, password_hash: str) -> int:
        self._id += 1
        self._by_email[email] = Account(account_id=self._id, email=email, password_hash=password_hash)
        return self._id


class InMemorySignoffs:
    def __init__(self):
        self._by_key: dict[tuple[ChecklistType, date], SignoffRecord] = {}
        self._id = 0
        self.reads = 0
        self.writes = 0

    def get(self, checklist_type, signoff_date):
        return self._by_key.get((checklist_type, signoff_date))

    def upsert(self, *, checklist_type, signoff_date, fields, now, max_overwrites):
        self.reads += 1
        existing = self._by_key.get((checklist_type, signoff_date))
        result = apply_submission(
            existing,
            checklist_type=checklist_type,
            signoff_date=signoff_date,
            fields=fields,
            now=now,
            max_overwrites=max_overwrites,
        )
        if result.locked:
            return result
        self.writes += 1
        rec = result.record
        if rec.signoff_id is None:
            self._id += 1
            rec = replace(rec, signoff_id=self._id)
        self._by_key[(checklist_type, signoff_date)] = rec
        return UpsertResult(locked=False, overwrote=result.overwrote, record=rec)

    def list_all(self):
        return sorted(self._by_key.values(), key=lambda r: (r.signoff_date, r.signoff_id))


class RecordingMailer:
    def __init__(self):
        self.sent: list[dict] = []
        self.fail = False

    def send(self, *, to, subject, text):
        if self.fail:
            raise NotificationError("SMTP down")
        self.sent.append({"to": list(to), "subject": subject, "text": text})


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 29, 9, 15, 0)


@pytest.fixture
def accounts_repo():
    return InMemoryAccounts()


@pytest.fixture
def signoffs_repo():
    return InMemorySignoffs()


@pytest.fixture
def mailer():
    return RecordingMailer()


@pytest.fixture
def container(accounts_repo, signoffs_repo, mailer):
    return assemble(
        conn=None,
        accounts_repo=accounts_repo,
        signoffs_repo=signoffs_repo,
        mailer=mailer,
        allowed_emails=ALLOWED,
    )


@pytest.fixture
def app(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.pharmacy_signoff.pharmacy_signoff.main import create_app

    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def logged_in_client(client, container):
    container.account_service.create_account(email="manager@example.com", password="pill-counter")
    resp = client.post("/login", data={"email": "manager@example.com", "password": "pill-counter"})
    assert resp.status_code == 302
    return client
