from __future__ import annotations

import smtplib
from datetime import date, datetime

import pytest

from src.pharmacy_signoff.pharmacy_signoff.core.enums import ChecklistType
from src.pharmacy_signoff.pharmacy_signoff.core.exceptions import NotificationError
from src.pharmacy_signoff.pharmacy_signoff.notifications import mailer as mailer_module
from src.pharmacy_signoff.pharmacy_signoff.notifications.mailer import MailConfig, SmtpMailer
from src.pharmacy_signoff.pharmacy_signoff.notifications.service import compose_signoff_email
from src.pharmacy_signoff.pharmacy_signoff.signoffs.model import SignoffRecord

CONFIG = MailConfig(
    host="smtp.example.com",
    port=587,
    username="pharmacy@example.com",
    password="app-password",
    from_email="pharmacy@example.com",
)


def _record(**kwargs) -> SignoffRecord:
    base = dict(
        signoff_id=1,
        checklist_type=ChecklistType.DAILY,
        signoff_date=date(2024, 3, 5),
        overwrites_used=0,
        signoff_timestamp=datetime(2024, 3, 5, 9, 30),
        manager_name="Alice",
        deputy_name="Bob",
    )
    base.update(kwargs)
    return SignoffRecord(**base)


def test_compose_daily_email():
    subject, body = compose_signoff_email(_record(fridge_temperature=4.5, notes="door seal ok"), overwrote=False)

    assert subject == "Daily Sign-Off 2024-03-05"
    assert body.startswith("Daily sign-off for 2024-03-05\nManager: Alice\nDeputy: Bob\n")
    assert "Fridge temperature: 4.5 C" in body
    assert "Notes: door seal ok" in body
    assert "Overwrites used" not in body


def test_compose_overwrite_email():
    subject, body = compose_signoff_email(_record(checklist_type=ChecklistType.WEEKLY, overwrites_used=2), overwrote=True)

    assert subject == "Weekly Sign-Off Overwrite 2024-03-05"
    assert "Overwrites used: 2" in body


def test_compose_monthly_email_names_director():
    record = _record(checklist_type=ChecklistType.MONTHLY, manager_name=None, deputy_name=None, director_name="Dee")
    _, body = compose_signoff_email(record, overwrote=False)

    assert "Director: Dee" in body
    assert "Manager" not in body


class FakeSMTP:
    instances: list["FakeSMTP"] = []

    def __init__(self, host, port, timeout=None):
        self.host = host
        self.port = port
        self.calls: list[str] = []
        self.sent = []
        FakeSMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def starttls(self):
        self.calls.append("starttls")

    def login(self, username, password):
        self.calls.append("login")

    def send_message(self, msg, to_addrs=None):
        self.sent.append((msg, to_addrs))


def test_smtp_mailer_sends_plain_text(monkeypatch):
    FakeSMTP.instances = []
    monkeypatch.setattr(mailer_module.smtplib, "SMTP", FakeSMTP)

    SmtpMailer(CONFIG).send(to=["a@example.com", "b@example.com"], subject="Daily Sign-Off", text="body\n")

    server = FakeSMTP.instances[0]
    assert (server.host, server.port) == ("smtp.example.com", 587)
    assert server.calls == ["starttls", "login"]
    msg, to_addrs = server.sent[0]
    assert to_addrs == ["a@example.com", "b@example.com"]
    assert msg["Subject"] == "Daily Sign-Off"
    assert msg["From"] == "Langley Pharmacy <pharmacy@example.com>"
    assert msg.get_content() == "body\n"


def test_smtp_failure_raises_notification_error(monkeypatch):
    class BrokenSMTP(FakeSMTP):
        def send_message(self, msg, to_addrs=None):
            raise smtplib.SMTPRecipientsRefused({})

    monkeypatch.setattr(mailer_module.smtplib, "SMTP", BrokenSMTP)

    with pytest.raises(NotificationError):
        SmtpMailer(CONFIG).send(to=["a@example.com"], subject="s", text="t")


def test_unconfigured_mailer_raises():
    config = MailConfig.from_dict({"host": "smtp.example.com", "port": 587})
    with pytest.raises(NotificationError, match="not configured"):
        SmtpMailer(config).send(to=["a@example.com"], subject="s", text="t")
