from __future__ import annotations

from typing import Iterable

from ..core.enums import ChecklistType
from ..signoffs.model import SignoffRecord
from .mailer import Mailer


def compose_signoff_email(record: SignoffRecord, *, overwrote: bool) -> tuple[str, str]:
    """Subject and plain-text body for one recorded sign-off."""
    label = record.checklist_type.label
    day = record.signoff_date.isoformat()

    subject = f"{label} Sign-Off Overwrite {day}" if overwrote else f"{label} Sign-Off {day}"

    lines = [f"{label} sign-off for {day}"]
    if record.checklist_type == ChecklistType.MONTHLY:
        lines.append(f"Director: {record.director_name or '-'}")
    else:
        lines.append(f"Manager: {record.manager_name or '-'}")
        lines.append(f"Deputy: {record.deputy_name or '-'}")
    if record.fridge_temperature is not None:
        lines.append(f"Fridge temperature: {record.fridge_temperature:g} C")
    if record.notes:
        lines.append(f"Notes: {record.notes}")
    if overwrote:
        lines.append(f"Overwrites used: {record.overwrites_used}")
    lines.append(f"Signed at: {record.signoff_timestamp:%Y-%m-%d %H:%M}")

    return subject, "\n".join(lines) + "\n"


class SignoffNotifier:
    """Emails the staff list after each recorded sign-off."""

    def __init__(self, mailer: Mailer, recipients: Iterable[str]):
        self._mailer = mailer
        self._recipients = list(recipients)

    def notify(self, record: SignoffRecord, *, overwrote: bool) -> None:
        subject, body = compose_signoff_email(record, overwrote=overwrote)
        self._mailer.send(to=self._recipients, subject=subject, text=body)
