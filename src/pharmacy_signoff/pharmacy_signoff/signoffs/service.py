from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import last_weekday_of_month, now_local
from ..core.constants import MAX_OVERWRITES
from ..core.enums import ChecklistType
from ..core.exceptions import NotificationError, SignoffLockedError, ValidationError
from ..notifications.service import SignoffNotifier
from .model import SignoffFields, SignoffRecord, UpsertResult
from .repository import SignoffRepository

logger = logging.getLogger(__name__)


def ensure_monthly_eligible(signoff_date: date) -> None:
    """Monthly sign-offs are only taken on the last weekday of the month."""
    expected = last_weekday_of_month(signoff_date)
    if signoff_date != expected:
        raise ValidationError(
            f"Monthly sign-off only if last weekday of the month ({expected.isoformat()})."
        )


class SignoffService:
    """Use case: record daily/weekly/monthly sign-offs and list the ledger."""

    def __init__(
        self,
        signoffs: SignoffRepository,
        notifier: SignoffNotifier,
        *,
        max_overwrites: int = MAX_OVERWRITES,
    ):
        self._signoffs = signoffs
        self._notifier = notifier
        self._max_overwrites = int(max_overwrites)

    def submit(
        self,
        checklist_type: ChecklistType,
        signoff_date: date,
        fields: SignoffFields,
        *,
        now: Optional[datetime] = None,
    ) -> UpsertResult:
        if checklist_type == ChecklistType.MONTHLY:
            ensure_monthly_eligible(signoff_date)

        result = self._signoffs.upsert(
            checklist_type=checklist_type,
            signoff_date=signoff_date,
            fields=fields,
            now=now or now_local(),
            max_overwrites=self._max_overwrites,
        )
        if result.locked:
            logger.info("%s sign-off for %s is locked", checklist_type.label, signoff_date)
            raise SignoffLockedError(
                f"{checklist_type.label} sign-off locked after {self._max_overwrites} overwrites."
            )

        logger.info(
            "%s sign-off for %s %s (overwrites used: %s)",
            checklist_type.label,
            signoff_date,
            "overwritten" if result.overwrote else "recorded",
            result.record.overwrites_used,
        )

        # The ledger write is already committed; a mail failure is reported, not rolled back.
        try:
            self._notifier.notify(result.record, overwrote=result.overwrote)
        except NotificationError:
            logger.exception("Sign-off email failed for %s %s", checklist_type.value, signoff_date)
            raise
        return result

    def submit_daily(
        self,
        signoff_date: date,
        *,
        manager_name: Optional[str],
        deputy_name: Optional[str],
        fridge_temperature: Optional[float] = None,
        notes: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> UpsertResult:
        fields = SignoffFields(
            manager_name=manager_name,
            deputy_name=deputy_name,
            fridge_temperature=fridge_temperature,
            notes=notes,
        )
        return self.submit(ChecklistType.DAILY, signoff_date, fields, now=now)

    def submit_weekly(
        self,
        signoff_date: date,
        *,
        manager_name: Optional[str],
        deputy_name: Optional[str],
        notes: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> UpsertResult:
        fields = SignoffFields(manager_name=manager_name, deputy_name=deputy_name, notes=notes)
        return self.submit(ChecklistType.WEEKLY, signoff_date, fields, now=now)

    def submit_monthly(
        self,
        signoff_date: date,
        *,
        director_name: Optional[str],
        notes: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> UpsertResult:
        fields = SignoffFields(director_name=director_name, notes=notes)
        return self.submit(ChecklistType.MONTHLY, signoff_date, fields, now=now)

    def history(self) -> Sequence[SignoffRecord]:
        return self._signoffs.list_all()
