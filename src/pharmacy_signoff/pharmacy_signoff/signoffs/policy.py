"""Overwrite policy for the sign-off ledger.

Pure functions: they decide what a submission does to the stored record and
leave reading and writing to the repository, which runs both inside one
transaction.
"""
from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional

from ..core.constants import MAX_OVERWRITES
from ..core.enums import ChecklistType
from .model import SignoffFields, SignoffRecord, UpsertResult


def _pick(new, old):
    return new if new is not None else old


def apply_submission(
    existing: Optional[SignoffRecord],
    *,
    checklist_type: ChecklistType,
    signoff_date: date,
    fields: SignoffFields,
    now: datetime,
    max_overwrites: int = MAX_OVERWRITES,
) -> UpsertResult:
    """Return the outcome and, unless locked, the record to persist."""
    if existing is None:
        record = SignoffRecord(
            signoff_id=None,
            checklist_type=checklist_type,
            signoff_date=signoff_date,
            overwrites_used=0,
            signoff_timestamp=now,
            manager_name=fields.manager_name,
            deputy_name=fields.deputy_name,
            director_name=fields.director_name,
            fridge_temperature=fields.fridge_temperature,
            notes=fields.notes,
        )
        return UpsertResult(locked=False, overwrote=False, record=record)

    if existing.overwrites_used >= max_overwrites:
        return UpsertResult(locked=True, overwrote=False, record=None)

    record = replace(
        existing,
        overwrites_used=existing.overwrites_used + 1,
        signoff_timestamp=now,
        manager_name=_pick(fields.manager_name, existing.manager_name),
        deputy_name=_pick(fields.deputy_name, existing.deputy_name),
        director_name=_pick(fields.director_name, existing.director_name),
        fridge_temperature=_pick(fields.fridge_temperature, existing.fridge_temperature),
        notes=_pick(fields.notes, existing.notes),
    )
    return UpsertResult(locked=False, overwrote=True, record=record)
