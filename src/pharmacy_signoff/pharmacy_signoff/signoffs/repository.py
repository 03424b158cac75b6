from __future__ import annotations

from datetime import date, datetime
from typing import Protocol, Sequence

from ..core.enums import ChecklistType
from .model import SignoffFields, SignoffRecord, UpsertResult


class SignoffRepository(Protocol):
    def upsert(
        self,
        *,
        checklist_type: ChecklistType,
        signoff_date: date,
        fields: SignoffFields,
        now: datetime,
        max_overwrites: int,
    ) -> UpsertResult:
        """Insert, overwrite or refuse (locked) in one read and at most one write."""

        raise NotImplementedError

    def list_all(self) -> Sequence[SignoffRecord]:
        """Whole ledger ordered by date ascending."""

        raise NotImplementedError
