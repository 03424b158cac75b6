from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import ChecklistType


@dataclass(frozen=True)
class SignoffFields:
    """Optional payload of one submission; None means not supplied."""

    manager_name: Optional[str] = None
    deputy_name: Optional[str] = None
    director_name: Optional[str] = None
    fridge_temperature: Optional[float] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class SignoffRecord:
    """One row of the sign-off ledger, unique per (checklist_type, signoff_date)."""

    signoff_id: Optional[int]
    checklist_type: ChecklistType
    signoff_date: date
    overwrites_used: int
    signoff_timestamp: datetime
    manager_name: Optional[str] = None
    deputy_name: Optional[str] = None
    director_name: Optional[str] = None
    fridge_temperature: Optional[float] = None
    notes: Optional[str] = None

    def to_json(self) -> dict:
        return {
            "id": self.signoff_id,
            "checklistType": self.checklist_type.value,
            "date": self.signoff_date.isoformat(),
            "managerName": self.manager_name,
            "deputyName": self.deputy_name,
            "directorName": self.director_name,
            "overwritesUsed": self.overwrites_used,
            "signoffTimestamp": self.signoff_timestamp.isoformat(),
            "fridgeTemperature": self.fridge_temperature,
            "notes": self.notes,
        }


@dataclass(frozen=True)
class UpsertResult:
    locked: bool
    overwrote: bool
    record: Optional[SignoffRecord] = None
