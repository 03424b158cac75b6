from __future__ import annotations

from enum import Enum


class ChecklistType(str, Enum):
    """Checklist periods that can be signed off."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"

    @property
    def label(self) -> str:
        return self.value.capitalize()
