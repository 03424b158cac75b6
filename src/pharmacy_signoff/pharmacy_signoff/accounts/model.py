from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Account:
    """Staff login. Plain data object, no DB access."""

    account_id: int
    email: str
    password_hash: str
    created_at: Optional[datetime] = None
