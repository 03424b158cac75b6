from __future__ import annotations

import math
import re
from typing import Iterable, Optional

from ..core.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

# fridge_temperature is DECIMAL(5, 2)
MAX_ABS_TEMPERATURE = 1000


def require_text(value, field_name: str) -> str:
    """JSON bodies can carry numbers or lists where a string is expected."""
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    return value


def require_non_empty(value, field_name: str) -> str:
    value = require_text(value, field_name)
    if not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def normalize_email(value) -> str:
    return require_text(value, "Email").strip().lower()


def optional_text(value, field_name: str = "Field") -> Optional[str]:
    """Blank form values count as not supplied."""
    if value is None:
        return None
    value = require_text(value, field_name).strip()
    return value or None


def optional_float(value, field_name: str) -> Optional[float]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not math.isfinite(number) or abs(number) >= MAX_ABS_TEMPERATURE:
        raise ValidationError(f"{field_name} must be between -{MAX_ABS_TEMPERATURE} and {MAX_ABS_TEMPERATURE}")
    return number


def parse_allowed_emails(emails: Iterable[str]) -> frozenset[str]:
    """Validate the configured allow-list; called once at startup."""
    allowed = set()
    for raw in emails:
        email = normalize_email(raw)
        if not _EMAIL_RE.match(email):
            raise ValidationError(f"Allow-list entry {raw!r} is not an email address")
        allowed.add(email)
    if not allowed:
        raise ValidationError("ALLOWED_EMAILS must list at least one email address")
    return frozenset(allowed)
