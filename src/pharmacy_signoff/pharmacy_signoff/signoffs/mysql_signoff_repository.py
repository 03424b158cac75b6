from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Sequence

from mysql.connector import errorcode
from mysql.connector.errors import DatabaseError

from ..core.enums import ChecklistType
from ..core.exceptions import SignoffConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import SignoffFields, SignoffRecord, UpsertResult
from .policy import apply_submission
from .repository import SignoffRepository

_CONFLICT_ERRNOS = (errorcode.ER_DUP_ENTRY, errorcode.ER_LOCK_DEADLOCK)

_COLUMNS = """
    signoff_id, checklist_type, signoff_date, manager_name, deputy_name, director_name,
    overwrites_used, signoff_timestamp, fridge_temperature, notes
"""


def _to_record(r: dict) -> SignoffRecord:
    temperature = r.get("fridge_temperature")
    return SignoffRecord(
        signoff_id=int(r["signoff_id"]),
        checklist_type=ChecklistType(r["checklist_type"]),
        signoff_date=r["signoff_date"],
        overwrites_used=int(r["overwrites_used"]),
        signoff_timestamp=r["signoff_timestamp"],
        manager_name=r.get("manager_name"),
        deputy_name=r.get("deputy_name"),
        director_name=r.get("director_name"),
        fridge_temperature=float(temperature) if temperature is not None else None,
        notes=r.get("notes"),
    )


class MySQLSignoffRepository(SignoffRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert(
        self,
        *,
        checklist_type: ChecklistType,
        signoff_date: date,
        fields: SignoffFields,
        now: datetime,
        max_overwrites: int,
    ) -> UpsertResult:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                # Row lock holds concurrent submissions for the same key until commit.
                cur.execute(
                    f"""
                    SELECT {_COLUMNS} FROM signoffs
                    WHERE checklist_type=%s AND signoff_date=%s
                    FOR UPDATE
                    """,
                    (checklist_type.value, signoff_date),
                )
                r = fetchone(cur)
                existing = _to_record(r) if r else None

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

                rec = result.record
                if existing is None:
                    cur.execute(
                        """
                        INSERT INTO signoffs(
                            checklist_type, signoff_date, manager_name, deputy_name, director_name,
                            overwrites_used, signoff_timestamp, fridge_temperature, notes
                        )
                        VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                        """,
                        (
                            rec.checklist_type.value,
                            rec.signoff_date,
                            rec.manager_name,
                            rec.deputy_name,
                            rec.director_name,
                            rec.overwrites_used,
                            rec.signoff_timestamp,
                            rec.fridge_temperature,
                            rec.notes,
                        ),
                    )
                    return UpsertResult(
                        locked=False,
                        overwrote=False,
                        record=replace(rec, signoff_id=int(cur.lastrowid)),
                    )

                # The row lock from FOR UPDATE keeps overwrites_used as read until commit.
                cur.execute(
                    """
                    UPDATE signoffs
                    SET manager_name=%s, deputy_name=%s, director_name=%s,
                        overwrites_used=%s, signoff_timestamp=%s,
                        fridge_temperature=%s, notes=%s
                    WHERE signoff_id=%s
                    """,
                    (
                        rec.manager_name,
                        rec.deputy_name,
                        rec.director_name,
                        rec.overwrites_used,
                        rec.signoff_timestamp,
                        rec.fridge_temperature,
                        rec.notes,
                        existing.signoff_id,
                    ),
                )
                return result
        except DatabaseError as e:
            # A racing first insert loses on the unique key, or on the gap lock as a deadlock.
            if e.errno in _CONFLICT_ERRNOS:
                raise SignoffConflictError(
                    f"{checklist_type.label} sign-off for {signoff_date} was created by another submission"
                ) from e
            raise

    def list_all(self) -> Sequence[SignoffRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM signoffs ORDER BY signoff_date ASC, signoff_id ASC")
            return [_to_record(r) for r in fetchall(cur)]
