from __future__ import annotations

import logging

from flask import Flask, jsonify, redirect, url_for

from ..common.auth import form_data, login_required
from ..common.datetime_utils import parse_iso_date
from ..common.validators import optional_float, optional_text
from ..core.constants import DASHBOARD_PAGE
from ..core.enums import ChecklistType
from ..core.exceptions import (
    NotificationError,
    SignoffConflictError,
    SignoffLockedError,
    ValidationError,
)
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.signoff_service

    def _submit(checklist_type: ChecklistType, submit):
        data = form_data()
        try:
            signoff_date = parse_iso_date(data.get("date"))
            submit(signoff_date, data)
        except ValidationError as e:
            return str(e), 400
        except SignoffLockedError as e:
            return str(e), 403
        except SignoffConflictError as e:
            return str(e), 409
        except NotificationError:
            return f"{checklist_type.label} sign-off recorded, but the notification email failed.", 500
        except Exception:
            logger.exception("Error signing off %s", checklist_type.value)
            return f"Error signing off {checklist_type.value}", 500

        flag = f"{checklist_type.value}Signed"
        return redirect(url_for("static", filename=DASHBOARD_PAGE, **{flag: 1}))

    @app.route("/api/signoff/daily", methods=["POST"], endpoint="signoff_daily")
    @login_required
    def signoff_daily():
        return _submit(
            ChecklistType.DAILY,
            lambda day, data: service.submit_daily(
                day,
                manager_name=optional_text(data.get("managerName"), "Manager name"),
                deputy_name=optional_text(data.get("deputyName"), "Deputy name"),
                fridge_temperature=optional_float(data.get("fridgeTemperature"), "Fridge temperature"),
                notes=optional_text(data.get("notes"), "Notes"),
            ),
        )

    @app.route("/api/signoff/weekly", methods=["POST"], endpoint="signoff_weekly")
    @login_required
    def signoff_weekly():
        return _submit(
            ChecklistType.WEEKLY,
            lambda day, data: service.submit_weekly(
                day,
                manager_name=optional_text(data.get("managerName"), "Manager name"),
                deputy_name=optional_text(data.get("deputyName"), "Deputy name"),
                notes=optional_text(data.get("notes"), "Notes"),
            ),
        )

    @app.route("/api/signoff/monthly", methods=["POST"], endpoint="signoff_monthly")
    @login_required
    def signoff_monthly():
        return _submit(
            ChecklistType.MONTHLY,
            lambda day, data: service.submit_monthly(
                day,
                director_name=optional_text(data.get("directorName"), "Director name"),
                notes=optional_text(data.get("notes"), "Notes"),
            ),
        )

    @app.route("/api/history", endpoint="history")
    @login_required
    def history():
        try:
            records = service.history()
        except Exception:
            logger.exception("Failed to fetch signoffs")
            return jsonify({"error": "failed to fetch signoffs"}), 500
        return jsonify([r.to_json() for r in records])
