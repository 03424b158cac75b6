from __future__ import annotations

from functools import wraps

from flask import redirect, request, session, url_for

from ..core.constants import LOGIN_PAGE


def login_required(view):
    """Redirect to the login page unless the session holds a user."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return redirect(url_for("static", filename=LOGIN_PAGE))
        return view(*args, **kwargs)

    return wrapper


def form_data() -> dict:
    """Request body as a flat dict, from a form post or a JSON object."""
    if request.form:
        return request.form.to_dict()
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}
