from __future__ import annotations

import logging

from flask import Flask, redirect, session, url_for

from ..common.auth import form_data
from ..core.constants import DASHBOARD_PAGE, LOGIN_PAGE
from ..core.exceptions import AuthenticationError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/", endpoint="home")
    def home():
        return redirect(url_for("static", filename=LOGIN_PAGE))

    @app.route("/createaccount", methods=["POST"], endpoint="create_account")
    def create_account():
        data = form_data()
        try:
            container.account_service.create_account(
                email=data.get("email", ""),
                password=data.get("password", ""),
            )
            return redirect(url_for("static", filename=LOGIN_PAGE, accountCreated=1))
        except ValidationError as e:
            return str(e), 400
        except Exception:
            logger.exception("Error creating account")
            return "Error creating account", 500

    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = form_data()
        try:
            s_user = container.auth_service.authenticate(data.get("email", ""), data.get("password", ""))
        except AuthenticationError as e:
            return str(e), 401
        except ValidationError as e:
            return str(e), 400
        except Exception:
            logger.exception("Server error on login")
            return "Server error on login.", 500

        session.clear()
        session.permanent = True
        session["user_id"] = s_user.user_id
        session["email"] = s_user.email
        logger.info("Login: %s", s_user.email)
        return redirect(url_for("static", filename=DASHBOARD_PAGE))

    @app.route("/logout", endpoint="logout")
    def logout():
        session.clear()
        return redirect(url_for("static", filename=LOGIN_PAGE, loggedOut=1))
