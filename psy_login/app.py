from datetime import timedelta
import secrets

from flask import Flask, request, redirect, session
from flask_wtf.csrf import CSRFProtect, CSRFError, generate_csrf
from markupsafe import Markup

from psy_login import auth_client
from psy_login.config import (
    APP_ENV,
    LOGIN_REDIRECT_URL,
    LOGIN_URL,
    MESSAGES,
    SECRET_KEY,
)
from psy_login.logger import setup_logger
from psy_login.services.login_service import build_view_model, validate_login_input
from psy_login.views.login_view import render_login, render_page

# ==========================================================
# APP SETUP
# ==========================================================
if not SECRET_KEY and APP_ENV == "production":
    raise RuntimeError("SECRET_KEY env var not set")

app = Flask(__name__)
app.secret_key = SECRET_KEY or secrets.token_hex(32)
app.config.update(
    SESSION_COOKIE_HTTPONLY=True,
    SESSION_COOKIE_SAMESITE="Lax",
    SESSION_COOKIE_SECURE=APP_ENV == "production",
    PERMANENT_SESSION_LIFETIME=timedelta(days=30),
)
csrf = CSRFProtect(app)
logger = setup_logger()

PAGE_TITLE = "Вход в систему"


# ==========================================================
# HELPERS
# ==========================================================
def csrf_field() -> Markup:
    return Markup('<input type="hidden" name="csrf_token" value="%s">') % generate_csrf()


def render_login_page(username=None, error=None, field_errors=None, status=200):
    view_model = build_view_model(
        request.args,
        username=username,
        error=error,
        field_errors=field_errors,
    )
    return render_page(render_login(view_model, csrf_field), PAGE_TITLE), status


# ==========================================================
# ROUTES
# ==========================================================
@app.route(LOGIN_URL, methods=["GET", "POST"])
def login():
    if request.method == "GET":
        if session.get("authenticated"):
            return redirect(LOGIN_REDIRECT_URL)
        return render_login_page()

    username = request.form.get("username", "")
    password = request.form.get("password", "")
    remember = "remember" in request.form
    remote = request.remote_addr or "unknown"

    errors = validate_login_input(username, password)
    if errors:
        logger.info("login input rejected fields=%s from=%s", ",".join(sorted(errors)), remote)
        return render_login_page(username=username, field_errors=errors)

    try:
        accepted = auth_client.verify_credentials(username, password)
    except auth_client.AuthServiceError:
        logger.exception("auth service failure user=%r from=%s", username, remote)
        return render_login_page(username=username, error=MESSAGES["login_failed"])

    if not accepted:
        logger.warning("login failed user=%r from=%s", username, remote)
        return render_login_page(username=username, error=MESSAGES["invalid_credentials"])

    session.clear()
    session["authenticated"] = True
    session["username"] = username
    session.permanent = remember

    logger.info("login ok user=%r remember=%s from=%s", username, remember, remote)
    return redirect(LOGIN_REDIRECT_URL)


@app.route("/logout")
def logout():
    username = session.get("username")
    session.clear()
    logger.info("logout user=%r", username)
    return redirect(f"{LOGIN_URL}?logged_out=1")


@app.errorhandler(CSRFError)
def handle_csrf_error(e):
    logger.warning("csrf check failed: %s", e.description)
    return render_login_page(
        username=request.form.get("username", ""),
        error=MESSAGES["csrf_failed"],
        status=400,
    )


# ==========================================================
# ENTRY POINT
# ==========================================================
if __name__ == "__main__":
    logger.info("Starting login service env=%s", APP_ENV)
    app.run(debug=APP_ENV == "development")
