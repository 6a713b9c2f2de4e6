from psy_login.config import (
    MESSAGES,
    PASSWORD_MIN_LENGTH,
    QUERY_FLAG_ON,
    QUERY_FLAGS,
    USERNAME_MAX_LENGTH,
    USERNAME_MIN_LENGTH,
)
from psy_login.views.login_view import ViewModel


def parse_query_flags(args) -> frozenset:
    # A flag is on only when the parameter is literally "1"
    return frozenset(
        flag for flag in QUERY_FLAGS
        if args.get(flag) == QUERY_FLAG_ON
    )


def validate_login_input(username: str, password: str) -> dict:
    errors = {}

    if not username:
        errors["username"] = MESSAGES["username_required"]
    elif len(username) < USERNAME_MIN_LENGTH:
        errors["username"] = MESSAGES["username_too_short"]
    elif len(username) > USERNAME_MAX_LENGTH:
        errors["username"] = MESSAGES["username_too_long"]

    if not password:
        errors["password"] = MESSAGES["password_required"]
    elif len(password) < PASSWORD_MIN_LENGTH:
        errors["password"] = MESSAGES["password_too_short"]

    return errors


def build_view_model(args, username=None, error=None, field_errors=None) -> ViewModel:
    return ViewModel(
        username=username or None,
        error=error or None,
        field_errors=dict(field_errors or {}),
        query_flags=parse_query_flags(args),
    )
