import pytest

from psy_login.config import MESSAGES
from psy_login.services.login_service import build_view_model, parse_query_flags, validate_login_input


# -------------------------------------------------
# parse_query_flags tests
# -------------------------------------------------

def test_flags_require_literal_one():
    args = {"expired": "1", "logged_out": "true", "registered": "01"}
    assert parse_query_flags(args) == frozenset({"expired"})


def test_unknown_params_ignored():
    assert parse_query_flags({"foo": "1"}) == frozenset()


def test_all_flags():
    args = {"expired": "1", "logged_out": "1", "registered": "1"}
    assert parse_query_flags(args) == frozenset({"expired", "logged_out", "registered"})


# -------------------------------------------------
# validate_login_input tests
# -------------------------------------------------

@pytest.mark.parametrize("username,expected", [
    ("", MESSAGES["username_required"]),
    ("ab", MESSAGES["username_too_short"]),
    ("a" * 101, MESSAGES["username_too_long"]),
])
def test_username_errors(username, expected):
    assert validate_login_input(username, "secret1")["username"] == expected


@pytest.mark.parametrize("password,expected", [
    ("", MESSAGES["password_required"]),
    ("12345", MESSAGES["password_too_short"]),
])
def test_password_errors(password, expected):
    assert validate_login_input("alice", password)["password"] == expected


def test_boundaries_are_valid():
    assert validate_login_input("abc", "123456") == {}
    assert validate_login_input("a" * 100, "123456") == {}


def test_both_fields_reported():
    assert set(validate_login_input("", "")) == {"username", "password"}


# -------------------------------------------------
# build_view_model tests
# -------------------------------------------------

def test_build_view_model_normalises_empty_values():
    vm = build_view_model({}, username="", error="")
    assert vm.username is None
    assert vm.error is None
    assert vm.field_errors == {}
    assert vm.query_flags == frozenset()


def test_build_view_model_carries_everything():
    vm = build_view_model(
        {"registered": "1"},
        username="alice",
        error="bad",
        field_errors={"password": "short"},
    )
    assert vm.username == "alice"
    assert vm.error == "bad"
    assert vm.field_errors == {"password": "short"}
    assert vm.query_flags == frozenset({"registered"})
