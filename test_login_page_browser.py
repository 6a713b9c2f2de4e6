"""Runs the login page script in a real browser (pytest-playwright)."""
import re
from urllib.parse import parse_qs

import pytest
from playwright.sync_api import expect

from psy_login.config import DEMO_PASSWORD, DEMO_USERNAME, LOGIN_URL, MESSAGES
from psy_login.views.login_view import ViewModel, render_login, render_page

pytestmark = pytest.mark.playwright

BASE_URL = "http://login.test"
TOKEN_FIELD = '<input type="hidden" name="csrf_token" value="tok-123">'

# Stand-in for the one tailwind rule the page script relies on
TAILWIND_STUB = ".hidden { display: none !important; }"


@pytest.fixture
def open_login(page):
    """Serve a rendered login page at BASE_URL/login; returns the list of POSTed bodies."""
    posts = []

    def open_(view_model=None, init_script=None):
        html = str(render_page(render_login(view_model or ViewModel(), lambda: TOKEN_FIELD)))

        def handle(route, request):
            if request.method == "POST":
                posts.append(parse_qs(request.post_data or ""))
                route.fulfill(status=200, content_type="text/html", body="<p>posted</p>")
            elif request.url.startswith(BASE_URL + LOGIN_URL):
                route.fulfill(status=200, content_type="text/html; charset=utf-8", body=html)
            elif "tailwind" in request.url:
                route.fulfill(status=200, content_type="text/css", body=TAILWIND_STUB)
            else:
                route.fulfill(status=200, content_type="text/css", body="")

        page.route("**/*", handle)
        if init_script:
            page.add_init_script(init_script)
        page.goto(BASE_URL + LOGIN_URL)
        # let the delayed autofocus settle before the test drives focus
        page.wait_for_function("document.activeElement && document.activeElement.tagName === 'INPUT'")
        return posts

    return open_


# -------------------------------------------------
# page load
# -------------------------------------------------

def test_autofocus_username_when_empty(page, open_login):
    open_login()
    expect(page.locator("#username")).to_be_focused()


def test_autofocus_password_when_username_prefilled(page, open_login):
    open_login(ViewModel(username="alice"))
    expect(page.locator("#password")).to_be_focused()


def test_no_warning_in_modern_browser(page, open_login):
    open_login()
    page.wait_for_timeout(200)
    expect(page.locator("#notifications .notification")).to_have_count(0)


def test_outdated_browser_warning(page, open_login):
    open_login(init_script="window.fetch = undefined;")

    notice = page.locator("#notifications .notification")
    expect(notice).to_have_count(1)
    expect(notice).to_have_class(re.compile(r"\bbg-yellow-100\b"))
    expect(notice).to_have_attribute("role", "alert")
    expect(notice).to_contain_text(MESSAGES["outdated_browser"])


# -------------------------------------------------
# password toggle
# -------------------------------------------------

def test_toggle_password_flips_type_not_value(page, open_login):
    open_login()
    password = page.locator("#password")
    password.fill("secret1")

    page.click("#toggle-password")
    expect(password).to_have_attribute("type", "text")
    expect(password).to_have_value("secret1")
    expect(page.locator("#toggle-password i")).to_have_class(re.compile(r"\bfa-eye-slash\b"))

    page.click("#toggle-password")
    expect(password).to_have_attribute("type", "password")
    expect(password).to_have_value("secret1")


# -------------------------------------------------
# demo modal
# -------------------------------------------------

def test_demo_link_opens_modal_without_navigating(page, open_login):
    open_login()
    modal = page.locator("#demo-modal")
    expect(modal).to_be_hidden()

    page.click("#demo-login")

    expect(modal).to_be_visible()
    assert page.url == BASE_URL + LOGIN_URL


def test_cancel_closes_modal(page, open_login):
    open_login()
    page.click("#demo-login")
    page.click("#close-demo-modal")
    expect(page.locator("#demo-modal")).to_be_hidden()


def test_backdrop_click_closes_but_content_click_does_not(page, open_login):
    open_login()
    modal = page.locator("#demo-modal")
    page.click("#demo-login")

    page.click("#demo-modal-content h3")
    expect(modal).to_be_visible()

    page.locator("#demo-modal [aria-hidden='true']").dispatch_event("click")
    expect(modal).to_be_hidden()


def test_enter_demo_mode_fills_form(page, open_login):
    open_login(ViewModel(username="someone"))
    page.click("#demo-login")
    page.click("#demo-login-btn")

    expect(page.locator("#username")).to_have_value(DEMO_USERNAME)
    expect(page.locator("#password")).to_have_value(DEMO_PASSWORD)
    expect(page.locator("#remember")).to_be_checked()
    expect(page.locator("#demo-modal")).to_be_hidden()
    expect(page.locator("#login-submit")).to_be_focused()

    notice = page.locator("#notifications .notification")
    expect(notice).to_have_count(1)
    expect(notice).to_have_class(re.compile(r"\bbg-blue-100\b"))
    expect(notice).to_have_attribute("role", "status")
    expect(notice).to_contain_text(MESSAGES["demo_filled"])


# -------------------------------------------------
# enter key
# -------------------------------------------------

def test_enter_in_username_moves_to_password(page, open_login):
    posts = open_login()
    page.fill("#username", "alice")

    page.press("#username", "Enter")

    expect(page.locator("#password")).to_be_focused()
    page.wait_for_timeout(200)
    assert posts == []


def test_enter_in_password_submits(page, open_login):
    open_login()
    page.fill("#username", "alice")
    page.fill("#password", "secret1")

    with page.expect_request(lambda r: r.method == "POST") as request_info:
        page.press("#password", "Enter")

    request = request_info.value
    body = parse_qs(request.post_data)
    assert request.url == BASE_URL + LOGIN_URL
    assert body["username"] == ["alice"]
    assert body["password"] == ["secret1"]
    assert body["csrf_token"] == ["tok-123"]
