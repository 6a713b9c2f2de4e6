"""
Login page rendering.

`render_login` is a pure function of its inputs: the ViewModel built by the
controller and a CSRF field provider. Every string from the ViewModel goes
through Jinja's autoescaping; the only markup injected unescaped is the
token field returned by the provider.
"""
from dataclasses import dataclass, field
from typing import Callable, Mapping, NamedTuple

from jinja2 import Environment
from markupsafe import Markup

from psy_login.config import (
    APP_NAME,
    APP_VERSION,
    AUTOFOCUS_DELAY_MS,
    BANNER_AUTO_CLOSE_MS,
    BANNER_STYLES,
    DEMO_NOTICE_DELAY_MS,
    DEMO_PASSWORD,
    DEMO_SESSION_MINUTES,
    DEMO_USERNAME,
    ERROR_BANNER_TITLE,
    FLAG_BANNERS,
    FORGOT_PASSWORD_URL,
    LOGIN_URL,
    MESSAGES,
    NOTIFICATION_TTL_MS,
    QUERY_FLAGS,
)
from psy_login.templates.layout import LAYOUT_TEMPLATE
from psy_login.templates.login import LOGIN_TEMPLATE


@dataclass(frozen=True)
class ViewModel:
    username: str | None = None
    error: str | None = None
    field_errors: Mapping[str, str] = field(default_factory=dict)
    query_flags: frozenset = frozenset()


class Banner(NamedTuple):
    kind: str      # "error" or one of QUERY_FLAGS
    level: str     # key of BANNER_STYLES
    title: str
    message: str


_env = Environment(autoescape=True, trim_blocks=True, lstrip_blocks=True)
_login_template = _env.from_string(LOGIN_TEMPLATE)
_layout_template = _env.from_string(LAYOUT_TEMPLATE)

# Shared with the page script so both sides use the same constants
CLIENT_CONFIG = {
    "demoUsername": DEMO_USERNAME,
    "demoPassword": DEMO_PASSWORD,
    "demoNoticeDelayMs": DEMO_NOTICE_DELAY_MS,
    "autofocusDelayMs": AUTOFOCUS_DELAY_MS,
    "messages": {
        "demoFilled": MESSAGES["demo_filled"],
        "outdatedBrowser": MESSAGES["outdated_browser"],
    },
}


def banners_for(view_model: ViewModel) -> list[Banner]:
    """
    All conditional banner rules, in display order:
    error -> expired -> logged_out -> registered.
    """
    banners = []

    if view_model.error:
        banners.append(Banner("error", "error", ERROR_BANNER_TITLE, view_model.error))

    for flag in QUERY_FLAGS:
        if flag in view_model.query_flags:
            title, message, level = FLAG_BANNERS[flag]
            banners.append(Banner(flag, level, title, message))

    return banners


def render_login(view_model: ViewModel, csrf_field: Callable[[], str]) -> Markup:
    # Provider runs first: a failing provider means no form at all
    token_field = Markup(csrf_field())

    return Markup(_login_template.render(
        vm=view_model,
        banners=banners_for(view_model),
        banner_styles=BANNER_STYLES,
        csrf_field=token_field,
        app_name=APP_NAME,
        login_url=LOGIN_URL,
        forgot_password_url=FORGOT_PASSWORD_URL,
        demo_username=DEMO_USERNAME,
        demo_password=DEMO_PASSWORD,
        demo_minutes=DEMO_SESSION_MINUTES,
        client_config=CLIENT_CONFIG,
    ))


def render_page(content: Markup, page_title: str | None = None) -> Markup:
    """Wrap a rendered fragment into the full HTML document."""
    return Markup(_layout_template.render(
        content=Markup(content),
        page_title=page_title,
        app_name=APP_NAME,
        app_version=APP_VERSION,
        notification_ttl_ms=NOTIFICATION_TTL_MS,
        banner_auto_close_ms=BANNER_AUTO_CLOSE_MS,
    ))
