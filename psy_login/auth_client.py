import requests

from psy_login.config import AUTH_API_URL, AUTH_API_TIMEOUT

HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}

# Status codes the auth service uses for "wrong username or password"
REJECTED_STATUSES = {401, 403}


class AuthServiceError(Exception):
    """The auth service could not be reached or answered unexpectedly."""


def verify_credentials(username, password, base_url=None, timeout=None):
    """
    Ask the external auth service whether the credentials are valid.

    Returns True when accepted, False when rejected. Any other outcome
    raises AuthServiceError.
    """
    url = f"{(base_url or AUTH_API_URL).rstrip('/')}/login"

    try:
        r = requests.post(
            url,
            headers=HEADERS,
            json={"username": username, "password": password},
            timeout=timeout or AUTH_API_TIMEOUT,
        )
        if r.status_code in REJECTED_STATUSES:
            return False
        r.raise_for_status()
    except requests.RequestException as exc:
        raise AuthServiceError(str(exc)) from exc

    return True
