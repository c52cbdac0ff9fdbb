"""
HTTP transport for the Steam community site.

Every call carries an explicit timeout.  Network errors (timeouts
included) surface as ``TransportFailure``; a body that is not valid JSON is
returned as ``None`` from ``post_json`` so the caller can treat it as an
unparseable reply.
"""

import requests

from ..config import BASE_URL, REFERER, REQUEST_TIMEOUT, USER_AGENT
from ..errors import TransportFailure
from ..logging_setup import log


def build_session(verify_ssl: bool = True) -> requests.Session:
    """
    Return a requests.Session with browser-like headers pre-configured.

    Args:
        verify_ssl: Whether to verify SSL certificates

    Returns:
        Configured requests.Session instance
    """
    session = requests.Session()
    session.verify = verify_ssl
    # The login endpoints reject requests that do not look like they came
    # from the community site itself.
    session.headers.update({
        "User-Agent": USER_AGENT,
        "Referer": REFERER,
        "Connection": "keep-alive",
    })
    return session


def base_url(path: str = "") -> str:
    return BASE_URL + path


class Transport:
    """Thin wrapper over a cookie-carrying ``requests.Session``."""

    def __init__(self, session: "requests.Session | None" = None,
                 timeout: float = REQUEST_TIMEOUT) -> None:
        self.session = session if session is not None else build_session()
        self.timeout = timeout

    @property
    def cookies(self) -> requests.cookies.RequestsCookieJar:
        return self.session.cookies

    def post_json(self, path: str, data: dict) -> "dict | list | None":
        """POST form *data* to *path*; return the decoded JSON body or None."""
        url = base_url(path)
        try:
            resp = self.session.post(
                url, data=data, timeout=self.timeout, allow_redirects=True,
            )
        except requests.RequestException as exc:
            log.error("POST %s failed: %s", path, exc)
            raise TransportFailure(f"POST {path} failed: {exc}") from exc

        log.debug("POST %s → HTTP %s (%d bytes)", path, resp.status_code, len(resp.content))
        try:
            return resp.json()
        except ValueError:
            log.debug("POST %s returned a non-JSON body: %r", path, resp.text[:120])
            return None

    def get_text(self, path: str, params: "dict | None" = None) -> str:
        """GET *path* and return the body text."""
        url = base_url(path)
        try:
            resp = self.session.get(
                url, params=params, timeout=self.timeout, allow_redirects=True,
            )
            resp.raise_for_status()
        except requests.RequestException as exc:
            log.error("GET %s failed: %s", path, exc)
            raise TransportFailure(f"GET {path} failed: {exc}") from exc

        log.debug("GET %s → HTTP %s (%d bytes)", path, resp.status_code, len(resp.content))
        return resp.text
