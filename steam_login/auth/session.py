"""
Session bootstrap after a successful login.

Once dologin succeeds the cookie jar is authenticated, and the community
landing page embeds the account id and session id as script variables:

    g_steamID = "76561198000000000";
    g_sessionID = "abc123";

A logged-out page carries ``g_steamID = false;`` instead.
"""

import re

from ..config import (
    ANONYMOUS_STEAM_ID,
    LANDING_PATH,
    LANGUAGE,
    LOGGED_IN_MARKER,
    MARKET_PATH,
    SESSION_ID_MARKER,
    STEAM_ID_MARKER,
)
from ..errors import UnexpectedResponse
from ..logging_setup import log
from ..models import Session
from ..network.client import Transport

_STEAM_ID_RE = re.compile(re.escape(STEAM_ID_MARKER) + r"([^;\r\n]*);")
_SESSION_ID_RE = re.compile(re.escape(SESSION_ID_MARKER) + r"([^;\r\n]*);")


def _marker_value(pattern: re.Pattern, body: str, name: str) -> str:
    m = pattern.search(body)
    if not m:
        raise UnexpectedResponse(f"Unexpected response from Steam: {name} not found on landing page")
    return m.group(1).replace('"', "").strip()


def parse_session(body: str) -> Session:
    """
    Extract the steam id and session id from a landing page *body*.

    Raises UnexpectedResponse when either marker is missing.
    """
    steam_id = _marker_value(_STEAM_ID_RE, body, "g_steamID")
    if steam_id == "false":
        steam_id = ANONYMOUS_STEAM_ID
    session_id = _marker_value(_SESSION_ID_RE, body, "g_sessionID")
    return Session(steam_id=steam_id, session_id=session_id)


def bootstrap_session(transport: Transport) -> Session:
    """Fetch the landing page with the authenticated cookies and parse it."""
    body = transport.get_text(LANDING_PATH, params={"l": LANGUAGE})
    session = parse_session(body)
    if session.is_anonymous:
        log.warning("Landing page reports an anonymous session (g_steamID = false)")
    else:
        log.debug("Session bootstrapped for steam id %s", session.steam_id)
    return session


def is_logged_in(transport: Transport) -> bool:
    """Return True when /market/ shows the wallet balance of a logged-in account."""
    body = transport.get_text(MARKET_PATH, params={"l": LANGUAGE})
    return LOGGED_IN_MARKER in body.lower()
