"""
steam_login
===========
Login client for steamcommunity.com: RSA password handshake, captcha /
email / two-factor challenge rounds, and session bootstrap.

Package structure
-----------------
steam_login/
├── __init__.py        – package init and public API
├── config.py          – endpoints, timeouts, page markers
├── errors.py          – exception types
├── models.py          – credentials, challenge state, results, response schemas
├── store.py           – per-username cookie / oauth token files
├── client.py          – SteamClient facade
├── cli.py             – argparse CLI (``python -m steam_login``)
├── network/           – requests.Session transport
├── auth/              – sub-package: the login sequence
│   ├── password.py    – RSA (PKCS#1 v1.5) password encryption
│   ├── login.py       – attempt_login and response classification
│   └── session.py     – landing page session bootstrap
└── utils/             – account id conversion

Quick start
-----------
    from steam_login import SteamClient, AuthCode

    client = SteamClient("account_name", "password", session_dir="sessions")
    result = client.login()
    if result.code is AuthCode.TWO_FACTOR:
        client.set_two_factor_code("ABCDE")
        result = client.login()
    print(client.steam_id, client.session_id)
"""

from .auth import attempt_login, bootstrap_session, encrypt_password, parse_session
from .client import SteamClient
from .errors import (
    CryptoError,
    ProtocolError,
    SteamLoginError,
    TransportFailure,
    UnexpectedResponse,
)
from .models import AuthCode, AuthResult, ChallengeState, Credentials, Session
from .store import SessionStore

__all__ = [
    "SteamClient",
    "SessionStore",
    "attempt_login",
    "bootstrap_session",
    "encrypt_password",
    "parse_session",
    "AuthCode",
    "AuthResult",
    "ChallengeState",
    "Credentials",
    "Session",
    "SteamLoginError",
    "TransportFailure",
    "CryptoError",
    "ProtocolError",
    "UnexpectedResponse",
]
