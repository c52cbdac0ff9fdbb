"""Authentication submodule – RSA handshake, login rounds, session bootstrap."""

from steam_login.auth.login import (
    attempt_login,
    build_login_params,
    classify_login_response,
    request_rsa_key,
)
from steam_login.auth.password import encrypt_password
from steam_login.auth.session import (
    bootstrap_session,
    is_logged_in,
    parse_session,
)

__all__ = [
    "attempt_login",
    "build_login_params",
    "classify_login_response",
    "request_rsa_key",
    "encrypt_password",
    "bootstrap_session",
    "is_logged_in",
    "parse_session",
]
