"""
steam_login.client
==================
Stateful facade over the login functions for a single account.

Holds the credentials, the challenge state of the sequence in progress
and, after success, the bootstrapped ``Session``.  Cookies are loaded from
and saved back to the ``SessionStore`` around every login round, while the
store's per-username lock is held.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .auth import attempt_login, is_logged_in
from .config import BASE_URL, CAPTCHA_PATH, DEFAULT_SESSION_DIR
from .logging_setup import log, register_secret
from .models import AuthCode, AuthResult, ChallengeState, Credentials, Session
from .network import Transport, build_session
from .store import SessionStore
from .utils import to_community_id


class SteamClient:
    """Login client for one steamcommunity.com account."""

    def __init__(
        self,
        username: str,
        password: str,
        session_dir: "str | Path" = DEFAULT_SESSION_DIR,
        steam_id: Optional[str] = None,
        verify_ssl: bool = True,
        transport: Optional[Transport] = None,
    ) -> None:
        register_secret(password)
        self.credentials = Credentials(
            username=username,
            password=password,
            steam_id=to_community_id(steam_id) if steam_id else None,
        )
        self.store = SessionStore(session_dir)
        self.transport = transport or Transport(build_session(verify_ssl=verify_ssl))
        self.challenge = ChallengeState()
        self.session: Optional[Session] = None
        self.last_result: Optional[AuthResult] = None

    # ------------------------------------------------------------------
    # Login
    # ------------------------------------------------------------------

    def login(self) -> AuthResult:
        """
        Run one login round with the current challenge answers.

        On a challenge code, set the requested answer and call again.  After
        SUCCESS the challenge state is reset so the next login starts fresh.
        """
        username = self.credentials.username
        with self.store.lock(username):
            self.store.load_cookies(username, self.transport.cookies)
            try:
                result = attempt_login(
                    self.transport, self.credentials, self.challenge, store=self.store,
                )
            finally:
                self.store.save_cookies(username, self.transport.cookies)

        self.last_result = result
        self.challenge = result.challenge
        if result.code is AuthCode.SUCCESS:
            self.session = result.session
            self.challenge = ChallengeState()
        return result

    def reset(self) -> None:
        """Drop challenge state so the next ``login`` starts a new sequence."""
        self.challenge = ChallengeState()

    def is_logged_in(self) -> bool:
        with self.store.lock(self.credentials.username):
            self.store.load_cookies(self.credentials.username, self.transport.cookies)
        logged_in = is_logged_in(self.transport)
        log.debug("Logged-in check for %s: %s", self.credentials.username, logged_in)
        return logged_in

    def captcha_link(self) -> Optional[str]:
        """URL of the captcha image for the pending CAPTCHA, or None if there is none."""
        if not self.challenge.captcha_gid:
            return None
        return f"{BASE_URL}{CAPTCHA_PATH}?gid={self.challenge.captcha_gid}"

    # ------------------------------------------------------------------
    # Challenge answers
    # ------------------------------------------------------------------

    def set_captcha_text(self, captcha_text: str) -> None:
        register_secret(captcha_text)
        self.challenge = self.challenge.with_captcha_text(captcha_text)

    def set_email_code(self, email_code: str) -> None:
        register_secret(email_code)
        self.challenge = self.challenge.with_email_code(email_code)

    def set_two_factor_code(self, two_factor_code: str) -> None:
        register_secret(two_factor_code)
        self.challenge = self.challenge.with_two_factor_code(two_factor_code)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def username(self) -> str:
        return self.credentials.username

    def set_username(self, username: str) -> None:
        """Switch accounts; cookies, challenge state and session of the old one are dropped."""
        if username == self.credentials.username:
            return
        self.credentials.username = username
        self.credentials.steam_id = None
        self.transport.cookies.clear()
        self.session = None
        self.last_result = None
        self.reset()

    @property
    def password(self) -> str:
        return self.credentials.password

    def set_password(self, password: str) -> None:
        register_secret(password)
        self.credentials.password = password

    @property
    def session_id(self) -> Optional[str]:
        return self.session.session_id if self.session else None

    @property
    def steam_id(self) -> Optional[str]:
        if self.session is not None:
            return self.session.steam_id
        return self.credentials.steam_id

    @property
    def oauth_token(self) -> Optional[str]:
        return self.store.get_token(self.credentials.username)
