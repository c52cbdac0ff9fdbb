"""
Value types shared by the login orchestrator, the session bootstrapper and
the ``SteamClient`` facade.

Response schemas
----------------
Each endpoint gets a fixed schema where every consumed field is optional.
A field the server did not send is ``None``; nothing here raises on a
missing key.  ``from_json`` returns ``None`` for a body that is not a JSON
object at all, which the orchestrator reports as ``AuthCode.FAIL``.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Optional

from .config import ANONYMOUS_STEAM_ID


class AuthCode(Enum):
    """Outcome of one ``attempt_login`` call."""

    SUCCESS = "success"
    FAIL = "fail"
    BAD_RSA = "bad_rsa"
    BAD_CREDENTIALS = "bad_credentials"
    CAPTCHA = "captcha"
    EMAIL = "email"
    TWO_FACTOR = "two_factor"

    @property
    def is_challenge(self) -> bool:
        return self in (AuthCode.CAPTCHA, AuthCode.EMAIL, AuthCode.TWO_FACTOR)


@dataclass
class Credentials:
    """Account name and password.  ``steam_id`` is an optional configured id."""

    username: str
    password: str = field(repr=False)
    steam_id: Optional[str] = None


@dataclass(frozen=True)
class ChallengeState:
    """
    Challenge flags and answers accumulated over one login sequence.

    Flags only ever go from False to True.  A new sequence starts from a
    fresh ``ChallengeState()``.
    """

    requires_captcha: bool = False
    captcha_gid: Optional[str] = None
    captcha_text: Optional[str] = field(default=None, repr=False)

    requires_email: bool = False
    email_steam_id: Optional[str] = None
    email_code: Optional[str] = field(default=None, repr=False)

    requires_2fa: bool = False
    two_factor_code: Optional[str] = field(default=None, repr=False)

    def with_captcha_text(self, text: str) -> "ChallengeState":
        return replace(self, captcha_text=text)

    def with_email_code(self, code: str) -> "ChallengeState":
        return replace(self, email_code=code)

    def with_two_factor_code(self, code: str) -> "ChallengeState":
        return replace(self, two_factor_code=code)


@dataclass(frozen=True)
class RsaKey:
    """Public key handed out by getrsakey; good for a single encryption."""

    modulus: str
    exponent: str
    timestamp: str


@dataclass(frozen=True)
class Session:
    """Identifiers scraped from the authenticated landing page."""

    steam_id: str
    session_id: str

    @property
    def is_anonymous(self) -> bool:
        return self.steam_id == ANONYMOUS_STEAM_ID


@dataclass
class AuthResult:
    """Outcome code, the updated challenge state, and the raw server reply."""

    code: AuthCode
    challenge: ChallengeState
    response: Optional[Dict[str, Any]] = None
    session: Optional[Session] = None


_BOOL_STRINGS = {"true": True, "1": True, "false": False, "0": False, "": False}


def _opt_bool(data: Dict[str, Any], key: str) -> Optional[bool]:
    """Booleans and integers coerced, "true"/"false" strings mapped, anything else None."""
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, (bool, int)):
        return bool(value)
    if isinstance(value, str):
        return _BOOL_STRINGS.get(value.strip().lower())
    return None


def _opt_str(data: Dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    return None if value is None else str(value)


@dataclass
class RsaKeyResponse:
    """Body of POST /login/getrsakey."""

    success: Optional[bool] = None
    publickey_mod: Optional[str] = None
    publickey_exp: Optional[str] = None
    timestamp: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_json(cls, data: Any) -> Optional["RsaKeyResponse"]:
        if not isinstance(data, dict):
            return None
        return cls(
            success=_opt_bool(data, "success"),
            publickey_mod=_opt_str(data, "publickey_mod"),
            publickey_exp=_opt_str(data, "publickey_exp"),
            timestamp=_opt_str(data, "timestamp"),
            raw=data,
        )

    def key(self) -> Optional[RsaKey]:
        """The usable key, or None when a component is missing."""
        if not (self.publickey_mod and self.publickey_exp and self.timestamp is not None):
            return None
        return RsaKey(self.publickey_mod, self.publickey_exp, self.timestamp)


@dataclass
class LoginResponse:
    """Body of POST /login/dologin/."""

    success: Optional[bool] = None
    captcha_needed: Optional[bool] = None
    captcha_gid: Optional[str] = None
    emailauth_needed: Optional[bool] = None
    emailsteamid: Optional[str] = None
    requires_twofactor: Optional[bool] = None
    login_complete: Optional[bool] = None
    message: Optional[str] = None
    oauth: Optional[str] = field(default=None, repr=False)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_json(cls, data: Any) -> Optional["LoginResponse"]:
        if not isinstance(data, dict):
            return None
        return cls(
            success=_opt_bool(data, "success"),
            captcha_needed=_opt_bool(data, "captcha_needed"),
            captcha_gid=_opt_str(data, "captcha_gid"),
            emailauth_needed=_opt_bool(data, "emailauth_needed"),
            emailsteamid=_opt_str(data, "emailsteamid"),
            requires_twofactor=_opt_bool(data, "requires_twofactor"),
            login_complete=_opt_bool(data, "login_complete"),
            message=_opt_str(data, "message"),
            oauth=_opt_str(data, "oauth"),
            raw=data,
        )
