"""
Login orchestration for steamcommunity.com.

One call to ``attempt_login`` runs the full handshake:

  1. POST /login/getrsakey   username            → modulus, exponent, timestamp
  2. RSA-encrypt the password (PKCS#1 v1.5), Base64
  3. POST /login/dologin/    username / password / challenge answers / rsatimestamp
  4. classify the reply; on success persist the oauth token and bootstrap
     the session from the landing page

The server may demand a captcha, an emailed code or a two-factor code.
Those come back as ``AuthCode`` values together with an updated
``ChallengeState``; the caller adds the answer and calls again.
Challenge flags are never cleared within a sequence: the server may want
every outstanding challenge answered on the same retry.
"""

from dataclasses import replace
from typing import Optional

from ..config import (
    BAD_CREDENTIALS_MESSAGE,
    DO_LOGIN_PATH,
    LANGUAGE,
    RSA_KEY_PATH,
)
from ..errors import CryptoError, TransportFailure
from ..logging_setup import log, register_secret
from ..models import (
    AuthCode,
    AuthResult,
    ChallengeState,
    Credentials,
    LoginResponse,
    RsaKey,
    RsaKeyResponse,
)
from ..network.client import Transport
from .password import encrypt_password
from .session import bootstrap_session


def build_login_params(
    credentials: Credentials, challenge: ChallengeState, encrypted_pw: str, rsa_timestamp: str
) -> dict:
    """Form fields for POST /login/dologin/."""
    email_steam_id = ""
    if challenge.requires_2fa or challenge.requires_email:
        email_steam_id = challenge.email_steam_id or credentials.steam_id or ""

    return {
        "username": credentials.username,
        "password": encrypted_pw,
        "twofactorcode": (challenge.two_factor_code or "") if challenge.requires_2fa else "",
        "captchagid": (challenge.captcha_gid or "-1") if challenge.requires_captcha else "-1",
        "captcha_text": (challenge.captcha_text or "") if challenge.requires_captcha else "",
        "emailsteamid": email_steam_id,
        "emailauth": (challenge.email_code or "") if challenge.requires_email else "",
        "rsatimestamp": rsa_timestamp,
        "remember_login": "false",
        "l": LANGUAGE,
    }


def request_rsa_key(transport: Transport, username: str) -> Optional[RsaKeyResponse]:
    """POST the username to /login/getrsakey; None for an unparseable reply."""
    return RsaKeyResponse.from_json(
        transport.post_json(RSA_KEY_PATH, {"username": username})
    )


def classify_login_response(
    resp: Optional[LoginResponse], challenge: ChallengeState
) -> "tuple[AuthCode, ChallengeState]":
    """
    Map a dologin reply to an outcome and the updated challenge state.

    Rules are checked in priority order and the first match wins.  A reply
    that matches nothing is reported as FAIL rather than guessed at.
    """
    if resp is None:
        return AuthCode.FAIL, challenge

    if resp.captcha_needed:
        return AuthCode.CAPTCHA, replace(
            challenge, requires_captcha=True, captcha_gid=resp.captcha_gid,
        )

    if resp.emailauth_needed:
        return AuthCode.EMAIL, replace(
            challenge, requires_email=True,
            email_steam_id=resp.emailsteamid or challenge.email_steam_id,
        )

    if resp.requires_twofactor and not resp.success:
        return AuthCode.TWO_FACTOR, replace(challenge, requires_2fa=True)

    if resp.login_complete is False:
        return AuthCode.BAD_CREDENTIALS, challenge

    if resp.message and BAD_CREDENTIALS_MESSAGE in resp.message.lower():
        return AuthCode.BAD_CREDENTIALS, challenge

    if resp.success:
        return AuthCode.SUCCESS, challenge

    return AuthCode.FAIL, challenge


def attempt_login(
    transport: Transport,
    credentials: Credentials,
    challenge: Optional[ChallengeState] = None,
    store=None,
) -> AuthResult:
    """
    Run one round of the login handshake.

    *challenge* carries the flags and answers from earlier rounds of the
    same sequence; it is not modified.  *store*, when given, receives the
    oauth token on success via ``store.put_token(username, token)``.

    Returns an AuthResult.  Only a landing page without session markers
    raises (UnexpectedResponse); everything else is reported as a code.
    """
    if challenge is None:
        challenge = ChallengeState()
    username = credentials.username

    # Step 1 – RSA key
    try:
        key_resp = request_rsa_key(transport, username)
    except TransportFailure:
        return AuthResult(AuthCode.FAIL, challenge)

    if key_resp is None:
        log.error("getrsakey returned an unparseable response")
        return AuthResult(AuthCode.FAIL, challenge)

    if not key_resp.success:
        log.error("getrsakey refused to issue a key for %s", username)
        return AuthResult(AuthCode.BAD_RSA, challenge, key_resp.raw)

    key: Optional[RsaKey] = key_resp.key()
    if key is None:
        log.error("getrsakey response is missing key components")
        return AuthResult(AuthCode.FAIL, challenge, key_resp.raw)

    # Step 2 – encrypt
    try:
        encrypted_pw = encrypt_password(credentials.password, key.modulus, key.exponent)
    except CryptoError as exc:
        log.error("Could not encrypt password: %s", exc)
        return AuthResult(AuthCode.BAD_RSA, challenge, key_resp.raw)

    # Step 3 – dologin
    params = build_login_params(credentials, challenge, encrypted_pw, key.timestamp)
    log.debug(
        "dologin for %s (captcha=%s email=%s 2fa=%s)",
        username, challenge.requires_captcha, challenge.requires_email, challenge.requires_2fa,
    )
    try:
        raw = transport.post_json(DO_LOGIN_PATH, params)
    except TransportFailure:
        return AuthResult(AuthCode.FAIL, challenge)

    # Step 4 – classify
    login_resp = LoginResponse.from_json(raw)
    code, challenge = classify_login_response(login_resp, challenge)
    raw_dict = login_resp.raw if login_resp is not None else None

    if code is not AuthCode.SUCCESS:
        if code.is_challenge:
            log.warning("Steam requires %s for %s", code.value.replace("_", "-"), username)
        elif code is AuthCode.BAD_CREDENTIALS:
            log.error("Login failed – incorrect account name or password for %s", username)
        else:
            log.error("Login failed – unrecognised dologin response")
        return AuthResult(code, challenge, raw_dict)

    # Step 5 – persist token, bootstrap session
    register_secret(login_resp.oauth)
    if login_resp.oauth and store is not None:
        store.put_token(username, login_resp.oauth)
        log.debug("Stored oauth token for %s", username)

    try:
        session = bootstrap_session(transport)
    except TransportFailure:
        return AuthResult(AuthCode.FAIL, challenge, raw_dict)

    log.info("Login successful for %s (steam id %s)", username, session.steam_id)
    return AuthResult(AuthCode.SUCCESS, challenge, raw_dict, session)
