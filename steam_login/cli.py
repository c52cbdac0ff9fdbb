"""
Command-line interface for the Steam login client.

Runs the login sequence interactively, prompting for each challenge
answer the server asks for.
"""

import argparse
import getpass
import sys

from .client import SteamClient
from .config import DEFAULT_PASSWORD, DEFAULT_SESSION_DIR, DEFAULT_USER, MAX_LOGIN_ROUNDS
from .errors import UnexpectedResponse
from .logging_setup import log, setup_logging
from .models import AuthCode


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Log in to steamcommunity.com and save the session cookies.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Credentials can also be provided via the STEAM_USER and\n"
            "STEAM_PASSWORD env vars.  If no password is available you will\n"
            "be prompted for it."
        ),
    )
    parser.add_argument(
        "--user", default=DEFAULT_USER,
        help="Steam account name (default: $STEAM_USER)",
    )
    parser.add_argument(
        "--password", default=DEFAULT_PASSWORD,
        help="Account password (overrides STEAM_PASSWORD env var)",
    )
    parser.add_argument(
        "--session-dir", default=DEFAULT_SESSION_DIR,
        help=f"Directory for cookie and token files (default: {DEFAULT_SESSION_DIR})",
    )
    parser.add_argument(
        "--steam-id", default=None,
        help="Account id (STEAM_X:Y:Z, 32-bit or 64-bit) sent with email/2FA answers",
    )
    parser.add_argument(
        "--no-verify-ssl", dest="verify_ssl", action="store_false", default=True,
        help="Disable TLS certificate verification",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable verbose debug logging",
    )
    return parser.parse_args(argv)


def _prompt_answer(client: SteamClient, code: AuthCode) -> None:
    if code is AuthCode.CAPTCHA:
        print(f"Captcha required: {client.captcha_link()}")
        client.set_captcha_text(input("Captcha text: ").strip())
    elif code is AuthCode.EMAIL:
        client.set_email_code(input("Steam Guard code from email: ").strip())
    elif code is AuthCode.TWO_FACTOR:
        client.set_two_factor_code(input("Mobile authenticator code: ").strip())


def run_login(client: SteamClient, max_rounds: int = MAX_LOGIN_ROUNDS) -> AuthCode:
    """Drive login rounds until a terminal code or *max_rounds* is reached."""
    code = AuthCode.FAIL
    for round_no in range(1, max_rounds + 1):
        log.debug("Login round %d/%d", round_no, max_rounds)
        code = client.login().code
        if not code.is_challenge:
            return code
        _prompt_answer(client, code)
    log.error("Giving up after %d login rounds", max_rounds)
    return code


def main(argv=None) -> int:
    args = parse_args(argv)

    setup_logging(debug=args.debug)

    if not args.verify_ssl:
        import urllib3
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
        log.warning("TLS certificate verification is DISABLED (--no-verify-ssl)")

    if not args.user:
        log.error("No account name given (use --user or STEAM_USER)")
        return 1
    if not args.password:
        args.password = getpass.getpass("Steam password: ")

    client = SteamClient(
        username=args.user,
        password=args.password,
        session_dir=args.session_dir,
        steam_id=args.steam_id,
        verify_ssl=args.verify_ssl,
    )

    try:
        code = run_login(client)
    except UnexpectedResponse as exc:
        log.critical("%s", exc)
        return 2

    if code is not AuthCode.SUCCESS:
        log.error("Login finished with %s", code.name)
        return 1

    log.info("Steam id   : %s", client.steam_id)
    log.info("Session id : %s", client.session_id)
    return 0


if __name__ == "__main__":
    sys.exit(main())
