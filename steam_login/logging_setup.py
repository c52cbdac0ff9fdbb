"""
Logging configuration for the Steam login client.

Passwords, challenge answers and oauth tokens must never reach a log line.
Code that handles one calls ``register_secret`` and the ``SecretFilter``
attached to the package logger masks every registered value in the
formatted message, whichever handler ends up writing it.
"""

import logging
import threading

try:
    import colorlog
    _COLORLOG_AVAILABLE = True
except ImportError:
    _COLORLOG_AVAILABLE = False

REDACTED = "********"

log = logging.getLogger("steam-login")

_secrets: "set[str]" = set()
_secrets_lock = threading.Lock()


def register_secret(value: "str | None") -> None:
    """Mask *value* in every later message of the package logger."""
    if value:
        with _secrets_lock:
            _secrets.add(value)


def forget_secrets() -> None:
    with _secrets_lock:
        _secrets.clear()


class SecretFilter(logging.Filter):
    """Replace registered secret values with ``REDACTED``."""

    def filter(self, record: logging.LogRecord) -> bool:
        with _secrets_lock:
            secrets = sorted(_secrets, key=len, reverse=True)
        if not secrets:
            return True
        message = record.getMessage()
        redacted = message
        for secret in secrets:
            redacted = redacted.replace(secret, REDACTED)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


log.addFilter(SecretFilter())


def setup_logging(debug: bool = False) -> None:
    """
    Install a console handler on the package logger.

    With *debug* the urllib3 connection log is switched on as well so the
    request sequence of a login round can be followed.
    """
    level = logging.DEBUG if debug else logging.INFO
    log.setLevel(level)
    log.handlers.clear()
    logging.getLogger("urllib3").setLevel(logging.DEBUG if debug else logging.WARNING)

    if _COLORLOG_AVAILABLE:
        handler = colorlog.StreamHandler()
        handler.setFormatter(colorlog.ColoredFormatter(
            "%(log_color)s%(asctime)s [%(levelname)s]%(reset)s %(name)s: %(message)s",
            datefmt="%H:%M:%S",
            log_colors={
                "DEBUG":    "cyan",
                "INFO":     "green",
                "WARNING":  "yellow",
                "ERROR":    "red",
                "CRITICAL": "bold_red",
            },
        ))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s", datefmt="%H:%M:%S"
        ))
    log.addHandler(handler)
