"""
Exception types raised by the login client.

Challenge outcomes (captcha, email code, two-factor code, bad password) are
not exceptions; they are reported through ``AuthCode`` values so callers can
branch on them and resume the sequence.
"""


class SteamLoginError(Exception):
    """Base class for every error raised by this package."""


class TransportFailure(SteamLoginError):
    """A network call failed, timed out, or returned an unusable body."""


class CryptoError(SteamLoginError):
    """The server-supplied RSA key could not be parsed or used."""


class ProtocolError(SteamLoginError):
    """The remote service answered in a shape this client does not understand."""


class UnexpectedResponse(ProtocolError):
    """The authenticated landing page lacked the session markers."""
