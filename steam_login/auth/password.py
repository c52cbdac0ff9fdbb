"""Password encryption for the Steam RSA login handshake."""

import base64

from Crypto.Cipher import PKCS1_v1_5
from Crypto.PublicKey import RSA

from ..errors import CryptoError


def encrypt_password(password: str, modulus_hex: str, exponent_hex: str) -> str:
    """
    Encrypt *password* under the server's RSA public key.

    The modulus and exponent arrive as hex strings from /login/getrsakey.
    dologin only accepts PKCS#1 v1.5 padding, not OAEP.  The ciphertext is
    returned Base64-encoded, ready to post as the ``password`` field.

    Raises CryptoError when the key cannot be built or used.
    """
    try:
        modulus = int(modulus_hex, 16)
        exponent = int(exponent_hex, 16)
    except (TypeError, ValueError) as exc:
        raise CryptoError("RSA key components are not hex integers") from exc

    try:
        key = RSA.construct((modulus, exponent))
        ciphertext = PKCS1_v1_5.new(key).encrypt(password.encode("utf-8"))
    except (TypeError, ValueError) as exc:
        raise CryptoError(f"RSA encryption failed: {exc}") from exc

    return base64.b64encode(ciphertext).decode("ascii")
