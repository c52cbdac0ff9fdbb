"""Configuration constants for the Steam community login client."""

import os

BASE_URL = "https://steamcommunity.com"

# Credentials can also be supplied via STEAM_USER / STEAM_PASSWORD env vars
DEFAULT_USER = os.environ.get("STEAM_USER", "")
DEFAULT_PASSWORD = os.environ.get("STEAM_PASSWORD", "")
DEFAULT_SESSION_DIR = os.environ.get("STEAM_SESSION_DIR", "sessions")

RSA_KEY_PATH  = "/login/getrsakey"
DO_LOGIN_PATH = "/login/dologin/"
LANDING_PATH  = "/"
MARKET_PATH   = "/market/"
CAPTCHA_PATH  = "/public/captcha.php"

REQUEST_TIMEOUT  = float(os.environ.get("STEAM_REQUEST_TIMEOUT", "15"))  # seconds per HTTP request
MAX_LOGIN_ROUNDS = 5      # challenge/answer rounds before the CLI gives up
LANGUAGE         = "english"

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/87.0.4280.88 Safari/537.36"
)
REFERER = "https://steamcommunity.com/"

# Script variables embedded in the authenticated landing page
STEAM_ID_MARKER   = "g_steamID = "
SESSION_ID_MARKER = "g_sessionID = "

# Matched case-insensitively against the dologin "message" field
BAD_CREDENTIALS_MESSAGE = "account name or password that you have entered is incorrect"

# Present on /market/ only for a logged-in account
LOGGED_IN_MARKER = "wallet balance"

# Anonymous landing pages carry g_steamID = false
ANONYMOUS_STEAM_ID = "0"
