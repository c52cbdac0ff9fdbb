"""Conversion between the three Steam account id notations."""

import re

# Offset between a 32-bit account id and its 64-bit community id
STEAM_ID64_BASE = 76561197960265728

_STEAM2_RE = re.compile(r"^STEAM_")


def to_community_id(steam_id: "str | int") -> str:
    """
    Return the 64-bit community id for *steam_id*.

    Accepts ``STEAM_X:Y:Z`` and short numeric account ids; anything else
    (already a community id, or unrecognised) is returned unchanged.
    """
    steam_id = str(steam_id)
    if _STEAM2_RE.match(steam_id):
        parts = steam_id.split(":")
        return str(int(parts[2]) * 2 + STEAM_ID64_BASE + int(parts[1]))
    if steam_id.isdigit() and len(steam_id) < 16:
        return str(int(steam_id) + STEAM_ID64_BASE)
    return steam_id


def to_account_id(steam_id: "str | int") -> str:
    """Return the 32-bit account id for a ``STEAM_X:Y:Z`` or 64-bit id."""
    steam_id = str(steam_id)
    if _STEAM2_RE.match(steam_id):
        parts = steam_id.split(":")
        return str(int(parts[2]) * 2 + int(parts[1]))
    if steam_id.startswith("765") and len(steam_id) > 15:
        return str(int(steam_id) - STEAM_ID64_BASE)
    return steam_id
