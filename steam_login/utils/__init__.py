"""Utility subpackage for the Steam login client."""

from .ids import to_account_id, to_community_id, STEAM_ID64_BASE

__all__ = ["to_account_id", "to_community_id", "STEAM_ID64_BASE"]
