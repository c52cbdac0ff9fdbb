"""
Network operations module for HTTP session setup and request handling.
"""

from steam_login.network.client import Transport, build_session, base_url

__all__ = ["Transport", "build_session", "base_url"]
