"""
Main entry point for the steam_login package.

Allows running the client as: python -m steam_login
"""

import sys

from steam_login.cli import main

if __name__ == "__main__":
    sys.exit(main())
