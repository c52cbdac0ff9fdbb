"""Package setup for steam_login."""

from setuptools import setup, find_packages

setup(
    name="steam-login",
    version="1.0.0",
    description="RSA handshake login client for steamcommunity.com with captcha, email and 2FA challenges",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
        "urllib3>=2.0.0",
        "pycryptodome>=3.19.0",
    ],
    extras_require={
        "ui": [
            "colorlog>=6.8.0",
        ],
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "steam-login=steam_login.cli:main",
        ],
    },
)
