"""
File-backed session persistence, one file pair per username.

    <session_dir>/<username>.cookie   – cookie jar (Netscape/Mozilla format)
    <session_dir>/<username>.auth     – oauth token from the last successful login
    <session_dir>/<username>.lock     – lock file for ``SessionStore.lock``

Both data files are overwritten on every save.
"""

import fcntl
import http.cookiejar
import os
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import requests

from .logging_setup import log

_registry_lock = threading.Lock()
_user_locks: "dict[str, threading.Lock]" = {}


def _thread_lock(key: str) -> threading.Lock:
    with _registry_lock:
        lock = _user_locks.get(key)
        if lock is None:
            lock = _user_locks[key] = threading.Lock()
        return lock


def _write_atomic(path: Path, content: bytes) -> None:
    """Write *content* next to *path* and rename it into place."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_name(path.name + ".tmp")
    tmp.write_bytes(content)
    os.replace(tmp, path)


class SessionStore:
    """Cookie jar and oauth token storage keyed by username."""

    def __init__(self, session_dir: "str | Path") -> None:
        self.session_dir = Path(session_dir)

    @staticmethod
    def _check_username(username: str) -> str:
        """Usernames become file names; refuse anything that could leave session_dir."""
        if (not username or username in (".", "..") or "/" in username
                or "\\" in username or "\0" in username):
            raise ValueError(f"invalid username for session files: {username!r}")
        return username

    def cookie_path(self, username: str) -> Path:
        return self.session_dir / f"{self._check_username(username)}.cookie"

    def auth_path(self, username: str) -> Path:
        return self.session_dir / f"{self._check_username(username)}.auth"

    def _lock_path(self, username: str) -> Path:
        return self.session_dir / f"{self._check_username(username)}.lock"

    @contextmanager
    def lock(self, username: str) -> Iterator[None]:
        """
        Hold exclusive access to *username*'s files.

        A per-username threading.Lock serialises threads in this process;
        fcntl.flock on the lock file serialises other processes.
        """
        lock_path = self._lock_path(username)
        with _thread_lock(str(lock_path.resolve())):
            lock_path.parent.mkdir(parents=True, exist_ok=True)
            lock_file = open(lock_path, "w")
            try:
                fcntl.flock(lock_file.fileno(), fcntl.LOCK_EX)
                yield
            finally:
                fcntl.flock(lock_file.fileno(), fcntl.LOCK_UN)
                lock_file.close()

    # -- oauth token --------------------------------------------------------

    def put_token(self, username: str, token: str) -> None:
        _write_atomic(self.auth_path(username), token.encode("utf-8"))

    def get_token(self, username: str) -> Optional[str]:
        path = self.auth_path(username)
        if not path.is_file():
            return None
        return path.read_text(encoding="utf-8")

    # -- cookies ------------------------------------------------------------

    def load_cookies(self, username: str, jar: requests.cookies.RequestsCookieJar) -> int:
        """Merge saved cookies into *jar*; return how many were loaded."""
        path = self.cookie_path(username)
        if not path.is_file():
            return 0
        saved = http.cookiejar.MozillaCookieJar(str(path))
        try:
            saved.load(ignore_discard=True, ignore_expires=True)
        except (http.cookiejar.LoadError, OSError) as exc:
            log.warning("Ignoring unreadable cookie file %s: %s", path, exc)
            return 0
        count = 0
        for cookie in saved:
            jar.set_cookie(cookie)
            count += 1
        log.debug("Loaded %d cookies for %s", count, username)
        return count

    def save_cookies(self, username: str, jar: requests.cookies.RequestsCookieJar) -> None:
        path = self.cookie_path(username)
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_name(path.name + ".tmp")
        out = http.cookiejar.MozillaCookieJar(str(tmp))
        for cookie in jar:
            out.set_cookie(cookie)
        out.save(ignore_discard=True, ignore_expires=True)
        os.replace(tmp, path)
        log.debug("Saved %d cookies for %s → %s", len(out), username, path)
