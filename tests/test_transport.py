"""Tests for the HTTP transport."""

import unittest
from unittest.mock import MagicMock, patch

import requests

from steam_login.errors import TransportFailure
from steam_login.network.client import Transport, base_url, build_session


class TestBuildSession(unittest.TestCase):
    def test_session_has_user_agent(self):
        session = build_session()
        self.assertIn("Mozilla", session.headers["User-Agent"])

    def test_session_has_referer(self):
        session = build_session()
        self.assertEqual(session.headers["Referer"], "https://steamcommunity.com/")

    def test_verify_flag(self):
        self.assertFalse(build_session(verify_ssl=False).verify)


class TestBaseUrl(unittest.TestCase):
    def test_base_url(self):
        self.assertEqual(base_url("/login/getrsakey"), "https://steamcommunity.com/login/getrsakey")


def _response(json_body=None, text="", status_code=200, bad_json=False):
    resp = MagicMock(spec=requests.Response)
    resp.status_code = status_code
    resp.text = text
    resp.content = text.encode("utf-8")
    if bad_json:
        resp.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        resp.json.return_value = json_body
    return resp


class TestPostJson(unittest.TestCase):
    def setUp(self):
        self.transport = Transport(build_session(), timeout=7)

    def test_returns_decoded_body_and_applies_timeout(self):
        with patch.object(self.transport.session, "post",
                          return_value=_response({"success": True})) as post:
            body = self.transport.post_json("/login/getrsakey", {"username": "gaben"})
        self.assertEqual(body, {"success": True})
        post.assert_called_once_with(
            "https://steamcommunity.com/login/getrsakey",
            data={"username": "gaben"}, timeout=7, allow_redirects=True,
        )

    def test_non_json_body_is_none(self):
        with patch.object(self.transport.session, "post",
                          return_value=_response(text="<html>", bad_json=True)):
            self.assertIsNone(self.transport.post_json("/login/dologin/", {}))

    def test_timeout_raises_transport_failure(self):
        with patch.object(self.transport.session, "post",
                          side_effect=requests.Timeout("read timed out")):
            with self.assertRaises(TransportFailure):
                self.transport.post_json("/login/dologin/", {})

    def test_connection_error_raises_transport_failure(self):
        with patch.object(self.transport.session, "post",
                          side_effect=requests.ConnectionError("refused")):
            with self.assertRaises(TransportFailure):
                self.transport.post_json("/login/getrsakey", {})


class TestGetText(unittest.TestCase):
    def setUp(self):
        self.transport = Transport(build_session(), timeout=7)

    def test_returns_text(self):
        with patch.object(self.transport.session, "get",
                          return_value=_response(text="g_steamID = false;")) as get:
            body = self.transport.get_text("/", params={"l": "english"})
        self.assertEqual(body, "g_steamID = false;")
        get.assert_called_once_with(
            "https://steamcommunity.com/", params={"l": "english"},
            timeout=7, allow_redirects=True,
        )

    def test_http_error_raises_transport_failure(self):
        resp = _response(text="busy", status_code=503)
        resp.raise_for_status.side_effect = requests.HTTPError("503")
        with patch.object(self.transport.session, "get", return_value=resp):
            with self.assertRaises(TransportFailure):
                self.transport.get_text("/market/")


if __name__ == "__main__":
    unittest.main()
