"""Tests for session bootstrap from the landing page."""

import unittest
from unittest.mock import MagicMock

from steam_login.auth.session import bootstrap_session, is_logged_in, parse_session
from steam_login.errors import TransportFailure, UnexpectedResponse
from steam_login.models import Session
from steam_login.network.client import Transport

LANDING = """
<script type="text/javascript">
    g_sessionID = "abc123";
    g_steamID = "76561198000000000";
    g_strLanguage = "english";
</script>
"""


class TestParseSession(unittest.TestCase):
    def test_logged_in_page(self):
        session = parse_session(LANDING)
        self.assertEqual(session, Session(steam_id="76561198000000000", session_id="abc123"))
        self.assertFalse(session.is_anonymous)

    def test_anonymous_page_maps_false_to_zero(self):
        body = 'g_steamID = false;\ng_sessionID = "f00d";'
        session = parse_session(body)
        self.assertEqual(session.steam_id, "0")
        self.assertEqual(session.session_id, "f00d")
        self.assertTrue(session.is_anonymous)

    def test_missing_session_marker_raises(self):
        with self.assertRaises(UnexpectedResponse):
            parse_session('g_steamID = "76561198000000000";')

    def test_missing_steam_id_marker_raises(self):
        with self.assertRaises(UnexpectedResponse):
            parse_session('g_sessionID = "abc123";')

    def test_value_stops_at_first_semicolon(self):
        body = 'g_steamID = "765"; var x = 1;\ng_sessionID = "s";'
        self.assertEqual(parse_session(body).steam_id, "765")

    def test_marker_without_terminator_raises(self):
        with self.assertRaises(UnexpectedResponse):
            parse_session('g_steamID = "765"\ng_sessionID = "s";')


class TestBootstrapSession(unittest.TestCase):
    def test_fetches_landing_page_in_english(self):
        transport = MagicMock(spec=Transport)
        transport.get_text.return_value = LANDING

        session = bootstrap_session(transport)

        transport.get_text.assert_called_once_with("/", params={"l": "english"})
        self.assertEqual(session.session_id, "abc123")

    def test_transport_failure_propagates(self):
        transport = MagicMock(spec=Transport)
        transport.get_text.side_effect = TransportFailure("timeout")
        with self.assertRaises(TransportFailure):
            bootstrap_session(transport)


class TestIsLoggedIn(unittest.TestCase):
    def test_wallet_balance_present(self):
        transport = MagicMock(spec=Transport)
        transport.get_text.return_value = "<div>Wallet balance: 1,00€</div>"
        self.assertTrue(is_logged_in(transport))
        transport.get_text.assert_called_once_with("/market/", params={"l": "english"})

    def test_wallet_balance_absent(self):
        transport = MagicMock(spec=Transport)
        transport.get_text.return_value = "<a>Sign in</a>"
        self.assertFalse(is_logged_in(transport))


if __name__ == "__main__":
    unittest.main()
