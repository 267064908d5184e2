import unittest
from unittest.mock import MagicMock, patch
from urllib.parse import parse_qs

import requests
import requests_mock

from guacamole_client.clients.guacamole import GuacamoleClient
from guacamole_client.core.exceptions import OperationError, is_not_found, is_permission_denied
from guacamole_client.models.auth import SessionState
from guacamole_client.models.connection import Connection


GUACAMOLE_URL = "http://guacamole.example.com/guacamole"
TOKENS_URL = f"{GUACAMOLE_URL}/api/tokens"
DATA_ROOT = f"{GUACAMOLE_URL}/api/session/data/postgresql"


class TestGuacamoleClient(unittest.TestCase):
    """Test cases for GuacamoleClient session handling and request pipeline."""

    def setUp(self):
        """Set up test fixtures."""
        self.client = GuacamoleClient(guacamole_url=GUACAMOLE_URL)

    def tearDown(self):
        self.client.close()

    def _authenticated(self):
        self.client.state = SessionState(auth_token="test-token", data_source="postgresql")

    def test_init_strips_trailing_slash(self):
        client = GuacamoleClient(guacamole_url="http://custom.example.com/guacamole/")
        self.assertEqual(client.guacamole_url, "http://custom.example.com/guacamole")
        self.assertIsNone(client.auth_token)
        self.assertEqual(client.data_source, "")

    @patch("guacamole_client.clients.guacamole.get_settings")
    def test_from_settings(self, mock_get_settings):
        """Test creating a client from settings."""
        mock_settings = MagicMock()
        mock_settings.URL = "http://default.example.com/guacamole"
        mock_settings.TIMEOUT = 12.5
        mock_settings.VERIFY_SSL = False
        mock_get_settings.return_value = mock_settings

        client = GuacamoleClient.from_settings()

        self.assertEqual(client.guacamole_url, "http://default.example.com/guacamole")
        self.assertEqual(client.timeout, 12.5)
        self.assertFalse(client.session.verify)

    def test_custom_session_is_used(self):
        session = MagicMock(spec=requests.Session)
        client = GuacamoleClient(GUACAMOLE_URL, session=session)

        self.assertIs(client.session, session)

    @requests_mock.Mocker()
    def test_authenticate_success(self, m):
        """Test a successful token exchange stores token and data source."""
        m.post(
            TOKENS_URL,
            json={
                "authToken": "T",
                "username": "admin",
                "dataSource": "postgresql",
                "availableDataSources": ["postgresql", "postgresql-shared"],
            },
        )

        auth = self.client.authenticate("admin", "secret")

        self.assertEqual(self.client.auth_token, "T")
        self.assertEqual(self.client.data_source, "postgresql")
        self.assertEqual(auth.available_data_sources, ["postgresql", "postgresql-shared"])

        request = m.last_request
        self.assertEqual(request.method, "POST")
        self.assertEqual(request.headers["Content-Type"], "application/x-www-form-urlencoded")
        self.assertEqual(parse_qs(request.text), {"username": ["admin"], "password": ["secret"]})
        self.assertNotIn("Guacamole-Token", request.headers)

    @requests_mock.Mocker()
    def test_authenticate_twice_overwrites_session(self, m):
        m.post(
            TOKENS_URL,
            [
                {"json": {"authToken": "first", "dataSource": "mysql"}},
                {"json": {"authToken": "second", "dataSource": "postgresql"}},
            ],
        )

        self.client.authenticate("admin", "secret")
        self.client.authenticate("admin", "secret")

        self.assertEqual(self.client.auth_token, "second")
        self.assertEqual(self.client.data_source, "postgresql")

    @requests_mock.Mocker()
    def test_authenticate_error_keeps_previous_session(self, m):
        """Test a rejected login leaves the existing session untouched."""
        self._authenticated()
        m.post(
            TOKENS_URL,
            status_code=403,
            json={"message": "Invalid login.", "type": "INVALID_CREDENTIALS"},
        )

        with self.assertRaises(OperationError) as context:
            self.client.authenticate("bad", "creds")

        self.assertEqual(context.exception.api_error.status_code, 403)
        self.assertEqual(context.exception.api_error.type, "INVALID_CREDENTIALS")
        self.assertTrue(str(context.exception).startswith("Failed to authenticate bad"))
        self.assertEqual(self.client.auth_token, "test-token")
        self.assertEqual(self.client.data_source, "postgresql")

    @requests_mock.Mocker()
    def test_authenticate_permission_denied(self, m):
        m.post(TOKENS_URL, status_code=403, json={"message": "Permission Denied.", "type": "PERMISSION_DENIED"})

        with self.assertRaises(OperationError) as context:
            self.client.authenticate("bad", "creds")

        self.assertTrue(is_permission_denied(context.exception))

    @requests_mock.Mocker()
    def test_logout(self, m):
        self._authenticated()
        m.delete(f"{GUACAMOLE_URL}/api/session", status_code=204)

        self.client.logout()

        self.assertEqual(m.last_request.headers["Guacamole-Token"], "test-token")
        self.assertNotIn("Content-Type", m.last_request.headers)
        # Local state is kept after logout.
        self.assertEqual(self.client.auth_token, "test-token")

    @requests_mock.Mocker()
    def test_token_header_omitted_without_session(self, m):
        m.get(requests_mock.ANY, json={})

        self.client.list_connections()

        self.assertNotIn("Guacamole-Token", m.last_request.headers)
        # No data source yet, so the data source segment is empty.
        self.assertEqual(m.last_request.url, f"{GUACAMOLE_URL}/api/session/data//connections")

    @requests_mock.Mocker()
    def test_token_header_sent(self, m):
        self._authenticated()
        m.get(f"{DATA_ROOT}/connections", json={})

        self.client.list_connections()

        self.assertEqual(m.last_request.headers["Guacamole-Token"], "test-token")

    def test_data_path_encodes_segments(self):
        self._authenticated()
        cases = {
            "normal": "normal",
            "with space": "with%20space",
            "user@domain.com": "user%40domain.com",
            "group/name": "group%2Fname",
            "bob smith@example.com": "bob%20smith%40example.com",
        }

        for segment, expected in cases.items():
            with self.subTest(segment=segment):
                self.assertEqual(
                    self.client.data_path("users", segment),
                    f"/api/session/data/postgresql/users/{expected}",
                )

    def test_data_path_encodes_data_source(self):
        self.client.state = SessionState(auth_token="t", data_source="my source")
        self.assertEqual(self.client.data_path("users"), "/api/session/data/my%20source/users")

    @requests_mock.Mocker()
    def test_special_characters_reach_the_server_encoded(self, m):
        self._authenticated()
        m.get(requests_mock.ANY, json={"username": "bob smith@example.com", "attributes": {}})

        user = self.client.get_user("bob smith@example.com")

        self.assertEqual(user.username, "bob smith@example.com")
        self.assertEqual(m.last_request.url, f"{DATA_ROOT}/users/bob%20smith%40example.com")

    @requests_mock.Mocker()
    def test_post_sets_json_content_type(self, m):
        self._authenticated()
        m.post(f"{DATA_ROOT}/connections", json={"identifier": "1", "name": "c", "protocol": "vnc"})

        self.client.create_connection(Connection(name="c", protocol="vnc"))

        self.assertEqual(m.last_request.headers["Content-Type"], "application/json")

    @requests_mock.Mocker()
    def test_not_found_through_wrapped_error(self, m):
        self._authenticated()
        m.get(f"{DATA_ROOT}/connections/99", status_code=404, json={"message": 'Not found: "99"', "type": "NOT_FOUND"})

        with self.assertRaises(OperationError) as context:
            self.client.get_connection("99")

        self.assertTrue(is_not_found(context.exception))
        self.assertFalse(is_permission_denied(context.exception))
        self.assertEqual(context.exception.identifier, "99")
        self.assertEqual(context.exception.api_error.message, 'Not found: "99"')

    @requests_mock.Mocker()
    def test_permission_denied_through_wrapped_error(self, m):
        self._authenticated()
        m.get(f"{DATA_ROOT}/users/bob", status_code=403, json={"message": "Permission Denied.", "type": "PERMISSION_DENIED"})

        with self.assertRaises(OperationError) as context:
            self.client.get_user("bob")

        self.assertTrue(is_permission_denied(context.exception))
        self.assertFalse(is_not_found(context.exception))

    @requests_mock.Mocker()
    def test_non_json_error_body(self, m):
        self._authenticated()
        m.get(f"{DATA_ROOT}/connections/1", status_code=500, text="Internal Server Error")

        with self.assertRaises(OperationError) as context:
            self.client.get_connection("1")

        api_error = context.exception.api_error
        self.assertEqual(api_error.status_code, 500)
        self.assertEqual(api_error.message, "Internal Server Error")
        self.assertEqual(api_error.type, "")

    @requests_mock.Mocker()
    def test_timeout_is_wrapped_but_not_classified(self, m):
        self._authenticated()
        m.get(f"{DATA_ROOT}/connections", exc=requests.exceptions.ConnectTimeout)

        with self.assertRaises(OperationError) as context:
            self.client.list_connections(timeout=0.5)

        self.assertIsInstance(context.exception.__cause__, requests.exceptions.ConnectTimeout)
        self.assertIsNone(context.exception.api_error)
        self.assertFalse(is_not_found(context.exception))

    @requests_mock.Mocker()
    def test_per_call_timeout_overrides_default(self, m):
        self._authenticated()
        m.get(f"{DATA_ROOT}/connections", json={})

        self.client.list_connections(timeout=(3, 7))
        self.assertEqual(m.last_request.timeout, (3, 7))

        self.client.list_connections()
        self.assertEqual(m.last_request.timeout, 30.0)

    @requests_mock.Mocker()
    def test_client_usable_after_error(self, m):
        self._authenticated()
        m.get(
            f"{DATA_ROOT}/connections",
            [{"status_code": 500, "text": "boom"}, {"json": {"1": {"identifier": "1", "name": "c", "protocol": "ssh"}}}],
        )

        with self.assertRaises(OperationError):
            self.client.list_connections()
        connections = self.client.list_connections()

        self.assertEqual(list(connections), ["1"])


if __name__ == "__main__":
    unittest.main()
