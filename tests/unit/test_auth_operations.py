# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import logging
import unittest

import requests

from restbridge.core.errors import AuthError
from restbridge.models.auth_session import AuthSession
from restbridge.operations.auth import AuthOperations
from tests.unit.test_helpers import BASE_URL, FakeResponse, make_client

TOKEN_BODY = {
    "access_token": "user-jwt",
    "token_type": "bearer",
    "expires_in": 3600,
    "expires_at": 1700003600,
    "refresh_token": "refresh",
    "user": {"id": "u1", "email": "alice@example.com"},
}


class TestSignUp(unittest.TestCase):
    def test_namespace_exists(self):
        client, _ = make_client()
        self.assertIsInstance(client.auth, AuthOperations)

    def test_sign_up_request_shape(self):
        client, http = make_client(FakeResponse(200, {"id": "u1", "email": "alice@example.com"}))

        session = client.auth.sign_up("alice@example.com", "pw", {"nickname": "alice"})

        method, url, kwargs = http.calls[0]
        self.assertEqual(method, "POST")
        self.assertEqual(url, f"{BASE_URL}/auth/v1/signup")
        self.assertEqual(kwargs["json"], {"email": "alice@example.com", "password": "pw", "data": {"nickname": "alice"}})
        self.assertIsInstance(session, AuthSession)
        self.assertEqual(session.user["id"], "u1")
        self.assertIsNone(session.access_token)

    def test_sign_up_default_metadata(self):
        client, http = make_client(FakeResponse(200, {"id": "u1"}))
        client.auth.sign_up("a@b.c", "pw")
        self.assertEqual(http.calls[0][2]["json"]["data"], {})

    def test_sign_up_does_not_change_token(self):
        client, _ = make_client(FakeResponse(200, TOKEN_BODY))
        session = client.auth.sign_up("alice@example.com", "pw")
        self.assertEqual(session.access_token, "user-jwt")
        self.assertFalse(client.is_authenticated)
        self.assertEqual(client.credential.bearer_token, "test-key")


class TestSignIn(unittest.TestCase):
    def test_sign_in_request_shape(self):
        client, http = make_client(FakeResponse(200, TOKEN_BODY))

        client.auth.sign_in("alice@example.com", "pw")

        method, url, kwargs = http.calls[0]
        self.assertEqual(method, "POST")
        self.assertEqual(url, f"{BASE_URL}/auth/v1/token?grant_type=password")
        self.assertEqual(kwargs["json"], {"email": "alice@example.com", "password": "pw"})
        self.assertEqual(kwargs["headers"]["Authorization"], "Bearer test-key")

    def test_sign_in_rotates_bearer_token(self):
        client, http = make_client(FakeResponse(200, TOKEN_BODY), FakeResponse(200, []), FakeResponse(200, []))

        session = client.auth.sign_in("alice@example.com", "pw")
        client.read("comments")
        client.delete("comments", {"id": 1})

        self.assertEqual(session.access_token, "user-jwt")
        self.assertTrue(client.is_authenticated)
        self.assertEqual(client.credential.access_token.expires_on, 1700003600)
        for _, _, kwargs in http.calls[1:]:
            self.assertEqual(kwargs["headers"]["Authorization"], "Bearer user-jwt")
            self.assertEqual(kwargs["headers"]["apikey"], "test-key")

    def test_failed_sign_in_keeps_token(self):
        client, _ = make_client(
            FakeResponse(400, {"error_description": "Invalid login credentials"}, reason="Bad Request")
        )
        with self.assertRaises(AuthError):
            client.auth.sign_in("alice@example.com", "bad")
        self.assertFalse(client.is_authenticated)

    def test_sign_in_without_token_in_body_keeps_token(self):
        client, _ = make_client(FakeResponse(200, {"user": {"id": "u1"}}))
        client.auth.sign_in("alice@example.com", "pw")
        self.assertFalse(client.is_authenticated)


class TestSignOut(unittest.TestCase):
    def _signed_in(self, *responses):
        client, http = make_client(FakeResponse(200, TOKEN_BODY), *responses)
        client.auth.sign_in("alice@example.com", "pw")
        return client, http

    def test_sign_out_success_resets_token(self):
        client, http = self._signed_in(FakeResponse(204, text=""), FakeResponse(200, []))

        self.assertIsNone(client.auth.sign_out())
        client.read("comments")

        method, url, kwargs = http.calls[1]
        self.assertEqual((method, url), ("POST", f"{BASE_URL}/auth/v1/logout"))
        self.assertEqual(kwargs["headers"]["Authorization"], "Bearer user-jwt")
        self.assertEqual(http.calls[2][2]["headers"]["Authorization"], "Bearer test-key")
        self.assertFalse(client.is_authenticated)

    def test_sign_out_remote_failure_is_logged_not_raised(self):
        client, http = self._signed_in(FakeResponse(401, {"msg": "invalid JWT"}, reason="Unauthorized"))

        with self.assertLogs("restbridge.operations.auth", level=logging.WARNING) as logs:
            client.auth.sign_out()

        self.assertIn("invalid JWT", logs.output[0])
        self.assertEqual(client.credential.bearer_token, "test-key")

    def test_sign_out_transport_failure_still_resets(self):
        client, _ = self._signed_in(requests.exceptions.ConnectionError("offline"))
        client.auth.sign_out()
        self.assertFalse(client.is_authenticated)

    def test_sign_out_explicit_token(self):
        client, http = make_client(FakeResponse(204, text=""))
        client.auth.sign_out("some-other-jwt")
        self.assertEqual(http.calls[0][2]["headers"]["Authorization"], "Bearer some-other-jwt")
        self.assertEqual(client.credential.bearer_token, "test-key")


class TestExplicitTokens(unittest.TestCase):
    def test_set_auth_token(self):
        client, http = make_client(FakeResponse(200, []))
        client.set_auth_token("manual")
        client.read("comments")
        self.assertEqual(http.last_headers["Authorization"], "Bearer manual")

    def test_set_credentials_resets_to_anonymous(self):
        client, http = make_client(FakeResponse(200, TOKEN_BODY), FakeResponse(200, []))
        client.sign_in("alice@example.com", "pw")

        client.set_credentials("https://other.supabase.co/", "other-key")
        client.read("comments")

        method, url, kwargs = http.calls[1]
        self.assertEqual(url, "https://other.supabase.co/rest/v1/comments")
        self.assertEqual(kwargs["headers"]["apikey"], "other-key")
        self.assertEqual(kwargs["headers"]["Authorization"], "Bearer other-key")
        self.assertFalse(client.is_authenticated)


if __name__ == "__main__":
    unittest.main()
