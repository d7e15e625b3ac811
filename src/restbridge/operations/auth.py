# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Sign-up, sign-in and sign-out against the auth endpoint."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, TYPE_CHECKING

from ..common.constants import AUTH_LOGOUT, AUTH_SIGNUP, AUTH_TOKEN_PASSWORD
from ..core.errors import HttpError, TransportError
from ..data._request_builder import build_auth_request
from ..models.auth_session import AuthSession

if TYPE_CHECKING:
    from ..client import RestBridgeClient

logger = logging.getLogger(__name__)


class AuthOperations:
    """
    Session lifecycle operations.

    Accessed via ``client.auth``. A successful :meth:`sign_in` makes every
    later request carry the returned access token; :meth:`sign_out` always
    puts the client back on the API key.

    Example::

        session = client.auth.sign_in("alice@example.com", "secret")
        client.records.insert("comments", {"content": "hi", "user_id": session.user["id"]})
        client.auth.sign_out()
    """

    def __init__(self, client: "RestBridgeClient") -> None:
        self._client = client

    def _post(self, action: str, operation: str, body: Any = None, token: Optional[str] = None) -> Dict[str, Any]:
        request = build_auth_request(
            self._client.base_url,
            action,
            self._client.credential,
            body=body,
            token=token,
            auth_path=self._client._config.auth_path,
        )
        return self._client._get_rest()._execute_auth(request, operation=operation)

    def sign_up(self, email: str, password: str, metadata: Optional[Dict[str, Any]] = None) -> AuthSession:
        """
        Register a new user.

        Does not change the client's credential, even when the server returns
        an access token.

        :param email: User email.
        :type email: str
        :param password: User password.
        :type password: str
        :param metadata: Free-form user metadata stored with the account.
        :type metadata: dict or None
        :return: The created session (``access_token`` is None while confirmation is pending).
        :rtype: ~restbridge.models.auth_session.AuthSession

        :raises ~restbridge.core.errors.AuthError: If the server rejects the sign-up.
        """
        body = {"email": email, "password": password, "data": dict(metadata or {})}
        return AuthSession.from_response(self._post(AUTH_SIGNUP, "sign_up", body))

    def sign_in(self, email: str, password: str) -> AuthSession:
        """
        Sign in with email and password.

        On success the returned access token replaces the client's bearer token.

        :return: The new session.
        :rtype: ~restbridge.models.auth_session.AuthSession

        :raises ~restbridge.core.errors.AuthError: If the credentials are rejected.
        """
        session = AuthSession.from_response(
            self._post(AUTH_TOKEN_PASSWORD, "sign_in", {"email": email, "password": password})
        )
        if session.access_token:
            self._client._set_token(session.access_token, session.expires_at or 0)
            logger.info("Signed in; bearer token replaced")
        return session

    def sign_out(self, access_token: Optional[str] = None) -> None:
        """
        Invalidate a session and return the client to the API key.

        The remote logout is best effort: failures are logged and the local
        token is reset regardless.

        :param access_token: Token to invalidate. Defaults to the client's current bearer token.
        :type access_token: str or None
        """
        try:
            self._post(AUTH_LOGOUT, "sign_out", token=access_token)
        except (HttpError, TransportError) as exc:
            logger.warning("Remote sign-out failed: %s", exc)
        finally:
            self._client._clear_token()
            logger.info("Signed out; bearer token reset to API key")


__all__ = ["AuthOperations"]
