# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Session returned by the auth endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class AuthSession:
    """
    Result of a sign-up or sign-in call.

    Sign-up with email confirmation enabled returns only a user object; in
    that case ``access_token`` is None.

    :param user: User record returned by the auth server.
    :type user: dict or None
    :param access_token: Bearer token for subsequent requests.
    :type access_token: str or None
    :param refresh_token: Token for refreshing the session (not used by the client).
    :type refresh_token: str or None
    :param token_type: Usually ``"bearer"``.
    :type token_type: str or None
    :param expires_in: Token lifetime in seconds.
    :type expires_in: int or None
    :param expires_at: Expiry as a Unix timestamp, when the server sends it.
    :type expires_at: int or None
    :param raw: Full decoded response body.
    :type raw: dict
    """

    user: Optional[Dict[str, Any]] = None
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    token_type: Optional[str] = None
    expires_in: Optional[int] = None
    expires_at: Optional[int] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_response(cls, body: Dict[str, Any]) -> "AuthSession":
        """Build a session from a decoded auth response body."""
        if not isinstance(body, dict):
            return cls()
        user = body.get("user")
        if user is None and "access_token" not in body and body.get("id"):
            # Bare user object (confirmation pending)
            user = body
        return cls(
            user=user,
            access_token=body.get("access_token"),
            refresh_token=body.get("refresh_token"),
            token_type=body.get("token_type"),
            expires_in=body.get("expires_in"),
            expires_at=body.get("expires_at"),
            raw=body,
        )

__all__ = ["AuthSession"]
