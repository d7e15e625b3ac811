# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from restbridge.models.auth_session import AuthSession


def test_from_token_response():
    body = {
        "access_token": "jwt",
        "refresh_token": "r",
        "token_type": "bearer",
        "expires_in": 3600,
        "expires_at": 1700003600,
        "user": {"id": "u1", "email": "a@b.c"},
    }
    session = AuthSession.from_response(body)
    assert session.access_token == "jwt"
    assert session.refresh_token == "r"
    assert session.expires_in == 3600
    assert session.expires_at == 1700003600
    assert session.user == {"id": "u1", "email": "a@b.c"}
    assert session.raw is body


def test_from_bare_user_response():
    body = {"id": "u1", "email": "a@b.c", "confirmation_sent_at": "2024-01-01T00:00:00Z"}
    session = AuthSession.from_response(body)
    assert session.access_token is None
    assert session.user is body


def test_from_empty_response():
    session = AuthSession.from_response({})
    assert session.user is None
    assert session.access_token is None
