# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Session credential carried by every request.

A :class:`SessionCredential` pairs the project API key with the bearer token
sent in the ``Authorization`` header. Instances are immutable; the client
swaps the whole value on sign-in, sign-out and credential reset, and each
request reads it once.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from azure.core.credentials import AccessToken, AzureKeyCredential

from ._error_codes import VALIDATION_CREDENTIAL_EMPTY
from .errors import ValidationError


@dataclass(frozen=True)
class SessionCredential:
    """
    API key plus active bearer token.

    :param api_key: Project API key (anon/publishable key).
    :type api_key: ~azure.core.credentials.AzureKeyCredential
    :param access_token: Token issued by sign-in, or None while anonymous.
    :type access_token: ~azure.core.credentials.AccessToken or None
    """

    api_key: AzureKeyCredential
    access_token: Optional[AccessToken] = None

    @classmethod
    def anonymous(cls, api_key: str) -> "SessionCredential":
        if not api_key:
            raise ValidationError("api_key is required.", subcode=VALIDATION_CREDENTIAL_EMPTY)
        return cls(AzureKeyCredential(api_key))

    @property
    def bearer_token(self) -> str:
        """Token for the ``Authorization`` header; the API key while anonymous."""
        if self.access_token is not None:
            return self.access_token.token
        return self.api_key.key

    @property
    def is_authenticated(self) -> bool:
        return self.access_token is not None

    def with_token(self, token: str, expires_on: int = 0) -> "SessionCredential":
        if not token:
            raise ValidationError("token is required.", subcode=VALIDATION_CREDENTIAL_EMPTY)
        return SessionCredential(self.api_key, AccessToken(token, expires_on))

    def without_token(self) -> "SessionCredential":
        return SessionCredential(self.api_key)


__all__ = ["SessionCredential"]
