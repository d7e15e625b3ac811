# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

import logging
import os
from typing import Any, List, Mapping, Optional, Union

import requests

from .core._error_codes import VALIDATION_BASE_URL_EMPTY
from .core.config import RestBridgeConfig
from .core.credentials import SessionCredential
from .core.errors import ValidationError
from .data._rest import _RestClient
from .models.auth_session import AuthSession
from .models.query_options import FilterSet, QueryOptions, Record, Scalar
from .operations.auth import AuthOperations
from .operations.records import RecordOperations

logger = logging.getLogger(__name__)


class RestBridgeClient:
    """
    Client for a PostgREST-style data backend with password auth.

    Builds every request from structured inputs (table name, equality filters,
    :class:`~restbridge.models.query_options.QueryOptions`) and carries the
    session credential: the project API key plus the active bearer token.

    Operations are grouped under two namespaces:

    - ``client.records``: ``read``, ``query``, ``get_by_id``, ``insert``, ``insert_many``,
      ``update``, ``update_by_id``, ``delete``, ``delete_by_id``
    - ``client.auth``: ``sign_up``, ``sign_in``, ``sign_out``

    The same operations are available directly on the client
    (``client.read(...)``, ``client.sign_in(...)``).

    :param base_url: Project URL, for example ``"https://xyz.supabase.co"``.
        Trailing slash is automatically removed.
    :type base_url: :class:`str`
    :param api_key: Project API key (anon/publishable key).
    :type api_key: :class:`str`
    :param config: Optional configuration for timeouts and endpoint paths.
        If not provided, defaults are loaded from :meth:`~restbridge.core.config.RestBridgeConfig.from_env`.
    :type config: ~restbridge.core.config.RestBridgeConfig or None
    :param session: Optional :class:`requests.Session` used as transport. The client
        closes it in :meth:`close`.
    :type session: :class:`requests.Session` or None

    :raises ~restbridge.core.errors.ValidationError: If ``base_url`` or ``api_key`` is empty.

    Example::

        with RestBridgeClient("https://xyz.supabase.co", "anon-key") as client:
            latest = client.read("comments", {"order": {"column": "created_at", "direction": "desc"}, "limit": 50})
            client.sign_in("alice@example.com", "secret")
            client.insert("comments", {"content": "hi"})
            client.sign_out()
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        config: Optional[RestBridgeConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._base_url = _clean_base_url(base_url)
        self._credential = SessionCredential.anonymous(api_key)
        self._config = config or RestBridgeConfig.from_env()
        self._session = session
        self._rest: Optional[_RestClient] = None

        # Initialize operation namespaces
        self.records = RecordOperations(self)
        self.auth = AuthOperations(self)

    @classmethod
    def from_env(cls, config: Optional[RestBridgeConfig] = None) -> "RestBridgeClient":
        """
        Build a client from ``SUPABASE_URL`` and ``SUPABASE_KEY``.

        :raises ~restbridge.core.errors.ValidationError: If either variable is unset.
        """
        return cls(os.environ.get("SUPABASE_URL", ""), os.environ.get("SUPABASE_KEY", ""), config=config)

    def __enter__(self) -> "RestBridgeClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """
        Release the transport (and the session passed at construction, if any).

        Safe to call multiple times.
        """
        if self._rest is not None:
            self._rest.close()
            self._rest = None
        elif self._session is not None:
            self._session.close()
        self._session = None

    def _get_rest(self) -> _RestClient:
        """Get or create the internal executor."""
        if self._rest is None:
            self._rest = _RestClient(self._config, session=self._session)
        return self._rest

    # ------------------------------------------------------------- credential

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def credential(self) -> SessionCredential:
        """The credential the next request will carry."""
        return self._credential

    @property
    def is_authenticated(self) -> bool:
        return self._credential.is_authenticated

    def _set_token(self, token: str, expires_on: int = 0) -> None:
        self._credential = self._credential.with_token(token, expires_on)

    def _clear_token(self) -> None:
        self._credential = self._credential.without_token()

    def set_auth_token(self, token: str) -> None:
        """
        Send ``token`` as the bearer token on subsequent requests.

        :raises ~restbridge.core.errors.ValidationError: If ``token`` is empty.
        """
        self._set_token(token)
        logger.info("Bearer token set explicitly")

    def set_credentials(self, base_url: str, api_key: str) -> None:
        """
        Point the client at another project and key.

        Drops any signed-in token; requests go out with the new API key.
        """
        new_base_url = _clean_base_url(base_url)
        self._credential = SessionCredential.anonymous(api_key)
        self._base_url = new_base_url
        logger.info("Credentials reset for %s", new_base_url)

    # --------------------------------------------------------- flat operations

    def read(self, table: str, options: Union[QueryOptions, Mapping[str, Any], None] = None) -> List[Record]:
        """Shortcut for :meth:`RecordOperations.read <restbridge.operations.records.RecordOperations.read>`."""
        return self.records.read(table, options)

    def query(
        self,
        table: str,
        filters: Optional[FilterSet] = None,
        options: Union[QueryOptions, Mapping[str, Any], None] = None,
    ) -> List[Record]:
        """Shortcut for :meth:`RecordOperations.query <restbridge.operations.records.RecordOperations.query>`."""
        return self.records.query(table, filters, options)

    def get_by_id(
        self,
        table: str,
        record_id: Scalar,
        options: Union[QueryOptions, Mapping[str, Any], None] = None,
    ) -> Optional[Record]:
        """Shortcut for :meth:`RecordOperations.get_by_id <restbridge.operations.records.RecordOperations.get_by_id>`."""
        return self.records.get_by_id(table, record_id, options)

    def insert(self, table: str, record: Mapping[str, Any]) -> List[Record]:
        return self.records.insert(table, record)

    def insert_many(self, table: str, records: List[Mapping[str, Any]]) -> List[Record]:
        return self.records.insert_many(table, records)

    def update(self, table: str, filters: FilterSet, patch: Mapping[str, Any]) -> List[Record]:
        return self.records.update(table, filters, patch)

    def update_by_id(self, table: str, record_id: Scalar, patch: Mapping[str, Any]) -> List[Record]:
        return self.records.update_by_id(table, record_id, patch)

    def delete(self, table: str, filters: FilterSet) -> List[Record]:
        return self.records.delete(table, filters)

    def delete_by_id(self, table: str, record_id: Scalar) -> List[Record]:
        return self.records.delete_by_id(table, record_id)

    def sign_up(self, email: str, password: str, metadata: Optional[Mapping[str, Any]] = None) -> AuthSession:
        return self.auth.sign_up(email, password, dict(metadata) if metadata else None)

    def sign_in(self, email: str, password: str) -> AuthSession:
        return self.auth.sign_in(email, password)

    def sign_out(self, access_token: Optional[str] = None) -> None:
        self.auth.sign_out(access_token)


def _clean_base_url(base_url: str) -> str:
    cleaned = (base_url or "").rstrip("/")
    if not cleaned:
        raise ValidationError("base_url is required.", subcode=VALIDATION_BASE_URL_EMPTY)
    return cleaned


__all__ = ["RestBridgeClient"]
