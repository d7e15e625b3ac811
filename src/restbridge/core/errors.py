# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Structured exceptions raised by the restbridge client.

- :class:`ValidationError`: local input rejected before any request is sent.
- :class:`TransportError`: the HTTP call itself could not complete.
- :class:`HttpError`: the backend answered with a non-success status.
- :class:`AuthError`: an :class:`HttpError` raised by an auth endpoint.
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Dict, Optional


class RestBridgeError(Exception):
    """Base structured error for the restbridge client."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        subcode: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        source: Optional[str] = None,
        is_transient: bool = False,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.subcode = subcode
        self.status_code = status_code
        self.details = details or {}
        self.source = source or "client"
        self.is_transient = is_transient
        self.timestamp = _dt.datetime.now(_dt.timezone.utc).isoformat().replace("+00:00", "Z")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "subcode": self.subcode,
            "status_code": self.status_code,
            "details": self.details,
            "source": self.source,
            "is_transient": self.is_transient,
            "timestamp": self.timestamp,
        }

    def __repr__(self) -> str:  # pragma: no cover
        return f"{self.__class__.__name__}(code={self.code!r}, subcode={self.subcode!r}, message={self.message!r})"


class ValidationError(RestBridgeError):
    def __init__(self, message: str, *, subcode: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="validation_error", subcode=subcode, details=details, source="client")


class TransportError(RestBridgeError):
    """
    The request never produced an HTTP response (DNS, connection, timeout).

    The originating :class:`requests.exceptions.RequestException` is chained
    as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        *,
        table: Optional[str] = None,
        operation: Optional[str] = None,
        subcode: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        d = details or {}
        if table is not None:
            d["table"] = table
        if operation is not None:
            d["operation"] = operation
        super().__init__(message, code="transport_error", subcode=subcode, details=d, source="client")
        self.table = table
        self.operation = operation

    def __str__(self) -> str:
        return _with_context(self.operation, self.table, self.message)


class HttpError(RestBridgeError):
    """
    The backend rejected a request with a non-success status.

    ``message`` is the backend-supplied text (or the status text fallback);
    ``str(err)`` prefixes it with the operation and table.
    """

    _code = "http_error"

    def __init__(
        self,
        message: str,
        status_code: int,
        *,
        table: Optional[str] = None,
        operation: Optional[str] = None,
        is_transient: bool = False,
        subcode: Optional[str] = None,
        service_error_code: Optional[str] = None,
        hint: Optional[str] = None,
        body_excerpt: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        d = details or {}
        if table is not None:
            d["table"] = table
        if operation is not None:
            d["operation"] = operation
        if service_error_code is not None:
            d["service_error_code"] = service_error_code
        if hint is not None:
            d["hint"] = hint
        if body_excerpt is not None:
            d["body_excerpt"] = body_excerpt
        super().__init__(
            message,
            code=self._code,
            subcode=subcode,
            status_code=status_code,
            details=d,
            source="server",
            is_transient=is_transient,
        )
        self.table = table
        self.operation = operation

    def __str__(self) -> str:
        return _with_context(self.operation, self.table, self.message)


class AuthError(HttpError):
    _code = "auth_error"


def _with_context(operation: Optional[str], table: Optional[str], message: str) -> str:
    target = " ".join(p for p in (operation, table) if p)
    if not target:
        return message
    return f"{target} failed: {message}"


__all__ = ["RestBridgeError", "ValidationError", "TransportError", "HttpError", "AuthError"]
