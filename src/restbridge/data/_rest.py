# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Low-level executor for table and auth requests.

:class:`_RestClient` sends :class:`~restbridge.data._request_builder.RequestDescriptor`
objects through the HTTP transport and turns responses into decoded JSON or
classified errors.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Type

import requests

from ..core._error_codes import (
    TRANSPORT_CONNECTION,
    TRANSPORT_OTHER,
    TRANSPORT_TIMEOUT,
    UNEXPECTED_RESPONSE,
    _http_subcode,
    _is_transient_status,
)
from ..core._http import _HttpClient
from ..core.config import RestBridgeConfig
from ..core.errors import AuthError, HttpError, TransportError
from ._request_builder import RequestDescriptor

logger = logging.getLogger(__name__)

_BODY_EXCERPT_LIMIT = 200


class _RestClient:
    """Executes request descriptors against a PostgREST/auth backend."""

    def __init__(self, config: Optional[RestBridgeConfig] = None, session: Optional[requests.Session] = None) -> None:
        self.config = config or RestBridgeConfig.from_env()
        self._http = _HttpClient(timeout=self.config.http_timeout, session=session)

    def _send(self, request: RequestDescriptor, *, table: Optional[str], operation: str) -> requests.Response:
        logger.debug("%s %s", request.method, request.url)
        kwargs: Dict[str, Any] = {"headers": dict(request.headers)}
        if request.json is not None:
            kwargs["json"] = request.json
        try:
            return self._http._request(request.method, request.url, **kwargs)
        except requests.exceptions.Timeout as exc:
            raise TransportError(
                f"Request timed out: {exc}", table=table, operation=operation, subcode=TRANSPORT_TIMEOUT
            ) from exc
        except requests.exceptions.ConnectionError as exc:
            raise TransportError(
                f"Connection error: {exc}", table=table, operation=operation, subcode=TRANSPORT_CONNECTION
            ) from exc
        except requests.exceptions.RequestException as exc:
            raise TransportError(str(exc), table=table, operation=operation, subcode=TRANSPORT_OTHER) from exc

    def _execute_table(self, request: RequestDescriptor, *, table: str, operation: str) -> List[Dict[str, Any]]:
        """Send a table request and return the echoed rows."""
        response = self._send(request, table=table, operation=operation)
        if not 200 <= response.status_code < 300:
            raise self._classify(response, HttpError, table=table, operation=operation)
        body = self._decode(response, HttpError, table=table, operation=operation)
        if body is None:
            return []
        if not isinstance(body, list):
            raise HttpError(
                f"Expected a JSON array, got {type(body).__name__}",
                response.status_code,
                table=table,
                operation=operation,
                subcode=UNEXPECTED_RESPONSE,
                body_excerpt=_excerpt(response),
            )
        return body

    def _execute_auth(self, request: RequestDescriptor, *, operation: str) -> Dict[str, Any]:
        """Send an auth request and return the decoded object (empty for bodiless replies)."""
        response = self._send(request, table=None, operation=operation)
        if not 200 <= response.status_code < 300:
            raise self._classify(response, AuthError, table=None, operation=operation)
        body = self._decode(response, AuthError, table=None, operation=operation)
        if body is None:
            return {}
        if not isinstance(body, dict):
            raise AuthError(
                f"Expected a JSON object, got {type(body).__name__}",
                response.status_code,
                operation=operation,
                subcode=UNEXPECTED_RESPONSE,
                body_excerpt=_excerpt(response),
            )
        return body

    @staticmethod
    def _decode(
        response: requests.Response,
        error_cls: Type[HttpError],
        *,
        table: Optional[str],
        operation: str,
    ) -> Any:
        if not response.text:
            return None
        try:
            return response.json()
        except ValueError:
            raise error_cls(
                "Response body is not valid JSON",
                response.status_code,
                table=table,
                operation=operation,
                subcode=UNEXPECTED_RESPONSE,
                body_excerpt=_excerpt(response),
            )

    @staticmethod
    def _classify(
        response: requests.Response,
        error_cls: Type[HttpError],
        *,
        table: Optional[str],
        operation: str,
    ) -> HttpError:
        status = response.status_code
        body: Any = None
        try:
            body = response.json()
        except ValueError:
            body = None
        if not isinstance(body, dict):
            body = {}

        if error_cls is AuthError:
            keys = ("error_description", "msg", "message")
        else:
            keys = ("message",)
        message = next((body[k] for k in keys if isinstance(body.get(k), str) and body[k]), None)
        if not message:
            message = response.reason or f"HTTP {status}"

        service_code = body.get("code") if body.get("code") is not None else body.get("error_code")
        details: Dict[str, Any] = {}
        if body.get("details") is not None:
            details["service_details"] = body["details"]
        return error_cls(
            message,
            status,
            table=table,
            operation=operation,
            is_transient=_is_transient_status(status),
            subcode=_http_subcode(status),
            service_error_code=str(service_code) if service_code is not None else None,
            hint=body.get("hint"),
            body_excerpt=_excerpt(response),
            details=details,
        )

    def close(self) -> None:
        self._http.close()


def _excerpt(response: requests.Response) -> Optional[str]:
    text = getattr(response, "text", None) or ""
    if not text:
        return None
    return text[:_BODY_EXCERPT_LIMIT]


__all__ = []
