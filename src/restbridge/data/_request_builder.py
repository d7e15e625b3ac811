# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Pure translation of table operations into request descriptors.

Nothing in this module performs I/O. Given the same base URL, table,
operation, filters, options and credential the functions always return the
same :class:`RequestDescriptor`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union
from urllib.parse import urlencode

from ..common.constants import (
    AUTH_PATH,
    FILTER_EQ,
    HEADER_API_KEY,
    HEADER_AUTHORIZATION,
    HEADER_PREFER,
    PREFER_RETURN_REPRESENTATION,
    REST_PATH,
)
from ..core._error_codes import VALIDATION_TABLE_EMPTY
from ..core.credentials import SessionCredential
from ..core.errors import ValidationError
from ..models.query_options import FilterSet, Operation, QueryOptions, format_filter_value

_METHODS = {
    Operation.SELECT: "GET",
    Operation.INSERT: "POST",
    Operation.UPDATE: "PATCH",
    Operation.DELETE: "DELETE",
}


@dataclass(frozen=True)
class RequestDescriptor:
    """
    Fully resolved HTTP request.

    :param method: HTTP method.
    :type method: str
    :param url: Absolute URL including the encoded query string.
    :type url: str
    :param headers: Request headers.
    :type headers: dict
    :param json: JSON body, or None for bodiless requests.
    """

    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    json: Any = None


def _filter_params(filters: Optional[FilterSet]) -> List[Tuple[str, str]]:
    if not filters:
        return []
    return [(column, f"{FILTER_EQ}{format_filter_value(value)}") for column, value in filters.items()]


def _option_params(options: QueryOptions) -> List[Tuple[str, str]]:
    params: List[Tuple[str, str]] = []
    if options.select is not None:
        params.append(("select", options.select))
    if options.order is not None:
        params.append(("order", options.order.render()))
    if options.limit is not None:
        params.append(("limit", str(options.limit)))
    if options.offset:
        params.append(("offset", str(options.offset)))
    return params


def _encode(params: List[Tuple[str, str]]) -> str:
    # Commas stay literal so column lists read as "select=id,name".
    return urlencode(params, safe=",")


def table_url(base_url: str, table: str, rest_path: str = REST_PATH) -> str:
    """Return the bare resource URL ``<base>/rest/v1/<table>``."""
    if not isinstance(table, str) or not table.strip():
        raise ValidationError("table name is required.", subcode=VALIDATION_TABLE_EMPTY)
    return f"{base_url.rstrip('/')}{rest_path}/{table}"


def build_url(
    base_url: str,
    table: str,
    operation: Union[Operation, str] = Operation.SELECT,
    filters: Optional[FilterSet] = None,
    options: Union[QueryOptions, Mapping[str, Any], None] = None,
    *,
    rest_path: str = REST_PATH,
) -> str:
    """
    Build the resource URL for ``operation`` on ``table``.

    Selects encode filters first (one ``column=eq.value`` per entry, in
    insertion order) followed by ``select``, ``order``, ``limit`` and
    ``offset``. Updates and deletes encode only the filters. Inserts get the
    bare resource URL. No ``?`` is appended when there is nothing to encode.

    :param base_url: Project URL, e.g. ``"https://xyz.supabase.co"``.
    :type base_url: str
    :param table: Table name.
    :type table: str
    :param operation: Request kind.
    :type operation: Operation or str
    :param filters: Equality filters.
    :type filters: dict or None
    :param options: Read options; ignored for non-select operations.
    :type options: QueryOptions or dict or None
    :return: Absolute URL.
    :rtype: str

    Example::

        build_url("https://x.supabase.co", "comments",
                  options={"order": {"column": "created_at", "direction": "desc"}, "limit": 50})
        # 'https://x.supabase.co/rest/v1/comments?order=created_at.desc&limit=50'
    """
    operation = Operation(operation)
    url = table_url(base_url, table, rest_path)

    params: List[Tuple[str, str]] = []
    if operation is Operation.SELECT:
        params.extend(_filter_params(filters))
        params.extend(_option_params(QueryOptions.coerce(options)))
    elif operation in (Operation.UPDATE, Operation.DELETE):
        params.extend(_filter_params(filters))

    if params:
        url += f"?{_encode(params)}"
    return url


def build_headers(credential: SessionCredential, *, prefer_representation: bool = True) -> Dict[str, str]:
    """Build the standard headers carrying ``credential``."""
    headers = {
        HEADER_API_KEY: credential.api_key.key,
        HEADER_AUTHORIZATION: f"Bearer {credential.bearer_token}",
        "Content-Type": "application/json",
        "Accept": "application/json",
    }
    if prefer_representation:
        headers[HEADER_PREFER] = PREFER_RETURN_REPRESENTATION
    return headers


def build_request(
    base_url: str,
    table: str,
    operation: Union[Operation, str],
    credential: SessionCredential,
    *,
    filters: Optional[FilterSet] = None,
    options: Union[QueryOptions, Mapping[str, Any], None] = None,
    body: Any = None,
    rest_path: str = REST_PATH,
) -> RequestDescriptor:
    """Build the descriptor for a table operation."""
    operation = Operation(operation)
    return RequestDescriptor(
        method=_METHODS[operation],
        url=build_url(base_url, table, operation, filters, options, rest_path=rest_path),
        headers=build_headers(credential),
        json=body if operation in (Operation.INSERT, Operation.UPDATE) else None,
    )


def build_auth_request(
    base_url: str,
    action: str,
    credential: SessionCredential,
    *,
    body: Any = None,
    token: Optional[str] = None,
    auth_path: str = AUTH_PATH,
) -> RequestDescriptor:
    """
    Build a POST to ``<base>/auth/v1/<action>``.

    :param token: Bearer token to send instead of the credential's current one
        (used to invalidate a specific session on logout).
    :type token: str or None
    """
    if token:
        credential = credential.with_token(token)
    return RequestDescriptor(
        method="POST",
        url=f"{base_url.rstrip('/')}{auth_path}/{action}",
        headers=build_headers(credential, prefer_representation=False),
        json=body,
    )


__all__ = ["RequestDescriptor", "build_url", "build_headers", "build_request", "build_auth_request", "table_url"]
