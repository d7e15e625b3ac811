# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Error subcode constants and helpers used by :mod:`restbridge.core.errors`.
"""

from __future__ import annotations

# HTTP subcode constants
HTTP_400 = "http_400"
HTTP_401 = "http_401"
HTTP_403 = "http_403"
HTTP_404 = "http_404"
HTTP_406 = "http_406"
HTTP_409 = "http_409"
HTTP_422 = "http_422"
HTTP_429 = "http_429"
HTTP_500 = "http_500"
HTTP_502 = "http_502"
HTTP_503 = "http_503"
HTTP_504 = "http_504"

_HTTP_STATUS_TO_SUBCODE = {
    400: HTTP_400,
    401: HTTP_401,
    403: HTTP_403,
    404: HTTP_404,
    406: HTTP_406,
    409: HTTP_409,
    422: HTTP_422,
    429: HTTP_429,
    500: HTTP_500,
    502: HTTP_502,
    503: HTTP_503,
    504: HTTP_504,
}

TRANSIENT_STATUS = {429, 502, 503, 504}

# Response shape subcodes
UNEXPECTED_RESPONSE = "unexpected_response"

# Transport subcodes
TRANSPORT_CONNECTION = "transport_connection"
TRANSPORT_TIMEOUT = "transport_timeout"
TRANSPORT_OTHER = "transport_other"

# Validation subcodes
VALIDATION_TABLE_EMPTY = "validation_table_empty"
VALIDATION_UNKNOWN_OPTION = "validation_unknown_option"
VALIDATION_ORDER_DIRECTION = "validation_order_direction"
VALIDATION_LIMIT = "validation_limit"
VALIDATION_OFFSET = "validation_offset"
VALIDATION_FILTERS_EMPTY = "validation_filters_empty"
VALIDATION_CREDENTIAL_EMPTY = "validation_credential_empty"
VALIDATION_BASE_URL_EMPTY = "validation_base_url_empty"
VALIDATION_CONFIG = "validation_config"


def _http_subcode(status: int) -> str:
    return _HTTP_STATUS_TO_SUBCODE.get(status, f"http_{status}")


def _is_transient_status(status: int) -> bool:
    return status in TRANSIENT_STATUS


__all__ = []
