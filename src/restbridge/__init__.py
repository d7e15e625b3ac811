# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
restbridge: structured CRUD and password auth for PostgREST-style backends.
"""

from .client import RestBridgeClient
from .core.config import RestBridgeConfig
from .core.errors import AuthError, HttpError, RestBridgeError, TransportError, ValidationError
from .models.query_options import OrderBy, QueryOptions

__version__ = "0.1.0"

__all__ = [
    "RestBridgeClient",
    "RestBridgeConfig",
    "QueryOptions",
    "OrderBy",
    "RestBridgeError",
    "ValidationError",
    "TransportError",
    "HttpError",
    "AuthError",
]
