# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Core infrastructure components for the restbridge client.

This module contains the foundational components including the session
credential, configuration, HTTP transport, and error handling.
"""

from .config import RestBridgeConfig
from .credentials import SessionCredential
from .errors import AuthError, HttpError, RestBridgeError, TransportError, ValidationError

__all__ = [
    "RestBridgeConfig",
    "SessionCredential",
    "RestBridgeError",
    "ValidationError",
    "TransportError",
    "HttpError",
    "AuthError",
]
