# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from ..common.constants import AUTH_PATH, REST_PATH
from ._error_codes import VALIDATION_CONFIG
from .errors import ValidationError


@dataclass(frozen=True)
class RestBridgeConfig:
    """
    Configuration settings for restbridge client operations.

    Logger levels and handlers are left to the application; every module logs
    under the ``restbridge`` namespace.

    :param http_timeout: Request timeout in seconds (default: method-dependent).
    :type http_timeout: float or None
    :param rest_path: Path prefix of the PostgREST endpoint (default: ``/rest/v1``).
    :type rest_path: str
    :param auth_path: Path prefix of the auth endpoint (default: ``/auth/v1``).
    :type auth_path: str

    :raises ~restbridge.core.errors.ValidationError: If ``http_timeout`` is not a positive number.
    """

    http_timeout: Optional[float] = None
    rest_path: str = REST_PATH
    auth_path: str = AUTH_PATH

    def __post_init__(self) -> None:
        timeout = self.http_timeout
        if timeout is not None and (isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0):
            raise ValidationError(
                f"http_timeout must be a positive number, got {timeout!r}",
                subcode=VALIDATION_CONFIG,
                details={"setting": "http_timeout"},
            )

    @classmethod
    def from_env(cls) -> "RestBridgeConfig":
        """
        Create a configuration instance from ``RESTBRIDGE_*`` environment variables.

        Unset variables keep the defaults.

        :return: Configuration instance.
        :rtype: ~restbridge.core.config.RestBridgeConfig
        :raises ~restbridge.core.errors.ValidationError: If ``RESTBRIDGE_HTTP_TIMEOUT`` is not a positive number.
        """
        raw = os.environ.get("RESTBRIDGE_HTTP_TIMEOUT")
        timeout: Optional[float] = None
        if raw:
            try:
                timeout = float(raw)
            except ValueError:
                raise ValidationError(
                    f"RESTBRIDGE_HTTP_TIMEOUT must be a number, got {raw!r}",
                    subcode=VALIDATION_CONFIG,
                    details={"setting": "RESTBRIDGE_HTTP_TIMEOUT"},
                ) from None
        # None falls back to method-dependent defaults in _HttpClient
        return cls(http_timeout=timeout)
