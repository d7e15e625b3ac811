# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Constants for the PostgREST and auth endpoints.
"""

REST_PATH = "/rest/v1"
AUTH_PATH = "/auth/v1"

# Auth actions, relative to AUTH_PATH
AUTH_SIGNUP = "signup"
AUTH_TOKEN_PASSWORD = "token?grant_type=password"
AUTH_LOGOUT = "logout"

HEADER_API_KEY = "apikey"
HEADER_AUTHORIZATION = "Authorization"
HEADER_PREFER = "Prefer"

PREFER_RETURN_REPRESENTATION = "return=representation"
"""Ask PostgREST to echo the affected rows in the response body."""

FILTER_EQ = "eq."
