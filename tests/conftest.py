# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Shared pytest fixtures and configuration for restbridge tests.
"""

import pytest

from restbridge.core.credentials import SessionCredential


@pytest.fixture
def anon_credential():
    """Credential with no signed-in token."""
    return SessionCredential.anonymous("test-key")


@pytest.fixture
def user_credential(anon_credential):
    """Credential carrying a signed-in user's token."""
    return anon_credential.with_token("user-token")
