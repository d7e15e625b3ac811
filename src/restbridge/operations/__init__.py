# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Operation namespace classes for the restbridge client.

- RecordOperations: CRUD operations on tables
- AuthOperations: sign-up, sign-in and sign-out
"""

__all__ = []
