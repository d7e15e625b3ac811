# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Request construction and execution for the restbridge client.

- ``_request_builder``: pure mapping from table operations to request descriptors.
- ``_rest``: sends descriptors and classifies responses.
"""

__all__ = []
