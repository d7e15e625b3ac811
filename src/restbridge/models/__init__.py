# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Data models and type definitions for the restbridge client.

- :class:`~restbridge.models.query_options.QueryOptions`: read options (select, order, limit, offset).
- :class:`~restbridge.models.query_options.OrderBy`: a single sort key.
- :class:`~restbridge.models.query_options.Operation`: request kind for a table endpoint.
- :class:`~restbridge.models.auth_session.AuthSession`: result of sign-up / sign-in.

Type aliases:

- ``FilterSet``: column name to equality value.
- ``Record``: one backend row as a dict.

Note:
    This ``__init__.py`` does NOT import/export models. Import directly from
    the specific module files.
"""

__all__ = []
