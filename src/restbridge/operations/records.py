# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Table CRUD operations namespace."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Union, TYPE_CHECKING

from ..core._error_codes import VALIDATION_FILTERS_EMPTY
from ..core.credentials import SessionCredential
from ..core.errors import ValidationError
from ..data._request_builder import RequestDescriptor, build_request
from ..models.query_options import FilterSet, Operation, QueryOptions, Record, Scalar

if TYPE_CHECKING:
    from ..client import RestBridgeClient

OptionsArg = Union[QueryOptions, Mapping[str, Any], None]


class RecordOperations:
    """
    CRUD operations on PostgREST tables.

    Accessed via ``client.records``. Every method returns the rows echoed by
    the backend as a list of dicts, except :meth:`get_by_id` which returns a
    single dict or None.

    Each call reads the client's current credential once. Pass
    ``credential=`` to send a specific :class:`~restbridge.core.credentials.SessionCredential`
    instead.

    Example::

        rows = client.records.read("comments", {"order": {"column": "created_at", "direction": "desc"}, "limit": 50})
        alice = client.records.query("users", {"nickname": "alice"})
        created = client.records.insert("comments", {"content": "hi"})
        client.records.update_by_id("comments", created[0]["id"], {"content": "edited"})
        client.records.delete_by_id("comments", created[0]["id"])
    """

    def __init__(self, client: "RestBridgeClient") -> None:
        """
        Initialize RecordOperations.

        :param client: Parent RestBridgeClient instance.
        :type client: RestBridgeClient
        """
        self._client = client

    # ------------------------------------------------------------------ builders

    def _request(
        self,
        table: str,
        operation: Operation,
        credential: Optional[SessionCredential],
        *,
        filters: Optional[FilterSet] = None,
        options: OptionsArg = None,
        body: Any = None,
    ) -> RequestDescriptor:
        config = self._client._config
        return build_request(
            self._client.base_url,
            table,
            operation,
            credential or self._client.credential,
            filters=filters,
            options=options,
            body=body,
            rest_path=config.rest_path,
        )

    def _run(self, request: RequestDescriptor, table: str, operation: str) -> List[Record]:
        return self._client._get_rest()._execute_table(request, table=table, operation=operation)

    # ---------------------------------------------------------------------- read

    def read(
        self,
        table: str,
        options: OptionsArg = None,
        *,
        credential: Optional[SessionCredential] = None,
    ) -> List[Record]:
        """
        Read rows from a table.

        :param table: Table name.
        :type table: str
        :param options: ``select``, ``order``, ``limit`` and ``offset``.
        :type options: QueryOptions or dict or None
        :return: Matching rows.
        :rtype: list[dict]

        :raises ~restbridge.core.errors.HttpError: If the backend rejects the request.
        :raises ~restbridge.core.errors.TransportError: If the request cannot be sent.
        """
        request = self._request(table, Operation.SELECT, credential, options=options)
        return self._run(request, table, "read")

    def query(
        self,
        table: str,
        filters: Optional[FilterSet] = None,
        options: OptionsArg = None,
        *,
        credential: Optional[SessionCredential] = None,
    ) -> List[Record]:
        """
        Read rows matching every equality filter.

        An unmatched filter yields an empty list, not an error.

        :param table: Table name.
        :type table: str
        :param filters: Column to value; each entry becomes ``column=eq.value``.
        :type filters: dict or None
        :param options: ``select``, ``order``, ``limit`` and ``offset``.
        :type options: QueryOptions or dict or None
        :return: Matching rows.
        :rtype: list[dict]

        Example::

            client.records.query("trips", {"user_id": 1, "status": "active"}, {"limit": 10})
        """
        request = self._request(table, Operation.SELECT, credential, filters=filters, options=options)
        return self._run(request, table, "query")

    def get_by_id(
        self,
        table: str,
        record_id: Scalar,
        options: OptionsArg = None,
        *,
        credential: Optional[SessionCredential] = None,
    ) -> Optional[Record]:
        """
        Fetch the row whose ``id`` equals ``record_id``.

        Runs :meth:`query` with ``{"id": record_id}`` and ``limit=1``.

        :return: The row, or None when no row matches.
        :rtype: dict or None
        """
        opts = QueryOptions.coerce(options).with_limit(1)
        rows = self.query(table, {"id": record_id}, opts, credential=credential)
        return rows[0] if rows else None

    # -------------------------------------------------------------------- insert

    def insert(
        self,
        table: str,
        record: Mapping[str, Any],
        *,
        credential: Optional[SessionCredential] = None,
    ) -> List[Record]:
        """
        Insert a single row.

        :param table: Table name.
        :type table: str
        :param record: Column values.
        :type record: dict
        :return: The inserted row(s) as echoed by the backend.
        :rtype: list[dict]

        :raises TypeError: If ``record`` is not a mapping.
        """
        if not isinstance(record, Mapping):
            raise TypeError("record must be a dict")
        request = self._request(table, Operation.INSERT, credential, body=dict(record))
        return self._run(request, table, "insert")

    def insert_many(
        self,
        table: str,
        records: List[Mapping[str, Any]],
        *,
        credential: Optional[SessionCredential] = None,
    ) -> List[Record]:
        """
        Insert several rows in one request.

        :param records: Rows to insert; must be a non-empty list of dicts.
        :type records: list[dict]
        :return: The inserted rows as echoed by the backend.
        :rtype: list[dict]

        :raises TypeError: If ``records`` is not a list of mappings.
        :raises ~restbridge.core.errors.ValidationError: If ``records`` is empty.
        """
        if not isinstance(records, list) or not all(isinstance(r, Mapping) for r in records):
            raise TypeError("records must be list[dict]")
        if not records:
            raise ValidationError("records must not be empty")
        request = self._request(table, Operation.INSERT, credential, body=[dict(r) for r in records])
        return self._run(request, table, "insert_many")

    # -------------------------------------------------------------------- update

    def update(
        self,
        table: str,
        filters: FilterSet,
        patch: Mapping[str, Any],
        *,
        credential: Optional[SessionCredential] = None,
    ) -> List[Record]:
        """
        Apply ``patch`` to every row matching ``filters``.

        :param filters: Column to value; must not be empty.
        :type filters: dict
        :param patch: Columns to change.
        :type patch: dict
        :return: The updated rows.
        :rtype: list[dict]

        :raises ~restbridge.core.errors.ValidationError: If ``filters`` is empty.
        :raises TypeError: If ``patch`` is not a mapping.
        """
        _require_filters(filters, "update")
        if not isinstance(patch, Mapping):
            raise TypeError("patch must be a dict")
        request = self._request(table, Operation.UPDATE, credential, filters=filters, body=dict(patch))
        return self._run(request, table, "update")

    def update_by_id(
        self,
        table: str,
        record_id: Scalar,
        patch: Mapping[str, Any],
        *,
        credential: Optional[SessionCredential] = None,
    ) -> List[Record]:
        """Same as ``update(table, {"id": record_id}, patch)``."""
        return self.update(table, {"id": record_id}, patch, credential=credential)

    # -------------------------------------------------------------------- delete

    def delete(
        self,
        table: str,
        filters: FilterSet,
        *,
        credential: Optional[SessionCredential] = None,
    ) -> List[Record]:
        """
        Delete every row matching ``filters``.

        :param filters: Column to value; must not be empty.
        :type filters: dict
        :return: The deleted rows.
        :rtype: list[dict]

        :raises ~restbridge.core.errors.ValidationError: If ``filters`` is empty.

        Example::

            client.records.delete("trips", {"user_id": 1, "status": "inactive"})
        """
        _require_filters(filters, "delete")
        request = self._request(table, Operation.DELETE, credential, filters=filters)
        return self._run(request, table, "delete")

    def delete_by_id(
        self,
        table: str,
        record_id: Scalar,
        *,
        credential: Optional[SessionCredential] = None,
    ) -> List[Record]:
        """Same as ``delete(table, {"id": record_id})``."""
        return self.delete(table, {"id": record_id}, credential=credential)


def _require_filters(filters: Optional[FilterSet], operation: str) -> None:
    if not filters:
        raise ValidationError(
            f"{operation} requires at least one filter",
            subcode=VALIDATION_FILTERS_EMPTY,
        )


__all__ = ["RecordOperations"]
