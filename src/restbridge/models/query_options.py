# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Typed query configuration for read operations.

:class:`QueryOptions` groups the recognised read options (``select``,
``order``, ``limit``, ``offset``); :class:`OrderBy` describes a single sort
key. Plain mappings are accepted everywhere an options object is and are
converted with :meth:`QueryOptions.coerce`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

from ..core._error_codes import (
    VALIDATION_LIMIT,
    VALIDATION_OFFSET,
    VALIDATION_ORDER_DIRECTION,
    VALIDATION_UNKNOWN_OPTION,
)
from ..core.errors import ValidationError

Scalar = Union[str, int, float, bool, None]
FilterSet = Mapping[str, Scalar]
Record = Dict[str, Any]


class Operation(str, Enum):
    """Kind of request sent to a table endpoint."""

    SELECT = "select"
    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"


_DIRECTIONS = ("asc", "desc")


@dataclass(frozen=True)
class OrderBy:
    """
    Sort key rendered as ``order=<column>.<direction>``.

    :param column: Column to sort on. Defaults to ``"id"``.
    :type column: str
    :param direction: ``"asc"`` or ``"desc"`` (case-insensitive). Defaults to ``"asc"``.
    :type direction: str
    """

    column: str = "id"
    direction: str = "asc"

    def __post_init__(self) -> None:
        direction = (self.direction or "asc").lower()
        if direction not in _DIRECTIONS:
            raise ValidationError(
                f"order direction must be 'asc' or 'desc', got {self.direction!r}",
                subcode=VALIDATION_ORDER_DIRECTION,
            )
        object.__setattr__(self, "direction", direction)
        object.__setattr__(self, "column", self.column or "id")

    @classmethod
    def coerce(cls, value: Union["OrderBy", Mapping[str, Any], str]) -> "OrderBy":
        """Build an :class:`OrderBy` from a mapping, a ``"column.direction"`` string or an instance."""
        if isinstance(value, OrderBy):
            return value
        if isinstance(value, str):
            column, _, direction = value.rpartition(".")
            if not column:
                return cls(column=direction)
            return cls(column=column, direction=direction)
        if isinstance(value, Mapping):
            return cls(column=value.get("column") or "id", direction=value.get("direction") or "asc")
        raise TypeError("order must be OrderBy, mapping or str")

    def render(self) -> str:
        return f"{self.column}.{self.direction}"


@dataclass(frozen=True)
class QueryOptions:
    """
    Options for read operations.

    :param select: Comma-joined column list; a sequence of names is joined for you.
        None selects all columns.
    :type select: str or None
    :param order: Sort key. None leaves the backend's natural order.
    :type order: OrderBy or None
    :param limit: Maximum rows to return (>= 1). None is unbounded.
    :type limit: int or None
    :param offset: Rows to skip (>= 0). None or 0 starts at the first row.
    :type offset: int or None

    Example::

        opts = QueryOptions(select="id,content", order=OrderBy("created_at", "desc"), limit=50)
        opts = QueryOptions.coerce({"order": {"column": "created_at", "direction": "desc"}, "limit": 50})
    """

    select: Optional[str] = None
    order: Optional[OrderBy] = None
    limit: Optional[int] = None
    offset: Optional[int] = None

    def __post_init__(self) -> None:
        if self.select is not None and not isinstance(self.select, str):
            object.__setattr__(self, "select", ",".join(self.select))
        if self.order is not None and not isinstance(self.order, OrderBy):
            object.__setattr__(self, "order", OrderBy.coerce(self.order))
        if self.limit is not None and (isinstance(self.limit, bool) or not isinstance(self.limit, int) or self.limit < 1):
            raise ValidationError(f"limit must be a positive integer, got {self.limit!r}", subcode=VALIDATION_LIMIT)
        if self.offset is not None and (
            isinstance(self.offset, bool) or not isinstance(self.offset, int) or self.offset < 0
        ):
            raise ValidationError(f"offset must be a non-negative integer, got {self.offset!r}", subcode=VALIDATION_OFFSET)

    @classmethod
    def coerce(cls, value: Union["QueryOptions", Mapping[str, Any], None]) -> "QueryOptions":
        """
        Normalise ``None``, a mapping or an instance to :class:`QueryOptions`.

        :raises ValidationError: If the mapping contains unrecognised keys or invalid values.
        """
        if value is None:
            return cls()
        if isinstance(value, QueryOptions):
            return value
        if not isinstance(value, Mapping):
            raise TypeError("options must be QueryOptions or a mapping")
        unknown = sorted(set(value) - {"select", "order", "limit", "offset"})
        if unknown:
            raise ValidationError(
                f"Unknown query option(s): {', '.join(unknown)}",
                subcode=VALIDATION_UNKNOWN_OPTION,
                details={"unknown": unknown},
            )
        order = value.get("order")
        return cls(
            select=value.get("select"),
            order=OrderBy.coerce(order) if order is not None else None,
            limit=value.get("limit"),
            offset=value.get("offset"),
        )

    def with_limit(self, limit: int) -> "QueryOptions":
        return replace(self, limit=limit)


def format_filter_value(value: Scalar) -> str:
    """
    Render a filter value for the ``eq.`` operator.

    Booleans become ``true``/``false``, None becomes ``null`` and integral
    floats drop their fraction (``1.0`` becomes ``1``); everything else is
    passed through ``str()`` without escaping.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


__all__ = ["Operation", "OrderBy", "QueryOptions", "FilterSet", "Record", "Scalar", "format_filter_value"]
