# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Unit tests for QueryOptions and OrderBy."""

import unittest

from restbridge.core.errors import ValidationError
from restbridge.models.query_options import Operation, OrderBy, QueryOptions, format_filter_value


class TestOrderBy(unittest.TestCase):
    def test_defaults(self):
        self.assertEqual(OrderBy().render(), "id.asc")

    def test_direction_normalised(self):
        self.assertEqual(OrderBy("date", "DESC").direction, "desc")

    def test_invalid_direction(self):
        with self.assertRaises(ValidationError):
            OrderBy("date", "sideways")

    def test_coerce_mapping(self):
        self.assertEqual(OrderBy.coerce({"column": "date", "direction": "desc"}), OrderBy("date", "desc"))
        self.assertEqual(OrderBy.coerce({"direction": "desc"}), OrderBy("id", "desc"))

    def test_coerce_string(self):
        self.assertEqual(OrderBy.coerce("created_at.desc"), OrderBy("created_at", "desc"))
        self.assertEqual(OrderBy.coerce("nickname"), OrderBy("nickname", "asc"))

    def test_coerce_rejects_other_types(self):
        with self.assertRaises(TypeError):
            OrderBy.coerce(3)


class TestQueryOptions(unittest.TestCase):
    def test_coerce_none(self):
        self.assertEqual(QueryOptions.coerce(None), QueryOptions())

    def test_coerce_instance_is_identity(self):
        opts = QueryOptions(limit=3)
        self.assertIs(QueryOptions.coerce(opts), opts)

    def test_coerce_mapping(self):
        opts = QueryOptions.coerce({"select": "id", "order": {"column": "date"}, "limit": 5, "offset": 10})
        self.assertEqual(opts, QueryOptions(select="id", order=OrderBy("date", "asc"), limit=5, offset=10))

    def test_unknown_key_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            QueryOptions.coerce({"limt": 5})
        self.assertEqual(ctx.exception.details["unknown"], ["limt"])

    def test_mapping_order_converted_in_constructor(self):
        self.assertEqual(QueryOptions(order={"column": "x"}).order, OrderBy("x"))

    def test_select_list_joined(self):
        self.assertEqual(QueryOptions(select=("id", "name")).select, "id,name")

    def test_limit_validation(self):
        for bad in (0, -1, 1.5, True, "10"):
            with self.assertRaises(ValidationError):
                QueryOptions(limit=bad)

    def test_offset_validation(self):
        QueryOptions(offset=0)
        for bad in (-1, 2.0, False):
            with self.assertRaises(ValidationError):
                QueryOptions(offset=bad)

    def test_with_limit_returns_copy(self):
        opts = QueryOptions(select="id")
        limited = opts.with_limit(1)
        self.assertIsNone(opts.limit)
        self.assertEqual(limited, QueryOptions(select="id", limit=1))


class TestFilterValues(unittest.TestCase):
    def test_format(self):
        self.assertEqual(format_filter_value("alice"), "alice")
        self.assertEqual(format_filter_value(1), "1")
        self.assertEqual(format_filter_value(2.5), "2.5")
        self.assertEqual(format_filter_value(True), "true")
        self.assertEqual(format_filter_value(False), "false")
        self.assertEqual(format_filter_value(None), "null")

    def test_integral_floats_render_without_fraction(self):
        self.assertEqual(format_filter_value(1.0), "1")
        self.assertEqual(format_filter_value(-3.0), "-3")
        self.assertEqual(format_filter_value(1e20), "100000000000000000000")
        self.assertEqual(format_filter_value(0.5), "0.5")

    def test_operation_values(self):
        self.assertEqual(Operation("select"), Operation.SELECT)
        self.assertEqual([op.value for op in Operation], ["select", "insert", "update", "delete"])


if __name__ == "__main__":
    unittest.main()
