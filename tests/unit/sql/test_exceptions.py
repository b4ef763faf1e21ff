"""Unit tests for QueryError and result tuples."""

import pytest

from tablequery.sql import DeleteResult, QueryBuildError, QueryError, SelectResult


@pytest.mark.unit
def test_query_error_keeps_query_and_original():
    original = RuntimeError("no such table: ghosts")

    error = QueryError("select", "SELECT id FROM ghosts", original)

    assert error.query == "SELECT id FROM ghosts"
    assert error.original_error is original
    assert "select failed" in str(error)
    assert "SELECT id FROM ghosts" in str(error)


@pytest.mark.unit
def test_query_error_to_dict():
    error = QueryError("delete", "DELETE FROM t", ValueError("boom"))

    payload = error.to_dict()

    assert payload["error_type"] == "QueryError"
    assert payload["operation"] == "delete"
    assert payload["query"] == "DELETE FROM t"
    assert payload["original_error_type"] == "ValueError"
    assert payload["original_error_message"] == "boom"


@pytest.mark.unit
def test_query_build_error_is_value_error():
    assert issubclass(QueryBuildError, ValueError)


@pytest.mark.unit
def test_results_unpack_like_tuples():
    query, rows = SelectResult("SELECT 1", [{"x": 1}])
    assert query == "SELECT 1"
    assert rows == [{"x": 1}]

    query, deleted = DeleteResult("DELETE FROM t", False)
    assert deleted is False
