"""Tests for error tree flattening."""

from __future__ import annotations

from structval import schema as s
from structval.loader import SourceMap
from structval.models.errors import ErrorKind, ErrorTree, SourceSpan
from structval.report import count_errors, flatten, has_errors, iter_violations
from structval.validator import ROOT_KEY, add_error, validate


def _nested_tree() -> ErrorTree:
    schema = s.object(
        {
            "users": s.array(s.object({"name": s.string(min=1), "age": s.number(min=0)})),
            "owner": s.string(),
        }
    )
    return validate(schema, ROOT_KEY, {"users": [{"name": "a", "age": 1}, {"name": "", "age": -1}]})


class TestPaths:
    def test_leaf_paths_use_dots_and_indexes(self) -> None:
        violations = flatten(_nested_tree())
        assert [(v.path, v.type) for v in violations] == [
            ("$.users[1].name", ErrorKind.RANGE_ERROR),
            ("$.users[1].age", ErrorKind.RANGE_ERROR),
            ("$.owner", ErrorKind.KEY_ERROR),
        ]

    def test_include_aggregates(self) -> None:
        violations = flatten(_nested_tree(), include_aggregates=True)
        assert [(v.path, v.type) for v in violations] == [
            ("$", ErrorKind.OBJECT_ERROR),
            ("$.users", ErrorKind.ARRAY_ERROR),
            ("$.users[1]", ErrorKind.OBJECT_ERROR),
            ("$.users[1].name", ErrorKind.RANGE_ERROR),
            ("$.users[1].age", ErrorKind.RANGE_ERROR),
            ("$.owner", ErrorKind.KEY_ERROR),
        ]

    def test_root_level_error(self) -> None:
        violations = flatten(validate(s.string(), ROOT_KEY, 3))
        assert len(violations) == 1
        assert violations[0].path == "$"
        assert violations[0].message == "Not a string."

    def test_several_errors_on_one_key(self) -> None:
        tree = validate(s.string(min=3, pattern=r"^\d+$"), "code", "x")
        assert [v.type for v in flatten(tree)] == [
            ErrorKind.RANGE_ERROR,
            ErrorKind.PATTERN_ERROR,
        ]

    def test_iter_is_lazy(self) -> None:
        iterator = iter_violations(_nested_tree())
        assert next(iterator).path == "$.users[1].name"


class TestCounting:
    def test_count_errors_counts_leaves(self) -> None:
        assert count_errors(_nested_tree()) == 3

    def test_empty_tree(self) -> None:
        assert count_errors({}) == 0
        assert flatten({}) == []
        assert has_errors({}) is False
        assert has_errors(None) is False

    def test_has_errors(self) -> None:
        tree: ErrorTree = {}
        add_error(tree, ErrorKind.VALUE_ERROR, "Value mismatch.", "k")
        assert has_errors(tree) is True


class TestSourceSpans:
    def test_spans_resolved_relative_to_document_root(self) -> None:
        source_map = SourceMap()
        span = SourceSpan(file="team.yaml", line=7, column=5)
        source_map.add("users[1].name", span)
        violations = flatten(_nested_tree(), source_map=source_map)
        assert violations[0].span == span
        assert violations[1].span is None

    def test_root_error_has_no_span(self) -> None:
        source_map = SourceMap()
        source_map.add("", SourceSpan(file="x.yaml", line=1, column=1))
        violations = flatten(validate(s.string(), ROOT_KEY, 3), source_map=source_map)
        assert violations[0].span is None
