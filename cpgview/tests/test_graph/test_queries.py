"""Tests for the CPG read queries against a real read-only SQLite store."""

from unittest.mock import MagicMock

from cpgview.core.db import Node, NodeKind
from cpgview.core.graph import queries
from cpgview.core.graph.models import Direction
from cpgview.core.graph.validation import validate_search_query

from conftest import (
    COLLECT_ALL_ID,
    COLLECT_ID,
    HELPER_ID,
    MAIN_ID,
    RATE_LIMIT_ID,
    RATE_PCT_ID,
    REGISTRY_ID,
    open_store,
    write_store,
)


def _search(db, raw: str):
    return queries.search_functions(db, validate_search_query(raw).sanitized)


class TestSearchFunctions:

    def test_substring_match(self, db):
        ids = {m.id for m in _search(db, "collect")}
        assert ids == {COLLECT_ID, COLLECT_ALL_ID}

    def test_only_function_nodes(self, db):
        assert REGISTRY_ID not in {m.id for m in _search(db, "Registry")}

    def test_underscore_matches_literally(self, db):
        ids = {m.id for m in _search(db, "rate_limit")}
        assert ids == {RATE_LIMIT_ID}

    def test_percent_matches_literally(self, db):
        ids = {m.id for m in _search(db, "100%")}
        assert ids == {RATE_PCT_ID}

    def test_returns_id_and_name(self, db):
        [match] = _search(db, "helper")
        assert match.to_dict() == {"id": HELPER_ID, "name": "helper"}

    def test_no_match_is_empty(self, db):
        assert _search(db, "does_not_exist") == []

    def test_empty_term_skips_store(self):
        db = MagicMock()
        assert queries.search_functions(db, "") == []
        db.get_session.assert_not_called()

    def test_backslash_matches_literally(self, tmp_path):
        path = tmp_path / "backslash.db"
        names = ["a\\b", "ab", "x%", "x\\y"]
        write_store(path, [
            Node(id=f"pkg::fn{i}", kind="function", name=name)
            for i, name in enumerate(names)
        ])
        db = open_store(path)
        try:
            assert {m.name for m in _search(db, "a\\b")} == {"a\\b"}
            assert {m.name for m in _search(db, "x\\")} == {"x\\y"}
            assert {m.name for m in _search(db, "x%")} == {"x%"}
        finally:
            db.close()

    def test_result_size_is_bounded(self, tmp_path):
        path = tmp_path / "many.db"
        write_store(path, [
            Node(id=f"pkg::handler{i:03d}", kind="function", name=f"handler{i:03d}")
            for i in range(120)
        ])
        db = open_store(path)
        try:
            assert len(queries.search_functions(db, "handler")) == 50
            assert len(queries.search_functions(db, "handler", limit=7)) == 7
        finally:
            db.close()


class TestNeighborRows:

    def test_callers_before_callees_each_sorted_by_name(self, db):
        rows = queries.get_neighbor_rows(db, COLLECT_ID)
        assert [(r.direction, r.id) for r in rows] == [
            (Direction.CALLER, COLLECT_ALL_ID),
            (Direction.CALLER, MAIN_ID),
            (Direction.CALLEE, COLLECT_ALL_ID),
        ]

    def test_dangling_edges_produce_no_rows(self, db):
        rows = queries.get_neighbor_rows(db, COLLECT_ID)
        assert "client/pkg::ghost" not in {r.id for r in rows}

    def test_non_call_edges_ignored(self, db):
        rows = queries.get_neighbor_rows(db, MAIN_ID)
        assert [r.id for r in rows] == [COLLECT_ID, HELPER_ID]
        assert all(r.direction is Direction.CALLEE for r in rows)

    def test_row_carries_metadata(self, db):
        caller = queries.get_neighbor_rows(db, HELPER_ID)[0]
        assert caller.id == MAIN_ID
        assert caller.file == "main.go"
        assert caller.line == 1
        assert caller.package == "client/pkg"


class TestNodeLookups:

    def test_get_function(self, db):
        target = queries.get_function(db, MAIN_ID)
        assert target.id == MAIN_ID
        assert target.name == "main"

    def test_get_function_ignores_other_kinds(self, db):
        assert queries.get_function(db, REGISTRY_ID) is None

    def test_get_node_kind(self, db):
        assert queries.get_node_kind(db, REGISTRY_ID) == ("type", NodeKind.OTHER)
        assert queries.get_node_kind(db, MAIN_ID) == ("function", NodeKind.FUNCTION)
        assert queries.get_node_kind(db, "pkg::nothing") is None


class TestCallEdgesBetween:

    def test_induced_edges_only(self, db):
        edges = queries.get_call_edges_between(db, [MAIN_ID, COLLECT_ID, COLLECT_ALL_ID])
        pairs = {(e["source"], e["target"]) for e in edges}
        assert pairs == {
            (MAIN_ID, COLLECT_ID),
            (COLLECT_ID, COLLECT_ALL_ID),
            (COLLECT_ALL_ID, COLLECT_ID),
        }

    def test_excludes_non_call_edges(self, db):
        assert queries.get_call_edges_between(db, [MAIN_ID, REGISTRY_ID]) == []

    def test_empty_ids_skip_store(self):
        db = MagicMock()
        assert queries.get_call_edges_between(db, []) == []
        db.get_session.assert_not_called()


def test_graph_stats(db):
    stats = queries.get_graph_stats(db)
    assert stats["total_nodes"] == 14
    assert stats["node_kinds"] == {"function": 13, "type": 1}
    assert stats["edge_kinds"] == {"call": 6, "reference": 1}
    assert stats["total_edges"] == 7
    assert stats["source_files"] == 3
