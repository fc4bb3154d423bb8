"""Tests for the read-only DatabaseManager."""

import pytest
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from cpgview.core.db import DatabaseManager, Node, NodeKind, build_readonly_url
from cpgview.core.db import get_database_manager
from cpgview.core.exceptions import StoreUnavailableError


def test_readonly_url():
    url = build_readonly_url("/data/cpg.db")
    assert url == "sqlite:///file:/data/cpg.db?mode=ro&uri=true"


def test_missing_file_raises(tmp_path):
    with pytest.raises(StoreUnavailableError):
        get_database_manager(str(tmp_path / "absent.db"))


def test_session_before_init_raises(tmp_path):
    db = DatabaseManager(str(tmp_path / "cpg.db"))
    with pytest.raises(StoreUnavailableError):
        with db.get_session():
            pass
    assert db.check_connection() is False


def test_store_is_read_only(db):
    with pytest.raises(OperationalError):
        with db.get_session() as session:
            session.execute(
                text("INSERT INTO nodes (id, kind) VALUES ('pkg::x', 'function')")
            )

    with db.get_session() as session:
        assert session.query(Node).filter(Node.id == "pkg::x").first() is None


def test_check_connection_and_close(db):
    assert db.check_connection() is True
    db.close()
    assert db.check_connection() is False


def test_kind_parsing():
    assert NodeKind.parse("function") is NodeKind.FUNCTION
    assert NodeKind.parse("type") is NodeKind.OTHER
    assert NodeKind.parse(None) is NodeKind.OTHER
