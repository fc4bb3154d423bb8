"""Shared fixtures: a small CPG store written to a temp file, opened read-only."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from cpgview.core.db import Base, DatabaseManager, Edge, Node, SourceFile

MAIN_ID = "client/pkg::main@main.go:1:1"
HELPER_ID = "client/pkg::helper@util.go:3:1"
COLLECT_ID = "client/pkg::Registry.Collect@reg.go:10:1"
COLLECT_ALL_ID = "client/pkg::collect_all@reg.go:14:1"
STALE_ID = "client/pkg::stale@reg.go:30:1"
INIT_ID = "client/pkg::init@util.go"
REGISTRY_ID = "client/pkg::Registry"
GENERATED_ID = "client/pkg::generated"
ORPHAN_ID = "client/pkg::orphan@missing.go:1:1"
RATE_LIMIT_ID = "client/pkg::rate_limit@util.go:5:1"
RATE_X_ID = "client/pkg::rateXlimit@util.go:5:1"
RATE_PCT_ID = "client/pkg::rate100@util.go:5:1"
PRINTLN_ID = "ext::fmt.Println"
TRIM_ID = "ext::strings.Trim"
GHOST_ID = "client/pkg::ghost"


def numbered_lines(count: int) -> str:
    return "\n".join(f"line {i}" for i in range(1, count + 1))


def _sample_rows():
    nodes = [
        Node(id=MAIN_ID, kind="function", name="main", package="client/pkg", file="main.go", line=1, end_line=5),
        Node(id=HELPER_ID, kind="function", name="helper", package="client/pkg", file="util.go", line=3, end_line=4),
        Node(id=COLLECT_ID, kind="function", name="Collect", package="client/pkg", file="reg.go", line=10, end_line=12),
        Node(id=COLLECT_ALL_ID, kind="function", name="collect_all", package="client/pkg", file="reg.go", line=14),
        Node(id=STALE_ID, kind="function", name="stale", package="client/pkg", file="reg.go", line=30, end_line=31),
        Node(id=INIT_ID, kind="function", name="init", package="client/pkg", file="util.go"),
        Node(id=REGISTRY_ID, kind="type", name="Registry", package="client/pkg", file="reg.go", line=1, end_line=8),
        Node(id=GENERATED_ID, kind="function", name="generated", package="client/pkg"),
        Node(id=ORPHAN_ID, kind="function", name="orphan", package="client/pkg", file="missing.go", line=1),
        Node(id=RATE_LIMIT_ID, kind="function", name="rate_limit", file="util.go", line=5),
        Node(id=RATE_X_ID, kind="function", name="rateXlimit", file="util.go", line=5),
        Node(id=RATE_PCT_ID, kind="function", name="rate100%", file="util.go", line=5),
        Node(id=PRINTLN_ID, kind="function", name="Println", package="fmt",
             type_info="func(a ...any) (n int, err error)"),
        Node(id=TRIM_ID, kind="function", name="Trim"),
    ]
    edges = [
        Edge(source=MAIN_ID, target=HELPER_ID, kind="call"),
        Edge(source=MAIN_ID, target=COLLECT_ID, kind="call"),
        Edge(source=COLLECT_ID, target=COLLECT_ALL_ID, kind="call"),
        Edge(source=COLLECT_ALL_ID, target=COLLECT_ID, kind="call"),
        Edge(source=HELPER_ID, target=PRINTLN_ID, kind="call"),
        Edge(source=MAIN_ID, target=REGISTRY_ID, kind="reference"),
        Edge(source=COLLECT_ID, target=GHOST_ID, kind="call"),
    ]
    sources = [
        SourceFile(file="main.go", content=numbered_lines(20)),
        SourceFile(file="reg.go", content=numbered_lines(20)),
        SourceFile(file="util.go", content=numbered_lines(5)),
    ]
    return nodes + edges + sources


def write_store(path, rows) -> None:
    """Write ORM rows into a fresh SQLite file at ``path``."""
    engine = create_engine(f"sqlite:///{path}")
    Base.metadata.create_all(engine)
    session = sessionmaker(bind=engine)()
    try:
        session.add_all(rows)
        session.commit()
    finally:
        session.close()
        engine.dispose()


def open_store(path) -> DatabaseManager:
    db = DatabaseManager(str(path))
    db.init_db()
    return db


@pytest.fixture
def store_path(tmp_path):
    path = tmp_path / "cpg.db"
    write_store(path, _sample_rows())
    return path


@pytest.fixture
def db(store_path):
    manager = open_store(store_path)
    yield manager
    manager.close()
