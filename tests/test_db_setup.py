import sqlite3

import pytest

from database.db_setup import ensure_schema, get_connection, init_db, resolve_database_path
from database.errors import ConfigError, SchemaError, StorageError

TABLES = {"users", "companies", "candidates", "job_openings"}


def _tables(conn):
    rows = conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'").fetchall()
    return {r["name"] for r in rows}


@pytest.mark.parametrize("url,expected", [
    ("sqlite:///recruitment.db", "recruitment.db"),
    ("sqlite:////var/data/recruitment.db", "/var/data/recruitment.db"),
    ("sqlite://", ":memory:"),
    ("sqlite:///:memory:", ":memory:"),
    (":memory:", ":memory:"),
    ("data/recruitment.db", "data/recruitment.db"),
])
def test_resolve_database_path(url, expected):
    assert resolve_database_path(url) == expected


@pytest.mark.parametrize("url", ["", "   ", "postgresql://user:pw@localhost/db"])
def test_resolve_database_path_rejects(url):
    with pytest.raises(ConfigError):
        resolve_database_path(url)


def test_schema_creates_all_tables(conn):
    assert TABLES <= _tables(conn)


def test_schema_is_idempotent(conn):
    conn.execute("INSERT INTO companies (name) VALUES ('Acme')")
    conn.commit()
    ensure_schema(conn)
    ensure_schema(conn)
    assert conn.execute("SELECT COUNT(*) FROM companies").fetchone()[0] == 1


def test_foreign_keys_enabled(conn):
    assert conn.execute("PRAGMA foreign_keys").fetchone()[0] == 1


def test_in_memory_store():
    conn = init_db("sqlite://")
    try:
        assert TABLES <= _tables(conn)
    finally:
        conn.close()


def test_unopenable_path_raises_storage_error(tmp_path):
    with pytest.raises(StorageError):
        get_connection(str(tmp_path / "missing" / "dir" / "x.db"))


def test_ddl_failure_raises_schema_error(tmp_path):
    path = tmp_path / "ro.db"
    sqlite3.connect(path).close()
    ro = sqlite3.connect(f"file:{path}?mode=ro", uri=True)
    try:
        with pytest.raises(SchemaError):
            ensure_schema(ro)
    finally:
        ro.close()
