# db_setup.py
import sqlite3

from loguru import logger

from database.errors import ConfigError, SchemaError, StorageError

SQLITE_PREFIX = "sqlite://"
MEMORY = ":memory:"

SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    username TEXT UNIQUE NOT NULL,
    password_hash TEXT NOT NULL,
    role TEXT NOT NULL DEFAULT 'user'
);

CREATE TABLE IF NOT EXISTS companies (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT UNIQUE NOT NULL
);

CREATE TABLE IF NOT EXISTS candidates (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    full_name TEXT NOT NULL,
    age INTEGER NOT NULL,
    email TEXT NOT NULL,
    experience TEXT,
    skills TEXT CHECK (skills IS NULL OR json_valid(skills))
);

CREATE TABLE IF NOT EXISTS job_openings (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    company_id INTEGER REFERENCES companies(id) ON DELETE CASCADE,
    title TEXT NOT NULL,
    experience TEXT,
    salary REAL NOT NULL,
    required_skills TEXT CHECK (required_skills IS NULL OR json_valid(required_skills))
);
"""


def resolve_database_path(database_url: str) -> str:
    """
    Turn DATABASE_URL into something sqlite3.connect accepts.

    Supported forms:
      sqlite:///relative/or/abs.db   sqlite:////abs/path.db
      sqlite:// or sqlite:///:memory: or :memory:   (in-memory store)
      recruitment.db                 (bare file path)
    """
    url = (database_url or "").strip()
    if not url:
        raise ConfigError("DATABASE_URL is not set")
    if url == MEMORY:
        return MEMORY
    if url.startswith(SQLITE_PREFIX):
        path = url[len(SQLITE_PREFIX):]
        if path in ("", "/"):
            return MEMORY
        if path.startswith("/"):
            path = path[1:]
        return path or MEMORY
    if "://" in url:
        scheme = url.split("://", 1)[0]
        raise ConfigError(f"unsupported database scheme '{scheme}' (expected sqlite)")
    return url


def get_connection(database_url: str) -> sqlite3.Connection:
    path = resolve_database_path(database_url)
    try:
        conn = sqlite3.connect(path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
    except sqlite3.Error as e:
        raise StorageError(f"could not open database '{path}': {e}") from e
    logger.debug("Opened database {}", path)
    return conn


def ensure_schema(conn: sqlite3.Connection) -> None:
    try:
        conn.executescript(SCHEMA)
    except sqlite3.Error as e:
        logger.error("Schema creation failed: {}", e)
        raise SchemaError(f"could not create tables: {e}") from e
    logger.info("Database schema ready")


def init_db(database_url: str) -> sqlite3.Connection:
    conn = get_connection(database_url)
    try:
        ensure_schema(conn)
    except SchemaError:
        conn.close()
        raise
    return conn
