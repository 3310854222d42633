# recruitment.py
import json
import sqlite3
from typing import List, Tuple

from loguru import logger

from database.errors import (
    DuplicateUserError,
    InvalidCredentialsError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from database.models import Candidate, JobOpening, Role, User
from database.security import DEFAULT_ROUNDS, check_password, hash_password

# sqlite3 raises OverflowError, not sqlite3.Error, for ints beyond 64 bits
STORE_ERRORS = (sqlite3.Error, OverflowError)

CANDIDATE_COLUMNS = "id, full_name, age, email, experience, skills"
JOB_OPENING_COLUMNS = "id, company_id, title, experience, salary, required_skills"

# ---------------- ENCODING ----------------

def _encode_skills(skills) -> str:
    try:
        return json.dumps([str(s) for s in (skills or [])], ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise StorageError(f"could not encode skills: {e}") from e

def _decode_skills(raw) -> List[str]:
    if raw is None:
        return []
    try:
        value = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise StorageError(f"could not decode skills {raw!r}: {e}") from e
    if not isinstance(value, list):
        raise StorageError(f"skills column holds {type(value).__name__}, expected a list")
    return [str(s) for s in value]

def _row_to_candidate(row: sqlite3.Row) -> Candidate:
    return Candidate(
        id=row["id"],
        full_name=row["full_name"],
        age=row["age"],
        email=row["email"],
        experience=row["experience"] or "",
        skills=_decode_skills(row["skills"]),
    )

def _row_to_job_opening(row: sqlite3.Row) -> JobOpening:
    return JobOpening(
        id=row["id"],
        company_id=row["company_id"],
        title=row["title"],
        experience=row["experience"] or "",
        salary=float(row["salary"]),
        required_skills=_decode_skills(row["required_skills"]),
    )

def _insert(conn: sqlite3.Connection, query: str, params: tuple, what: str) -> int:
    try:
        with conn:
            cursor = conn.execute(query, params)
    except STORE_ERRORS as e:
        logger.warning("Insert {} failed: {}", what, e)
        raise StorageError(f"could not add {what}: {e}") from e
    return cursor.lastrowid

# ---------------- USERS ----------------

def register_user(conn: sqlite3.Connection, username: str, password: str,
                  rounds: int = DEFAULT_ROUNDS) -> int:
    """
    Create a user with the default role and return its id.

    The existence check only saves a bcrypt round; the UNIQUE constraint on
    users.username is what actually rejects duplicates.
    """
    if not username or not password:
        raise ValidationError("username and password must not be empty")

    try:
        exists = conn.execute("SELECT 1 FROM users WHERE username = ?", (username,)).fetchone()
    except STORE_ERRORS as e:
        raise StorageError(f"could not check user existence: {e}") from e
    if exists:
        raise DuplicateUserError(f"user '{username}' already exists")

    password_hash = hash_password(password, rounds=rounds)
    try:
        with conn:
            cursor = conn.execute(
                "INSERT INTO users (username, password_hash, role) VALUES (?, ?, ?)",
                (username, password_hash, Role.USER.value),
            )
    except sqlite3.IntegrityError as e:
        raise DuplicateUserError(f"user '{username}' already exists") from e
    except STORE_ERRORS as e:
        raise StorageError(f"could not register user: {e}") from e

    logger.info("Registered user {} (id={})", username, cursor.lastrowid)
    return cursor.lastrowid

def login_user(conn: sqlite3.Connection, username: str, password: str) -> Tuple[int, Role]:
    try:
        row = conn.execute(
            "SELECT id, password_hash, role FROM users WHERE username = ?", (username,)
        ).fetchone()
    except STORE_ERRORS as e:
        raise StorageError(f"could not look up user: {e}") from e

    if row is None:
        raise NotFoundError(f"user '{username}' not found")
    try:
        user = User(id=row["id"], username=username,
                    password_hash=row["password_hash"], role=Role.parse(row["role"]))
    except ValueError as e:
        raise StorageError(f"user '{username}' has unknown role {row['role']!r}") from e

    if not check_password(password, user.password_hash):
        logger.warning("Failed login for {}", username)
        raise InvalidCredentialsError("invalid password")

    logger.info("User {} logged in", username)
    return user.id, user.role

# ---------------- COMPANIES ----------------

def add_company(conn: sqlite3.Connection, name: str) -> int:
    if not name:
        raise ValidationError("company name must not be empty")
    company_id = _insert(conn, "INSERT INTO companies (name) VALUES (?)", (name,), "company")
    logger.info("Added company {} (id={})", name, company_id)
    return company_id

# ---------------- CANDIDATES ----------------

def add_candidate(conn: sqlite3.Connection, candidate: Candidate) -> int:
    if not candidate.full_name or candidate.age <= 0:
        raise ValidationError("candidate needs a full name and a positive age")
    candidate_id = _insert(conn, """
        INSERT INTO candidates (full_name, age, email, experience, skills)
        VALUES (?, ?, ?, ?, ?)
    """, (candidate.full_name, candidate.age, candidate.email or "",
          candidate.experience or "", _encode_skills(candidate.skills)), "candidate")
    logger.info("Added candidate {} (id={})", candidate.full_name, candidate_id)
    return candidate_id

def find_candidates_by_skill(conn: sqlite3.Connection, skill: str) -> List[Candidate]:
    try:
        rows = conn.execute(f"""
            SELECT {CANDIDATE_COLUMNS} FROM candidates
            WHERE EXISTS (SELECT 1 FROM json_each(candidates.skills) WHERE json_each.value = ?)
        """, (skill,)).fetchall()
    except STORE_ERRORS as e:
        raise StorageError(f"candidate search failed: {e}") from e
    return [_row_to_candidate(r) for r in rows]

# ---------------- JOB OPENINGS ----------------

def add_job_opening(conn: sqlite3.Connection, job_opening: JobOpening) -> int:
    if not job_opening.title or job_opening.company_id <= 0 or job_opening.salary <= 0:
        raise ValidationError("job opening needs a title, a company id and a positive salary")
    job_id = _insert(conn, """
        INSERT INTO job_openings (company_id, title, experience, salary, required_skills)
        VALUES (?, ?, ?, ?, ?)
    """, (job_opening.company_id, job_opening.title, job_opening.experience or "",
          round(float(job_opening.salary), 2), _encode_skills(job_opening.required_skills)),
        "job opening")
    logger.info("Added job opening {} (id={})", job_opening.title, job_id)
    return job_id

def find_job_openings_by_skill(conn: sqlite3.Connection, skill: str) -> List[JobOpening]:
    try:
        rows = conn.execute(f"""
            SELECT {JOB_OPENING_COLUMNS} FROM job_openings
            WHERE EXISTS (SELECT 1 FROM json_each(job_openings.required_skills) WHERE json_each.value = ?)
        """, (skill,)).fetchall()
    except STORE_ERRORS as e:
        raise StorageError(f"job opening search failed: {e}") from e
    return [_row_to_job_opening(r) for r in rows]

def list_all_job_openings(conn: sqlite3.Connection) -> List[JobOpening]:
    try:
        rows = conn.execute(f"SELECT {JOB_OPENING_COLUMNS} FROM job_openings").fetchall()
    except STORE_ERRORS as e:
        raise StorageError(f"could not list job openings: {e}") from e
    return [_row_to_job_opening(r) for r in rows]
