import math
import random
import re
from typing import List

import pandas as pd
from faker import Faker

from database.errors import ValidationError
from database.models import Candidate, JobOpening

fake = Faker()

SKILL_POOL = [
    "python", "go", "sql", "java", "javascript", "typescript", "docker",
    "kubernetes", "aws", "react", "django", "fastapi", "postgresql", "linux",
    "machine learning", "pandas", "git", "terraform",
]

CANDIDATE_COLUMNS = ["id", "full_name", "age", "email", "experience", "skills"]
JOB_OPENING_COLUMNS = ["id", "company_id", "title", "experience", "salary", "required_skills"]

INT_RE = re.compile(r"[-+]?[0-9]+")

# -----------------------------
# Input coercion
# -----------------------------

def parse_int(text: str) -> int:
    """Plain ASCII digits with an optional sign; no underscores or other numerals."""
    value = str(text).strip()
    if not INT_RE.fullmatch(value):
        raise ValidationError(f"invalid integer: {text!r}")
    try:
        return int(value)
    except ValueError:
        # beyond the interpreter's int string-conversion digit limit
        raise ValidationError(f"integer too long: {value[:20]}...")

def parse_float(text: str) -> float:
    try:
        value = float(str(text).strip())
    except ValueError:
        raise ValidationError(f"invalid number: {text!r}")
    if not math.isfinite(value):
        raise ValidationError(f"invalid number: {text!r}")
    return value

def parse_skills(text: str) -> List[str]:
    """
    Split a comma-separated skills line into a list, keeping the order
    the user typed. Blank input means no skills, and empty items such as
    the middle of "go,,sql" are dropped rather than stored as "".
    """
    if not text or not text.strip():
        return []
    return [s.strip() for s in text.split(",") if s.strip()]

# -----------------------------
# Tabular views
# -----------------------------

def candidates_frame(candidates: List[Candidate]) -> pd.DataFrame:
    rows = [{
        "id": c.id,
        "full_name": c.full_name,
        "age": c.age,
        "email": c.email,
        "experience": c.experience,
        "skills": ", ".join(c.skills),
    } for c in candidates]
    return pd.DataFrame(rows, columns=CANDIDATE_COLUMNS)

def job_openings_frame(job_openings: List[JobOpening]) -> pd.DataFrame:
    rows = [{
        "id": j.id,
        "company_id": j.company_id,
        "title": j.title,
        "experience": j.experience,
        "salary": f"{j.salary:.2f}",
        "required_skills": ", ".join(j.required_skills),
    } for j in job_openings]
    return pd.DataFrame(rows, columns=JOB_OPENING_COLUMNS)

# -----------------------------
# Demo records
# -----------------------------

def seed_random(seed: int):
    Faker.seed(seed)
    random.seed(seed)

def _fake_skills(low: int = 1, high: int = 5) -> List[str]:
    k = random.randint(low, high)
    return list(fake.random_elements(elements=SKILL_POOL, length=k, unique=True))

def fake_company_name() -> str:
    return fake.unique.company()

def fake_candidate() -> Candidate:
    return Candidate(
        full_name=fake.name(),
        age=random.randint(20, 65),
        email=fake.email(),
        experience=f"{random.randint(0, 15)} years as {fake.job()}",
        skills=_fake_skills(),
    )

def fake_job_opening(company_id: int) -> JobOpening:
    return JobOpening(
        company_id=company_id,
        title=fake.job(),
        experience=f"{random.randint(0, 8)}+ years",
        salary=float(random.randrange(30000, 150000, 500)),
        required_skills=_fake_skills(1, 4),
    )
