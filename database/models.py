# models.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Role(str, Enum):
    USER = "user"

    @classmethod
    def parse(cls, value: str) -> "Role":
        """Map a stored role string to a Role. New roles get added here."""
        return cls(str(value).strip().lower())


@dataclass
class User:
    username: str
    password_hash: str
    role: Role = Role.USER
    id: Optional[int] = None


@dataclass
class Candidate:
    full_name: str
    age: int
    email: str = ""
    experience: str = ""
    skills: List[str] = field(default_factory=list)
    id: Optional[int] = None


@dataclass
class JobOpening:
    company_id: int
    title: str
    salary: float
    experience: str = ""
    required_skills: List[str] = field(default_factory=list)
    id: Optional[int] = None
