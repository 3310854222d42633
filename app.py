import sqlite3
import sys
from functools import partial

from loguru import logger

from config import Config
from data_utils import (
    candidates_frame, job_openings_frame, parse_float, parse_int, parse_skills,
)
from database.db_setup import init_db
from database.errors import RecruitmentError
from database.models import Candidate, JobOpening
from database.recruitment import (
    add_candidate, add_company, add_job_opening, find_candidates_by_skill,
    find_job_openings_by_skill, list_all_job_openings, login_user, register_user,
)
from database.security import DEFAULT_ROUNDS

EXIT_CHOICE = 9

MENU = [
    (1, "Register"),
    (2, "Log in"),
    (3, "Add company"),
    (4, "Add candidate"),
    (5, "Add job opening"),
    (6, "Find candidates by skill"),
    (7, "Find job openings by skill"),
    (8, "Show all job openings"),
    (EXIT_CHOICE, "Exit"),
]

# -----------------------------
# Console helpers
# -----------------------------

def get_input(prompt: str) -> str:
    return input(prompt).strip()

def get_int_input(prompt: str) -> int:
    return parse_int(get_input(prompt))

def get_float_input(prompt: str) -> float:
    return parse_float(get_input(prompt))

def get_list_input(prompt: str) -> list[str]:
    return parse_skills(get_input(prompt))

def handle_error(err: Exception):
    print(f"❌ Error: {err}")

def print_menu():
    print("\nChoose an action:")
    for number, label in MENU:
        print(f"{number}. {label}")

# -----------------------------
# Actions
# -----------------------------

def register_action(conn, rounds=DEFAULT_ROUNDS):
    username = get_input("Username: ")
    password = get_input("Password: ")
    register_user(conn, username, password, rounds=rounds)
    print("✅ Registration successful!")

def login_action(conn):
    username = get_input("Username: ")
    password = get_input("Password: ")
    user_id, role = login_user(conn, username, password)
    print(f"✅ Login successful! User ID: {user_id}, Role: {role.value}")

def add_company_action(conn):
    name = get_input("Company name: ")
    add_company(conn, name)
    print("✅ Company added.")

def add_candidate_action(conn):
    full_name = get_input("Candidate full name: ")
    age = get_int_input("Candidate age: ")
    email = get_input("Candidate email: ")
    experience = get_input("Candidate work experience: ")
    skills = get_list_input("Candidate skills (comma-separated): ")
    add_candidate(conn, Candidate(full_name=full_name, age=age, email=email,
                                  experience=experience, skills=skills))
    print("✅ Candidate added.")

def add_job_opening_action(conn):
    title = get_input("Job title: ")
    company_id = get_int_input("Company ID: ")
    experience = get_input("Required experience: ")
    salary = get_float_input("Salary: ")
    skills = get_list_input("Required skills (comma-separated): ")
    add_job_opening(conn, JobOpening(company_id=company_id, title=title, salary=salary,
                                     experience=experience, required_skills=skills))
    print("✅ Job opening added.")

def find_candidates_action(conn):
    skill = get_input("Skill to search candidates by: ")
    candidates = find_candidates_by_skill(conn, skill)
    if not candidates:
        print("No candidates found.")
        return
    print("📌 Candidates found:")
    print(candidates_frame(candidates)[["id", "full_name", "skills"]].to_string(index=False))

def find_job_openings_action(conn):
    skill = get_input("Skill to search job openings by: ")
    job_openings = find_job_openings_by_skill(conn, skill)
    if not job_openings:
        print("No job openings found.")
        return
    print("📌 Job openings found:")
    print(job_openings_frame(job_openings)[["id", "title", "required_skills"]].to_string(index=False))

def list_job_openings_action(conn):
    job_openings = list_all_job_openings(conn)
    if not job_openings:
        print("No job openings yet.")
        return
    print("📌 All job openings:")
    print(job_openings_frame(job_openings).to_string(index=False))

ACTIONS = {
    1: register_action,
    2: login_action,
    3: add_company_action,
    4: add_candidate_action,
    5: add_job_opening_action,
    6: find_candidates_action,
    7: find_job_openings_action,
    8: list_job_openings_action,
}

# -----------------------------
# Loop & entry point
# -----------------------------

def run(conn: sqlite3.Connection, rounds: int = DEFAULT_ROUNDS):
    """Menu loop. Returns when the user exits or input ends."""
    actions = {**ACTIONS, 1: partial(register_action, rounds=rounds)}
    while True:
        print_menu()
        try:
            choice = get_int_input("Enter action number: ")
            if choice == EXIT_CHOICE:
                print("Goodbye.")
                return
            action = actions.get(choice)
            if action is None:
                print("Invalid choice. Try again.")
                continue
            action(conn)
        except RecruitmentError as e:
            logger.debug("Action failed: {}", e)
            handle_error(e)
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye.")
            return

def configure_logging(level: str, log_file: str = ""):
    logger.remove()
    logger.add(sys.stderr, level=level)
    if log_file:
        logger.add(log_file, level="DEBUG", rotation="10 MB", retention=5)

def main():
    configure_logging(Config.LOG_LEVEL, Config.LOG_FILE)
    try:
        Config.validate()
        rounds = Config.bcrypt_rounds()
        conn = init_db(Config.DATABASE_URL)
    except RecruitmentError as e:
        logger.critical("Startup failed: {}", e)
        handle_error(e)
        sys.exit(1)

    try:
        run(conn, rounds=rounds)
    finally:
        conn.close()


if __name__ == "__main__":
    main()
