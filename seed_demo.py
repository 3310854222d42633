# seed_demo.py
import argparse
import random

from loguru import logger

from config import Config
from data_utils import fake_candidate, fake_company_name, fake_job_opening, seed_random
from database.db_setup import init_db
from database.errors import StorageError
from database.recruitment import add_candidate, add_company, add_job_opening


def seed(conn, companies: int = 5, candidates: int = 20, jobs: int = 10) -> dict:
    """Insert fake companies, candidates and job openings. Returns counts inserted."""
    company_ids = []
    for _ in range(companies):
        name = fake_company_name()
        try:
            company_ids.append(add_company(conn, name))
        except StorageError as e:
            logger.warning("Skipping company {}: {}", name, e)

    for _ in range(candidates):
        add_candidate(conn, fake_candidate())

    n_jobs = 0
    if company_ids:
        for _ in range(jobs):
            add_job_opening(conn, fake_job_opening(random.choice(company_ids)))
            n_jobs += 1
    elif jobs:
        logger.warning("No companies available, skipping job openings")

    return {"companies": len(company_ids), "candidates": candidates, "job_openings": n_jobs}


def main():
    ap = argparse.ArgumentParser(description="Fill the recruitment database with demo data.")
    ap.add_argument("--companies", type=int, default=5, help="Number of companies to create")
    ap.add_argument("--candidates", type=int, default=20, help="Number of candidates to create")
    ap.add_argument("--jobs", type=int, default=10, help="Number of job openings to create")
    ap.add_argument("--seed", type=int, default=None, help="Random seed for reproducible data")
    args = ap.parse_args()

    if args.seed is not None:
        seed_random(args.seed)

    Config.validate()
    conn = init_db(Config.DATABASE_URL)
    try:
        counts = seed(conn, args.companies, args.candidates, args.jobs)
    finally:
        conn.close()
    print(f"✅ Demo data inserted: {counts}")


if __name__ == "__main__":
    main()
