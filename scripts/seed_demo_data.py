#!/usr/bin/env python3
"""
Demo Data Seed Script

Creates the schema and inserts a small set of categories, companies and
jobs so the API has something to list on a fresh database.

Usage:
    # Seed built-in demo data
    python scripts/seed_demo_data.py

    # Seed from a JSON file with "categories", "companies" and "jobs" keys
    python scripts/seed_demo_data.py --json-file path/to/data.json

    # Show row counts
    python scripts/seed_demo_data.py --verify
"""

import asyncio
import argparse
import json
import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Dict

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.config import get_settings
from jobboard.database import create_engine_from_settings, create_session_factory, init_db
from jobboard.models import Category, Company, Job
from jobboard.schemas import CategoryCreate, CompanyCreate, JobCreate

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


# ==============================================================================
# Seed Data
# ==============================================================================

SEED_DATA: Dict[str, Any] = {
    "categories": [
        {"name": "Engineering", "slug": "engineering", "icon": "code"},
        {"name": "Design", "slug": "design", "icon": "palette"},
        {"name": "Marketing", "slug": "marketing", "icon": "megaphone"},
        {"name": "Customer Support", "slug": "customer-support", "icon": "lifebuoy"},
    ],
    "companies": [
        {
            "name": "Acme Cloud",
            "slug": "acme-cloud",
            "website": "https://acme.example.com",
            "description": "Infrastructure for teams that ship every day.",
            "is_verified": True,
        },
        {
            "name": "Brightside Studio",
            "slug": "brightside-studio",
            "website": "https://brightside.example.com",
            "description": "A small product design studio.",
            "is_verified": False,
        },
    ],
    "jobs": [
        {
            "company": "acme-cloud",
            "title": "Senior Python Engineer",
            "description": "## About the role\n\nBuild **async** services in `Python`.\n\n- FastAPI\n- PostgreSQL",
            "salary_min": 120000,
            "salary_max": 160000,
            "location": "Remote (EU)",
            "job_type": "full-time",
            "category": "engineering",
            "tags": ["python", "fastapi"],
            "apply_url": "https://acme.example.com/careers/python",
            "is_featured": True,
            "days_ago": 1,
        },
        {
            "company": "acme-cloud",
            "title": "Support Engineer",
            "description": "Help customers *succeed* with Acme Cloud.",
            "salary_min": 60000,
            "location": "Remote (US)",
            "job_type": "full-time",
            "category": "customer-support",
            "tags": ["support"],
            "apply_url": "https://acme.example.com/careers/support",
            "days_ago": 3,
        },
        {
            "company": "brightside-studio",
            "title": "Product Designer",
            "description": "# Product Designer\n\n1. Research\n2. Prototype\n3. Ship",
            "salary_max": 95000,
            "location": "Remote",
            "job_type": "contract",
            "category": "design",
            "tags": ["figma"],
            "apply_url": "https://brightside.example.com/jobs/designer",
            "days_ago": 7,
        },
    ],
}


# ==============================================================================
# Database Operations
# ==============================================================================

async def import_data(session: AsyncSession, data: Dict[str, Any]) -> int:
    """Insert categories, companies and jobs, skipping existing slugs."""
    count = 0
    now = datetime.now(timezone.utc)

    for category_data in data.get("categories", []):
        category = CategoryCreate(**category_data)
        existing = await session.execute(select(Category).where(Category.slug == category.slug))
        if existing.scalars().first():
            logger.debug(f"Category already exists: {category.slug}")
            continue
        session.add(Category(**category.model_dump()))
        count += 1

    companies: Dict[str, Company] = {}
    for company_data in data.get("companies", []):
        company_in = CompanyCreate(**company_data)
        existing = await session.execute(select(Company).where(Company.slug == company_in.slug))
        company = existing.scalars().first()
        if not company:
            company = Company(**company_in.model_dump())
            session.add(company)
            count += 1
            logger.info(f"Imported company: {company.name}")
        companies[company.slug] = company

    await session.flush()

    for job_data in data.get("jobs", []):
        job_data = dict(job_data)
        company = companies.get(job_data.pop("company"))
        if not company:
            logger.warning(f"Skipping job with unknown company: {job_data['title']}")
            continue
        days_ago = job_data.pop("days_ago", 0)
        job = JobCreate(company_id=company.id, posted_at=now - timedelta(days=days_ago), **job_data)
        session.add(Job(**job.model_dump(mode="json", exclude={"posted_at", "expires_at"}),
                        posted_at=job.posted_at, expires_at=job.expires_at))
        count += 1
        logger.info(f"Imported job: {job.title}")

    await session.commit()
    return count


async def verify_import(session: AsyncSession) -> None:
    for model in (Category, Company, Job):
        result = await session.execute(select(func.count()).select_from(model))
        logger.info(f"{model.__tablename__}: {result.scalar()}")


# ==============================================================================
# Main
# ==============================================================================

async def main() -> None:
    parser = argparse.ArgumentParser(description="Seed job board demo data")
    parser.add_argument("--json-file", type=Path, help="Path to JSON seed file")
    parser.add_argument("--verify", action="store_true", help="Show row counts")

    args = parser.parse_args()

    engine = create_engine_from_settings(get_settings())
    await init_db(engine)
    session_factory = create_session_factory(engine)

    try:
        async with session_factory() as session:
            if args.verify:
                await verify_import(session)
            elif args.json_file:
                data = json.loads(args.json_file.read_text(encoding="utf-8"))
                count = await import_data(session, data)
                logger.info(f"Imported {count} rows from {args.json_file}")
            else:
                count = await import_data(session, SEED_DATA)
                logger.info(f"Imported {count} demo rows")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
