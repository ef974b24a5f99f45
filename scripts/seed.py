"""
Seed script - populates the database with demo data for development.

Usage:
    python -m scripts.seed

Creates one demo user with jobs spread over the last few months so the
list filters and the stats endpoint have something to show.

This script is IDEMPOTENT - running it twice won't create duplicates.
It checks for existing data before inserting.
"""
import asyncio
import sys
import os
from datetime import datetime, timedelta, timezone

# Add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from jobportal.core.database import async_session_maker, close_db, init_db
from jobportal.core.security import hash_password
from jobportal.models.job import Job, JobStatus, WorkType
from jobportal.models.user import User
from sqlalchemy import select


# ─── Demo User ─────────────────────────────────────────────────

DEMO_USER = {
    "email": "demo@jobportal.dev",
    "password": "password123",
    "name": "Demo",
    "last_name": "User",
    "location": "Bengaluru",
}


# ─── Jobs ──────────────────────────────────────────────────────
# (company, position, status, work_type, work_location, days_ago)

SAMPLE_JOBS = [
    ("Acme Inc.", "Software Engineer", JobStatus.PENDING, WorkType.FULL_TIME, "Mumbai", 2),
    ("Globex", "Backend Developer", JobStatus.INTERVIEW, WorkType.FULL_TIME, "Pune", 12),
    ("Initech", "Data Analyst", JobStatus.REJECT, WorkType.CONTRACT, "Remote", 35),
    ("Umbrella", "DevOps Engineer", JobStatus.PENDING, WorkType.FULL_TIME, "Hyderabad", 40),
    ("Hooli", "Frontend Intern", JobStatus.INTERVIEW, WorkType.INTERNSHIP, "Bengaluru", 70),
    ("Stark Industries", "QA Engineer", JobStatus.REJECT, WorkType.PART_TIME, "Chennai", 95),
    ("Wayne Enterprises", "Platform Engineer", JobStatus.PENDING, WorkType.FULL_TIME, "Remote", 130),
]


async def seed():
    print("Initializing database...")
    await init_db()

    async with async_session_maker() as db:
        # ── User ───────────────────────────────────────────
        result = await db.execute(select(User).where(User.email == DEMO_USER["email"]))
        user = result.scalar_one_or_none()
        if user:
            print("  Demo user already exists, skipping...")
        else:
            user = User(
                email=DEMO_USER["email"],
                password_hash=hash_password(DEMO_USER["password"]),
                name=DEMO_USER["name"],
                last_name=DEMO_USER["last_name"],
                location=DEMO_USER["location"],
            )
            db.add(user)
            await db.flush()
            print(f"  Created user {user.email}")

        # ── Jobs ───────────────────────────────────────────
        existing = await db.execute(select(Job.id).where(Job.created_by == user.id).limit(1))
        if existing.scalar_one_or_none():
            print("  Jobs already exist, skipping...")
        else:
            now = datetime.now(timezone.utc)
            for company, position, status, work_type, location, days_ago in SAMPLE_JOBS:
                db.add(
                    Job(
                        company=company,
                        position=position,
                        status=status,
                        work_type=work_type,
                        work_location=location,
                        created_by=user.id,
                        created_at=now - timedelta(days=days_ago),
                    )
                )
            await db.flush()
            print(f"  Created {len(SAMPLE_JOBS)} jobs")

        await db.commit()

    await close_db()
    print()
    print("Seed complete!")
    print(f"  Login: {DEMO_USER['email']} / {DEMO_USER['password']}")


if __name__ == "__main__":
    asyncio.run(seed())
