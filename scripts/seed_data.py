#!/usr/bin/env python3
"""
Seed the database with sample people so the dashboard cards show numbers.

Usage:
  python scripts/seed_data.py            # 1 admin, 5 teachers, 10 parents, 20 students
  python scripts/seed_data.py --reset    # drop and recreate tables first

Reads DATABASE_URL from .env (or the environment).
"""
import argparse
import asyncio
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.database import AsyncSessionLocal, Base, engine, init_db, close_db
from app.models.user import Admin, Teacher, Parent, Student
from app.services.count_service import CountService, get_label


async def seed(reset: bool, teachers: int, parents: int, students: int) -> None:
    if reset:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
    await init_db()

    async with AsyncSessionLocal() as session:
        session.add(Admin(username="admin"))
        session.add_all(
            Teacher(username=f"teacher{i}", name=f"Teacher{i}", surname="Demo", address="")
            for i in range(1, teachers + 1)
        )
        parent_rows = [
            Parent(username=f"parent{i}", name=f"Parent{i}", surname="Demo", address="")
            for i in range(1, parents + 1)
        ]
        session.add_all(parent_rows)
        await session.flush()
        session.add_all(
            Student(
                username=f"student{i}",
                name=f"Student{i}",
                surname="Demo",
                address="",
                parent_id=parent_rows[i % len(parent_rows)].id,
            )
            for i in range(1, students + 1)
        )
        await session.commit()

        counts = await CountService.count_all(session)

    for category, total in counts.items():
        print(f"{get_label(category)}: {total}")
    await close_db()


def main():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--reset", action="store_true", help="drop all tables first")
    parser.add_argument("--teachers", type=int, default=5)
    parser.add_argument("--parents", type=int, default=10)
    parser.add_argument("--students", type=int, default=20)
    args = parser.parse_args()
    if args.parents < 1 and args.students > 0:
        print("ERROR: students need at least one parent.")
        sys.exit(1)
    asyncio.run(seed(args.reset, args.teachers, args.parents, args.students))


if __name__ == "__main__":
    main()
