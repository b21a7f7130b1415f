"""Create the admin account, the singleton rows and optional sample content."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from contextlib import suppress

from core.db import database
from core.db.repositories import collections as repo
from core.db.repositories import singletons as singleton_repo
from core.db.repositories import users as user_repo
from core.db import models
from core.services.content_service import ContentService
from core.utils.token_crypto import hash_password


logger = logging.getLogger("core.scripts.seed_content")


# Access SessionLocal dynamically so test fixtures that rebind the
# sessionmaker are respected.
SessionLocal = lambda: database.SessionLocal()


SAMPLE_PROJECTS = [
    {
        "title": "3D Portfolio Website",
        "description": "An immersive 3D portfolio showcasing projects with WebGL and Three.js",
        "technologies": ["React", "Three.js", "TypeScript", "Tailwind CSS", "WebGL"],
        "featured": True,
        "order": 1,
    },
    {
        "title": "Interactive Data Visualization",
        "description": "Real-time data visualization dashboard with 3D charts and animations",
        "technologies": ["React", "D3.js", "Three.js", "Node.js"],
        "featured": True,
        "order": 2,
    },
    {
        "title": "E-Commerce Platform",
        "description": "Full-stack e-commerce solution with real-time inventory",
        "technologies": ["Next.js", "PostgreSQL", "Stripe", "Redis", "TypeScript"],
        "featured": False,
        "order": 3,
    },
]

SAMPLE_SKILLS = [
    {"name": "React", "category": "Frontend", "proficiency": 95, "order": 1},
    {"name": "Three.js", "category": "3D/Graphics", "proficiency": 90, "order": 2},
    {"name": "TypeScript", "category": "Frontend", "proficiency": 90, "order": 3},
    {"name": "Node.js", "category": "Backend", "proficiency": 85, "order": 4},
    {"name": "PostgreSQL", "category": "Backend", "proficiency": 80, "order": 5},
    {"name": "Git", "category": "Tools", "proficiency": 90, "order": 6},
    {"name": "Docker", "category": "Tools", "proficiency": 75, "order": 7},
]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed the admin user and default site content")
    parser.add_argument(
        "--username",
        default=os.getenv("ADMIN_USERNAME", "admin"),
        help="Admin username (default: $ADMIN_USERNAME or 'admin')",
    )
    parser.add_argument(
        "--password",
        default=os.getenv("ADMIN_PASSWORD"),
        help="Admin password (default: $ADMIN_PASSWORD; required when the user does not exist)",
    )
    parser.add_argument(
        "--samples",
        action="store_true",
        help="Also insert sample projects and skills when those tables are empty",
    )
    return parser.parse_args(argv)


def ensure_admin(session, username: str, password: str | None) -> bool:
    """Create the admin account if missing. Returns True when a user was created."""
    if user_repo.get_user_by_username(session, username) is not None:
        return False
    if not password:
        raise ValueError(f"No password given for new admin user '{username}'")
    user_repo.create_user(session, username=username, password_hash=hash_password(password))
    return True


def seed_samples(session) -> int:
    service = ContentService(session)
    created = 0
    if not repo.list_rows(session, models.Project, limit=1):
        for project in SAMPLE_PROJECTS:
            service.create("projects", project)
            created += 1
    if not repo.list_rows(session, models.Skill, limit=1):
        for skill in SAMPLE_SKILLS:
            service.create("skills", skill)
            created += 1
    return created


def seed(username: str, password: str | None, samples: bool) -> int:
    session = SessionLocal()
    try:
        try:
            admin_created = ensure_admin(session, username, password)
        except ValueError as exc:
            print(str(exc), file=sys.stderr)
            logger.error("Admin seed aborted", extra={"username": username})
            return 1
        singletons = singleton_repo.seed_singletons(session)
        sample_rows = seed_samples(session) if samples else 0
        print(
            f"Admin user {'created' if admin_created else 'already present'}; "
            f"{singletons} singleton row(s) and {sample_rows} sample row(s) created."
        )
        logger.info(
            "Content seed finished",
            extra={
                "admin_created": admin_created,
                "singleton_rows": singletons,
                "sample_rows": sample_rows,
            },
        )
        return 0
    finally:
        with suppress(Exception):
            session.close()


def main(argv: list[str] | None = None) -> int:
    if not logging.getLogger().handlers:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    args = parse_args(argv)
    return seed(username=args.username, password=args.password, samples=args.samples)


if __name__ == "__main__":  # pragma: no cover - manual execution path
    sys.exit(main())
