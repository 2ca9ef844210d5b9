"""
Заполняет БД демонстрационными данными: 5 пользователей, 3 группы, активности.

    python scripts/seed_sample_data.py [--password password123]
"""
from __future__ import annotations

import argparse
import logging
import random
from datetime import timedelta

from fittrack.core.db import SessionLocal, init_db
from fittrack.core.logs import setup_logging
from fittrack.models import ActivityType, Group
from fittrack.models.base import utcnow
from fittrack.services import activity_service, group_service, user_service
import fittrack.core.events  # noqa: F401

logger = logging.getLogger("seed_sample_data")

USERS = [
    ("Marco Perez", "marco@example.com"),
    ("Ana Garcia", "ana@example.com"),
    ("Carlos Rodriguez", "carlos@example.com"),
    ("Sofia Martinez", "sofia@example.com"),
    ("Luis Torres", "luis@example.com"),
]

# (название, индекс создателя, индексы участников)
GROUPS = [
    ("Morning Runners", 0, [1, 2]),
    ("Gym Warriors", 3, [4, 0]),
    ("Yoga Enthusiasts", 1, [3, 4]),
]


def seed(password: str, days: int, seed_value: int) -> None:
    rng = random.Random(seed_value)
    init_db()
    db = SessionLocal()
    try:
        users = [user_service.register(db, email, password, name) for name, email in USERS]
        logger.info(f"Созданы пользователи: {', '.join(u.name for u in users)}")

        groups: list[Group] = []
        for name, creator_idx, member_idxs in GROUPS:
            group = group_service.create_group(db, users[creator_idx], name)
            for idx in member_idxs:
                group_service.join_group(db, users[idx], group.id)
            groups.append(group)
        logger.info(f"Созданы группы: {', '.join(g.name for g in groups)}")

        today = utcnow().replace(hour=8, minute=0, second=0, microsecond=0)
        created = 0
        for (_, creator_idx, member_idxs), group in zip(GROUPS, groups):
            for idx in [creator_idx, *member_idxs]:
                for offset in range(days):
                    if rng.random() < 0.4:
                        activity_service.create_activity(
                            db,
                            users[idx],
                            rng.choice(list(ActivityType)),
                            rng.choice([20, 30, 45, 60, 90]),
                            today - timedelta(days=offset),
                            group.id,
                        )
                        created += 1
        logger.info(f"Создано активностей: {created}")
    finally:
        db.close()


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed FitTrack with sample data")
    parser.add_argument("--password", default="password123", help="Password for all sample users")
    parser.add_argument("--days", type=int, default=21, help="How many past days to fill")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    args = parser.parse_args()

    setup_logging("INFO")
    seed(args.password, args.days, args.seed)


if __name__ == "__main__":
    main()
