"""
Удаляет все данные из БД, указанной в DATABASE_URL (с учётом внешних ключей).

    python scripts/cleanup_db.py --yes
"""
from __future__ import annotations

import argparse
import logging
import sys

from fittrack.core.config import DATABASE_URL
from fittrack.core.db import SessionLocal
from fittrack.core.logs import setup_logging
from fittrack.services.admin_service import reset_database
import fittrack.core.events  # noqa: F401

logger = logging.getLogger("cleanup_db")


def main() -> int:
    parser = argparse.ArgumentParser(description="Delete every row from the FitTrack database")
    parser.add_argument("--yes", action="store_true", help="Confirm the cleanup")
    args = parser.parse_args()

    setup_logging("INFO")
    if not args.yes:
        logger.error("Добавьте --yes, чтобы подтвердить очистку базы")
        return 1

    logger.info(f"Очищаем базу {DATABASE_URL.split('@')[-1]}")
    db = SessionLocal()
    try:
        reset_database(db)
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
