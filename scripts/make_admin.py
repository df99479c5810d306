"""Promote a mirrored user to ADMIN.

Usage: python scripts/make_admin.py <email>
Without an email, lists the known users.
"""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from coursex.core.database import SessionLocal
from coursex.core.exceptions import NotFoundError
from coursex.core.logging import configure_logging
from coursex.models.base import Base  # noqa: F401  registers every mapper
from coursex.services.user import user_service

logger = logging.getLogger("coursex.scripts.make_admin")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Promote a user to ADMIN by email.")
    parser.add_argument("email", nargs="?", help="email of the user to promote")
    args = parser.parse_args(argv)

    db = SessionLocal()
    try:
        if not args.email:
            users = user_service.list_users(db)
            if not users:
                print("No users found.")
            for user in users:
                print(f"{user.email}\t{user.role.value}\t{user.name or ''}")
            return 0

        try:
            user = user_service.make_admin(db, email=args.email)
        except NotFoundError:
            logger.error(f"No user with email {args.email}")
            return 1

        logger.info(f"{user.email} is now ADMIN")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    configure_logging()
    sys.exit(main())
