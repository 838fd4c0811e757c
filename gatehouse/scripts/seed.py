"""
Reset the users table and provision the default admin account:

  python -m gatehouse.scripts.seed

Deletes every user, then creates (or promotes) admin@example.com with role admin.
"""

import logging
import sys

from gatehouse.core.config import get_settings
from gatehouse.core.database import Database
from gatehouse.core.security import hash_password
from gatehouse.services.users import UserRepository

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "adminpassword"


def seed(users: UserRepository, password_hash: str) -> None:
    users.delete_all()
    users.upsert_admin(
        email=ADMIN_EMAIL,
        password_hash=password_hash,
        first_name="Admin",
        last_name="User",
    )


def main(database: Database | None = None) -> int:
    settings = get_settings()
    database = database or Database(settings)
    if settings.DATABASE_URL.startswith("sqlite"):
        database.create_all()
    db = database.session()
    try:
        seed(UserRepository(db), hash_password(ADMIN_PASSWORD, settings))
        logger.info("Admin user created")
        return 0
    except Exception as e:
        logger.exception("Seed failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
