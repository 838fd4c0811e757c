"""
Create a user with an explicit role (e.g. an admin). Run from project root:
  python -m gatehouse.scripts.create_user EMAIL PASSWORD FIRST_NAME LAST_NAME [role]
Example:
  python -m gatehouse.scripts.create_user ops@example.com s3cret-pass Ops Team admin
"""
import argparse
import logging
import sys

from gatehouse.core.config import get_settings
from gatehouse.core.database import Database
from gatehouse.core.errors import UserAlreadyExistsError
from gatehouse.core.security import hash_password
from gatehouse.services.users import ROLES, UserRepository
from gatehouse.services.validation import Invalid, validate_signup

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None, database: Database | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Gatehouse user.")
    parser.add_argument("email", help="Email address (unique)")
    parser.add_argument("password", help="Password")
    parser.add_argument("first_name")
    parser.add_argument("last_name")
    parser.add_argument("role", nargs="?", default="user", choices=list(ROLES))
    args = parser.parse_args(argv)

    settings = get_settings()
    checked = validate_signup(
        {
            "email": args.email.strip(),
            "password": args.password,
            "first_name": args.first_name,
            "last_name": args.last_name,
        },
        settings.PASSWORD_MIN_LEN,
    )
    if isinstance(checked, Invalid):
        for issue in checked.issues:
            print(f"{issue.field}: {issue.message}", file=sys.stderr)
        return 1
    body = checked.value

    database = database or Database(settings)
    if settings.DATABASE_URL.startswith("sqlite"):
        database.create_all()
    db = database.session()
    try:
        users = UserRepository(db)
        if users.find_by_email(body.email) is not None:
            print(f"User '{body.email}' already exists.", file=sys.stderr)
            return 1
        try:
            users.create(
                email=body.email,
                password_hash=hash_password(body.password, settings),
                first_name=body.first_name,
                last_name=body.last_name,
                role=args.role,
            )
        except UserAlreadyExistsError:
            print(f"User '{body.email}' already exists.", file=sys.stderr)
            return 1
        logger.info("Created user '%s' with role '%s'.", body.email, args.role)
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
