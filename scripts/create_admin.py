"""Utility script to create an administrator account in the database."""

from __future__ import annotations

import argparse
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError

from app.application.use_cases.users import create_user
from app.domain.entities import ROLE_ADMIN
from app.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for admin creation."""

    parser = argparse.ArgumentParser(
        description="Create an administrator for the Travel Guide API.",
    )
    parser.add_argument(
        "--username",
        default="admin",
        help="Login name of the administrator (default: admin)",
    )
    parser.add_argument(
        "--display-name",
        default="Administrator",
        help="Name shown to other users (default: Administrator)",
    )
    parser.add_argument(
        "--password",
        default=None,
        help="Password for the account. Prompted interactively when omitted.",
    )
    return parser.parse_args()


def main() -> None:
    """Create an administrator using the provided command line arguments."""

    args = parse_args()

    password = args.password or getpass("Password for the administrator: ")
    if not password:
        raise SystemExit("No password provided.")

    initialize_database()

    session = SessionLocal()
    try:
        user = create_user(
            session,
            username=args.username,
            password=password,
            display_name=args.display_name,
            role=ROLE_ADMIN,
        )
    except ValueError as exc:
        session.rollback()
        raise SystemExit(f"Could not create the administrator: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Database error while saving the administrator: {exc}") from exc
    else:
        print(
            "Administrator created:\n"
            f"  ID: {user.id}\n"
            f"  Username: {user.username}\n"
            f"  Display name: {user.public_name}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
