"""Utility script to create a staff (admin) account in the database."""

from __future__ import annotations

import argparse
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError

from volunteer_api.application.use_cases.users import create_user
from volunteer_api.domain.entities import ROLE_ADMIN
from volunteer_api.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for admin creation."""

    parser = argparse.ArgumentParser(
        description="Create a staff account for the volunteer matching API.",
    )
    parser.add_argument(
        "--name",
        default="Administrator",
        help="Display name of the account (default: Administrator)",
    )
    parser.add_argument(
        "--email",
        default="admin@example.com",
        help="Login email of the account (default: admin@example.com)",
    )
    parser.add_argument(
        "--password",
        default=None,
        help="Account password. Prompted interactively when omitted.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()

    password = args.password or getpass("Password for the new admin: ")
    if not password:
        raise SystemExit("No password was provided.")

    initialize_database()

    session = SessionLocal()
    try:
        user = create_user(
            session,
            name=args.name,
            email=args.email,
            password=password,
            role=ROLE_ADMIN,
        )
    except ValueError as exc:
        session.rollback()
        raise SystemExit(f"Could not create the admin: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Error saving the admin to the database: {exc}") from exc
    else:
        print(
            "Admin created:\n"
            f"  ID: {user.id}\n"
            f"  Name: {user.name}\n"
            f"  Email: {user.email}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
