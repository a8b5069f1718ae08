"""Utility script to create the default site roles in the database."""

from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from comment_optin.application.use_cases.roles import DEFAULT_ROLES, ensure_default_roles
from comment_optin.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for role seeding."""

    parser = argparse.ArgumentParser(
        description="Create the default roles used by the comment opt-in service.",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Only print the default roles and their capabilities.",
    )
    return parser.parse_args()


def main() -> None:
    """Create any missing default role."""

    args = parse_args()
    if args.list:
        for alias, (name, capabilities) in DEFAULT_ROLES.items():
            print(f"{alias} ({name}): {', '.join(capabilities)}")
        return

    initialize_database()

    session = SessionLocal()
    try:
        roles = ensure_default_roles(session)
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Could not save the roles to the database: {exc}") from exc
    else:
        for role in roles:
            print(f"  {role.id}: {role.alias} -> {', '.join(role.capabilities)}")
    finally:
        session.close()


if __name__ == "__main__":
    main()
