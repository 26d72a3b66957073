import argparse
import asyncio
import logging
import sys

from src.adapters.sqlite.migrator import SQLiteMigrator
from src.adapters.sqlite.repos import SQLiteUserRepo
from src.api.auth_utils import get_password_hash
from src.api.deps import Settings
from src.domain.entities import User
from src.rules.loader import load_rules

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")


def handle_migrate(settings: Settings, args: argparse.Namespace) -> None:
    applied = SQLiteMigrator(settings.db_path, str(settings.migrations_dir)).run_migrations()
    print(f"Applied {len(applied)} migration(s).")


def handle_create_user(settings: Settings, args: argparse.Namespace) -> None:
    rules = load_rules(settings.rules_path)
    if len(args.password) < rules.auth.password_min_length:
        logger.error(
            "Password must be at least %d characters.", rules.auth.password_min_length
        )
        sys.exit(1)

    SQLiteMigrator(settings.db_path, str(settings.migrations_dir)).run_migrations()
    repo = SQLiteUserRepo(settings.db_path)
    if asyncio.run(repo.get_by_email(args.email)):
        logger.error("User %s already exists.", args.email)
        sys.exit(1)

    user = User(
        email=args.email,
        name=args.name or args.email.split("@")[0],
        password_hash=get_password_hash(args.password),
    )
    asyncio.run(repo.save(user))
    print(f"Created user {user.email} ({user.id}).")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Invoice dashboard CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # migrate
    subparsers.add_parser("migrate", help="Apply pending database migrations")

    # create-user
    user_parser = subparsers.add_parser("create-user", help="Create a sign-in user")
    user_parser.add_argument("--email", required=True)
    user_parser.add_argument("--password", required=True)
    user_parser.add_argument("--name", help="Display name (defaults to the email local part)")

    args = parser.parse_args(argv)
    settings = Settings()

    if args.command == "migrate":
        handle_migrate(settings, args)
    elif args.command == "create-user":
        handle_create_user(settings, args)


if __name__ == "__main__":
    main()
