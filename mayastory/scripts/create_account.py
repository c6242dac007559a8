"""
Create an account from the command line. Run from project root:
  python -m mayastory.scripts.create_account USERNAME PASSWORD [--email EMAIL]
Example:
  python -m mayastory.scripts.create_account Sora secret1 --email sora@example.com
"""
import argparse
import sys

from mayastory.core.config import get_settings
from mayastory.core.database import SessionLocal
from mayastory.core.exceptions import AccountError
from mayastory.services.account_store import SqlAccountStore
from mayastory.services.accounts import register_account


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a MayaStory account.")
    parser.add_argument("username", help="Username (3-13 chars)")
    parser.add_argument("password", help="Password (6-50 chars)")
    parser.add_argument("--email", default=None, help="Optional contact email")
    args = parser.parse_args(argv)

    settings = get_settings()
    try:
        db = SessionLocal()
    except AccountError as e:
        print(e.message, file=sys.stderr)
        return 1
    try:
        account_id = register_account(
            SqlAccountStore(db),
            args.username,
            args.password,
            args.email,
            rounds=settings.BCRYPT_ROUNDS,
        )
    except AccountError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created account '{args.username}' with id {account_id}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
