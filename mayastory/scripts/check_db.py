"""
Check the database connection from the command line:

  python -m mayastory.scripts.check_db [USERNAME]

Prints the database time, whether the accounts table exists, and whether
USERNAME (default "Sora") has an account. Exits 1 if the database cannot be reached.
"""

import argparse
import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

from mayastory.core.database import (
    SessionLocal,
    accounts_table_exists,
    dispose_engine,
    fetch_store_time,
)
from mayastory.core.exceptions import AccountError
from mayastory.services.account_store import SqlAccountStore

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check MayaStory database connectivity.")
    parser.add_argument("username", nargs="?", default="Sora", help="Account name to look up")
    args = parser.parse_args(argv)

    logger.info("Testing database connection...")
    try:
        db = SessionLocal()
    except AccountError as e:
        logger.error("Database connection failed: %s", e.message)
        return 1
    except SQLAlchemyError as e:
        logger.error("Database connection failed: %s", e)
        return 1
    try:
        current_time = fetch_store_time(db)
        logger.info("Database connected; current time: %s", current_time)

        if not accounts_table_exists(db):
            logger.warning("Accounts table does not exist. Run `alembic upgrade head`.")
            return 0
        logger.info("Accounts table exists")

        account = SqlAccountStore(db).find_by_name(args.username)
        if account is None:
            logger.info("Username %r does not exist in the accounts table", args.username)
        else:
            logger.info("Username %r exists; account id %s", args.username, account.id)
        return 0
    except (SQLAlchemyError, AccountError) as e:
        logger.error("Database connection failed: %s", e.__cause__ or e)
        return 1
    finally:
        db.close()
        dispose_engine()


if __name__ == "__main__":
    sys.exit(main())
