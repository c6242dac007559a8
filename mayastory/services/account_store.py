"""Account store: the only collaborator the registration and login pipelines talk to."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Protocol

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from mayastory.core.exceptions import ConflictError, StoreUnavailableError
from mayastory.models import Account

logger = logging.getLogger(__name__)

# Fixed values written for columns the game server owns.
DEFAULT_BIRTHDAY = date(1990, 1, 1)
DEFAULT_GENDER = 0
DEFAULT_TOS = 1


@dataclass(frozen=True)
class AccountRecord:
    """The columns login needs: id, stored hash and ban flag."""

    id: int
    password_hash: str
    banned: int

    @property
    def is_banned(self) -> bool:
        # Only the exact value 1 counts as banned.
        return self.banned == 1


class AccountStore(Protocol):
    """Lookup by unique name and insert-if-absent."""

    def find_by_name(self, name: str) -> AccountRecord | None: ...

    def create(self, name: str, password_hash: str, email: str | None) -> int: ...


class SqlAccountStore:
    """
    AccountStore backed by the accounts table through one SQLAlchemy session.

    Pass an open session, or a session_factory to open one on first query.
    A store that opened its own session closes it in close().
    """

    def __init__(
        self,
        session: Session | None = None,
        *,
        session_factory: Callable[[], Session] | None = None,
    ) -> None:
        if session is None and session_factory is None:
            raise ValueError("SqlAccountStore needs a session or a session_factory")
        self._session = session
        self._session_factory = session_factory
        self._owns_session = session is None

    @property
    def session(self) -> Session:
        if self._session is None:
            try:
                self._session = self._session_factory()
            except SQLAlchemyError as e:
                raise StoreUnavailableError() from e
        return self._session

    def close(self) -> None:
        if self._owns_session and self._session is not None:
            self._session.close()
            self._session = None

    def find_by_name(self, name: str) -> AccountRecord | None:
        try:
            account = self.session.query(Account).filter(Account.name == name).first()
        except SQLAlchemyError as e:
            raise StoreUnavailableError() from e
        if account is None:
            return None
        return AccountRecord(
            id=account.id,
            password_hash=account.password_hash,
            banned=account.banned,
        )

    def create(self, name: str, password_hash: str, email: str | None) -> int:
        """
        Insert a new account and return its id.

        The unique index on name is the authoritative duplicate guard; a
        violation (e.g. two concurrent registrations) raises ConflictError.
        """
        account = Account(
            name=name,
            password_hash=password_hash,
            email=email or None,
            birthday=DEFAULT_BIRTHDAY,
            gender=DEFAULT_GENDER,
            creation=datetime.now(timezone.utc),
            banned=0,
            loggedin=0,
            tos=DEFAULT_TOS,
        )
        session = self.session
        try:
            session.add(account)
            session.flush()
            account_id = account.id
            session.commit()
        except IntegrityError as e:
            session.rollback()
            logger.info("Account insert rejected by unique constraint", extra={"account_name": name})
            raise ConflictError() from e
        except SQLAlchemyError as e:
            session.rollback()
            raise StoreUnavailableError() from e
        return account_id
