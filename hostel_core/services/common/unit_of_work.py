# hostel_core/services/common/unit_of_work.py
"""
Transaction boundary for the entity store.

A UnitOfWork owns one Session for the duration of a ``with`` block and
hands out repositories bound to it. Store errors are mapped onto the
core exception types here.
"""
from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Any, Callable, Optional, Type, TypeVar

from sqlalchemy.exc import DBAPIError, IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from hostel_core.core.exceptions import BaseAppException, ConflictError, TransactionError
from hostel_core.core.logging import get_logger
from hostel_core.repositories import (
    BedRepository,
    BookingRepository,
    ComplaintRepository,
    PaymentRepository,
    PropertyRepository,
    RoomRepository,
    StoreRevisionRepository,
    StudentRepository,
)

logger = get_logger(__name__)

TRepository = TypeVar("TRepository")

# SQLSTATE codes for serialization failure and deadlock
_CONTENTION_SQLSTATES = {"40001", "40P01"}
_CONTENTION_MESSAGES = ("database is locked", "database table is locked", "could not serialize")


def is_contention_error(exc: BaseException) -> bool:
    """True when the store rejected the transaction because of a concurrent writer."""
    if isinstance(exc, StaleDataError):
        return True
    if isinstance(exc, DBAPIError):
        sqlstate = getattr(exc.orig, "pgcode", None) or getattr(exc.orig, "sqlstate", None)
        if sqlstate in _CONTENTION_SQLSTATES:
            return True
        text = str(exc.orig).lower()
        return any(marker in text for marker in _CONTENTION_MESSAGES)
    return False


def translate_store_error(exc: BaseException) -> BaseAppException:
    """
    Map a SQLAlchemy failure onto the core error taxonomy.

    Constraint violations and concurrency losses become ConflictError,
    anything else a TransactionError.
    """
    if isinstance(exc, BaseAppException):
        return exc
    if isinstance(exc, IntegrityError):
        return ConflictError(
            "Change violates a store constraint",
            details={"constraint": str(exc.orig)},
        )
    if is_contention_error(exc):
        return ConflictError(
            "Concurrent modification detected, retry the operation",
            details={"error_type": type(exc).__name__},
        )
    return TransactionError("Store operation failed", exc if isinstance(exc, Exception) else None)


class UnitOfWork(AbstractContextManager["UnitOfWork"]):
    """
    One store transaction plus the repositories bound to its session.

    Usage:
        >>> with UnitOfWork(session_factory) as uow:
        ...     bed = uow.beds.get_by_id(bed_id)
        ...     uow.beds.claim(bed, student_id)
        ... # committed here unless the block raised

    Leaving the block with an exception rolls back. Store failures
    surface as ConflictError or TransactionError; application exceptions
    propagate unchanged.
    """

    def __init__(
        self,
        session_factory: Callable[[], Session],
        *,
        auto_commit: bool = True,
    ) -> None:
        """
        Args:
            session_factory: Returns a fresh Session per transaction
            auto_commit: Commit when the block exits normally
        """
        self._session_factory = session_factory
        self._auto_commit = auto_commit

        self.session: Optional[Session] = None
        self._committed = False
        self._rolled_back = False
        self._repos: dict[type, Any] = {}

    def __enter__(self) -> "UnitOfWork":
        if self.session is not None:
            raise RuntimeError("UnitOfWork is not reentrant")

        self.session = self._session_factory()
        self._committed = self._rolled_back = False
        self._repos.clear()
        logger.debug("Transaction opened")
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> bool:
        if self.session is None:
            return False

        try:
            if exc_type is not None:
                self._discard(f"{exc_type.__name__} raised in transaction")
                if isinstance(exc_val, SQLAlchemyError):
                    raise translate_store_error(exc_val) from exc_val
            elif self._auto_commit and not (self._committed or self._rolled_back):
                self.commit()
        finally:
            self.session.close()
            self.session = None
            self._repos.clear()
            logger.debug("Transaction closed")

        return False

    def _require_session(self, action: str) -> Session:
        if self.session is None:
            raise RuntimeError(f"UnitOfWork.{action}() needs an open transaction")
        return self.session

    def _discard(self, reason: str) -> None:
        if not self._rolled_back:
            self.session.rollback()
            self._rolled_back = True
            logger.warning(f"Transaction rolled back: {reason}")

    # ------------------------------------------------------------------ #
    # Transaction control
    # ------------------------------------------------------------------ #

    def commit(self) -> None:
        """
        Commit now instead of on block exit.

        Raises:
            ConflictError: A constraint or a concurrent writer rejected the commit
            TransactionError: The store failed for another reason
        """
        session = self._require_session("commit")
        if self._committed:
            return
        if self._rolled_back:
            raise RuntimeError("Transaction was already rolled back")

        try:
            session.commit()
        except SQLAlchemyError as exc:
            logger.error(f"Commit rejected by store: {exc}")
            self._discard("commit failed")
            raise translate_store_error(exc) from exc
        self._committed = True

    def rollback(self) -> None:
        self._require_session("rollback")
        if not self._rolled_back:
            self.session.rollback()
            self._rolled_back = True
            self._committed = False

    def flush(self) -> None:
        """
        Send pending writes so constraint and version checks run now.

        Raises:
            ConflictError: On constraint or version conflicts
            TransactionError: On other store failures
        """
        session = self._require_session("flush")
        try:
            session.flush()
        except SQLAlchemyError as exc:
            raise translate_store_error(exc) from exc

    # ------------------------------------------------------------------ #
    # Repositories
    # ------------------------------------------------------------------ #

    def get_repo(self, repo_cls: Type[TRepository]) -> TRepository:
        """Repository of ``repo_cls`` bound to this transaction's session, created once."""
        session = self._require_session("get_repo")
        repo = self._repos.get(repo_cls)
        if repo is None:
            repo = self._repos[repo_cls] = repo_cls(session)
        return repo

    @property
    def properties(self) -> PropertyRepository:
        return self.get_repo(PropertyRepository)

    @property
    def rooms(self) -> RoomRepository:
        return self.get_repo(RoomRepository)

    @property
    def beds(self) -> BedRepository:
        return self.get_repo(BedRepository)

    @property
    def students(self) -> StudentRepository:
        return self.get_repo(StudentRepository)

    @property
    def bookings(self) -> BookingRepository:
        return self.get_repo(BookingRepository)

    @property
    def payments(self) -> PaymentRepository:
        return self.get_repo(PaymentRepository)

    @property
    def complaints(self) -> ComplaintRepository:
        return self.get_repo(ComplaintRepository)

    @property
    def revisions(self) -> StoreRevisionRepository:
        return self.get_repo(StoreRevisionRepository)
