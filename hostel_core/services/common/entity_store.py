# hostel_core/services/common/entity_store.py
"""
Entity store: the single gateway to persisted occupancy state.

Writes run through :meth:`EntityStore.run_transaction`, which opens one
UnitOfWork, advances the store revision, runs the operation and commits.
Reads of the whole Property -> Room -> Bed graph go through
:meth:`EntityStore.read_graph`, which returns an immutable snapshot
taken inside one read transaction.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, List, Optional, TypeVar
from uuid import uuid4

from sqlalchemy.orm import Session

from hostel_core.config.database import create_db_engine, create_session_factory
from hostel_core.config.settings import Settings, get_settings
from hostel_core.core.exceptions import NotFoundError
from hostel_core.core.logging import get_logger
from hostel_core.models.base.base_model import utcnow
from hostel_core.schemas.hostel.snapshot import GraphSnapshot, PropertySnapshot
from hostel_core.services.common.unit_of_work import UnitOfWork

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class CommitEvent:
    """Delivered to subscribers after a write transaction commits."""

    revision: int
    transaction_id: str
    started_at: datetime
    committed_at: datetime = field(default_factory=utcnow)

    @property
    def duration_ms(self) -> float:
        return (self.committed_at - self.started_at).total_seconds() * 1000


CommitListener = Callable[[CommitEvent], None]


def build_snapshot(uow: UnitOfWork, property_id: Optional[str] = None) -> GraphSnapshot:
    """
    Load the graph inside ``uow``'s transaction and freeze it.

    Raises:
        NotFoundError: If ``property_id`` does not exist
    """
    revision = uow.revisions.current()
    properties = uow.properties.load_graph(property_id)
    if property_id is not None and not properties:
        raise NotFoundError("Property", property_id)
    return GraphSnapshot(
        revision=revision,
        taken_at=utcnow(),
        properties=tuple(PropertySnapshot.model_validate(p) for p in properties),
    )


class EntityStore:
    """
    Transactional access to the entity graph.

    Usage:
        >>> store = EntityStore.from_settings()
        >>> store.run_transaction(lambda uow: uow.rooms.get_by_id(room_id).capacity)
        >>> snapshot = store.read_graph()
    """

    def __init__(
        self,
        session_factory: Callable[[], Session],
        settings: Optional[Settings] = None,
    ) -> None:
        self._session_factory = session_factory
        self._settings = settings or get_settings()
        self._listeners: List[CommitListener] = []
        self._listeners_lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "EntityStore":
        """Build engine, session factory and store from configuration."""
        settings = settings or get_settings()
        engine = create_db_engine(settings)
        return cls(create_session_factory(engine), settings)

    @property
    def session_factory(self) -> Callable[[], Session]:
        return self._session_factory

    # ------------------------------------------------------------------ #
    # Transactions
    # ------------------------------------------------------------------ #

    def run_transaction(self, fn: Callable[[UnitOfWork], T]) -> T:
        """
        Run ``fn`` atomically and commit.

        The revision row is advanced before ``fn`` runs, so concurrent
        writers are ordered by that row lock. Any exception rolls the
        whole transaction back and propagates; store failures arrive as
        ConflictError or TransactionError. Nothing is retried.

        Args:
            fn: Operation receiving the open UnitOfWork

        Returns:
            Whatever ``fn`` returns
        """
        transaction_id = str(uuid4())
        started_at = utcnow()

        with UnitOfWork(self._session_factory) as uow:
            revision = uow.revisions.advance()
            result = fn(uow)
            uow.commit()

        event = CommitEvent(revision=revision, transaction_id=transaction_id, started_at=started_at)
        logger.debug(
            f"Transaction committed at revision {revision} in {event.duration_ms:.1f} ms",
            extra={
                "transaction_id": transaction_id,
                "revision": revision,
                "duration_ms": event.duration_ms,
            },
        )
        self._notify(event)
        return result

    def run_read(self, fn: Callable[[UnitOfWork], T]) -> T:
        """
        Run ``fn`` inside one read transaction and discard any changes.

        On server databases the transaction uses the configured snapshot
        isolation level so all reads observe the same committed state.
        """
        with UnitOfWork(self._session_factory, auto_commit=False) as uow:
            if not self._settings.is_sqlite() and self._settings.SNAPSHOT_ISOLATION_LEVEL:
                uow.session.connection(
                    execution_options={"isolation_level": self._settings.SNAPSHOT_ISOLATION_LEVEL}
                )
            try:
                return fn(uow)
            finally:
                uow.rollback()

    def read_graph(self, property_id: Optional[str] = None) -> GraphSnapshot:
        """
        Consistent snapshot of properties, rooms and beds.

        Args:
            property_id: Restrict the snapshot to one property

        Raises:
            NotFoundError: If ``property_id`` does not exist
        """
        return self.run_read(lambda uow: build_snapshot(uow, property_id))

    def current_revision(self) -> int:
        return self.run_read(lambda uow: uow.revisions.current())

    # ------------------------------------------------------------------ #
    # Change notification
    # ------------------------------------------------------------------ #

    def subscribe(self, listener: CommitListener) -> Callable[[], None]:
        """
        Register ``listener`` to run after every committed write.

        Returns:
            Callable that removes the listener again
        """
        with self._listeners_lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._listeners_lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, event: CommitEvent) -> None:
        with self._listeners_lock:
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(event)
            except Exception as e:
                # The write is already committed at this point
                logger.error(f"After-commit listener failed: {e}", exc_info=True)
