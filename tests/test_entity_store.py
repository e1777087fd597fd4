"""Tests for transactions, snapshots and change notification."""
import logging

import pytest
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm.exc import StaleDataError

from hostel_core.config.database import create_db_engine, create_session_factory
from hostel_core.config.settings import Settings
from hostel_core.core.exceptions import ConflictError, ErrorCode, TransactionError
from hostel_core.models.base import Base
from hostel_core.models.base.enums import BedStatus
from hostel_core.models.hostel import Property
from hostel_core.models.room import Bed
from hostel_core.services.common.entity_store import EntityStore
from hostel_core.services.common.unit_of_work import translate_store_error


class TestRunTransaction:
    def test_commit_advances_revision(self, store):
        before = store.current_revision()
        store.run_transaction(lambda uow: uow.properties.create(Property(name="A", total_floors=1)))
        assert store.current_revision() == before + 1

    def test_exception_rolls_back_everything(self, store):
        before = store.current_revision()

        def op(uow):
            uow.properties.create(Property(name="Doomed", total_floors=1))
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            store.run_transaction(op)

        assert store.read_graph().properties == ()
        assert store.current_revision() == before

    def test_unseeded_store_refuses_writes(self, tmp_path):
        """Without the revision row from init_db, writes fail instead of racing to create it."""
        settings = Settings(
            DATABASE_URL=f"sqlite:///{tmp_path / 'bare.db'}",
            ENVIRONMENT="testing",
        )
        engine = create_db_engine(settings)
        Base.metadata.create_all(bind=engine)
        try:
            bare = EntityStore(create_session_factory(engine), settings)

            with pytest.raises(TransactionError) as exc_info:
                bare.run_transaction(
                    lambda uow: uow.properties.create(Property(name="A", total_floors=1))
                )

            assert "init_db" in exc_info.value.message
            assert bare.read_graph().properties == ()
        finally:
            engine.dispose()

    def test_constraint_violation_becomes_conflict(self, store):
        with pytest.raises(ConflictError):
            store.run_transaction(
                lambda uow: uow.properties.create(Property(name="Bad", total_floors=0))
            )

    def test_stale_bed_write_is_conflict(self, store, room):
        """A write based on an outdated bed version is rejected."""
        bed_id = room.beds[0].id
        session = store.session_factory()
        try:
            stale = session.get(Bed, bed_id)
            session.expunge(stale)
        finally:
            session.close()

        store.run_transaction(lambda uow: setattr(uow.beds.get_by_id(bed_id), "label", "Z"))

        def write_stale(uow):
            merged = uow.session.merge(stale, load=False)
            merged.label = "Y"
            uow.flush()

        with pytest.raises(ConflictError):
            store.run_transaction(write_stale)
        assert store.read_graph().find_bed(bed_id).label == "Z"


class TestReadGraph:
    def test_snapshot_reflects_graph(self, store, hostel, room):
        snapshot = store.read_graph()

        assert [p.id for p in snapshot.properties] == [hostel.id]
        only_room = snapshot.find_room(room.id)
        assert only_room.capacity == 2
        assert [bed.label for bed in only_room.beds] == ["A", "B"]
        assert only_room.occupied_count == 0

    def test_snapshot_is_immutable(self, store, room):
        snapshot = store.read_graph()
        with pytest.raises(PydanticValidationError):
            snapshot.find_bed(room.beds[0].id).status = BedStatus.OCCUPIED

    def test_snapshot_does_not_change_after_writes(self, services, store, room):
        snapshot = store.read_graph()
        services.bed_allocation().resize_room_capacity(room.id, 4)

        assert len(list(snapshot.iter_beds())) == 2
        newer = store.read_graph()
        assert len(list(newer.iter_beds())) == 4
        assert newer.revision > snapshot.revision

    def test_revision_unchanged_without_writes(self, store, room):
        assert store.read_graph().revision == store.read_graph().revision


class TestSubscribe:
    def test_listener_receives_revision_after_commit(self, store):
        events = []
        store.subscribe(events.append)

        store.run_transaction(lambda uow: uow.properties.create(Property(name="A", total_floors=1)))

        assert len(events) == 1
        assert events[0].revision == store.current_revision()

    def test_event_reports_commit_duration(self, store, caplog):
        events = []
        store.subscribe(events.append)

        with caplog.at_level(logging.DEBUG, logger="hostel_core.services.common.entity_store"):
            store.run_transaction(
                lambda uow: uow.properties.create(Property(name="A", total_floors=1))
            )

        (event,) = events
        assert event.committed_at >= event.started_at
        assert event.duration_ms >= 0
        assert f"Transaction committed at revision {event.revision}" in caplog.text

    def test_no_event_on_rollback(self, store):
        events = []
        store.subscribe(events.append)

        with pytest.raises(ConflictError):
            store.run_transaction(
                lambda uow: uow.properties.create(Property(name="Bad", total_floors=0))
            )
        assert events == []

    def test_unsubscribe(self, store):
        events = []
        unsubscribe = store.subscribe(events.append)
        unsubscribe()

        store.run_transaction(lambda uow: uow.properties.create(Property(name="A", total_floors=1)))
        assert events == []

    def test_failing_listener_does_not_break_commit(self, store):
        def broken(event):
            raise RuntimeError("listener bug")

        store.subscribe(broken)
        created = store.run_transaction(
            lambda uow: uow.properties.create(Property(name="Kept", total_floors=1)).id
        )
        assert store.read_graph(created).properties[0].name == "Kept"


class TestTranslateStoreError:
    def test_integrity_error(self):
        exc = IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))
        assert isinstance(translate_store_error(exc), ConflictError)

    def test_stale_data(self):
        assert isinstance(translate_store_error(StaleDataError("stale")), ConflictError)

    def test_locked_database(self):
        exc = OperationalError("UPDATE", {}, Exception("database is locked"))
        assert translate_store_error(exc).error_code == ErrorCode.CONFLICT

    def test_other_failures(self):
        exc = OperationalError("SELECT", {}, Exception("no such table: beds"))
        translated = translate_store_error(exc)
        assert isinstance(translated, TransactionError)
        assert translated.error_code == ErrorCode.DATABASE_ERROR
