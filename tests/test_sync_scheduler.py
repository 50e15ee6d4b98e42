"""Tests for the sync scheduler."""
import threading

from frontend.exceptions import HttpError, UnexpectedContentType
from frontend.models import MoleculeRecord
from frontend.normalizer import normalize_batch
from frontend.store import MoleculeStore
from frontend.sync_scheduler import SyncScheduler


class StubSource:
    def __init__(self, *results):
        self.results = list(results)
        self.calls = 0

    def sync(self):
        self.calls += 1
        result = self.results.pop(0) if len(self.results) > 1 else self.results[0]
        if isinstance(result, Exception):
            raise result
        return result


class BlockingSource:
    """Holds every sync open until ``release`` is set."""

    def __init__(self, records):
        self.records = records
        self.started = threading.Event()
        self.release = threading.Event()
        self.calls = 0

    def sync(self):
        self.calls += 1
        self.started.set()
        self.release.wait(5)
        return self.records


def test_tick_replaces_store(raw_molecules):
    store = MoleculeStore()
    scheduler = SyncScheduler(StubSource(raw_molecules), store, interval_seconds=60)
    assert scheduler.tick() is True
    assert scheduler.wait(5)
    assert [r.id for r in store.current()] == ['MOL-001', 'MOL-002']
    assert scheduler.last_error is None
    assert scheduler.last_success_at is not None


def test_failed_sync_keeps_previous_data(raw_molecules):
    store = MoleculeStore([MoleculeRecord(id='KEEP')])
    scheduler = SyncScheduler(StubSource(UnexpectedContentType('text/html', '<html>')), store, interval_seconds=60)
    scheduler.tick()
    scheduler.wait(5)
    assert [r.id for r in store.current()] == ['KEEP']
    assert isinstance(scheduler.last_error, UnexpectedContentType)
    assert scheduler.last_attempt_at is not None
    assert scheduler.last_success_at is None


def test_empty_sync_keeps_previous_data():
    store = MoleculeStore([MoleculeRecord(id='KEEP')])
    scheduler = SyncScheduler(StubSource([]), store, interval_seconds=60)
    scheduler.tick()
    scheduler.wait(5)
    assert [r.id for r in store.current()] == ['KEEP']
    assert store.version == 1


def test_unexpected_errors_are_contained():
    store = MoleculeStore([MoleculeRecord(id='KEEP')])
    scheduler = SyncScheduler(StubSource(RuntimeError('boom')), store, interval_seconds=60)
    scheduler.tick()
    scheduler.wait(5)
    assert not scheduler.in_flight
    assert isinstance(scheduler.last_error, RuntimeError)
    assert [r.id for r in store.current()] == ['KEEP']


def test_error_is_cleared_after_next_success(raw_molecules):
    store = MoleculeStore()
    scheduler = SyncScheduler(StubSource(HttpError(503), raw_molecules), store, interval_seconds=60)
    scheduler.tick()
    scheduler.wait(5)
    assert isinstance(scheduler.last_error, HttpError)
    scheduler.tick()
    scheduler.wait(5)
    assert scheduler.last_error is None
    assert len(store) == 2


def test_ticks_do_not_overlap(raw_molecules):
    source = BlockingSource(raw_molecules)
    scheduler = SyncScheduler(source, MoleculeStore(), interval_seconds=60)
    assert scheduler.tick() is True
    assert source.started.wait(5)
    assert scheduler.in_flight
    assert scheduler.tick() is False
    assert scheduler.refresh() is False
    source.release.set()
    assert scheduler.wait(5)
    assert source.calls == 1
    assert scheduler.tick() is True
    scheduler.wait(5)
    assert source.calls == 2


def test_result_is_discarded_after_dispose(raw_molecules):
    source = BlockingSource(raw_molecules)
    store = MoleculeStore([MoleculeRecord(id='KEEP')])
    scheduler = SyncScheduler(source, store, interval_seconds=60)
    scheduler.tick()
    assert source.started.wait(5)
    scheduler.dispose()
    source.release.set()
    assert scheduler.wait(5)
    assert [r.id for r in store.current()] == ['KEEP']
    assert scheduler.tick() is False


def test_dispose_during_normalize_drops_the_batch(raw_molecules):
    store = MoleculeStore([MoleculeRecord(id='KEEP')])
    scheduler = None

    def normalize_then_dispose(rows):
        scheduler.dispose()
        return normalize_batch(rows)

    scheduler = SyncScheduler(StubSource(raw_molecules), store, interval_seconds=60,
                              normalize=normalize_then_dispose)
    scheduler.tick()
    assert scheduler.wait(5)
    assert [r.id for r in store.current()] == ['KEEP']
    assert scheduler.last_success_at is None


class LockCheckingStore(MoleculeStore):
    """Records whether the scheduler lock was held while the batch was written."""

    def __init__(self):
        super().__init__()
        self.scheduler = None
        self.lock_held = []

    def replace_all(self, records):
        self.lock_held.append(self.scheduler._lock.locked())
        return super().replace_all(records)


def test_store_write_excludes_dispose(raw_molecules):
    store = LockCheckingStore()
    scheduler = SyncScheduler(StubSource(raw_molecules), store, interval_seconds=60)
    store.scheduler = scheduler
    scheduler.tick()
    assert scheduler.wait(5)
    assert store.lock_held == [True]
    assert len(store) == 2


def test_start_syncs_immediately_and_returns_disposer(raw_molecules):
    store = MoleculeStore()
    scheduler = SyncScheduler(StubSource(raw_molecules), store, interval_seconds=60)
    dispose = scheduler.start()
    scheduler.wait(5)
    assert len(store) == 2
    dispose()
    assert scheduler.disposed
    dispose()


def test_periodic_ticks_until_disposed(raw_molecules):
    source = StubSource(raw_molecules)
    scheduler = SyncScheduler(source, MoleculeStore(), interval_seconds=0.05)
    scheduler.start()
    done = threading.Event()
    for _ in range(100):
        if source.calls >= 3:
            done.set()
            break
        done.wait(0.05)
    scheduler.dispose()
    scheduler.wait(5)
    assert source.calls >= 3
    calls_after_dispose = source.calls
    threading.Event().wait(0.2)
    assert source.calls == calls_after_dispose
