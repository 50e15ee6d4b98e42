import logging
import threading
from datetime import datetime, timezone
from typing import Callable, Optional

from .constants import SYNC_INTERVAL_SECONDS
from .exceptions import SyncError
from .normalizer import normalize_batch
from .store import MoleculeStore

logger = logging.getLogger(__name__)


class SyncScheduler:
    """
    Keeps a :class:`MoleculeStore` in step with the remote API.

    One sync runs immediately on ``start()`` and then once per interval. At most
    one sync is in flight: a tick that arrives while the previous sync is still
    running is dropped, not queued. The scheduler only ever replaces the
    store's collection; whatever the user typed into the search box lives in
    the UI session and is never touched here.
    """

    def __init__(self, source, store: MoleculeStore, interval_seconds: float = SYNC_INTERVAL_SECONDS,
                 normalize: Callable = normalize_batch):
        self.source = source
        self.store = store
        self.interval_seconds = interval_seconds
        self.normalize = normalize

        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._ticker: Optional[threading.Thread] = None
        self._worker: Optional[threading.Thread] = None
        self._in_flight = False
        self._disposed = False

        self.last_error: Optional[Exception] = None
        self.last_attempt_at: Optional[datetime] = None
        self.last_success_at: Optional[datetime] = None

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    @property
    def disposed(self) -> bool:
        return self._disposed

    def start(self) -> Callable[[], None]:
        """Run the first sync now, start the periodic ticker, return the disposer."""
        with self._lock:
            if self._disposed:
                raise RuntimeError("SyncScheduler has been disposed and cannot be restarted")
            if self._ticker is not None:
                return self.dispose
            self._ticker = threading.Thread(target=self._run_ticker, name='molecule-sync-ticker', daemon=True)

        logger.info("Starting molecule sync every %s seconds", self.interval_seconds)
        self.tick()
        self._ticker.start()
        return self.dispose

    def dispose(self) -> None:
        """Stop the ticker. A sync already in flight finishes but its result is dropped."""
        with self._lock:
            if self._disposed:
                return
            self._disposed = True
            self._stop_event.set()
            ticker = self._ticker

        if ticker is not None and ticker.is_alive() and ticker is not threading.current_thread():
            ticker.join(timeout=1.0)
        logger.info("Molecule sync scheduler disposed")

    def tick(self) -> bool:
        """Start a background sync unless one is already running. Returns True if started."""
        with self._lock:
            if self._disposed:
                return False
            if self._in_flight:
                logger.debug("Previous molecule sync still in flight, skipping this tick")
                return False
            self._in_flight = True
            worker = threading.Thread(target=self._run_sync, name='molecule-sync', daemon=True)
            self._worker = worker
        worker.start()
        return True

    def refresh(self) -> bool:
        """Manual refresh from the UI, subject to the same in-flight guard as a tick."""
        logger.info("Manual molecule refresh requested")
        return self.tick()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Join the current sync worker. Returns True when nothing is in flight anymore."""
        worker = self._worker
        if worker is not None:
            worker.join(timeout)
        return not self._in_flight

    def _run_ticker(self):
        while not self._stop_event.wait(self.interval_seconds):
            self.tick()

    def _run_sync(self):
        try:
            self._sync_once()
        finally:
            with self._lock:
                self._in_flight = False

    def _sync_once(self) -> bool:
        self.last_attempt_at = datetime.now(timezone.utc)
        try:
            raw_records = self.source.sync()
            records = self.normalize(raw_records)
            # dispose() 与写入互斥：释放之后到达的结果一律丢弃
            with self._lock:
                if self._disposed:
                    logger.info("Discarding molecule sync result received after dispose")
                    return False
                replaced = self.store.replace_all(records)
        except SyncError as e:
            logger.warning("Molecule sync failed, keeping %d existing records: %s", len(self.store), e)
            self.last_error = e
            return False
        except Exception as e:
            logger.exception(f"Unexpected error during molecule sync: {e}")
            self.last_error = e
            return False

        self.last_error = None
        self.last_success_at = datetime.now(timezone.utc)
        return replaced
