import logging
import threading
from datetime import datetime, timezone
from typing import Iterable, Optional, Tuple

from .models import MoleculeRecord

logger = logging.getLogger(__name__)


class MoleculeStore:
    """
    In-memory owner of the canonical molecule collection.

    The collection is an immutable tuple that is swapped as a whole, so a
    reader holding the result of ``current()`` never sees a half-updated
    batch. Only the sync scheduler writes; views and search only read.
    """

    def __init__(self, initial: Iterable[MoleculeRecord] = ()):
        self._lock = threading.Lock()
        self._records: Tuple[MoleculeRecord, ...] = ()
        self._version = 0
        self._updated_at: Optional[datetime] = None
        initial = tuple(initial)
        if initial:
            self.replace_all(initial)

    def current(self) -> Tuple[MoleculeRecord, ...]:
        return self._records

    @property
    def version(self) -> int:
        return self._version

    @property
    def updated_at(self) -> Optional[datetime]:
        return self._updated_at

    def __len__(self) -> int:
        return len(self._records)

    def replace_all(self, records: Iterable[MoleculeRecord]) -> bool:
        """
        Replace the whole collection with ``records``.

        An empty batch leaves the current collection untouched and returns False.
        """
        batch = tuple(records)
        if not batch:
            logger.info("Ignoring empty molecule batch, keeping %d existing records", len(self._records))
            return False

        ids = [record.id for record in batch]
        if len(set(ids)) != len(ids):
            raise ValueError("Molecule batch contains duplicate ids")

        with self._lock:
            self._records = batch
            self._version += 1
            self._updated_at = datetime.now(timezone.utc)
        logger.info("Molecule store replaced with %d records (version %d)", len(batch), self._version)
        return True
