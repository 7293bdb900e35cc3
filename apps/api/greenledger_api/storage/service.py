"""JSON file storage for whole-collection reads and writes.

Each collection is a single JSON array on disk. There are no indexes and no
partial updates: callers read the full list, change it in memory and write the
full list back. Writers on the same collection are serialized by a per-collection
lock held for the whole read/modify/write cycle.
"""

import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from greenledger_api.errors import PersistenceError

logger = logging.getLogger(__name__)

COMPANIES = "companies"
ESG_ACTIVITIES = "esg_activities"
REPORTS = "reports"
USERS = "users"

COLLECTIONS = (COMPANIES, ESG_ACTIVITIES, REPORTS, USERS)


class JSONCollectionStore:
    """Read/write-all access to the four record collections."""

    def __init__(self, data_dir: Path):
        """Initialize store rooted at data_dir."""
        self.data_dir = Path(data_dir)
        self._locks = {name: threading.RLock() for name in COLLECTIONS}

    def _path(self, collection: str) -> Path:
        if collection not in COLLECTIONS:
            raise ValueError(f"Unknown collection: {collection}")
        return self.data_dir / f"{collection}.json"

    def initialize(self) -> None:
        """Create the data directory and any missing collection file."""
        logger.info("Initializing data directory and files...")
        self.data_dir.mkdir(parents=True, exist_ok=True)
        for collection in COLLECTIONS:
            path = self._path(collection)
            if path.exists():
                logger.info(f"Data file exists: {path.name}")
                continue
            self.write_all(collection, [])
            logger.info(f"Created new data file: {path.name}")

    def read_all(self, collection: str) -> list[dict]:
        """
        Load every record of a collection in stored order.

        A missing file reads as an empty collection. An unreadable or corrupt
        file is logged and also treated as empty.
        """
        path = self._path(collection)
        if not path.exists():
            return []

        try:
            with path.open("r", encoding="utf-8") as f:
                records = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to read JSON file: {path.name}: {e}")
            return []

        if not isinstance(records, list):
            logger.error(f"Failed to read JSON file: {path.name}: expected a list")
            return []

        logger.debug(f"Read {len(records)} records from {path.name}")
        return records

    def write_all(self, collection: str, records: list[dict]) -> None:
        """
        Replace a collection with records.

        The list is written to a temporary file and renamed into place.

        Raises:
            PersistenceError: If the file cannot be written
        """
        path = self._path(collection)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{collection}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(records, f, indent=2)
                os.replace(tmp_name, path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Failed to write JSON file: {path.name}: {e}")
            raise PersistenceError(collection, str(e)) from e

        logger.debug(f"Wrote {len(records)} records to {path.name}")

    @contextmanager
    def transaction(self, collection: str) -> Iterator[list[dict]]:
        """
        Hold the collection's writer lock across a read/modify/write cycle.

        The yielded list is written back only if the block exits normally.
        """
        self._path(collection)
        with self._locks[collection]:
            records = self.read_all(collection)
            yield records
            self.write_all(collection, records)

    def is_writable(self) -> bool:
        """Check the data directory exists and accepts writes."""
        return self.data_dir.is_dir() and os.access(self.data_dir, os.W_OK)
