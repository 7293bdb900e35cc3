"""ESG activity ledger with hash chaining."""

import hashlib
import json
import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Optional, Sequence

from greenledger_api.schemas import ActivityCreate, LedgerVerification
from greenledger_api.storage import ESG_ACTIVITIES, JSONCollectionStore
from greenledger_api.utils.metrics import activities_appended, ledger_verification_failures

logger = logging.getLogger(__name__)

GENESIS_HASH = "0"


def hash_payload(data: Any) -> str:
    """Compute SHA-256 over the deterministic JSON form of data."""
    data_str = json.dumps(data, sort_keys=True)
    return hashlib.sha256(data_str.encode()).hexdigest()


def hash_record(record: dict) -> str:
    """Hash an activity record over every field except its own hash."""
    return hash_payload({key: value for key, value in record.items() if key != "hash"})


def chain_record(fields: dict, tail: Optional[dict]) -> dict:
    """
    Link a new record to the chain tail and seal it.

    prev_hash is assigned before hashing, so the record hash also commits to
    its predecessor.
    """
    record = dict(fields)
    record["prev_hash"] = tail["hash"] if tail else GENESIS_HASH
    record["hash"] = hash_record(record)
    return record


def verify_chain(records: Sequence[dict]) -> tuple[bool, Optional[int]]:
    """
    Walk records in append order.

    Returns:
        (True, None) if every hash and link holds, otherwise (False, index of
        the first record that fails)
    """
    previous_hash = GENESIS_HASH
    for index, record in enumerate(records):
        if record.get("prev_hash") != previous_hash:
            return False, index
        if hash_record(record) != record.get("hash"):
            return False, index
        previous_hash = record["hash"]
    return True, None


class LedgerService:
    """Append-only ESG activity ledger shared by all companies."""

    def __init__(self, store: JSONCollectionStore):
        """Initialize ledger service."""
        self.store = store

    def append(self, activity: ActivityCreate) -> dict:
        """Append an activity to the global chain and persist the ledger."""
        fields = activity.model_dump(mode="json", exclude_none=True)
        fields.pop("hash", None)
        fields["id"] = str(uuid.uuid4())
        fields["created_at"] = datetime.now(timezone.utc).isoformat()

        with self.store.transaction(ESG_ACTIVITIES) as records:
            tail = records[-1] if records else None
            record = chain_record(fields, tail)
            records.append(record)

        activities_appended.labels(category=record["category"]).inc()
        logger.info(
            f"Appended ESG activity {record['id']} "
            f"(company={record['company_id']}, category={record['category']}, "
            f"hash={record['hash'][:16]}...)"
        )
        return record

    def list_all(self) -> list[dict]:
        """Get every activity in append order."""
        return self.store.read_all(ESG_ACTIVITIES)

    def for_company(self, company_id: str, records: Optional[Sequence[dict]] = None) -> list[dict]:
        """Get a company's activities in append order."""
        if records is None:
            records = self.list_all()
        return [record for record in records if record.get("company_id") == company_id]

    def query(self, company_id: Optional[str] = None, category: Optional[str] = None) -> list[dict]:
        """Filter activities, newest created first."""
        records = self.list_all()
        if company_id:
            records = [r for r in records if r.get("company_id") == company_id]
        if category:
            records = [r for r in records if r.get("category") == category]

        # Reverse first so that equal timestamps keep newest-appended first
        newest_first = list(reversed(records))
        newest_first.sort(key=lambda r: r.get("created_at") or "", reverse=True)
        return newest_first

    def verify(self) -> LedgerVerification:
        """Verify the persisted chain."""
        records = self.list_all()
        is_valid, index = verify_chain(records)
        if not is_valid:
            ledger_verification_failures.inc()
            logger.warning(f"Ledger chain broken at index {index} of {len(records)}")
        return LedgerVerification(valid=is_valid, length=len(records), first_invalid_index=index)
