"""Hash-chained activity ledger."""

from greenledger_api.ledger.service import (
    GENESIS_HASH,
    LedgerService,
    chain_record,
    hash_payload,
    hash_record,
    verify_chain,
)

__all__ = [
    "LedgerService",
    "GENESIS_HASH",
    "chain_record",
    "hash_payload",
    "hash_record",
    "verify_chain",
]
