"""
Booking submission: validate -> check stock -> decrement -> persist.

The inventory document is the source of truth for stock; the ledger row and
the audit log line are written after the decrement is durable and are never
rolled back.
"""

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from fastapi.concurrency import run_in_threadpool

from core.errors import (
    CategoryNotFoundError,
    ItemNotFoundError,
    MissingFieldsError,
    OutOfStockError,
)
from db.audit_log import AuditLog
from db.inventory_store import InventoryStore
from db.ledger import RegistrationLedger
from schemas.booking import BookingRequest, LedgerRow
from schemas.catalog import Catalog

logger = logging.getLogger(__name__)

# e.g. "10/18/2026, 04:12:05 PM"
TIMESTAMP_FORMAT = "%m/%d/%Y, %I:%M:%S %p"


def format_timestamp(dt: datetime) -> str:
    return dt.strftime(TIMESTAMP_FORMAT)


def format_log_line(row: LedgerRow, previous_count: int, new_count: int) -> str:
    return (
        f"[{row.timestamp}] {row.name} ({row.email}, {row.phone}) - {row.category}/{row.item}"
        f" | Governorate: {row.governorate}, Position: {row.position}, Committee: {row.committee},"
        f" Notes: {row.notes or 'None'}"
        f" | Stock: {previous_count} → {new_count}"
    )


@dataclass
class BookingResult:
    catalog: Catalog
    row: LedgerRow
    previous_count: int
    new_count: int


class BookingHandler:
    """Runs one booking against the three stores.

    One lock per handler serializes the read-check-mutate-write sequence, so
    two concurrent bookings in this process can never both pass the stock
    check on the same stale read.
    """

    def __init__(
        self,
        inventory: InventoryStore,
        ledger: RegistrationLedger,
        audit_log: AuditLog,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.inventory = inventory
        self.ledger = ledger
        self.audit_log = audit_log
        self._clock = clock or datetime.now
        self._lock = asyncio.Lock()

    async def submit(self, request: BookingRequest) -> BookingResult:
        missing = request.missing_fields()
        if missing:
            raise MissingFieldsError(missing)

        async with self._lock:
            # Fail-closed: a broken inventory document must not look like "no categories"
            catalog = (await run_in_threadpool(self.inventory.read)).unwrap()

            category = catalog.find_category(request.category)
            if category is None:
                raise CategoryNotFoundError()
            item = category.find_item(request.item)
            if item is None:
                raise ItemNotFoundError()
            if item.count <= 0:
                raise OutOfStockError()

            previous_count = item.count
            item.count -= 1
            (await run_in_threadpool(self.inventory.save, catalog)).unwrap()

            row = LedgerRow.from_request(request, format_timestamp(self._clock()))
            (await run_in_threadpool(self.ledger.append_row, row)).unwrap()

            line = format_log_line(row, previous_count, item.count)
            logged = await run_in_threadpool(self.audit_log.append, line)
            if not logged.ok:
                logger.warning("[booking] audit log not written for %s/%s", row.category, row.item)

        logger.info(
            "[booking] %s booked %s/%s (stock %d -> %d)",
            row.email, row.category, row.item, previous_count, item.count,
        )
        return BookingResult(catalog=catalog, row=row, previous_count=previous_count, new_count=item.count)
