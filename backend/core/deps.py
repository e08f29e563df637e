from functools import lru_cache

from core.booking import BookingHandler
from core.config import settings
from db.audit_log import AuditLog
from db.inventory_store import InventoryStore
from db.ledger import RegistrationLedger


def get_inventory_store() -> InventoryStore:
    return InventoryStore(settings.items_file)


def get_ledger() -> RegistrationLedger:
    return RegistrationLedger(settings.submissions_file)


def get_audit_log() -> AuditLog:
    return AuditLog(settings.booking_log_file)


@lru_cache
def get_booking_handler() -> BookingHandler:
    # Cached so every request shares the handler's lock
    return BookingHandler(get_inventory_store(), get_ledger(), get_audit_log())
