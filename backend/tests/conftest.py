from __future__ import annotations

import json
import sys
from datetime import datetime
from pathlib import Path

import pytest

# Make the backend's top-level packages importable when run from the repo root
BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from core.booking import BookingHandler  # noqa: E402
from db.audit_log import AuditLog  # noqa: E402
from db.inventory_store import InventoryStore  # noqa: E402
from db.ledger import RegistrationLedger  # noqa: E402

FIXED_NOW = datetime(2026, 10, 18, 16, 12, 5)

SAMPLE_CATALOG = {
    "categories": [
        {
            "name": "Electronics",
            "items": [
                {"name": "Cable", "count": 1},
                {"name": "Projector", "count": 3},
                {"name": "Laptop", "count": 0},
            ],
        },
        {"name": "Audio", "items": [{"name": "Microphone", "count": 2}]},
    ]
}


def write_catalog(path: Path, data: dict) -> None:
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def booking_payload(**overrides) -> dict:
    payload = {
        "name": "Mona Adel",
        "email": "mona@example.org",
        "phone": "01001234567",
        "governorate": "Giza",
        "position": "Member",
        "committee": "Media",
        "category": "Electronics",
        "item": "Cable",
        "notes": "Pick up Thursday",
    }
    payload.update(overrides)
    return payload


@pytest.fixture()
def items_path(tmp_path) -> Path:
    path = tmp_path / "items.json"
    write_catalog(path, SAMPLE_CATALOG)
    return path


@pytest.fixture()
def inventory(items_path) -> InventoryStore:
    return InventoryStore(items_path)


@pytest.fixture()
def ledger(tmp_path) -> RegistrationLedger:
    ledger = RegistrationLedger(tmp_path / "submissions.xlsx")
    ledger.ensure_initialized().unwrap()
    return ledger


@pytest.fixture()
def audit_log(tmp_path) -> AuditLog:
    return AuditLog(tmp_path / "log.txt")


@pytest.fixture()
def handler(inventory, ledger, audit_log) -> BookingHandler:
    return BookingHandler(inventory, ledger, audit_log, clock=lambda: FIXED_NOW)


@pytest.fixture()
def client(inventory, ledger, handler):
    from fastapi.testclient import TestClient

    from core.deps import get_booking_handler, get_inventory_store, get_ledger
    from main import app

    app.dependency_overrides[get_inventory_store] = lambda: inventory
    app.dependency_overrides[get_ledger] = lambda: ledger
    app.dependency_overrides[get_booking_handler] = lambda: handler
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()
