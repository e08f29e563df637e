from __future__ import annotations

import json

import pytest

from db.inventory_store import InventoryStore
from scripts.seed_items import DEFAULT_CATEGORIES, build_catalog, seed_items


def test_seed_writes_default_catalog(tmp_path):
    path = tmp_path / "items.json"

    assert seed_items(path, count=2, overwrite=False, dry_run=False) == 0

    catalog = InventoryStore(path).load()
    assert [c.name for c in catalog.categories] == list(DEFAULT_CATEGORIES)
    assert {i.count for c in catalog.categories for i in c.items} == {2}


def test_seed_refuses_to_overwrite_live_stock(tmp_path):
    path = tmp_path / "items.json"
    path.write_text(json.dumps({"categories": []}), encoding="utf-8")

    assert seed_items(path, count=2, overwrite=False, dry_run=False) == 1
    assert json.loads(path.read_text(encoding="utf-8")) == {"categories": []}

    assert seed_items(path, count=2, overwrite=True, dry_run=False) == 0
    assert InventoryStore(path).load().categories


def test_seed_dry_run_writes_nothing(tmp_path):
    path = tmp_path / "items.json"

    assert seed_items(path, count=1, overwrite=False, dry_run=True) == 0
    assert not path.exists()


def test_build_catalog_rejects_negative_count():
    with pytest.raises(ValueError):
        build_catalog(-1)
