import argparse
import sys
from pathlib import Path

"""
Write a starter inventory document (items.json).

Refuses to overwrite an existing document unless --overwrite is given, since
the file holds the live stock counts.

  python scripts/seed_items.py --path items.json --count 5
"""

# Allow running from repo root by ensuring `backend/` is on sys.path
BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from core.config import settings  # noqa: E402
from db.inventory_store import InventoryStore  # noqa: E402
from schemas.catalog import Catalog  # noqa: E402

DEFAULT_CATEGORIES = {
    "Electronics": ["Laptop", "Projector", "HDMI Cable", "Extension Cord"],
    "Audio": ["Microphone", "Speaker", "Mixer"],
    "Stationery": ["Whiteboard", "Markers Set", "Flip Chart"],
}


def build_catalog(count: int) -> Catalog:
    if count < 0:
        raise ValueError("count must be >= 0")
    return Catalog.model_validate(
        {
            "categories": [
                {"name": name, "items": [{"name": item, "count": count} for item in items]}
                for name, items in DEFAULT_CATEGORIES.items()
            ]
        }
    )


def seed_items(path: Path, count: int, overwrite: bool, dry_run: bool) -> int:
    store = InventoryStore(path)
    if path.exists() and not overwrite:
        print(f"[seed_items] {path} already exists; pass --overwrite to replace it")
        return 1

    catalog = build_catalog(count)
    n_items = sum(len(c.items) for c in catalog.categories)
    if dry_run:
        print(f"[seed_items] DRY RUN: would write {len(catalog.categories)} categories, {n_items} items")
        return 0

    store.save(catalog).unwrap()
    print(f"[seed_items] Wrote {len(catalog.categories)} categories, {n_items} items to {path}")
    return 0


def main():
    p = argparse.ArgumentParser()
    p.add_argument("--path", type=Path, default=settings.items_file, help="Inventory document to write")
    p.add_argument("--count", type=int, default=5, help="Initial stock per item")
    p.add_argument("--overwrite", action="store_true")
    p.add_argument("--dry-run", action="store_true")
    args = p.parse_args()
    sys.exit(seed_items(args.path, args.count, args.overwrite, args.dry_run))


if __name__ == "__main__":
    main()
