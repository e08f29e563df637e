"""
JSON-backed inventory (the Catalog).

The whole document is read on every call and rewritten in full on save;
nothing is cached between requests.
"""

import json
import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from core.results import StoreResult
from schemas.catalog import Catalog

logger = logging.getLogger(__name__)


class InventoryStore:
    def __init__(self, path: Path):
        self.path = Path(path)

    def read(self) -> StoreResult[Catalog]:
        try:
            with self.path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
            catalog = Catalog.model_validate(data)
        except (OSError, ValueError, ValidationError) as e:
            logger.warning("[inventory] failed to load %s: %r", self.path, e)
            return StoreResult(self.path, error=e)
        return StoreResult(self.path, value=catalog)

    def load(self) -> Catalog:
        """Fail-open read: an unreadable or invalid document is an empty catalog."""
        return self.read().value_or(Catalog())

    def save(self, catalog: Catalog) -> StoreResult[None]:
        payload = json.dumps(catalog.to_document(), indent=2, ensure_ascii=False)
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            # Write next to the target so os.replace stays on one filesystem
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp_name, self.path)
        except OSError as e:
            logger.error("[inventory] failed to save %s: %r", self.path, e)
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            return StoreResult(self.path, error=e)
        logger.info("[inventory] saved %s", self.path)
        return StoreResult(self.path)
