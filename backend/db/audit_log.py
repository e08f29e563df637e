import logging
from pathlib import Path

from core.results import StoreResult

logger = logging.getLogger(__name__)


class AuditLog:
    """Plain-text booking log. Append-only: prior lines are never read or rewritten."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def append(self, line: str) -> StoreResult[None]:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as fh:
                fh.write(line + "\n")
        except OSError as e:
            logger.error("[audit_log] failed to append to %s: %r", self.path, e)
            return StoreResult(self.path, error=e)
        logger.debug("[audit_log] entry saved")
        return StoreResult(self.path)
