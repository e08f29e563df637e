from dataclasses import dataclass
from pathlib import Path
from typing import Generic, Optional, TypeVar

from core.errors import PersistenceError

T = TypeVar("T")


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    """Outcome of a store operation.

    Stores never raise on I/O failure; they hand back a result and the caller
    decides whether to fall back to a default (fail-open) or abort
    (fail-closed) via ``unwrap()``.
    """

    path: Path
    value: Optional[T] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise PersistenceError(self.path, self.error) from self.error
        return self.value

    def value_or(self, default: T) -> T:
        return self.value if self.error is None else default
