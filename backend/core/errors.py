from pathlib import Path
from typing import List, Optional


class BookingError(Exception):
    """Raised when a booking is rejected; nothing has been persisted."""

    status_code: int = 400
    message: str = "Booking rejected"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingFieldsError(BookingError):
    status_code = 400
    message = "Missing required fields"

    def __init__(self, fields: List[str]):
        self.fields = list(fields)
        super().__init__()


class CategoryNotFoundError(BookingError):
    status_code = 404
    message = "Category not found"


class ItemNotFoundError(BookingError):
    status_code = 404
    message = "Item not found"


class OutOfStockError(BookingError):
    status_code = 400
    message = "Item out of stock"


class PersistenceError(Exception):
    """An I/O or parse failure on one of the persisted artifacts."""

    def __init__(self, path: Path, cause: BaseException):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"{self.path.name}: {cause}")
