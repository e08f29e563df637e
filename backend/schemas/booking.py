from typing import List, Optional

from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from pydantic import BaseModel, field_validator

REQUIRED_FIELDS = (
    "name",
    "email",
    "phone",
    "governorate",
    "position",
    "committee",
    "category",
    "item",
)


class BookingRequest(BaseModel):
    # Required fields are checked by the booking handler, not by pydantic,
    # so a missing field is a booking rejection rather than a 422.
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    governorate: Optional[str] = None
    position: Optional[str] = None
    committee: Optional[str] = None
    category: Optional[str] = None
    item: Optional[str] = None
    notes: Optional[str] = None

    @field_validator(*REQUIRED_FIELDS, "notes")
    @classmethod
    def _strip_nullable(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        # The ledger cannot store control characters; reject before any stock moves
        if ILLEGAL_CHARACTERS_RE.search(v):
            raise ValueError("control characters are not allowed")
        return v or None

    def missing_fields(self) -> List[str]:
        return [f for f in REQUIRED_FIELDS if not getattr(self, f)]


class LedgerRow(BaseModel):
    """One booking as written to the registrations spreadsheet."""

    timestamp: str
    name: str
    email: str
    phone: str
    governorate: str
    position: str
    committee: str
    category: str
    item: str
    notes: Optional[str] = None

    @classmethod
    def from_request(cls, request: BookingRequest, timestamp: str) -> "LedgerRow":
        return cls(timestamp=timestamp, **request.model_dump())
