"""
Registrations ledger: one spreadsheet row per successful booking.

Appending is a full read-modify-write of the workbook; rows keep submission
order and are never edited or removed.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import List

from openpyxl import Workbook, load_workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from core.results import StoreResult
from schemas.booking import LedgerRow

logger = logging.getLogger(__name__)

SHEET_NAME = "Registrations"

# (header, LedgerRow field, column width)
COLUMNS = [
    ("Timestamp", "timestamp", 22),
    ("Full Name", "name", 25),
    ("Email", "email", 32),
    ("Phone", "phone", 18),
    ("Governorate", "governorate", 20),
    ("Position in Team", "position", 22),
    ("Committee", "committee", 25),
    ("Category", "category", 20),
    ("Item Booked", "item", 25),
    ("Notes", "notes", 40),
]

HEADER_FONT = Font(bold=True, size=12, color="FFFFFFFF")
HEADER_FILL = PatternFill(fill_type="solid", fgColor="FF6366F1")
HEADER_ALIGNMENT = Alignment(vertical="center", horizontal="center")
_thin = Side(style="thin")
HEADER_BORDER = Border(top=_thin, left=_thin, bottom=_thin, right=_thin)
HEADER_HEIGHT = 25


def _style_header(ws) -> None:
    for idx, (_, _, width) in enumerate(COLUMNS, start=1):
        ws.column_dimensions[get_column_letter(idx)].width = width
        cell = ws.cell(row=1, column=idx)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.alignment = HEADER_ALIGNMENT
        cell.border = HEADER_BORDER
    ws.row_dimensions[1].height = HEADER_HEIGHT


class RegistrationLedger:
    def __init__(self, path: Path):
        self.path = Path(path)

    def _save(self, wb: Workbook) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.stem}.", suffix=".xlsx", dir=self.path.parent)
        os.close(fd)
        try:
            wb.save(tmp_name)
            os.replace(tmp_name, self.path)
        except Exception:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    def ensure_initialized(self) -> StoreResult[bool]:
        """Create the workbook with its header row if it does not exist yet.

        ``value`` is True when a new file was written, False when one was
        already present.
        """
        if self.path.exists():
            logger.info("[ledger] %s already exists", self.path)
            return StoreResult(self.path, value=False)
        try:
            wb = Workbook()
            ws = wb.active
            ws.title = SHEET_NAME
            ws.append([header for header, _, _ in COLUMNS])
            _style_header(ws)
            self._save(wb)
        except Exception as e:
            logger.error("[ledger] failed to create %s: %r", self.path, e)
            return StoreResult(self.path, error=e)
        logger.info("[ledger] created %s", self.path)
        return StoreResult(self.path, value=True)

    def append_row(self, row: LedgerRow) -> StoreResult[int]:
        try:
            wb = load_workbook(self.path)
            ws = wb[SHEET_NAME]
            ws.append([getattr(row, key) for _, key, _ in COLUMNS])
            row_index = ws.max_row
            self._save(wb)
        except Exception as e:
            # openpyxl surfaces corrupt files as zipfile/KeyError/ValueError alike
            logger.error("[ledger] failed to append to %s: %r", self.path, e)
            return StoreResult(self.path, error=e)
        return StoreResult(self.path, value=row_index)

    def rows(self) -> List[LedgerRow]:
        wb = load_workbook(self.path, read_only=True)
        try:
            ws = wb[SHEET_NAME]
            out: List[LedgerRow] = []
            for values in ws.iter_rows(min_row=2, values_only=True):
                if not any(v is not None for v in values):
                    continue
                data = {key: (values[i] if i < len(values) else None) for i, (_, key, _) in enumerate(COLUMNS)}
                out.append(LedgerRow(**data))
            return out
        finally:
            wb.close()
