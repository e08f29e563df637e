from datetime import datetime, timezone

from fastapi import APIRouter

from core.config import settings

router = APIRouter()


def _utc_iso_now() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("/health")
async def health():
    return {"status": "Server running", "port": settings.port, "time": _utc_iso_now()}
