import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import settings
from core.deps import get_ledger
from core.logging_setup import setup_logging
from routers.bookings import router as bookings_router
from routers.health import router as health_router
from routers.items import router as items_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level)
    # Honour test overrides so startup touches the same ledger the routes use
    ledger = app.dependency_overrides.get(get_ledger, get_ledger)()
    ledger.ensure_initialized().unwrap()
    logger.info("Booking API listening on port %s", settings.port)
    yield


app = FastAPI(
    title="Inventory Booking API",
    description="Item catalog and booking submissions",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


app.include_router(items_router, tags=["items"])
app.include_router(bookings_router, tags=["bookings"])
app.include_router(health_router, tags=["health"])

if __name__ == "__main__":
    uvicorn.run("main:app", host=settings.host, port=settings.port, reload=True)
