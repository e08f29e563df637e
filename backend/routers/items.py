from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from typing import Dict

from core.deps import get_inventory_store
from db.inventory_store import InventoryStore

router = APIRouter()


@router.get("/items", response_model=Dict)
async def list_items(store: InventoryStore = Depends(get_inventory_store)):
    """Get the current catalog (an unreadable inventory yields an empty one)"""
    catalog = await run_in_threadpool(store.load)
    return {"success": True, "data": catalog.to_document()}
