"""Endpoints API du catalogue (lecture seule)."""
from typing import Any, Dict, List
from fastapi import APIRouter
from starlette.concurrency import run_in_threadpool

from . import repository as catalog_repository

router = APIRouter(prefix="/api/v1/categories", tags=["Catalog API"])

@router.get("")
async def list_categories() -> List[Dict[str, Any]]:
    """Catégories de montres ordonnées (liste de secours si la base est vide ou injoignable)."""
    return await run_in_threadpool(catalog_repository.get_watch_categories)
