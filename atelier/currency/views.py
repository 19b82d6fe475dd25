from fastapi import APIRouter
from starlette.concurrency import run_in_threadpool

from .service import get_usd_to_cad_rate

router = APIRouter(prefix="/api", tags=["Currency API"])

@router.get("/exchange-rate")
async def exchange_rate():
    """Taux courant { usdToCad: float } (1 USD = X CAD)."""
    usd_to_cad = await run_in_threadpool(get_usd_to_cad_rate)
    return {"usdToCad": usd_to_cad}
