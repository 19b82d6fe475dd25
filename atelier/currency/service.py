"""
Devises de la boutique: tous les prix sont stockés en CAD, l'affichage peut être en USD.

- parse_currency: valeur du cookie 'currency' -> "USD" | "CAD" (CAD par défaut)
- get_usd_to_cad_rate: 1 USD = X CAD
    1) settings.exchange_rate_usd_to_cad (EXCHANGE_RATE_USD_TO_CAD) si nombre > 0
    2) cache process d'une heure
    3) API publique exchangerate-api (httpx)
    4) valeur de secours 1.36, mise en cache elle aussi
- format_price: "C$1,234.50" (CAD) ou "$907.72" (USD, montant converti)
"""
from typing import Optional, Tuple
import logging
import math
import time

import httpx

from atelier.config import Settings, get_settings

logger = logging.getLogger(__name__)

CURRENCY_COOKIE_NAME = "currency"
CURRENCIES: Tuple[str, ...] = ("USD", "CAD")
DEFAULT_CURRENCY = "CAD"

EXCHANGE_RATE_URL = "https://api.exchangerate-api.com/v4/latest/USD"
CACHE_SECONDS = 60 * 60
FALLBACK_RATE = 1.36

_cached_rate: Optional[float] = None
_cache_time: float = 0.0


def parse_currency(value: Optional[str]) -> str:
    if value in CURRENCIES:
        return value
    return DEFAULT_CURRENCY


def _positive(value) -> Optional[float]:
    try:
        n = float(value)
    except (TypeError, ValueError):
        return None
    if math.isfinite(n) and n > 0:
        return n
    return None


def _remember(rate: float) -> float:
    global _cached_rate, _cache_time
    _cached_rate = rate
    _cache_time = time.monotonic()
    return rate


def reset_cache() -> None:
    global _cached_rate, _cache_time
    _cached_rate = None
    _cache_time = 0.0


def fetch_usd_to_cad(timeout: float = 5.0) -> Optional[float]:
    try:
        res = httpx.get(EXCHANGE_RATE_URL, timeout=timeout)
        res.raise_for_status()
        data = res.json()
    except (httpx.HTTPError, ValueError) as e:
        logger.warning("currency.fetch_usd_to_cad failed: %s", e)
        return None
    return _positive(((data or {}).get("rates") or {}).get("CAD"))


def get_usd_to_cad_rate(settings: Optional[Settings] = None) -> float:
    settings = settings or get_settings()
    env_rate = _positive(settings.exchange_rate_usd_to_cad) if settings.exchange_rate_usd_to_cad else None
    if env_rate is not None:
        return env_rate
    if _cached_rate is not None and time.monotonic() - _cache_time < CACHE_SECONDS:
        return _cached_rate
    rate = fetch_usd_to_cad()
    if rate is not None:
        return _remember(rate)
    return _remember(FALLBACK_RATE)


def format_price(amount_cad: float, currency: str, usd_to_cad: float) -> str:
    if currency == "CAD":
        return f"C${amount_cad:,.2f}"
    return f"${amount_cad / usd_to_cad:,.2f}"
