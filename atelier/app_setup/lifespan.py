"""
Lifespan FastAPI de la boutique.

Au démarrage:
- journalise la configuration effective (locales, Supabase, Stripe) sans exposer de secret
- branche FastAPILimiter sur Redis (ou fakeredis) pour /api/checkout

Variables d'environnement:
- RATE_LIMIT_REDIS_URL: URL Redis (redis://127.0.0.1:6379/0 par défaut)
- DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS=1: pas de rate limiting (tests)
- USE_FAKE_REDIS_FOR_TESTS=1: Redis en mémoire via fakeredis
- LOCAL_RATE_LIMIT_FALLBACK=1: compteur mémoire si Redis est injoignable
"""
import os
import logging
from contextlib import asynccontextmanager
from typing import Any, Optional

import redis.asyncio as redis
from fastapi import FastAPI
from fastapi_limiter import FastAPILimiter

from atelier.config import get_settings

logger = logging.getLogger("uvicorn.error")

def _log_configuration() -> None:
    settings = get_settings()
    logger.info(
        "Storefront locales=%s default=%s supabase=%s stripe=%s webhook_secret=%s",
        ",".join(settings.locales),
        settings.default_locale,
        "configured" if settings.supabase_url else "missing",
        "configured" if settings.stripe_secret_key else "missing",
        "configured" if settings.stripe_webhook_secret else "missing",
    )

def _redis_connection() -> Any:
    if os.getenv("USE_FAKE_REDIS_FOR_TESTS") == "1":
        from fakeredis.aioredis import FakeRedis  # tests only
        return FakeRedis(decode_responses=True)
    redis_url = os.getenv("RATE_LIMIT_REDIS_URL", "redis://127.0.0.1:6379/0")
    return redis.from_url(redis_url, encoding="utf-8", decode_responses=True)

async def _init_rate_limiter(app: FastAPI) -> Optional[Any]:
    """
    Retourne la connexion Redis utilisée (à fermer à l'arrêt), ou None.
    app.state.rate_limit_enabled reflète l'état effectif lu par optional_rate_limit.
    """
    if os.getenv("DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS") == "1":
        app.state.rate_limit_enabled = False
        logger.info("Rate limiting disabled by DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS")
        return None

    conn = None
    try:
        conn = _redis_connection()
        await FastAPILimiter.init(conn)
        app.state.rate_limit_enabled = True
        logger.info("Rate limiting enabled on /api/checkout")
        return conn
    except Exception as e:
        # Checkout reste disponible: compteur mémoire si demandé, sinon pas de limite
        app.state.rate_limit_enabled = os.getenv("LOCAL_RATE_LIMIT_FALLBACK") == "1"
        if app.state.rate_limit_enabled:
            logger.warning("Rate limiting falling back to local in-memory: %s", e)
        else:
            logger.warning("Rate limiting disabled due to init error: %s", e)
        return None

@asynccontextmanager
async def lifespan(app: FastAPI):
    _log_configuration()
    conn = await _init_rate_limiter(app)
    yield
    if conn is not None:
        await conn.aclose()
