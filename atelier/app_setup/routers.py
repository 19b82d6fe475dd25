"""
Registre central des routers (pages localisées, API catalogue, devises, paiements, session, health).
"""
from fastapi import FastAPI
from atelier.pages.views import router as pages_router
from atelier.catalog.views import router as catalog_router
from atelier.currency.views import router as currency_router
from atelier.payments.views import router as payments_router
from atelier.auth.views import router as auth_router
from atelier.health.router import router as health_router

def register_routers(app: FastAPI) -> None:
    # API
    app.include_router(catalog_router)
    app.include_router(currency_router)
    app.include_router(payments_router)
    app.include_router(auth_router)
    app.include_router(health_router)
    # Pages web (HTML), en dernier: /{locale} capture le premier segment
    app.include_router(pages_router)
