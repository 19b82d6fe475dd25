# module atelier.app
"""
Factory de l'application web de la boutique.
"""
from fastapi import FastAPI

from atelier.app_setup.lifespan import lifespan
from atelier.app_setup.middlewares import register_basic_middlewares, register_security_middleware
from atelier.app_setup.static import mount_static_files
from atelier.app_setup.exceptions import register_exception_handlers
from atelier.app_setup.routes import register_routes
from atelier.app_setup.routers import register_routers
from atelier.routing import register_locale_middleware

def create_app() -> FastAPI:
    """
    Crée et configure l'instance FastAPI.
    Étapes et ordre:
      1) register_basic_middlewares: CORS, TrustedHost, ProxyHeaders.
      2) mount_static_files: expose /_next/static.
      3) register_security_middleware: en-têtes de sécurité + CSP.
      4) register_exception_handlers: 404 HTML localisé, JSON pour l'API, 500 de configuration.
      5) register_routes: favicon.
      6) register_routers: API (/api/...) puis pages localisées (/{locale}/...).
      7) register_locale_middleware: ajouté en dernier pour s'exécuter en premier
         (session rafraîchie + redirection vers la locale par défaut).
    """
    app = FastAPI(
        title="Atelier Storefront",
        lifespan=lifespan,
        docs_url="/api/docs",
        openapi_url="/api/openapi.json",
        redoc_url=None,
    )
    register_basic_middlewares(app)
    mount_static_files(app)
    register_security_middleware(app)
    register_exception_handlers(app)
    register_routes(app)
    register_routers(app)
    register_locale_middleware(app)
    return app

# App globale
app = create_app()
