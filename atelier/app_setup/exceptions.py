"""
Gestionnaires d'exceptions.
- HTTPException 404 sur une page (Accept: text/html, hors /api/*): page « introuvable » localisée.
- Autres HTTPException: corps JSON FastAPI standard {"detail": ...}.
- ConfigurationError: 500 JSON, la requête ne peut pas aboutir sans la configuration requise.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from atelier.config import API_PREFIX, DEFAULT_LOCALE, LOCALES
from atelier.errors import ConfigurationError
from atelier.i18n import get_dictionary
from atelier.pages.templating import templates

logger = logging.getLogger(__name__)

def _locale_from_path(path: str) -> str:
    first = path.strip("/").split("/", 1)[0]
    return first if first in LOCALES else DEFAULT_LOCALE

def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        accept = (request.headers.get("accept") or "").lower()
        is_api = request.url.path.startswith(API_PREFIX)
        if exc.status_code == 404 and "text/html" in accept and not is_api:
            locale = _locale_from_path(request.url.path)
            return templates.TemplateResponse(
                request,
                "not_found.html",
                {"locale": locale, "dictionary": get_dictionary(locale)},
                status_code=404,
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(ConfigurationError)
    async def configuration_error(request: Request, exc: ConfigurationError):
        logger.error("configuration error on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=500, content={"detail": str(exc)})
