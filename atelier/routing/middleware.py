"""
Routeur de locale (middleware HTTP).

Hors matcher (/_next/static, /_next/image, /favicon.ico): requête transmise telle quelle.

Ordre d'exécution pour les autres requêtes:
  1) Rafraîchissement de session (atelier.auth.session.refresh_session), dans le threadpool
     car le SDK Supabase est synchrone. Le SessionState est exposé sur request.state.session.
  2) Décision de routage pure (atelier.routing.locale.decide_route).
  3) Redirection 307 vers le chemin préfixé, ou passage à la suite de la pile.
  4) Les cookies de session émis sont écrits sur la réponse finale, redirection comprise;
     une session expirée efface sb_access / sb_refresh.
Une erreur du service de session ne bloque jamais la requête: dégradation en anonyme.
"""
from typing import Any, Callable, Optional
import logging

from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse
from starlette.concurrency import run_in_threadpool
from starlette.status import HTTP_307_TEMPORARY_REDIRECT

from atelier.config import Settings, get_settings
from atelier.auth.session import ANONYMOUS, refresh_session, apply_session_cookies, clear_session_cookies
from atelier.infra import supabase_client
from .locale import decide_route, is_matcher_excluded

logger = logging.getLogger(__name__)

def _default_client_factory() -> Any:
    return supabase_client.get_auth_supabase()

def register_locale_middleware(
    app: FastAPI,
    settings: Optional[Settings] = None,
    client_factory: Optional[Callable[[], Any]] = None,
) -> None:
    """
    Enregistre le routeur de locale.
    - settings: locales supportées, locale par défaut, cookie_secure (get_settings() par défaut)
    - client_factory: fabrique du client d'auth Supabase (injectable pour les tests)
    """
    settings = settings or get_settings()
    factory = client_factory or _default_client_factory

    @app.middleware("http")
    async def locale_router(request: Request, call_next):
        if is_matcher_excluded(request.url.path):
            return await call_next(request)

        try:
            state = await run_in_threadpool(refresh_session, dict(request.cookies), factory)
        except Exception:
            logger.exception("routing.locale session refresh crashed path=%s", request.url.path)
            state = ANONYMOUS
        request.state.session = state

        decision = decide_route(
            request.url.path,
            request.url.query,
            settings.locales,
            settings.default_locale,
        )
        if decision.is_redirect:
            response = RedirectResponse(url=decision.redirect_to, status_code=HTTP_307_TEMPORARY_REDIRECT)
        else:
            response = await call_next(request)
        if state.clear_cookies:
            clear_session_cookies(response)
            return response
        return apply_session_cookies(response, state.cookies, secure=settings.cookie_secure)
