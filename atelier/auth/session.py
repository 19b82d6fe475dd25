"""
Rafraîchissement de session (Supabase Auth).

- Lit les cookies sb_access / sb_refresh de la requête entrante.
- Valide le jeton d'accès via supabase.auth.get_user; s'il est expiré/invalide et qu'un
  refresh token existe, réémet une session via supabase.auth.refresh_session.
- Retourne un SessionState: l'utilisateur (ou None) et la liste des cookies (nom, valeur)
  à écrire sur la réponse sortante. Aucune mutation de réponse ici: le routeur applique.
- Toute erreur du service de session est journalisée puis dégradée en « pas de session ».
- Jetons rejetés (accès invalide sans refresh, refresh refusé): EXPIRED, le routeur efface
  alors sb_access / sb_refresh.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple
import logging

from starlette.responses import Response

logger = logging.getLogger(__name__)

ACCESS_COOKIE_NAME = "sb_access"
REFRESH_COOKIE_NAME = "sb_refresh"
SESSION_MAX_AGE = 60 * 60 * 24 * 7


@dataclass(frozen=True)
class SessionCookie:
    name: str
    value: str


@dataclass(frozen=True)
class SessionState:
    user: Optional[Dict[str, Any]] = None
    cookies: Tuple[SessionCookie, ...] = field(default_factory=tuple)
    clear_cookies: bool = False

    @property
    def is_authenticated(self) -> bool:
        return bool(self.user and self.user.get("id"))


ANONYMOUS = SessionState()
EXPIRED = SessionState(clear_cookies=True)


def _normalize_user(user: Any) -> Optional[Dict[str, Any]]:
    if not user:
        return None
    if isinstance(user, dict):
        raw = user
    else:
        raw = {
            "id": getattr(user, "id", None),
            "email": getattr(user, "email", None),
            "user_metadata": getattr(user, "user_metadata", None),
        }
    if not raw.get("id"):
        return None
    return {
        "id": str(raw.get("id")),
        "email": raw.get("email"),
        "metadata": raw.get("user_metadata") or {},
    }


def refresh_session(cookies: Mapping[str, str], client_factory: Callable[[], Any]) -> SessionState:
    """
    Valide/rafraîchit la session à partir des cookies de la requête.
    - Pas de cookie: session anonyme, aucun appel réseau.
    - Jeton d'accès valide: utilisateur renvoyé, aucun cookie à réécrire.
    - Jeton expiré + refresh token: nouvelle paire de cookies (sb_access, sb_refresh).
    - Client d'auth indisponible: ANONYMOUS, les cookies sont laissés en place.
    - Jetons rejetés: EXPIRED (cookies à effacer). Jamais d'exception propagée.
    """
    access_token = cookies.get(ACCESS_COOKIE_NAME)
    refresh_token = cookies.get(REFRESH_COOKIE_NAME)
    if not access_token and not refresh_token:
        return ANONYMOUS

    try:
        client = client_factory()
    except Exception:
        logger.exception("auth.session client init failed")
        return ANONYMOUS

    if access_token:
        try:
            res = client.auth.get_user(access_token)
            user = _normalize_user(getattr(res, "user", None))
            if user:
                return SessionState(user=user)
        except Exception as e:
            # Jeton expiré: cas normal, on tente le refresh ci-dessous
            logger.debug("auth.session get_user failed: %s", e)

    if not refresh_token:
        return EXPIRED

    try:
        res = client.auth.refresh_session(refresh_token)
    except Exception:
        logger.warning("auth.session refresh_session failed", exc_info=True)
        return EXPIRED

    sess = getattr(res, "session", None)
    new_access = getattr(sess, "access_token", None)
    new_refresh = getattr(sess, "refresh_token", None)
    if not new_access:
        return EXPIRED

    issued: List[SessionCookie] = [SessionCookie(ACCESS_COOKIE_NAME, new_access)]
    if new_refresh:
        issued.append(SessionCookie(REFRESH_COOKIE_NAME, new_refresh))
    user = _normalize_user(getattr(res, "user", None) or getattr(sess, "user", None))
    return SessionState(user=user, cookies=tuple(issued))


def apply_session_cookies(
    response: Response,
    cookies: Tuple[SessionCookie, ...],
    secure: bool = False,
) -> Response:
    """
    Écrit les cookies de session sur une réponse avec la politique commune
    (HttpOnly, Secure selon settings.cookie_secure, SameSite=Lax, path=/).
    Utilisé à l'identique pour une réponse normale et pour une redirection de locale.
    """
    for cookie in cookies:
        response.set_cookie(
            key=cookie.name,
            value=cookie.value,
            httponly=True,
            secure=secure,
            samesite="lax",
            max_age=SESSION_MAX_AGE,
            path="/",
        )
    return response


def clear_session_cookies(response: Response) -> None:
    response.delete_cookie(ACCESS_COOKIE_NAME, path="/")
    response.delete_cookie(REFRESH_COOKIE_NAME, path="/")
