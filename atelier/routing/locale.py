"""
Décision de routage par locale (pure, sans I/O).

Hors matcher (ni session ni routage): /_next/static, /_next/image, /favicon.ico.

Règles, dans l'ordre:
1) Chemins exemptés: préfixe assets internes (/_next), préfixe API (/api),
   ou présence d'un point (heuristique « fichier avec extension »).
2) Chemin déjà préfixé par une locale supportée (/en, /en/..., /fr, /fr/...): rien à faire.
3) Sinon: redirection vers /<locale par défaut><chemin>, la query string est conservée.
   La racine / devient /<locale par défaut> (pas de double slash ni de slash final).
"""
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from atelier.config import ASSET_PREFIX, API_PREFIX

@dataclass(frozen=True)
class RouteDecision:
    redirect_to: Optional[str] = None

    @property
    def is_redirect(self) -> bool:
        return self.redirect_to is not None


PASS_THROUGH = RouteDecision()

MATCHER_EXCLUDED_PREFIXES: Tuple[str, ...] = ("/_next/static", "/_next/image", "/favicon.ico")


def is_matcher_excluded(path: str) -> bool:
    return path.startswith(MATCHER_EXCLUDED_PREFIXES)


def is_exempt_path(path: str, exempt_prefixes: Iterable[str] = (ASSET_PREFIX, API_PREFIX)) -> bool:
    if any(path.startswith(prefix) for prefix in exempt_prefixes):
        return True
    return "." in path


def has_locale_prefix(path: str, locales: Sequence[str]) -> bool:
    return any(path == f"/{loc}" or path.startswith(f"/{loc}/") for loc in locales)


def localized_path(path: str, locale: str) -> str:
    if path in ("", "/"):
        return f"/{locale}"
    if not path.startswith("/"):
        path = "/" + path
    return f"/{locale}{path}"


def decide_route(path: str, query: str, locales: Sequence[str], default_locale: str) -> RouteDecision:
    """
    Calcule la décision de routage pour un chemin et sa query string brute.
    Retourne PASS_THROUGH ou RouteDecision(redirect_to="/en/...?...").
    """
    if is_exempt_path(path):
        return PASS_THROUGH
    if has_locale_prefix(path, locales):
        return PASS_THROUGH
    target = localized_path(path, default_locale)
    if query:
        target = f"{target}?{query}"
    return RouteDecision(redirect_to=target)
