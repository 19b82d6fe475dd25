"""
Layout localisé: gabarit commun à toutes les pages /{locale}/...

- require_locale: dépendance FastAPI; locale hors de l'ensemble supporté -> 404 (aucun rendu partiel)
- build_layout_context: dictionnaire, navigation (catégories), pied de page, devise, utilisateur, SEO
"""
from typing import Any, Dict

from fastapi import HTTPException, Request

from atelier.auth import get_optional_user
from atelier.catalog import get_nav_categories
from atelier.currency import CURRENCY_COOKIE_NAME, FALLBACK_RATE, parse_currency, get_usd_to_cad_rate
from atelier.i18n import LOCALE_LABELS, get_dictionary, is_supported_locale
from atelier.site_settings import get_footer_settings
from . import seo

def require_locale(locale: str) -> str:
    if not is_supported_locale(locale):
        raise HTTPException(status_code=404, detail="Not Found")
    return locale

def build_layout_context(request: Request, locale: str, path: str = "") -> Dict[str, Any]:
    """
    Contexte commun passé aux templates (layout.html):
    - locale + dictionary (sections nav, cart, hero, home, shop, contact)
    - nav_categories (toujours avec 'womens'), footer (réglages fusionnés)
    - currency (cookie 'currency', CAD par défaut) + usd_to_cad (taux résolu seulement en USD)
    - user (session rafraîchie)
    - seo: canonical, alternates, JSON-LD Organization et WebSite
    """
    user = get_optional_user(request)
    dictionary = get_dictionary(locale)
    currency = parse_currency(request.cookies.get(CURRENCY_COOKIE_NAME))
    return {
        "locale": locale,
        "locale_labels": LOCALE_LABELS,
        "dictionary": dictionary,
        "nav": dictionary["nav"],
        "nav_categories": get_nav_categories(),
        "footer": get_footer_settings(),
        "currency": currency,
        "usd_to_cad": get_usd_to_cad_rate() if currency == "USD" else FALLBACK_RATE,
        "user": user,
        "html_lang": seo.HTML_LANG.get(locale, "en-CA"),
        "meta_description": seo.description(locale),
        "canonical_url": seo.full_url(f"/{locale}{path}"),
        "alternate_urls": seo.alternates(path),
        "organization_jsonld": seo.organization_jsonld(locale),
        "website_jsonld": seo.website_jsonld(locale),
    }
