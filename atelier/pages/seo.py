"""
SEO: URLs canoniques/alternates et JSON-LD (Organization, WebSite, BreadcrumbList).
SITE_URL est ramené à son origine pour éviter les chemins doublés (/en/en).
"""
from typing import Any, Dict, List

from atelier.payments.stripe_client import get_site_url

SITE_NAME = "Ciavaglia Timepieces"
DEFAULT_DESCRIPTION_EN = (
    "Custom luxury timepieces and artisan watchmaking in Montreal. Design your own watch "
    "with our configurator or explore ready-to-ship collections."
)
DEFAULT_DESCRIPTION_FR = (
    "Montres de luxe sur mesure et horlogerie artisanale à Montréal. Concevez votre montre "
    "avec notre configurateur ou explorez les collections prêtes à expédier."
)
LOCALE_DESCRIPTIONS = {"en": DEFAULT_DESCRIPTION_EN, "fr": DEFAULT_DESCRIPTION_FR}
HTML_LANG = {"en": "en-CA", "fr": "fr-CA"}

def full_url(path: str) -> str:
    p = path if path.startswith("/") else f"/{path}"
    return f"{get_site_url()}{p}"

def description(locale: str) -> str:
    return LOCALE_DESCRIPTIONS.get(locale, DEFAULT_DESCRIPTION_EN)

def organization_jsonld(locale: str) -> Dict[str, Any]:
    return {
        "@context": "https://schema.org",
        "@type": "Organization",
        "name": SITE_NAME,
        "url": full_url(f"/{locale}"),
        "logo": full_url("/_next/static/images/logo.svg"),
        "description": description(locale),
        "address": {
            "@type": "PostalAddress",
            "addressLocality": "Montreal",
            "addressCountry": "CA",
        },
        "contactPoint": {
            "@type": "ContactPoint",
            "email": "ciavagliatimepieces@gmail.com",
            "contactType": "customer service",
            "availableLanguage": ["English", "French"],
        },
    }

def website_jsonld(locale: str) -> Dict[str, Any]:
    return {
        "@context": "https://schema.org",
        "@type": "WebSite",
        "name": SITE_NAME,
        "url": full_url(f"/{locale}"),
        "description": description(locale),
        "inLanguage": HTML_LANG.get(locale, "en-CA"),
        "publisher": organization_jsonld(locale),
        "potentialAction": {
            "@type": "SearchAction",
            "target": {
                "@type": "EntryPoint",
                "urlTemplate": full_url(f"/{locale}/shop?q={{search_term_string}}"),
            },
            "query-input": "required name=search_term_string",
        },
    }

def breadcrumb_jsonld(locale: str, items: List[Dict[str, str]]) -> Dict[str, Any]:
    return {
        "@context": "https://schema.org",
        "@type": "BreadcrumbList",
        "itemListElement": [
            {
                "@type": "ListItem",
                "position": i + 1,
                "name": item["name"],
                "item": full_url(f"/{locale}{item['path']}"),
            }
            for i, item in enumerate(items)
        ],
    }

def alternates(path: str = "") -> Dict[str, str]:
    """hreflang -> URL absolue, pour un chemin relatif à la locale ('' = accueil)."""
    return {HTML_LANG[loc]: full_url(f"/{loc}{path}") for loc in ("en", "fr")}
