# atelier.config
"""
Configuration centrale de la boutique.

- Charge le fichier .env à la racine du projet (BASE_DIR/.env)
- Expose les chemins utiles (STATIC_DIR, TEMPLATES_DIR)
- Normalise et expose les secrets/URLs (Supabase, Stripe), sécurité cookies, CORS/hosts
- Regroupe le tout dans un objet Settings immuable, chargé une fois (get_settings)
"""
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import List, Tuple
import os
from dotenv import load_dotenv

# Calculer le chemin du projet puis charger .env de manière explicite
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"
load_dotenv(dotenv_path=ENV_PATH, override=True)

PACKAGE_DIR = Path(__file__).resolve().parent
STATIC_DIR = PACKAGE_DIR / "static"
TEMPLATES_DIR = PACKAGE_DIR / "templates"

def _clean_env(v: str) -> str:
    """
    Nettoie une valeur d'environnement:
    - supprime les espaces et guillemets (simples, doubles) et backticks
    - retourne toujours une chaîne (jamais None)
    """
    return (v or "").strip().strip("'").strip('"').strip("`")

def _csv(v: str) -> List[str]:
    return [x.strip() for x in (v or "").split(",") if x.strip()]

# Locales supportées: la première est la locale par défaut
LOCALES: Tuple[str, ...] = ("en", "fr")
DEFAULT_LOCALE = "en"

# Préfixes exemptés de la redirection de locale (assets internes, API)
ASSET_PREFIX = "/_next"
API_PREFIX = "/api"

# Supabase: URL et clés (anon/service)
SUPABASE_URL = _clean_env(os.getenv("SUPABASE_URL") or os.getenv("NEXT_PUBLIC_SUPABASE_URL") or "")
SUPABASE_ANON = _clean_env(os.getenv("SUPABASE_ANON_KEY") or os.getenv("NEXT_PUBLIC_SUPABASE_ANON_KEY") or "")
SUPABASE_SERVICE_KEY = _clean_env(os.getenv("SUPABASE_SERVICE_KEY") or os.getenv("SUPABASE_SERVICE_ROLE_KEY") or "")

if SUPABASE_URL and not SUPABASE_URL.startswith("http"):
    SUPABASE_URL = "https://" + SUPABASE_URL
if SUPABASE_URL.endswith("/"):
    SUPABASE_URL = SUPABASE_URL.rstrip("/")

# Cookies / sécurité
COOKIE_SECURE = (os.getenv("COOKIE_SECURE", "false").lower() == "true")
ADMIN_USER_IDS = _csv(os.getenv("ADMIN_USER_IDS", ""))

# CORS (dev)
CORS_ORIGINS = _csv(os.getenv("CORS_ORIGINS", "*"))
ALLOWED_HOSTS = _csv(os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1,testserver"))

# Stripe: clé secrète et secret webhook
STRIPE_SECRET_KEY = _clean_env(os.getenv("STRIPE_SECRET_KEY") or "")
STRIPE_WEBHOOK_SECRET = _clean_env(os.getenv("STRIPE_WEBHOOK_SECRET") or "")
STRIPE_API_VERSION = "2026-01-28.clover"

# URL publique du site (origine uniquement, utilisée pour les redirections Stripe et le SEO)
SITE_URL = _clean_env(os.getenv("NEXT_PUBLIC_SITE_URL") or os.getenv("SITE_URL") or "http://localhost:8000")

# Taux USD -> CAD forcé (optionnel)
EXCHANGE_RATE_USD_TO_CAD = _clean_env(os.getenv("EXCHANGE_RATE_USD_TO_CAD") or "")


@dataclass(frozen=True)
class Settings:
    """
    Vue immuable de la configuration, injectée dans les composants
    (routeur de locale, fabrique Stripe, devises) plutôt que lue à la volée.
    """
    locales: Tuple[str, ...] = LOCALES
    default_locale: str = DEFAULT_LOCALE
    supabase_url: str = ""
    supabase_anon_key: str = ""
    supabase_service_key: str = ""
    stripe_secret_key: str = ""
    stripe_webhook_secret: str = ""
    stripe_api_version: str = STRIPE_API_VERSION
    site_url: str = "http://localhost:8000"
    cookie_secure: bool = False
    admin_user_ids: Tuple[str, ...] = field(default_factory=tuple)
    exchange_rate_usd_to_cad: str = ""


def load_settings() -> Settings:
    """Construit Settings depuis les constantes du module (déjà normalisées)."""
    return Settings(
        locales=LOCALES,
        default_locale=DEFAULT_LOCALE,
        supabase_url=SUPABASE_URL,
        supabase_anon_key=SUPABASE_ANON,
        supabase_service_key=SUPABASE_SERVICE_KEY,
        stripe_secret_key=STRIPE_SECRET_KEY,
        stripe_webhook_secret=STRIPE_WEBHOOK_SECRET,
        stripe_api_version=STRIPE_API_VERSION,
        site_url=SITE_URL,
        cookie_secure=COOKIE_SECURE,
        admin_user_ids=tuple(ADMIN_USER_IDS),
        exchange_rate_usd_to_cad=EXCHANGE_RATE_USD_TO_CAD,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
