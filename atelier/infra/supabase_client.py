"""
Clients Supabase (supabase-py, API synchrone), construits depuis Settings.
- get_supabase: client 'anon' partagé, lectures publiques (catégories, produits, réglages)
- get_service_supabase: client service-role partagé, écritures (configurations, commandes)
- get_auth_supabase: client 'anon' neuf à chaque appel pour get_user / refresh_session
Les appelants attrapent ConfigurationError comme toute autre erreur du store.
"""
from typing import Optional
from supabase import create_client, Client, ClientOptions

from atelier.config import Settings, get_settings
from atelier.errors import ConfigurationError

_supabase: Optional[Client] = None
_service_supabase: Optional[Client] = None

def _create(settings: Settings, key: str, key_name: str, options: Optional[ClientOptions] = None) -> Client:
    if not settings.supabase_url:
        raise ConfigurationError("Missing SUPABASE_URL")
    if not key:
        raise ConfigurationError(f"Missing {key_name}")
    if options is None:
        return create_client(settings.supabase_url, key)
    return create_client(settings.supabase_url, key, options=options)

def get_supabase(settings: Optional[Settings] = None) -> Client:
    global _supabase
    if _supabase is None:
        settings = settings or get_settings()
        _supabase = _create(settings, settings.supabase_anon_key, "SUPABASE_ANON_KEY")
    return _supabase

def get_service_supabase(settings: Optional[Settings] = None) -> Client:
    global _service_supabase
    if _service_supabase is None:
        settings = settings or get_settings()
        _service_supabase = _create(settings, settings.supabase_service_key, "SUPABASE_SERVICE_KEY")
    return _service_supabase

def get_auth_supabase(settings: Optional[Settings] = None) -> Client:
    settings = settings or get_settings()
    # Côté serveur: pas de session persistée ni de refresh automatique, les cookies font foi
    return _create(
        settings,
        settings.supabase_anon_key,
        "SUPABASE_ANON_KEY",
        ClientOptions(auto_refresh_token=False, persist_session=False),
    )
