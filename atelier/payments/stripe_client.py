"""
Adaptateur Stripe: centralise la construction du client et les appels Stripe.
- get_stripe: StripeClient lié à une version d'API fixe; échoue immédiatement sans clé
- get_site_url: origine du site pour les URLs de retour Checkout (évite /en/en)
"""
from typing import Any, Dict, Optional
from urllib.parse import urlsplit

import stripe

from atelier.config import Settings, get_settings
from atelier.errors import ConfigurationError

def get_stripe(settings: Optional[Settings] = None) -> stripe.StripeClient:
    """
    Construit un client Stripe prêt à l'emploi.
    - Aucune requête réseau à la construction.
    - ConfigurationError si STRIPE_SECRET_KEY est absent: le paiement ne peut pas continuer.
    """
    settings = settings or get_settings()
    if not settings.stripe_secret_key:
        raise ConfigurationError("Missing STRIPE_SECRET_KEY")
    return stripe.StripeClient(settings.stripe_secret_key, stripe_version=settings.stripe_api_version)

def get_site_url(settings: Optional[Settings] = None) -> str:
    """Origine seule (schéma + hôte[:port]), sans chemin ni slash final."""
    settings = settings or get_settings()
    url = (settings.site_url or "http://localhost:8000").rstrip("/")
    parts = urlsplit(url)
    if parts.scheme and parts.netloc:
        return f"{parts.scheme}://{parts.netloc}"
    return "/".join(url.split("/")[:3]) or url

def create_checkout_session(client: stripe.StripeClient, params: Dict[str, Any]) -> Any:
    return client.v1.checkout.sessions.create(params=params)

def construct_event(client: stripe.StripeClient, payload: bytes, signature: str, secret: str) -> Any:
    """Valide la signature Stripe-Signature et retourne l'événement."""
    return client.construct_event(payload, signature, secret)
