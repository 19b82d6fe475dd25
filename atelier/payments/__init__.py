"""
Module 'payments' (feature-first): point d'entrée public.
Réunit client Stripe, repository BD (configurations, orders) et services.
"""
from .stripe_client import get_stripe, get_site_url, create_checkout_session, construct_event
from .service import PreparedOrder, prepare_order, build_checkout_params, handle_event

__all__ = [
    "get_stripe",
    "get_site_url",
    "create_checkout_session",
    "construct_event",
    "PreparedOrder",
    "prepare_order",
    "build_checkout_params",
    "handle_event",
]
