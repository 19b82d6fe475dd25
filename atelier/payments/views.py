import logging
from typing import Any, Dict, Optional, Union

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.concurrency import run_in_threadpool

from atelier.config import get_settings
from atelier.utils.rate_limit import optional_rate_limit
from atelier.payments import stripe_client
from atelier.payments import service as payments_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["Payments API"])

class CheckoutRequest(BaseModel):
    type: str
    locale: Optional[str] = None
    userId: Optional[str] = None
    configuration: Optional[Dict[str, Any]] = None
    productId: Optional[Union[str, int]] = None

@router.post("/checkout", dependencies=[Depends(optional_rate_limit(times=15, seconds=60))])
async def create_checkout_session(req: CheckoutRequest):
    """
    Crée une session Checkout Stripe pour une montre configurée ou un modèle prêt à expédier.
    - Étapes:
      1) Construire le client Stripe (ConfigurationError -> 500 si clé absente, rien n'est écrit)
      2) Valider le payload et enregistrer la configuration (payments_service.prepare_order)
      3) Créer la session et renvoyer {url}
    - Erreurs: 422 corps invalide, 400 type inconnu / insertion impossible, 404 produit inconnu
    """
    settings = get_settings()
    client = stripe_client.get_stripe(settings)
    order = await run_in_threadpool(payments_service.prepare_order, req.model_dump())
    params = payments_service.build_checkout_params(order, stripe_client.get_site_url(settings))
    session = await run_in_threadpool(stripe_client.create_checkout_session, client, params)
    return JSONResponse({"url": payments_service.read_field(session, "url")})

@router.post("/webhook", include_in_schema=False)
async def stripe_webhook(request: Request):
    """
    Webhook Stripe: checkout.session.completed -> configuration 'paid' + ligne 'orders'.
    - 400 si l'en-tête Stripe-Signature manque ou si la signature est invalide
    - Répond toujours {"received": true} une fois l'événement validé
    """
    signature = request.headers.get("stripe-signature")
    if not signature:
        return JSONResponse({"error": "Missing Stripe signature"}, status_code=400)

    payload = await request.body()
    settings = get_settings()
    client = stripe_client.get_stripe(settings)
    try:
        event = stripe_client.construct_event(client, payload, signature, settings.stripe_webhook_secret)
    except Exception:
        logger.warning("payments.webhook invalid signature", exc_info=True)
        return JSONResponse({"error": "Invalid webhook signature"}, status_code=400)

    await run_in_threadpool(payments_service.handle_event, event)
    return JSONResponse({"received": True})
