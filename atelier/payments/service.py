"""
Cas d'usage 'payments': orchestre repository, catalogue et client Stripe.
- prepare_order: valide le payload, enregistre la configuration 'pending', calcule résumé et montant
- build_checkout_params: paramètres de la session Checkout (URLs de retour localisées, metadata)
- handle_event: consomme checkout.session.completed (configuration payée + commande)
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional
import logging

from fastapi import HTTPException

from atelier.catalog import repository as catalog_repository
from atelier.config import DEFAULT_LOCALE
from atelier.configurator import InvalidSelection, price_selection
from atelier.i18n import is_supported_locale
from . import repository

logger = logging.getLogger(__name__)

CHECKOUT_CURRENCY = "usd"
DEFAULT_SUMMARY = "Ciavaglia timepiece"


@dataclass(frozen=True)
class PreparedOrder:
    locale: str
    type: str
    summary: str
    amount: float
    configuration_id: Optional[str]
    user_id: Optional[str]


def read_field(obj: Any, key: str, default: Any = None) -> Any:
    """Lecture tolérante: dict ou objet Stripe (attributs)."""
    if obj is None:
        return default
    if isinstance(obj, dict):
        return obj.get(key, default)
    return getattr(obj, key, default)


def _amount(value: Any) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        raise HTTPException(status_code=400, detail="Invalid price")


def prepare_order(payload: Dict[str, Any]) -> PreparedOrder:
    """
    Body attendu:
      { "locale": "en", "type": "custom"|"built", "userId": "...",
        "configuration": {...}, "productId": "..." }
    - custom avec configuration.steps (identifiants d'options): prix et résumé recalculés
      depuis le configurateur (400 si la sélection est invalide)
    - custom sans steps: résumé « Custom build · case / dial / strap », montant configuration.price
    - built: produit lu dans 'products' (404 si inconnu)
    - 400 si type inconnu ou insertion de la configuration impossible
    """
    order_type = payload.get("type")
    if order_type not in ("custom", "built"):
        raise HTTPException(status_code=400, detail="Invalid checkout type")

    locale = payload.get("locale")
    if not is_supported_locale(locale):
        locale = DEFAULT_LOCALE
    user_id = payload.get("userId") or None

    summary = DEFAULT_SUMMARY
    amount = 0.0
    configuration_id: Optional[str] = None

    configuration = payload.get("configuration")
    product_id = payload.get("productId")

    if order_type == "custom" and configuration:
        if not isinstance(configuration, dict):
            raise HTTPException(status_code=400, detail="Invalid configuration")
        if isinstance(configuration.get("steps"), list):
            try:
                priced = price_selection(configuration["steps"])
            except InvalidSelection as e:
                raise HTTPException(status_code=400, detail=str(e))
            summary = "Custom build · " + " / ".join(priced.labels)
            amount = priced.price
            configuration = {**configuration, "steps": list(priced.option_ids), "price": amount}
        else:
            summary = (
                f"Custom build · {configuration.get('case')} / "
                f"{configuration.get('dial')} / {configuration.get('strap')}"
            )
            amount = _amount(configuration.get("price"))
        try:
            configuration_id = repository.insert_configuration({
                "type": "custom",
                "options": configuration,
                "status": "pending",
                "price": amount,
                "user_id": user_id,
            })
        except repository.RepositoryError as e:
            raise HTTPException(status_code=400, detail=str(e))

    if order_type == "built" and product_id:
        product = catalog_repository.get_product(str(product_id))
        if not product:
            raise HTTPException(status_code=404, detail="Unknown product")
        name = product.get("name") or ""
        summary = f"Built watch · {name}"
        amount = _amount(product.get("price"))
        try:
            configuration_id = repository.insert_configuration({
                "type": "built",
                "options": {"product_id": str(product.get("id")), "title": name},
                "status": "pending",
                "price": amount,
                "user_id": user_id,
            })
        except repository.RepositoryError as e:
            raise HTTPException(status_code=400, detail=str(e))

    return PreparedOrder(
        locale=locale,
        type=order_type,
        summary=summary,
        amount=amount,
        configuration_id=configuration_id,
        user_id=user_id,
    )


def build_checkout_params(order: PreparedOrder, site_url: str) -> Dict[str, Any]:
    return {
        "mode": "payment",
        "line_items": [
            {
                "quantity": 1,
                "price_data": {
                    "currency": CHECKOUT_CURRENCY,
                    "product_data": {"name": order.summary},
                    "unit_amount": int(round(order.amount * 100)),
                },
            }
        ],
        "success_url": f"{site_url}/{order.locale}/checkout/success?session_id={{CHECKOUT_SESSION_ID}}",
        "cancel_url": f"{site_url}/{order.locale}/checkout/cancel",
        "metadata": {
            "configuration_id": order.configuration_id or "",
            "summary": order.summary,
            "locale": order.locale,
            "type": order.type,
            "user_id": order.user_id or "",
        },
        "billing_address_collection": "required",
        "allow_promotion_codes": True,
    }


def handle_event(event: Any) -> bool:
    """
    Traite un événement Stripe déjà validé.
    Retourne True si l'événement a été consommé (checkout.session.completed), False sinon.
    """
    if read_field(event, "type") != "checkout.session.completed":
        return False

    session = read_field(read_field(event, "data"), "object") or {}
    metadata = read_field(session, "metadata") or {}
    configuration_id = read_field(metadata, "configuration_id") or None
    summary = read_field(metadata, "summary") or "Ciavaglia order"
    user_id = read_field(metadata, "user_id") or None
    total = (read_field(session, "amount_total") or 0) / 100

    if configuration_id:
        repository.mark_configuration_paid(configuration_id)

    repository.insert_order({
        "configuration_id": configuration_id,
        "user_id": user_id,
        "total": total,
        "status": "paid",
        "summary": summary,
        "stripe_session_id": read_field(session, "id"),
    })
    logger.info("payments.webhook order recorded session=%s configuration=%s total=%s", read_field(session, "id"), configuration_id, total)
    return True
