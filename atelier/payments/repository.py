"""
Accès aux données pour la feature 'payments' (tables 'configurations' et 'orders').
"""
from typing import Any, Dict, Optional
import logging

import atelier.infra.supabase_client as supabase_client

logger = logging.getLogger(__name__)

class RepositoryError(Exception):
    pass

def insert_configuration(data: Dict[str, Any]) -> str:
    """
    Insère une configuration (custom ou built) en statut 'pending' et retourne son id.
    - Lève RepositoryError avec le message Supabase en cas d'échec.
    """
    try:
        res = (
            supabase_client.get_service_supabase()
            .table("configurations")
            .insert(data)
            .execute()
        )
    except Exception as e:
        logger.exception("payments.repository.insert_configuration failed type=%s", data.get("type"))
        raise RepositoryError(str(e)) from e
    rows = getattr(res, "data", None) or []
    if not rows or not rows[0].get("id"):
        raise RepositoryError("configuration insert returned no id")
    return str(rows[0]["id"])

def mark_configuration_paid(configuration_id: str) -> bool:
    try:
        (
            supabase_client.get_service_supabase()
            .table("configurations")
            .update({"status": "paid"})
            .eq("id", configuration_id)
            .execute()
        )
        return True
    except Exception:
        logger.exception("payments.repository.mark_configuration_paid failed id=%s", configuration_id)
        return False

def insert_order(data: Dict[str, Any]) -> Optional[dict]:
    try:
        res = supabase_client.get_service_supabase().table("orders").insert(data).execute()
        rows = getattr(res, "data", None) or []
        if isinstance(rows, list) and rows:
            return rows[0]
        return {"status": "ok"}
    except Exception:
        logger.exception("payments.repository.insert_order failed session=%s", data.get("stripe_session_id"))
        return None
