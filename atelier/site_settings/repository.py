"""
Accès à la table générique 'site_settings' (clé -> JSON).
- get_setting: None si absente ou en cas d'erreur (les valeurs par défaut sont à la charge de l'appelant)
"""
from typing import Any, Optional
import json
import logging

import atelier.infra.supabase_client as supabase_client

logger = logging.getLogger(__name__)

def get_setting(key: str) -> Optional[Any]:
    if not key:
        return None
    try:
        res = (
            supabase_client.get_supabase()
            .table("site_settings")
            .select("value")
            .eq("key", key)
            .maybe_single()
            .execute()
        )
    except Exception:
        logger.warning("site_settings.repository.get_setting failed key=%s", key, exc_info=True)
        return None
    row = getattr(res, "data", None) if res is not None else None
    if not row:
        return None
    value = row.get("value")
    if isinstance(value, str):
        # Certaines lignes historiques stockent le JSON sous forme de texte
        try:
            return json.loads(value)
        except ValueError:
            logger.warning("site_settings.repository invalid JSON key=%s", key)
            return None
    return value
