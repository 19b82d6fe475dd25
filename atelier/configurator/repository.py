"""
Accès aux tables du configurateur ('configurator_steps', 'configurator_options').
Lecture publique via le client 'anon'; une erreur du store donne une liste vide.
"""
from typing import Any, Dict, List
import logging

import atelier.infra.supabase_client as supabase_client

logger = logging.getLogger(__name__)

STEP_COLUMNS = "id, label_en, label_fr, sort_order"
OPTION_COLUMNS = "id, step_id, parent_option_id, label_en, label_fr, letter, price, image_url, preview_image_url, sort_order"


def list_steps() -> List[Dict[str, Any]]:
    try:
        res = (
            supabase_client.get_supabase()
            .table("configurator_steps")
            .select(STEP_COLUMNS)
            .order("sort_order", desc=False)
            .execute()
        )
        return list(res.data or [])
    except Exception:
        logger.exception("configurator.repository.list_steps failed")
        return []


def list_options() -> List[Dict[str, Any]]:
    """Toutes les options, toutes étapes confondues, dans l'ordre d'affichage."""
    try:
        res = (
            supabase_client.get_supabase()
            .table("configurator_options")
            .select(OPTION_COLUMNS)
            .order("sort_order", desc=False)
            .execute()
        )
        return list(res.data or [])
    except Exception:
        logger.exception("configurator.repository.list_options failed")
        return []
