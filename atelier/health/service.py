"""
Diagnostic de la connexion Supabase: résolution DNS de l'hôte puis une lecture d'une ligne
par table utilisée par la boutique.
"""
from typing import Any, Dict
from urllib.parse import urlparse
import logging
import socket

from atelier.config import SUPABASE_URL
from atelier.infra import supabase_client

logger = logging.getLogger(__name__)

CHECKED_TABLES = ("watch_categories", "site_settings", "products")

def _check_table(client, name: str) -> Dict[str, Any]:
    try:
        res = client.table(name).select("*").limit(1).execute()
        return {"ok": True, "rows": len(res.data or [])}
    except Exception as e:
        return {"ok": False, "error": str(e)}

def _resolve(hostname: str):
    try:
        socket.getaddrinfo(hostname, 443)
        return True, None
    except OSError as e:
        return False, str(e)

def health_supabase_info() -> Dict[str, Any]:
    parsed = urlparse(SUPABASE_URL) if SUPABASE_URL else None
    hostname = parsed.hostname if parsed else None
    dns_ok, dns_error = _resolve(hostname) if hostname else (None, None)

    info: Dict[str, Any] = {
        "supabase_url": SUPABASE_URL,
        "hostname": hostname,
        "dns_ok": dns_ok,
        "dns_error": dns_error,
        "connect_ok": False,
        "error": None,
        "tables": {},
    }
    try:
        client = supabase_client.get_supabase()
        for t in CHECKED_TABLES:
            info["tables"][t] = _check_table(client, t)
        info["connect_ok"] = True
    except Exception as e:
        logger.warning("health.supabase failed: %s", e)
        info["error"] = str(e)
    return info
