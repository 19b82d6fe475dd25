from typing import Any, Dict, Optional
from fastapi import Request

from atelier.config import Settings, get_settings
from .session import ANONYMOUS, SessionState

def get_session_state(request: Request) -> SessionState:
    """SessionState posé par le routeur de locale (anonyme si absent, ex: tests unitaires)."""
    return getattr(request.state, "session", None) or ANONYMOUS

def get_optional_user(request: Request) -> Optional[Dict[str, Any]]:
    return get_session_state(request).user

def is_admin(user_id: Optional[str], settings: Optional[Settings] = None) -> bool:
    settings = settings or get_settings()
    return bool(user_id) and user_id in settings.admin_user_ids
