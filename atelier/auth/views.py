"""Endpoints de session (JSON): état courant et déconnexion."""
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from .security import get_session_state, is_admin
from .session import clear_session_cookies

router = APIRouter(prefix="/api/auth", tags=["Auth API"])

@router.get("/session")
def current_session(request: Request):
    """Utilisateur de la session rafraîchie par le routeur de locale (null si anonyme)."""
    state = get_session_state(request)
    user = state.user
    return {"user": user, "is_admin": is_admin((user or {}).get("id"))}

@router.post("/signout")
def signout():
    res = JSONResponse({"ok": True})
    clear_session_cookies(res)
    return res
