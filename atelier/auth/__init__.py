from .session import (
    ACCESS_COOKIE_NAME,
    REFRESH_COOKIE_NAME,
    SessionCookie,
    SessionState,
    ANONYMOUS,
    EXPIRED,
    refresh_session,
    apply_session_cookies,
    clear_session_cookies,
)
from .security import get_session_state, get_optional_user, is_admin

__all__ = [
    "ACCESS_COOKIE_NAME",
    "REFRESH_COOKIE_NAME",
    "SessionCookie",
    "SessionState",
    "ANONYMOUS",
    "EXPIRED",
    "refresh_session",
    "apply_session_cookies",
    "clear_session_cookies",
    "get_session_state",
    "get_optional_user",
    "is_admin",
]
