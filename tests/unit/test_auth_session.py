from types import SimpleNamespace
from unittest.mock import MagicMock

from starlette.responses import Response

from atelier.auth.security import is_admin
from atelier.config import Settings

from atelier.auth.session import (
    ANONYMOUS,
    EXPIRED,
    ACCESS_COOKIE_NAME,
    REFRESH_COOKIE_NAME,
    SessionCookie,
    refresh_session,
    apply_session_cookies,
    clear_session_cookies,
)

def _user(uid="u-1", email="a@example.com"):
    return SimpleNamespace(id=uid, email=email, user_metadata={"full_name": "Ada"})

def test_no_cookies_is_anonymous_without_client():
    factory = MagicMock()
    assert refresh_session({}, factory) is ANONYMOUS
    factory.assert_not_called()

def test_valid_access_token_returns_user_without_new_cookies():
    client = MagicMock()
    client.auth.get_user.return_value = SimpleNamespace(user=_user())
    state = refresh_session({ACCESS_COOKIE_NAME: "tok"}, lambda: client)
    assert state.is_authenticated
    assert state.user == {"id": "u-1", "email": "a@example.com", "metadata": {"full_name": "Ada"}}
    assert state.cookies == ()
    client.auth.refresh_session.assert_not_called()

def test_expired_access_token_is_refreshed():
    client = MagicMock()
    client.auth.get_user.side_effect = Exception("JWT expired")
    client.auth.refresh_session.return_value = SimpleNamespace(
        user=_user(),
        session=SimpleNamespace(access_token="new-access", refresh_token="new-refresh"),
    )
    state = refresh_session({ACCESS_COOKIE_NAME: "old", REFRESH_COOKIE_NAME: "r1"}, lambda: client)
    client.auth.refresh_session.assert_called_once_with("r1")
    assert state.user["id"] == "u-1"
    assert state.cookies == (
        SessionCookie(ACCESS_COOKIE_NAME, "new-access"),
        SessionCookie(REFRESH_COOKIE_NAME, "new-refresh"),
    )

def test_refresh_failure_expires_session():
    client = MagicMock()
    client.auth.get_user.side_effect = Exception("JWT expired")
    client.auth.refresh_session.side_effect = Exception("network down")
    state = refresh_session({ACCESS_COOKIE_NAME: "old", REFRESH_COOKIE_NAME: "r1"}, lambda: client)
    assert state is EXPIRED
    assert state.user is None
    assert state.clear_cookies

def test_client_factory_failure_degrades_to_anonymous():
    def _boom():
        raise RuntimeError("no supabase url")
    assert refresh_session({REFRESH_COOKIE_NAME: "r1"}, _boom) is ANONYMOUS

def test_apply_and_clear_cookies():
    res = Response()
    apply_session_cookies(res, (SessionCookie(ACCESS_COOKIE_NAME, "a"),))
    header = res.headers["set-cookie"]
    assert "sb_access=a" in header
    assert "HttpOnly" in header
    assert "Path=/" in header
    assert "samesite=lax" in header.lower()

    cleared = Response()
    clear_session_cookies(cleared)
    values = [v for k, v in cleared.raw_headers if k == b"set-cookie"]
    assert len(values) == 2

def test_rejected_access_token_without_refresh_expires_session():
    client = MagicMock()
    client.auth.get_user.side_effect = Exception("invalid JWT")
    state = refresh_session({ACCESS_COOKIE_NAME: "stale"}, lambda: client)
    assert state is EXPIRED
    client.auth.refresh_session.assert_not_called()

def test_refresh_without_new_access_token_expires_session():
    client = MagicMock()
    client.auth.refresh_session.return_value = SimpleNamespace(user=None, session=None)
    assert refresh_session({REFRESH_COOKIE_NAME: "r1"}, lambda: client) is EXPIRED

def test_client_factory_failure_keeps_cookies():
    def _boom():
        raise RuntimeError("no supabase url")
    assert not refresh_session({ACCESS_COOKIE_NAME: "a"}, _boom).clear_cookies

def test_secure_flag_follows_caller():
    res = Response()
    apply_session_cookies(res, (SessionCookie(ACCESS_COOKIE_NAME, "a"),), secure=True)
    assert "secure" in res.headers["set-cookie"].lower()

    plain = Response()
    apply_session_cookies(plain, (SessionCookie(ACCESS_COOKIE_NAME, "a"),))
    assert "secure" not in plain.headers["set-cookie"].lower()

def test_admin_ids_come_from_settings():
    settings = Settings(admin_user_ids=("admin-1",))
    assert is_admin("admin-1", settings)
    assert not is_admin("u-2", settings)
    assert not is_admin(None, settings)
