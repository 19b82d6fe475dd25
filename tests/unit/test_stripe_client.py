import pytest

from atelier.config import Settings, STRIPE_API_VERSION
from atelier.errors import ConfigurationError
from atelier.payments import stripe_client

def test_missing_secret_raises_before_any_client(monkeypatch):
    created = []
    monkeypatch.setattr(stripe_client.stripe, "StripeClient", lambda *a, **k: created.append((a, k)))
    with pytest.raises(ConfigurationError):
        stripe_client.get_stripe(Settings(stripe_secret_key=""))
    assert created == []

def test_client_bound_to_fixed_api_version(monkeypatch):
    captured = {}

    class _FakeClient:
        def __init__(self, api_key, **kwargs):
            captured["api_key"] = api_key
            captured.update(kwargs)

    monkeypatch.setattr(stripe_client.stripe, "StripeClient", _FakeClient)
    client = stripe_client.get_stripe(Settings(stripe_secret_key="sk_test_1"))
    assert isinstance(client, _FakeClient)
    assert captured["api_key"] == "sk_test_1"
    assert captured["stripe_version"] == STRIPE_API_VERSION == "2026-01-28.clover"

def test_real_client_construction_is_offline():
    client = stripe_client.get_stripe(Settings(stripe_secret_key="sk_test_offline"))
    assert client is not None

@pytest.mark.parametrize("url,expected", [
    ("https://shop.example.com/en", "https://shop.example.com"),
    ("https://shop.example.com/", "https://shop.example.com"),
    ("http://localhost:3000", "http://localhost:3000"),
])
def test_site_url_is_origin(url, expected):
    assert stripe_client.get_site_url(Settings(site_url=url)) == expected
