import json

from atelier.site_settings import service
from atelier.site_settings.defaults import DEFAULT_FOOTER, DEFAULT_FAQ

def test_defaults_when_no_row(fake_supabase):
    assert service.get_footer_settings() == DEFAULT_FOOTER
    assert service.get_faq_settings() == DEFAULT_FAQ

def test_stored_values_override_known_keys(fake_supabase):
    fake_supabase.tables["site_settings"] = [{"value": {"contact_email": "hi@example.com", "unknown": 1, "contact_phone": None}}]
    footer = service.get_footer_settings()
    assert footer["contact_email"] == "hi@example.com"
    assert footer["contact_phone"] == DEFAULT_FOOTER["contact_phone"]
    assert "unknown" not in footer

def test_nested_cards_are_merged(fake_supabase):
    fake_supabase.tables["site_settings"] = [{"value": json.dumps({"shop": {"price": 950}})}]
    cards = service.get_home_style_cards()
    assert cards["shop"]["price"] == 950
    assert cards["shop"]["title_en"] == "Watches"
    assert cards["custom_build"]["title_fr"] == "Construction sur mesure"

def test_invalid_json_falls_back(fake_supabase):
    fake_supabase.tables["site_settings"] = [{"value": "{not json"}]
    assert service.get_faq_settings() == DEFAULT_FAQ

def test_query_error_falls_back(fake_supabase):
    fake_supabase.errors["site_settings"] = Exception("timeout")
    assert service.get_footer_settings() == DEFAULT_FOOTER
