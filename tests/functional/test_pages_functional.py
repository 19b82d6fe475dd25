import re

import pytest

PRODUCTS = [
    {"id": "p-1", "name": "Oak Blue 41", "description": "", "price": 1200, "original_price": 1500, "image": None, "stock": 2},
]


def test_root_lands_on_english_home(client):
    res = client.get("/")
    assert res.status_code == 200
    assert str(res.url).endswith("/en")
    assert '<html lang="en-CA">' in res.text
    assert 'href="/en/configurator"' in res.text
    # 'womens' toujours présent dans la navigation
    assert 'href="/en/shop/womens"' in res.text


def test_french_home(client):
    res = client.get("/fr")
    assert res.status_code == 200
    assert "Accueil" in res.text
    assert "Femmes" in res.text
    assert 'hreflang="en-CA"' in res.text


def test_shop_lists_categories(client):
    res = client.get("/en/shop")
    assert res.status_code == 200
    assert 'href="/en/shop/g-oak"' in res.text


def test_category_page_lists_products(client, fake_supabase):
    fake_supabase.tables["products"] = PRODUCTS
    res = client.get("/en/shop/oak")
    assert res.status_code == 200
    assert "Oak Blue 41" in res.text
    assert "C$1,200.00" in res.text
    assert "BreadcrumbList" in res.text


def test_category_prices_in_usd(client, fake_supabase):
    fake_supabase.tables["products"] = PRODUCTS
    client.cookies.set("currency", "USD")
    res = client.get("/en/shop/oak")
    assert "$960.00" in res.text


def test_unknown_category_is_404(client):
    assert client.get("/en/shop/unknown").status_code == 404


def test_unknown_page_renders_not_found_page(client):
    res = client.get("/en/de", headers={"Accept": "text/html"})
    assert res.status_code == 404
    assert "Page not found." in res.text


def test_not_found_page_is_localized(client):
    res = client.get("/fr/shop/unknown", headers={"Accept": "text/html"})
    assert res.status_code == 404
    assert "Page introuvable." in res.text


def test_faq_uses_defaults(client):
    res = client.get("/en/faq")
    assert res.status_code == 200
    assert "How long does a custom build take?" in res.text


def test_footer_uses_stored_settings(client, fake_supabase):
    fake_supabase.tables["site_settings"] = [{"value": {"contact_email": "studio@example.com"}}]
    res = client.get("/en/faq")
    assert "studio@example.com" in res.text


@pytest.mark.parametrize("path", ["/en/checkout/success?session_id=cs_1", "/fr/checkout/cancel"])
def test_checkout_return_pages(client, path):
    assert client.get(path).status_code == 200


STEPS = [
    {"id": "s1", "label_en": "Case", "label_fr": "Boîtier", "sort_order": 1},
    {"id": "s2", "label_en": "Dial", "label_fr": "Cadran", "sort_order": 2},
]
OPTIONS = [
    {"id": "o1", "step_id": "s1", "parent_option_id": None, "label_en": "Steel 41", "label_fr": "Acier 41", "price": 900},
    {"id": "o2", "step_id": "s2", "parent_option_id": "o1", "label_en": "Black", "label_fr": "Noir", "price": 150},
]


def test_configurator_lists_steps_and_options(client, fake_supabase):
    fake_supabase.tables["configurator_steps"] = STEPS
    fake_supabase.tables["configurator_options"] = OPTIONS
    res = client.get("/fr/configurator")
    assert res.status_code == 200
    assert "Boîtier" in res.text
    assert "Acier 41" in res.text
    assert 'value="o2"' in res.text
    assert 'data-parent="o1"' in res.text
    assert "C$900.00" in res.text
    assert 'data-checkout="custom"' in res.text


def test_configurator_without_steps(client):
    res = client.get("/en/configurator")
    assert res.status_code == 200
    assert "The configurator is being updated" in res.text


def test_product_page(client, fake_supabase):
    fake_supabase.tables["products"] = [dict(PRODUCTS[0], category="oak", specifications="41 mm, sapphire")]
    res = client.get("/en/shop/product/p-1")
    assert res.status_code == 200
    assert "Oak Blue 41" in res.text
    assert "41 mm, sapphire" in res.text
    assert 'data-product-id="p-1"' in res.text
    assert 'href="/en/shop/oak"' in res.text
    assert "BreadcrumbList" in res.text


def test_sold_out_product_has_no_purchase_form(client, fake_supabase):
    fake_supabase.tables["products"] = [dict(PRODUCTS[0], stock=0)]
    res = client.get("/fr/shop/product/p-1")
    assert res.status_code == 200
    assert "Épuisé" in res.text
    assert "data-checkout" not in res.text


def test_unknown_product_is_404(client):
    assert client.get("/en/shop/product/missing").status_code == 404


@pytest.mark.parametrize("locale", ["en", "fr"])
def test_internal_links_resolve(client, fake_supabase, locale):
    fake_supabase.tables["products"] = PRODUCTS
    pages = [f"/{locale}", f"/{locale}/shop/oak", f"/{locale}/checkout/cancel"]
    links = set()
    for page in pages:
        links.update(re.findall(r'href="(/[^"]*)"', client.get(page).text))
    assert f"/{locale}/configurator" in links
    for link in sorted(links):
        assert client.get(link).status_code == 200, link
