from atelier.catalog import service

def test_nav_adds_womens_when_missing(fake_supabase):
    fake_supabase.tables["watch_categories"] = [
        {"id": "1", "slug": "oak", "label_en": "Oak", "label_fr": "Oak", "sort_order": 1},
    ]
    nav = service.get_nav_categories()
    assert [c["slug"] for c in nav] == ["womens", "oak"]

def test_nav_keeps_existing_womens():
    rows = [{"slug": "womens", "label_en": "W"}, {"slug": "sky"}]
    assert service.with_nav_categories(rows) == rows

def test_category_label():
    cat = {"slug": "chronograph", "label_en": "Chronograph", "label_fr": "Chronographe"}
    assert service.category_label(cat, "fr") == "Chronographe"
    assert service.category_label(cat, "en") == "Chronograph"
    assert service.category_label({"slug": "x"}, "fr") == "x"

def test_normalize_product_defaults():
    p = service.normalize_product({"id": "p1", "name": "Sky", "price": "1450.5", "original_price": None})
    assert p["price"] == 1450.5
    assert p["original_price"] is None
    assert p["image"] == service.DEFAULT_PRODUCT_IMAGE
    assert p["stock"] == 0
