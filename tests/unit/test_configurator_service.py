import pytest

from atelier.configurator import InvalidSelection, get_configurator_steps, price_selection

STEPS = [
    {"id": "s-case", "label_en": "Case", "label_fr": "Boîtier", "sort_order": 1},
    {"id": "s-dial", "label_en": "Dial", "label_fr": "Cadran", "sort_order": 2},
    {"id": "s-extra", "label_en": "Extra", "label_fr": "Extra", "sort_order": 3},
]
OPTIONS = [
    {"id": "o-steel", "step_id": "s-case", "parent_option_id": None, "label_en": "Steel 41", "price": "900"},
    {"id": "o-gold", "step_id": "s-case", "parent_option_id": None, "label_en": "Gold 39", "price": 2100},
    {"id": "o-dial-child", "step_id": "s-case", "parent_option_id": "o-steel", "label_en": "Hidden", "price": 1},
    {"id": "o-black", "step_id": "s-dial", "parent_option_id": "o-steel", "label_en": "Black", "price": 150},
    {"id": "o-blue", "step_id": "s-dial", "parent_option_id": None, "label_en": "Blue", "price": 175},
    {"id": "o-box", "step_id": "s-extra", "parent_option_id": None, "label_en": "Wooden box", "price": 80},
    {"id": "o-strap", "step_id": "s-extra", "parent_option_id": None, "label_en": "Spare strap", "price": 60},
]

@pytest.fixture()
def configurator_tables(fake_supabase):
    fake_supabase.tables["configurator_steps"] = STEPS
    fake_supabase.tables["configurator_options"] = OPTIONS
    return fake_supabase

def test_steps_group_options(configurator_tables):
    steps = get_configurator_steps()
    assert [s["id"] for s in steps] == ["s-case", "s-dial", "s-extra"]
    # Première étape: options racines uniquement
    assert [o["id"] for o in steps[0]["options"]] == ["o-steel", "o-gold"]
    assert steps[0]["options"][0]["price"] == 900.0
    assert [o["id"] for o in steps[1]["options"]] == ["o-black", "o-blue"]
    assert steps[2]["is_extra"] and not steps[0]["is_extra"]

def test_store_error_gives_no_steps(fake_supabase):
    fake_supabase.errors["configurator_steps"] = Exception("relation does not exist")
    assert get_configurator_steps() == []

def test_price_selection_sums_stored_prices(configurator_tables):
    priced = price_selection(["o-steel", "o-black", "o-box", "o-strap"])
    assert priced.price == 1190.0
    assert priced.labels == ("Steel 41", "Black", "Wooden box", "Spare strap")
    assert priced.option_ids == ("o-steel", "o-black", "o-box", "o-strap")

@pytest.mark.parametrize("ids", [
    [],
    ["o-unknown"],
    ["o-steel", "o-gold"],
    ["o-gold", "o-black"],
])
def test_invalid_selections(configurator_tables, ids):
    with pytest.raises(InvalidSelection):
        price_selection(ids)
