"""
Configuration statique des styles de montres (navigation + catégories de boutique).
Sert aussi de source pour la liste de secours des catégories (repository.FALLBACK_CATEGORIES).
"""
from typing import Dict, List, Tuple

SHOP_CATEGORY_SLUGS: Tuple[str, ...] = (
    "womens",
    "stealth",
    "sub-gmt",
    "chronograph",
    "44mm-diver",
    "others",
    "dj",
    "dd",
    "naut",
    "oak",
    "g-oak",
    "sky",
)

# Ordre d'affichage de la barre de navigation
NAV_WATCH_ITEMS: List[Dict[str, str]] = [
    {"type": "configurator", "label_en": "Customizer", "label_fr": "Customiseur"},
    {"type": "shop", "label_en": "Most Popular", "label_fr": "Plus populaires"},
    {"type": "category", "slug": "womens", "label_en": "Womens", "label_fr": "Femmes"},
    {"type": "category", "slug": "stealth", "label_en": "Stealth", "label_fr": "Stealth"},
    {"type": "category", "slug": "sub-gmt", "label_en": "Sub/GMT", "label_fr": "Sub/GMT"},
    {"type": "category", "slug": "chronograph", "label_en": "Chronograph", "label_fr": "Chronographe"},
    {"type": "category", "slug": "44mm-diver", "label_en": "44mm Diver", "label_fr": "44mm Diver"},
    {"type": "category", "slug": "others", "label_en": "Others+", "label_fr": "Others+"},
    {"type": "category", "slug": "dj", "label_en": "DJ", "label_fr": "DJ"},
    {"type": "category", "slug": "dd", "label_en": "DD", "label_fr": "DD"},
    {"type": "category", "slug": "naut", "label_en": "Naut", "label_fr": "Naut"},
    {"type": "category", "slug": "oak", "label_en": "Oak", "label_fr": "Oak"},
    {"type": "category", "slug": "g-oak", "label_en": "G-OAK", "label_fr": "G-OAK"},
    {"type": "category", "slug": "sky", "label_en": "Sky", "label_fr": "Sky"},
]

SHOP_CATEGORIES: List[Dict[str, str]] = [item for item in NAV_WATCH_ITEMS if item["type"] == "category"]
