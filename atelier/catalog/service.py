"""
Cas d'usage 'catalog': navigation et normalisation des produits pour l'affichage.
"""
from typing import Any, Dict, List, Optional

from .repository import WatchCategory, get_watch_categories, list_category_products, get_product

DEFAULT_PRODUCT_IMAGE = "/_next/static/images/hero-1.svg"

# Catégorie toujours présente dans la barre de navigation, jamais dans les blocs de l'accueil
WOMENS_NAV_CATEGORY: WatchCategory = {
    "id": "nav-womens",
    "slug": "womens",
    "label_en": "Womens",
    "label_fr": "Femmes",
    "sort_order": 0,
    "image_url": None,
    "display_price": None,
}

def with_nav_categories(categories: List[WatchCategory]) -> List[WatchCategory]:
    """Ajoute 'womens' en tête si la base ne la fournit pas (navigation uniquement)."""
    if any(c.get("slug") == "womens" for c in categories):
        return list(categories)
    return [dict(WOMENS_NAV_CATEGORY), *categories]

def get_nav_categories() -> List[WatchCategory]:
    return with_nav_categories(get_watch_categories())

def category_label(category: WatchCategory, locale: str) -> str:
    if locale == "fr":
        return category.get("label_fr") or category.get("slug") or ""
    return category.get("label_en") or category.get("slug") or ""

def _to_float(value: Any, default: float = 0.0) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default

def normalize_product(row: Dict[str, Any]) -> Dict[str, Any]:
    original = row.get("original_price")
    return {
        "id": row.get("id"),
        "name": row.get("name") or "",
        "description": row.get("description") or "",
        "price": _to_float(row.get("price")),
        "original_price": _to_float(original) if original is not None else None,
        "image": row.get("image") or DEFAULT_PRODUCT_IMAGE,
        "stock": row.get("stock") or 0,
        "specifications": row.get("specifications") or "",
        "category": row.get("category") or None,
    }

def get_category_watches(category: str) -> List[Dict[str, Any]]:
    return [normalize_product(r) for r in list_category_products(category)]

def get_watch(product_id: str) -> Optional[Dict[str, Any]]:
    """Montre prête à expédier (produit actif normalisé), None si introuvable."""
    row = get_product(product_id)
    if not row:
        return None
    return normalize_product(row)
