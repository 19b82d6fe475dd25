"""
Module 'catalog' (feature-first): catégories de montres et produits par catégorie.
"""
from .repository import (
    WatchCategory,
    Fetched,
    Unavailable,
    FALLBACK_CATEGORIES,
    fetch_categories,
    resolve_categories,
    get_watch_categories,
    find_category,
)
from .service import with_nav_categories, get_nav_categories, category_label, get_category_watches, get_watch

__all__ = [
    "WatchCategory",
    "Fetched",
    "Unavailable",
    "FALLBACK_CATEGORIES",
    "fetch_categories",
    "resolve_categories",
    "get_watch_categories",
    "find_category",
    "with_nav_categories",
    "get_nav_categories",
    "category_label",
    "get_category_watches",
    "get_watch",
]
