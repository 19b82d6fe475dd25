"""
Accès aux catégories de montres (table 'watch_categories').

Le résultat de la requête est modélisé explicitement:
  - Fetched(rows): la table a renvoyé au moins une ligne, transmise telle quelle
  - Unavailable(reason): erreur (réseau, auth, schéma) ou table vide
Unavailable se résout toujours vers FALLBACK_CATEGORIES.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, TypedDict, Union
import logging

import atelier.infra.supabase_client as supabase_client
from .data import SHOP_CATEGORIES

logger = logging.getLogger(__name__)

CATEGORY_COLUMNS = "id, slug, label_en, label_fr, sort_order, image_url, display_price"
PRODUCT_COLUMNS = "id, name, description, specifications, price, original_price, image, stock, category"


class WatchCategory(TypedDict):
    id: str
    slug: str
    label_en: str
    label_fr: str
    sort_order: int
    image_url: Optional[str]
    display_price: Optional[float]


@dataclass(frozen=True)
class Fetched:
    rows: List[Dict[str, Any]]


@dataclass(frozen=True)
class Unavailable:
    reason: str


CategoryResult = Union[Fetched, Unavailable]


def _build_fallback() -> List[WatchCategory]:
    return [
        {
            "id": f"fallback-{c['slug']}",
            "slug": c["slug"],
            "label_en": c["label_en"],
            "label_fr": c["label_fr"],
            "sort_order": i + 1,
            "image_url": None,
            "display_price": None,
        }
        for i, c in enumerate(SHOP_CATEGORIES)
    ]

# Construite une seule fois au chargement du module
FALLBACK_CATEGORIES: List[WatchCategory] = _build_fallback()


def fetch_categories() -> CategoryResult:
    """Interroge la table; n'émet jamais d'exception."""
    try:
        res = (
            supabase_client.get_supabase()
            .table("watch_categories")
            .select(CATEGORY_COLUMNS)
            .order("sort_order", desc=False)
            .execute()
        )
    except Exception as e:
        return Unavailable(reason=f"query failed: {e}")
    rows = list(getattr(res, "data", None) or [])
    if not rows:
        return Unavailable(reason="no rows")
    return Fetched(rows=rows)


def resolve_categories(result: CategoryResult) -> List[WatchCategory]:
    if isinstance(result, Fetched):
        return result.rows
    logger.warning("catalog.repository using fallback categories reason=%s", result.reason)
    return [dict(c) for c in FALLBACK_CATEGORIES]


def get_watch_categories() -> List[WatchCategory]:
    """Catégories ordonnées par sort_order; jamais vide, ne lève jamais."""
    return resolve_categories(fetch_categories())


def find_category(categories: List[WatchCategory], slug: str) -> Optional[WatchCategory]:
    return next((c for c in categories if c.get("slug") == slug), None)


def list_category_products(category: str) -> List[dict]:
    """
    Produits actifs d'une catégorie, du plus récent au plus ancien.
    - Retourne [] en cas d'erreur.
    """
    if not category:
        return []
    try:
        res = (
            supabase_client.get_supabase()
            .table("products")
            .select(PRODUCT_COLUMNS)
            .eq("active", True)
            .eq("category", category)
            .order("created_at", desc=True)
            .execute()
        )
        return res.data or []
    except Exception:
        logger.exception("catalog.repository.list_category_products failed category=%s", category)
        return []


def get_product(product_id: str) -> Optional[dict]:
    """Produit actif par identifiant; None si inconnu, inactif ou en cas d'erreur."""
    if not product_id:
        return None
    try:
        res = (
            supabase_client.get_supabase()
            .table("products")
            .select(PRODUCT_COLUMNS)
            .eq("id", product_id)
            .eq("active", True)
            .single()
            .execute()
        )
        return res.data or None
    except Exception:
        logger.warning("catalog.repository.get_product failed id=%s", product_id, exc_info=True)
        return None
