"""
Cas d'usage 'site_settings': fusionne le JSON stocké avec les valeurs par défaut.
La fusion se fait champ par champ; une clé absente ou un JSON invalide retombe sur le défaut.
"""
from copy import deepcopy
from typing import Any, Dict

from . import repository
from .defaults import (
    HOME_STYLE_CARDS_KEY,
    FOOTER_KEY,
    FAQ_KEY,
    DEFAULT_HOME_STYLE_CARDS,
    DEFAULT_FOOTER,
    DEFAULT_FAQ,
)

def _merge(defaults: Dict[str, Any], stored: Any) -> Dict[str, Any]:
    merged = deepcopy(defaults)
    if not isinstance(stored, dict):
        return merged
    for key, value in stored.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = _merge(merged[key], value)
        elif key in merged and value is not None:
            merged[key] = value
    return merged

def get_home_style_cards() -> Dict[str, Dict[str, Any]]:
    """Cartes « custom_build » et « shop » de l'accueil, toujours complètes."""
    return _merge(DEFAULT_HOME_STYLE_CARDS, repository.get_setting(HOME_STYLE_CARDS_KEY))

def get_footer_settings() -> Dict[str, Any]:
    return _merge(DEFAULT_FOOTER, repository.get_setting(FOOTER_KEY))

def get_faq_settings() -> Dict[str, Any]:
    return _merge(DEFAULT_FAQ, repository.get_setting(FAQ_KEY))
