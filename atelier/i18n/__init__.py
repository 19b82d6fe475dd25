"""
Résolution des dictionnaires de traduction.
- get_dictionary(locale): lookup pur, sans I/O; l'appelant garantit une locale supportée
  (voir atelier.pages.layout.require_locale).
- Les dictionnaires retournés sont en lecture seule (MappingProxyType).
"""
from types import MappingProxyType
from typing import Any, Mapping

from atelier.config import LOCALES, DEFAULT_LOCALE
from .dictionaries import DICTIONARIES

LOCALE_LABELS: Mapping[str, str] = MappingProxyType({
    "en": "English",
    "fr": "Français",
})

def _freeze(value: Any) -> Any:
    if isinstance(value, dict):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    return value

_FROZEN: Mapping[str, Mapping[str, Any]] = _freeze(DICTIONARIES)

def is_supported_locale(locale: Any) -> bool:
    return isinstance(locale, str) and locale in LOCALES

def get_dictionary(locale: str) -> Mapping[str, Any]:
    return _FROZEN[locale]

__all__ = [
    "LOCALES",
    "DEFAULT_LOCALE",
    "LOCALE_LABELS",
    "is_supported_locale",
    "get_dictionary",
]
