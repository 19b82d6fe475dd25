"""
Module 'configurator' (feature-first): construction d'une montre sur mesure.
"""
from .service import InvalidSelection, PricedSelection, get_configurator_steps, price_selection

__all__ = [
    "InvalidSelection",
    "PricedSelection",
    "get_configurator_steps",
    "price_selection",
]
