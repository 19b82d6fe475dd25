"""Atelier: boutique bilingue (en/fr) d'un atelier d'horlogerie sur mesure."""
