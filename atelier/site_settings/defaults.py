"""Valeurs par défaut des réglages éditables (accueil, pied de page, FAQ)."""
from typing import Any, Dict

HOME_STYLE_CARDS_KEY = "home_style_cards"
FOOTER_KEY = "footer"
FAQ_KEY = "faq"

DEFAULT_SHOP_IMAGE = "https://images.unsplash.com/photo-1612817159949-195b6eb9e31a?w=800&q=80"

DEFAULT_HOME_STYLE_CARDS: Dict[str, Dict[str, Any]] = {
    "custom_build": {
        "title_en": "Custom Build",
        "title_fr": "Construction sur mesure",
        "description_en": "Design dial, case, movement, and strap. Live pricing. Reviewed before it ships.",
        "description_fr": "Concevez cadran, boîtier, mouvement et bracelet. Prix en direct. Révisé avant expédition.",
        "image_url": "",
        "price": None,
    },
    "shop": {
        "title_en": "Watches",
        "title_fr": "Montres",
        "image_url": DEFAULT_SHOP_IMAGE,
        "price": None,
    },
}

DEFAULT_FOOTER: Dict[str, Any] = {
    "brand_title_en": "Ciavaglia Timepieces",
    "brand_title_fr": "Ciavaglia Timepieces",
    "brand_description_en": "Custom timepieces, crafted in Montreal.",
    "brand_description_fr": "Montres sur mesure, conçues à Montréal.",
    "explore_heading_en": "Explore",
    "explore_heading_fr": "Explorer",
    "explore_links": [
        {"label_en": "Watches", "label_fr": "Montres", "path": "/shop"},
        {"label_en": "Configurator", "label_fr": "Configurateur", "path": "/configurator"},
    ],
    "resources_heading_en": "Resources",
    "resources_heading_fr": "Ressources",
    "resources_links": [
        {"label_en": "FAQ", "label_fr": "FAQ", "path": "/faq"},
        {"label_en": "Email us", "label_fr": "Écrivez-nous", "path": "mailto:ciavagliatimepieces@gmail.com"},
    ],
    "contact_heading_en": "Contact",
    "contact_heading_fr": "Contact",
    "contact_email": "ciavagliatimepieces@gmail.com",
    "contact_phone": "+1 514 243 2116",
    "contact_city_en": "Montreal",
    "contact_city_fr": "Montréal",
    "copyright_text_en": "Ciavaglia Timepieces · Montreal",
    "copyright_text_fr": "Ciavaglia Timepieces · Montréal",
}

DEFAULT_FAQ: Dict[str, Any] = {
    "heading_en": "Questions answered in full.",
    "heading_fr": "Questions détaillées.",
    "intro_en": "If you need more detail, email us and we will respond within one business day.",
    "intro_fr": "Si vous avez besoin de plus de détails, écrivez-nous et nous répondrons sous un jour ouvrable.",
    "items": [
        {
            "question_en": "How long does a custom build take?",
            "question_fr": "Combien de temps prend une construction sur mesure ?",
            "answer_en": "Custom builds take 4-8 weeks depending on movement complexity and hand-finishing requirements.",
            "answer_fr": "Les constructions sur mesure prennent 4 à 8 semaines selon la complexité du mouvement et les finitions à la main.",
        },
        {
            "question_en": "Do you ship internationally?",
            "question_fr": "Livrez-vous à l'international ?",
            "answer_en": "Yes. We ship worldwide with insured, tracked delivery and signature confirmation.",
            "answer_fr": "Oui. Nous livrons dans le monde entier avec assurance, suivi et signature.",
        },
        {
            "question_en": "Can I update my configuration after payment?",
            "question_fr": "Puis-je modifier ma configuration après le paiement ?",
            "answer_en": "Minor adjustments are possible within 48 hours of purchase. Contact our support team immediately.",
            "answer_fr": "Des ajustements mineurs sont possibles dans les 48 heures suivant l'achat. Contactez notre équipe sans tarder.",
        },
    ],
}
