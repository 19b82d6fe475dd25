from .repository import get_setting
from .service import get_home_style_cards, get_footer_settings, get_faq_settings

__all__ = [
    "get_setting",
    "get_home_style_cards",
    "get_footer_settings",
    "get_faq_settings",
]
