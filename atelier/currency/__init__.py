from .service import (
    CURRENCY_COOKIE_NAME,
    CURRENCIES,
    DEFAULT_CURRENCY,
    FALLBACK_RATE,
    parse_currency,
    get_usd_to_cad_rate,
    format_price,
)

__all__ = [
    "CURRENCY_COOKIE_NAME",
    "CURRENCIES",
    "DEFAULT_CURRENCY",
    "FALLBACK_RATE",
    "parse_currency",
    "get_usd_to_cad_rate",
    "format_price",
]
