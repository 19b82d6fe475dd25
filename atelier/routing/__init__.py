from .locale import (
    RouteDecision,
    PASS_THROUGH,
    decide_route,
    has_locale_prefix,
    is_exempt_path,
    is_matcher_excluded,
    localized_path,
)
from .middleware import register_locale_middleware

__all__ = [
    "RouteDecision",
    "PASS_THROUGH",
    "decide_route",
    "has_locale_prefix",
    "is_exempt_path",
    "is_matcher_excluded",
    "localized_path",
    "register_locale_middleware",
]
