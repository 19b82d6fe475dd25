from fastapi.templating import Jinja2Templates

from atelier.config import TEMPLATES_DIR
from atelier.currency import format_price

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

def localized(record, field: str, locale: str) -> str:
    """record.<field>_fr ou record.<field>_en selon la locale (repli sur l'anglais)."""
    if not record:
        return ""
    value = record.get(f"{field}_{locale}") if locale else None
    return value or record.get(f"{field}_en") or ""

templates.env.globals["format_price"] = format_price
templates.env.filters["localized"] = localized
