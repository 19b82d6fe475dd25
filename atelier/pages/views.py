"""
Pages web localisées (HTML, Jinja2).
Toutes les routes passent par require_locale: /xx/... hors en/fr -> 404.
Handlers synchrones: FastAPI les exécute dans le threadpool (appels Supabase bloquants).
"""
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse

from atelier.catalog import (
    find_category,
    get_watch_categories,
    get_nav_categories,
    category_label,
    get_category_watches,
    get_watch,
)
from atelier.configurator import get_configurator_steps
from atelier.site_settings import get_home_style_cards, get_faq_settings
from .layout import require_locale, build_layout_context
from .templating import templates
from . import seo

router = APIRouter(tags=["Pages"])

@router.get("/{locale}", response_class=HTMLResponse, name="home_page")
def home_page(request: Request, locale: str = Depends(require_locale)):
    context = build_layout_context(request, locale)
    context.update({
        "style_cards": get_home_style_cards(),
        "categories": get_watch_categories(),
    })
    return templates.TemplateResponse(request, "home.html", context)

@router.get("/{locale}/shop", response_class=HTMLResponse, name="shop_page")
def shop_page(request: Request, locale: str = Depends(require_locale)):
    context = build_layout_context(request, locale, "/shop")
    context["categories"] = get_watch_categories()
    return templates.TemplateResponse(request, "shop.html", context)

@router.get("/{locale}/shop/{category}", response_class=HTMLResponse, name="shop_category_page")
def shop_category_page(request: Request, category: str, locale: str = Depends(require_locale)):
    """
    Produits actifs d'une catégorie.
    - 404 si le slug ne correspond à aucune catégorie (base ou liste de secours).
    """
    style_category = find_category(get_nav_categories(), category)
    if not style_category:
        raise HTTPException(status_code=404, detail="Category not found")
    label = category_label(style_category, locale)
    context = build_layout_context(request, locale, f"/shop/{category}")
    context.update({
        "category": style_category,
        "label": label,
        "watches": get_category_watches(category),
        "breadcrumb_jsonld": seo.breadcrumb_jsonld(locale, [
            {"name": context["nav"]["shop"], "path": "/shop"},
            {"name": label, "path": f"/shop/{category}"},
        ]),
    })
    return templates.TemplateResponse(request, "category.html", context)

@router.get("/{locale}/shop/product/{product_id}", response_class=HTMLResponse, name="product_page")
def product_page(request: Request, product_id: str, locale: str = Depends(require_locale)):
    """
    Fiche d'une montre prête à expédier, achat direct via /api/checkout (type 'built').
    - 404 si le produit est inconnu ou inactif.
    """
    watch = get_watch(product_id)
    if not watch:
        raise HTTPException(status_code=404, detail="Product not found")
    context = build_layout_context(request, locale, f"/shop/product/{product_id}")
    style_category = find_category(get_nav_categories(), watch["category"]) if watch["category"] else None
    label = category_label(style_category, locale) if style_category else None
    crumbs = [{"name": context["nav"]["shop"], "path": "/shop"}]
    if style_category:
        crumbs.append({"name": label, "path": f"/shop/{style_category['slug']}"})
    crumbs.append({"name": watch["name"], "path": f"/shop/product/{product_id}"})
    context.update({
        "watch": watch,
        "category": style_category,
        "category_label": label,
        "breadcrumb_jsonld": seo.breadcrumb_jsonld(locale, crumbs),
    })
    return templates.TemplateResponse(request, "product.html", context)

@router.get("/{locale}/configurator", response_class=HTMLResponse, name="configurator_page")
def configurator_page(request: Request, locale: str = Depends(require_locale)):
    context = build_layout_context(request, locale, "/configurator")
    context["steps"] = get_configurator_steps()
    return templates.TemplateResponse(request, "configurator.html", context)

@router.get("/{locale}/faq", response_class=HTMLResponse, name="faq_page")
def faq_page(request: Request, locale: str = Depends(require_locale)):
    context = build_layout_context(request, locale, "/faq")
    context["faq"] = get_faq_settings()
    return templates.TemplateResponse(request, "faq.html", context)

@router.get("/{locale}/checkout/success", response_class=HTMLResponse, name="checkout_success_page")
def checkout_success_page(request: Request, locale: str = Depends(require_locale), session_id: str = ""):
    context = build_layout_context(request, locale, "/checkout/success")
    context["session_id"] = session_id
    return templates.TemplateResponse(request, "checkout_success.html", context)

@router.get("/{locale}/checkout/cancel", response_class=HTMLResponse, name="checkout_cancel_page")
def checkout_cancel_page(request: Request, locale: str = Depends(require_locale)):
    context = build_layout_context(request, locale, "/checkout/cancel")
    return templates.TemplateResponse(request, "checkout_cancel.html", context)
