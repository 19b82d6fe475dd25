"""
Cas d'usage 'configurator': étapes de construction d'une montre sur mesure.

- get_configurator_steps: étapes ordonnées, chacune avec ses options
  (la première étape ne propose que des options racines; les suivantes
  dépendent de l'option choisie à la première étape via parent_option_id)
- price_selection: recalcule côté serveur le prix et le résumé d'une sélection
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from . import repository


class InvalidSelection(ValueError):
    pass


@dataclass(frozen=True)
class PricedSelection:
    option_ids: Tuple[str, ...]
    labels: Tuple[str, ...]
    price: float


def _price(value: Any) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


def _is_extra(step: Dict[str, Any]) -> bool:
    return str(step.get("label_en") or "").strip().lower() == "extra"


def get_configurator_steps() -> List[Dict[str, Any]]:
    steps = repository.list_steps()
    options = repository.list_options()
    result = []
    for index, step in enumerate(steps):
        step_options = [
            {**o, "price": _price(o.get("price"))}
            for o in options
            if str(o.get("step_id")) == str(step.get("id"))
            and (index > 0 or not o.get("parent_option_id"))
        ]
        result.append({**step, "is_extra": _is_extra(step), "options": step_options})
    return result


def price_selection(option_ids: Sequence[Any], steps: Optional[List[Dict[str, Any]]] = None) -> PricedSelection:
    """
    Prix = somme des options retenues, lues en base (le prix envoyé par le navigateur est ignoré).
    - InvalidSelection si un identifiant est inconnu, si une étape (hors 'extra') reçoit
      plusieurs options, ou si une option dépend d'une autre option de première étape
    """
    ids = [str(i) for i in option_ids if i]
    if not ids:
        raise InvalidSelection("Empty selection")
    steps = steps if steps is not None else get_configurator_steps()

    by_id: Dict[str, Tuple[Dict[str, Any], Dict[str, Any]]] = {}
    for step in steps:
        for option in step["options"]:
            by_id[str(option.get("id"))] = (step, option)

    unknown = [i for i in ids if i not in by_id]
    if unknown:
        raise InvalidSelection(f"Unknown option {unknown[0]}")

    root_ids = {str(o.get("id")) for o in (steps[0]["options"] if steps else [])}
    chosen_root = next((i for i in ids if i in root_ids), None)

    seen_steps = set()
    labels: List[str] = []
    total = 0.0
    for i in ids:
        step, option = by_id[i]
        step_id = str(step.get("id"))
        if step_id in seen_steps and not step["is_extra"]:
            raise InvalidSelection(f"Several options for step {step_id}")
        seen_steps.add(step_id)
        parent = option.get("parent_option_id")
        if parent and str(parent) != chosen_root:
            raise InvalidSelection(f"Option {i} does not match the selected base")
        labels.append(option.get("label_en") or i)
        total += option["price"]

    return PricedSelection(option_ids=tuple(ids), labels=tuple(labels), price=total)
