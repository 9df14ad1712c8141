"""
➡️ But : Valider les formulaires côté client, avant tout appel réseau.

validate_many_fields("task", form) → liste de {"field", "err"} ; vide = formulaire valide.
"""

from typing import Any, Callable, Dict, List, Mapping, Optional, TypedDict


class FieldError(TypedDict):
    field: str
    err: str


def _required(value: Any) -> Optional[str]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return "This field is required"
    return None


Rule = Callable[[Any], Optional[str]]

# Champs validés par type de formulaire ; les autres champs sont libres.
_RULES: Dict[str, Dict[str, Rule]] = {
    "task": {
        "description": _required,
    },
}


def _rules_for(kind: str) -> Dict[str, Rule]:
    try:
        return _RULES[kind]
    except KeyError:
        raise ValueError(f"Unknown form kind: {kind!r}") from None


def validate(kind: str, field: str, value: Any) -> Optional[str]:
    rule = _rules_for(kind).get(field)
    return rule(value) if rule else None


def validate_many_fields(kind: str, fields: Mapping[str, Any]) -> List[FieldError]:
    errors: List[FieldError] = []
    for name in _rules_for(kind):
        err = validate(kind, name, fields.get(name))
        if err:
            errors.append({"field": name, "err": err})
    return errors
