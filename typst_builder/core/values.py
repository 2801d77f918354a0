"""
Formatage des valeurs littérales Typst utilisées par les constructeurs d'attributs.
Le core (schemas, renderer) ne formate jamais de valeur lui-même.
"""
from decimal import Decimal
from typing import Any, Sequence

from pydantic import BaseModel, ConfigDict, model_validator


def typst_string(value: str) -> str:
    """Littéral chaîne Typst : "…" avec \\ et " échappés."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def format_decimal(value: float) -> str:
    """Décimal sans exposant : 12.0, 0.65, 10000000000000000.0, 0.0000001."""
    text = format(Decimal(repr(float(value))), "f")
    if "." not in text:
        text += ".0"
    return text


def typst_bool(value: bool) -> str:
    return "true" if value else "false"


def typst_content(value: str) -> str:
    """Bloc de contenu Typst : [--]."""
    return f"[{value}]"


def typst_array(items: Sequence[Any]) -> str:
    """Tableau Typst. Un seul élément → `(x,)`, sinon ce serait une simple parenthèse."""
    parts = [typst_value(item) for item in items]
    if len(parts) == 1:
        return f"({parts[0]},)"
    return f"({', '.join(parts)})"


def typst_value(value: Any) -> str:
    """Dispatch générique Python → littéral Typst."""
    if value is None:
        return "none"
    if isinstance(value, bool):
        return typst_bool(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return format_decimal(value)
    if isinstance(value, str):
        return typst_string(value)
    if hasattr(value, "to_typst"):
        return value.to_typst()
    if isinstance(value, (list, tuple)):
        return typst_array(value)
    raise TypeError(f"Valeur sans équivalent Typst : {value!r}")


class Pattern(BaseModel):
    """Motif de numérotation ("1.", "1.a.", "I.") — rendu comme chaîne Typst."""
    model_config = ConfigDict(frozen=True)

    pattern: str

    def __init__(self, pattern: str) -> None:
        super().__init__(pattern=pattern)

    @model_validator(mode="before")
    @classmethod
    def _from_string(cls, data: Any) -> Any:
        # Les manifests donnent le motif en chaîne brute
        if isinstance(data, str):
            return {"pattern": data}
        return data

    def to_typst(self) -> str:
        return typst_string(self.pattern)
