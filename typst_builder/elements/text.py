"""Texte — #strong, #emph, #text, sauts de ligne/paragraphe."""
from typing import Sequence, Union

from ..core.schemas import (
    Attr,
    ElementKind,
    Element,
    Group,
    build_node,
    check_attrs,
    group as _group,
    make_attr,
    make_keyed_attr,
)
from ..core.units import Length
from ..core.values import typst_string
from .base import Child, as_content


class StrongKind(ElementKind):
    name = "strong"


class EmphKind(ElementKind):
    name = "emph"


class TextKind(ElementKind):
    name = "text"


class LinebreakKind(ElementKind):
    name = "linebreak"


class ParbreakKind(ElementKind):
    name = "parbreak"


# ── Attributs ───────────────────────────────────────────────────────────────

def delta(value: int) -> Attr[StrongKind]:
    """Incrément de graisse de #strong."""
    return make_attr(StrongKind, make_keyed_attr("delta", str(value)))


def font(value: str) -> Attr[TextKind]:
    return make_attr(TextKind, make_keyed_attr("font", typst_string(value)))


def size(value: Length) -> Attr[TextKind]:
    return make_attr(TextKind, make_keyed_attr("size", value.to_typst()))


def weight(value: Union[int, str]) -> Attr[TextKind]:
    """Graisse numérique (700) ou nommée ("bold")."""
    rendered = str(value) if isinstance(value, int) else typst_string(value)
    return make_attr(TextKind, make_keyed_attr("weight", rendered))


def fill(value: str) -> Attr[TextKind]:
    # Expression couleur Typst transmise telle quelle : red, rgb("#ff0000")…
    return make_attr(TextKind, make_keyed_attr("fill", value))


def lang(value: str) -> Attr[TextKind]:
    return make_attr(TextKind, make_keyed_attr("lang", typst_string(value)))


# ── Builders ────────────────────────────────────────────────────────────────

def group(children: Sequence[Child]) -> Group:
    return _group(as_content(children))


def strong(attrs: Sequence[Attr[StrongKind]] = (), children: Sequence[Child] = ()) -> Element:
    return build_node(StrongKind.name, check_attrs(StrongKind, attrs), as_content(children))


def emph(attrs: Sequence[Attr[EmphKind]] = (), children: Sequence[Child] = ()) -> Element:
    return build_node(EmphKind.name, check_attrs(EmphKind, attrs), as_content(children))


def styled_text(attrs: Sequence[Attr[TextKind]] = (), children: Sequence[Child] = ()) -> Element:
    """#text(font: "…", size: 12.0pt)[…]"""
    return build_node(TextKind.name, check_attrs(TextKind, attrs), as_content(children))


def linebreak(attrs: Sequence[Attr[LinebreakKind]] = ()) -> Element:
    return build_node(LinebreakKind.name, check_attrs(LinebreakKind, attrs), [])


def parbreak(attrs: Sequence[Attr[ParbreakKind]] = ()) -> Element:
    return build_node(ParbreakKind.name, check_attrs(ParbreakKind, attrs), [])
