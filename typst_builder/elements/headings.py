"""Titres — #heading(level: 1, numbering: "1.")[…]."""
from typing import Optional, Sequence

from ..core.schemas import Attr, ElementKind, Element, build_node, check_attrs, make_attr, make_keyed_attr
from ..core.values import Pattern, typst_bool
from .base import Child, as_content


class HeadingKind(ElementKind):
    name = "heading"


def level(value: int) -> Attr[HeadingKind]:
    # Pas de contrôle de plage : Typst s'en charge
    return make_attr(HeadingKind, make_keyed_attr("level", str(value)))


def numbering(value: Optional[Pattern]) -> Attr[HeadingKind]:
    rendered = value.to_typst() if value is not None else "none"
    return make_attr(HeadingKind, make_keyed_attr("numbering", rendered))


def outlined(value: bool) -> Attr[HeadingKind]:
    return make_attr(HeadingKind, make_keyed_attr("outlined", typst_bool(value)))


def bookmarked(value: bool) -> Attr[HeadingKind]:
    return make_attr(HeadingKind, make_keyed_attr("bookmarked", typst_bool(value)))


def heading(attrs: Sequence[Attr[HeadingKind]] = (), children: Sequence[Child] = ()) -> Element:
    return build_node(HeadingKind.name, check_attrs(HeadingKind, attrs), as_content(children))
