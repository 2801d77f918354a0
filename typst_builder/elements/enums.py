"""Listes numérotées — #enum(numbering: "1.a)", start: 3)[item1][item2]."""
from typing import Sequence

from ..core.schemas import Attr, ElementKind, Element, build_multi_node, check_attrs, make_attr, make_keyed_attr
from ..core.units import Length
from ..core.values import Pattern, typst_bool
from .base import Child, as_content


class EnumKind(ElementKind):
    name = "enum"


def numbering(value: Pattern) -> Attr[EnumKind]:
    return make_attr(EnumKind, make_keyed_attr("numbering", value.to_typst()))


def start(value: int) -> Attr[EnumKind]:
    return make_attr(EnumKind, make_keyed_attr("start", str(value)))


def full(value: bool) -> Attr[EnumKind]:
    """Numérotation complète des niveaux imbriqués (1.a. au lieu de a.)."""
    return make_attr(EnumKind, make_keyed_attr("full", typst_bool(value)))


def tight(value: bool) -> Attr[EnumKind]:
    return make_attr(EnumKind, make_keyed_attr("tight", typst_bool(value)))


def indent(value: Length) -> Attr[EnumKind]:
    return make_attr(EnumKind, make_keyed_attr("indent", value.to_typst()))


def body_indent(value: Length) -> Attr[EnumKind]:
    return make_attr(EnumKind, make_keyed_attr("body-indent", value.to_typst()))


def spacing(value: Length) -> Attr[EnumKind]:
    return make_attr(EnumKind, make_keyed_attr("spacing", value.to_typst()))


def enum_list(attrs: Sequence[Attr[EnumKind]] = (), items: Sequence[Child] = ()) -> Element:
    return build_multi_node(EnumKind.name, check_attrs(EnumKind, attrs), as_content(items))
