"""Listes à puces — #list(marker: [--])[item1][item2]."""
from typing import Sequence

from ..core.schemas import Attr, ElementKind, Element, build_multi_node, check_attrs, make_attr, make_keyed_attr
from ..core.units import Length
from ..core.values import typst_bool, typst_content
from .base import Child, as_content


class ListKind(ElementKind):
    name = "list"


def marker(value: str) -> Attr[ListKind]:
    """Puce textuelle, rendue comme bloc de contenu : marker: [--]."""
    return make_attr(ListKind, make_keyed_attr("marker", typst_content(value)))


def tight(value: bool) -> Attr[ListKind]:
    return make_attr(ListKind, make_keyed_attr("tight", typst_bool(value)))


def indent(value: Length) -> Attr[ListKind]:
    return make_attr(ListKind, make_keyed_attr("indent", value.to_typst()))


def body_indent(value: Length) -> Attr[ListKind]:
    return make_attr(ListKind, make_keyed_attr("body-indent", value.to_typst()))


def spacing(value: Length) -> Attr[ListKind]:
    return make_attr(ListKind, make_keyed_attr("spacing", value.to_typst()))


def bullet_list(attrs: Sequence[Attr[ListKind]] = (), items: Sequence[Child] = ()) -> Element:
    """Un corps [..] par item."""
    return build_multi_node(ListKind.name, check_attrs(ListKind, attrs), as_content(items))
