"""Paragraphes — #par(justify: true, leading: 0.65em)[…]."""
from typing import Sequence

from ..core.schemas import Attr, ElementKind, Element, build_node, check_attrs, make_attr, make_keyed_attr
from ..core.units import Length
from ..core.values import typst_bool
from .base import Child, as_content


class ParKind(ElementKind):
    name = "par"


def justify(value: bool) -> Attr[ParKind]:
    return make_attr(ParKind, make_keyed_attr("justify", typst_bool(value)))


def leading(value: Length) -> Attr[ParKind]:
    return make_attr(ParKind, make_keyed_attr("leading", value.to_typst()))


def spacing(value: Length) -> Attr[ParKind]:
    return make_attr(ParKind, make_keyed_attr("spacing", value.to_typst()))


def first_line_indent(value: Length) -> Attr[ParKind]:
    return make_attr(ParKind, make_keyed_attr("first-line-indent", value.to_typst()))


def par(attrs: Sequence[Attr[ParKind]] = (), children: Sequence[Child] = ()) -> Element:
    return build_node(ParKind.name, check_attrs(ParKind, attrs), as_content(children))
