"""Espacements — #h(1.0em), #v(12.0pt, weak: true), #pagebreak."""
from typing import Sequence, Union

from ..core.schemas import (
    Attr,
    ElementKind,
    Element,
    build_node,
    check_attrs,
    make_attr,
    make_keyed_attr,
    make_positional_attr,
)
from ..core.units import Fraction, Length, Ratio
from ..core.values import typst_bool

Amount = Union[Length, Fraction, Ratio]


class HKind(ElementKind):
    name = "h"


class VKind(ElementKind):
    name = "v"


class PagebreakKind(ElementKind):
    name = "pagebreak"


def h_amount(value: Amount) -> Attr[HKind]:
    return make_attr(HKind, make_positional_attr(value.to_typst()))


def h_weak(value: bool) -> Attr[HKind]:
    return make_attr(HKind, make_keyed_attr("weak", typst_bool(value)))


def v_amount(value: Amount) -> Attr[VKind]:
    return make_attr(VKind, make_positional_attr(value.to_typst()))


def v_weak(value: bool) -> Attr[VKind]:
    return make_attr(VKind, make_keyed_attr("weak", typst_bool(value)))


def pagebreak_weak(value: bool) -> Attr[PagebreakKind]:
    return make_attr(PagebreakKind, make_keyed_attr("weak", typst_bool(value)))


def h(attrs: Sequence[Attr[HKind]] = ()) -> Element:
    return build_node(HKind.name, check_attrs(HKind, attrs), [])


def v(attrs: Sequence[Attr[VKind]] = ()) -> Element:
    return build_node(VKind.name, check_attrs(VKind, attrs), [])


def pagebreak(attrs: Sequence[Attr[PagebreakKind]] = ()) -> Element:
    return build_node(PagebreakKind.name, check_attrs(PagebreakKind, attrs), [])


def hspace(amount: Amount, weak: bool = False) -> Element:
    attrs = [h_amount(amount)]
    if weak:
        attrs.append(h_weak(True))
    return h(attrs)


def vspace(amount: Amount, weak: bool = False) -> Element:
    attrs = [v_amount(amount)]
    if weak:
        attrs.append(v_weak(True))
    return v(attrs)
