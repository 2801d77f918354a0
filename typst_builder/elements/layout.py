"""Mise en page — #align(center)[…], #block(width: 50.0%)[…]."""
from enum import Enum
from typing import List, Sequence, Union

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
from ..core.units import Length, Ratio, TrackSize
from ..core.values import typst_bool
from .base import Child, as_content


class Alignment(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    START = "start"
    END = "end"
    TOP = "top"
    HORIZON = "horizon"
    BOTTOM = "bottom"


def format_alignment(value: Union[Alignment, List[Alignment]]) -> str:
    """center, ou combinaison horizontale + verticale : center + horizon."""
    if isinstance(value, Alignment):
        return value.value
    return " + ".join(Alignment(v).value for v in value)


class AlignKind(ElementKind):
    name = "align"


class BlockKind(ElementKind):
    name = "block"


# ── Attributs ───────────────────────────────────────────────────────────────

def alignment(value: Union[Alignment, List[Alignment]]) -> Attr[AlignKind]:
    return make_attr(AlignKind, make_positional_attr(format_alignment(value)))


def width(value: Union[Length, Ratio]) -> Attr[BlockKind]:
    return make_attr(BlockKind, make_keyed_attr("width", value.to_typst()))


def height(value: TrackSize) -> Attr[BlockKind]:
    return make_attr(BlockKind, make_keyed_attr("height", value.to_typst()))


def inset(value: Union[Length, Ratio]) -> Attr[BlockKind]:
    return make_attr(BlockKind, make_keyed_attr("inset", value.to_typst()))


def breakable(value: bool) -> Attr[BlockKind]:
    return make_attr(BlockKind, make_keyed_attr("breakable", typst_bool(value)))


# ── Builders ────────────────────────────────────────────────────────────────

def align(attrs: Sequence[Attr[AlignKind]] = (), children: Sequence[Child] = ()) -> Element:
    return build_node(AlignKind.name, check_attrs(AlignKind, attrs), as_content(children))


def aligned(value: Union[Alignment, List[Alignment]], children: Sequence[Child]) -> Element:
    """Raccourci : aligned(Alignment.CENTER, [...]) → #align(center)[...]."""
    return align([alignment(value)], children)


def block(attrs: Sequence[Attr[BlockKind]] = (), children: Sequence[Child] = ()) -> Element:
    return build_node(BlockKind.name, check_attrs(BlockKind, attrs), as_content(children))
