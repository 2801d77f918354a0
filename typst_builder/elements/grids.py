"""
Grilles — #grid(columns: (1.0fr, 2.0fr), "Hello", grid.cell(colspan: 2)[World]).

Les cellules sont des arguments de #grid (disposition InlineArgs) : le texte y
est rendu entre guillemets et grid.cell sans préfixe #.
"""
from typing import List, Sequence, Union

from pydantic import StrictInt

from ..core.errors import ConfigurationError
from ..core.schemas import (
    Attr,
    ElementKind,
    Element,
    build_inline_node,
    build_node,
    check_attrs,
    make_attr,
    make_keyed_attr,
)
from ..core.units import TrackSize
from ..core.values import typst_array
from .base import Child, as_content
from .layout import Alignment, format_alignment

# StrictInt : un booléen JSON n'est pas un nombre de colonnes
Tracks = Union[StrictInt, List[TrackSize]]


class GridKind(ElementKind):
    name = "grid"


class GridCellKind(ElementKind):
    name = "grid.cell"


def _format_tracks(value: Tracks) -> str:
    if isinstance(value, bool):
        raise ConfigurationError(f"Pistes de grille invalides : {value!r}")
    # Un entier = nombre de colonnes auto
    if isinstance(value, int):
        return str(value)
    return typst_array(value)


# ── Attributs grid ──────────────────────────────────────────────────────────

def columns(value: Tracks) -> Attr[GridKind]:
    return make_attr(GridKind, make_keyed_attr("columns", _format_tracks(value)))


def rows(value: Tracks) -> Attr[GridKind]:
    return make_attr(GridKind, make_keyed_attr("rows", _format_tracks(value)))


def gutter(value: TrackSize) -> Attr[GridKind]:
    return make_attr(GridKind, make_keyed_attr("gutter", value.to_typst()))


def column_gutter(value: TrackSize) -> Attr[GridKind]:
    return make_attr(GridKind, make_keyed_attr("column-gutter", value.to_typst()))


def row_gutter(value: TrackSize) -> Attr[GridKind]:
    return make_attr(GridKind, make_keyed_attr("row-gutter", value.to_typst()))


# ── Attributs grid.cell ─────────────────────────────────────────────────────

def x(value: int) -> Attr[GridCellKind]:
    return make_attr(GridCellKind, make_keyed_attr("x", str(value)))


def y(value: int) -> Attr[GridCellKind]:
    return make_attr(GridCellKind, make_keyed_attr("y", str(value)))


def colspan(value: int) -> Attr[GridCellKind]:
    return make_attr(GridCellKind, make_keyed_attr("colspan", str(value)))


def rowspan(value: int) -> Attr[GridCellKind]:
    return make_attr(GridCellKind, make_keyed_attr("rowspan", str(value)))


def cell_align(value: Union[Alignment, List[Alignment]]) -> Attr[GridCellKind]:
    return make_attr(GridCellKind, make_keyed_attr("align", format_alignment(value)))


# ── Builders ────────────────────────────────────────────────────────────────

def grid(attrs: Sequence[Attr[GridKind]] = (), cells: Sequence[Child] = ()) -> Element:
    return build_inline_node(GridKind.name, check_attrs(GridKind, attrs), as_content(cells))


def grid_cell(attrs: Sequence[Attr[GridCellKind]] = (), children: Sequence[Child] = ()) -> Element:
    return build_node(GridCellKind.name, check_attrs(GridCellKind, attrs), as_content(children))
