"""
Manifest parser — DocumentManifest → Content.
Chaque élément est résolu via le registry : builder + constructeurs d'attributs.
Les valeurs d'attributs sont validées par pydantic contre l'annotation du
premier paramètre du constructeur ("12pt" → Length, "1." → Pattern…).
"""
import inspect
import logging
from functools import lru_cache
from typing import Any, Callable, Dict, NamedTuple, get_type_hints

from pydantic import TypeAdapter

from ..core.errors import ConfigurationError, UnknownAttributeError, UnknownElementError
from ..core.schemas import Content, Group, group, text
from ..elements import enums, grids, headings, layout, lists, paragraphs, spacing
from ..elements import text as text_attrs
from .schema import DocumentManifest, ManifestElement, ManifestNode

log = logging.getLogger(__name__)


class ElementEntry(NamedTuple):
    builder: Callable
    attrs: Dict[str, Callable]
    accepts_children: bool = True


# ── Registry des éléments ───────────────────────────────────────────────────

ELEMENT_REGISTRY: Dict[str, ElementEntry] = {
    "strong": ElementEntry(text_attrs.strong, {"delta": text_attrs.delta}),
    "emph": ElementEntry(text_attrs.emph, {}),
    "text": ElementEntry(text_attrs.styled_text, {
        "font": text_attrs.font,
        "size": text_attrs.size,
        "weight": text_attrs.weight,
        "fill": text_attrs.fill,
        "lang": text_attrs.lang,
    }),
    "linebreak": ElementEntry(text_attrs.linebreak, {}, accepts_children=False),
    "parbreak": ElementEntry(text_attrs.parbreak, {}, accepts_children=False),
    "heading": ElementEntry(headings.heading, {
        "level": headings.level,
        "numbering": headings.numbering,
        "outlined": headings.outlined,
        "bookmarked": headings.bookmarked,
    }),
    "list": ElementEntry(lists.bullet_list, {
        "marker": lists.marker,
        "tight": lists.tight,
        "indent": lists.indent,
        "body_indent": lists.body_indent,
        "spacing": lists.spacing,
    }),
    "enum": ElementEntry(enums.enum_list, {
        "numbering": enums.numbering,
        "start": enums.start,
        "full": enums.full,
        "tight": enums.tight,
        "indent": enums.indent,
        "body_indent": enums.body_indent,
        "spacing": enums.spacing,
    }),
    "align": ElementEntry(layout.align, {"alignment": layout.alignment}),
    "block": ElementEntry(layout.block, {
        "width": layout.width,
        "height": layout.height,
        "inset": layout.inset,
        "breakable": layout.breakable,
    }),
    "h": ElementEntry(spacing.h, {"amount": spacing.h_amount, "weak": spacing.h_weak}, accepts_children=False),
    "v": ElementEntry(spacing.v, {"amount": spacing.v_amount, "weak": spacing.v_weak}, accepts_children=False),
    "pagebreak": ElementEntry(spacing.pagebreak, {"weak": spacing.pagebreak_weak}, accepts_children=False),
    "grid": ElementEntry(grids.grid, {
        "columns": grids.columns,
        "rows": grids.rows,
        "gutter": grids.gutter,
        "column_gutter": grids.column_gutter,
        "row_gutter": grids.row_gutter,
    }),
    "grid.cell": ElementEntry(grids.grid_cell, {
        "x": grids.x,
        "y": grids.y,
        "colspan": grids.colspan,
        "rowspan": grids.rowspan,
        "align": grids.cell_align,
    }),
    "par": ElementEntry(paragraphs.par, {
        "justify": paragraphs.justify,
        "leading": paragraphs.leading,
        "spacing": paragraphs.spacing,
        "first_line_indent": paragraphs.first_line_indent,
    }),
}


@lru_cache(maxsize=None)
def _value_adapter(ctor: Callable) -> TypeAdapter:
    """TypeAdapter du premier paramètre d'un constructeur d'attribut (mis en cache)."""
    first_param = next(iter(inspect.signature(ctor).parameters))
    return TypeAdapter(get_type_hints(ctor)[first_param])


def _parse_attr(element: str, entry: ElementEntry, name: str, raw: Any):
    ctor = entry.attrs.get(name)
    if ctor is None:
        raise UnknownAttributeError(element, name, list(entry.attrs))
    # ValidationError propagée telle quelle
    value = _value_adapter(ctor).validate_python(raw)
    return ctor(value)


def _parse_element(node: ManifestElement) -> Content:
    children = [_parse_node(child) for child in node.children]

    # "group" : concaténation sans markup, pas d'attribut
    if node.element == "group":
        if node.attrs:
            raise ConfigurationError("Un group n'accepte aucun attribut")
        return group(children)

    entry = ELEMENT_REGISTRY.get(node.element)
    if entry is None:
        raise UnknownElementError(node.element, list(ELEMENT_REGISTRY))

    attrs = [_parse_attr(node.element, entry, name, raw) for name, raw in node.attrs.items()]
    log.debug("manifest: %s (%d attributs, %d enfants)", node.element, len(attrs), len(children))

    if not entry.accepts_children:
        if children:
            raise ConfigurationError(f"L'élément {node.element!r} n'accepte pas d'enfants")
        return entry.builder(attrs)
    return entry.builder(attrs, children)


def _parse_node(node: ManifestNode) -> Content:
    if isinstance(node, str):
        return text(node)
    return _parse_element(node)


def parse_manifest(manifest: DocumentManifest) -> Group:
    """
    Convertit un DocumentManifest en arbre Content prêt à rendre.

    1. Résout chaque élément depuis le registry
    2. Valide et construit ses attributs, dans l'ordre du manifest
    3. Regroupe le corps dans un Group
    """
    return group([_parse_node(node) for node in manifest.body])


def parse_manifest_json(data: str) -> Group:
    """Raccourci : JSON texte → Content."""
    return parse_manifest(DocumentManifest.model_validate_json(data))
