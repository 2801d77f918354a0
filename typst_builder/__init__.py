"""
typst_builder v0.1 — construction typée de documents et rendu en markup Typst.

Usage (builders):
    >>> from typst_builder import heading, strong, text, group, render
    >>> from typst_builder.elements import headings
    >>> doc = group([heading([headings.level(1)], ["Titre"]), strong(children=["gras"])])
    >>> render(doc)
    '#heading(level: 1)[Titre]#strong[gras]'

Usage (manifest):
    >>> from typst_builder import DocumentManifest, parse_manifest, render
    >>> render(parse_manifest(DocumentManifest(body=["Bonjour"])))
    'Bonjour'
"""

# ── Core ────────────────────────────────────────────────────────────────────
from .core.schemas import (
    Keyed, Positional, RenderedAttr,
    PlainText, Element, Group, Content,
    BlockJoined, BlockPerChild, InlineArgs, ChildLayout,
    ElementKind, Attr,
    make_keyed_attr, make_positional_attr, render_attrs,
    build_node, build_multi_node, build_inline_node,
    text,
)
from .core.errors import (
    TypstBuilderError, ConfigurationError, AttrKindMismatchError,
    UnknownElementError, UnknownAttributeError,
)
from .core.units import Length, Fraction, Ratio, Auto, AUTO, pt, mm, cm, inches, em, fr, percent
from .core.values import Pattern
from .renderer.typst import render

# ── Éléments ────────────────────────────────────────────────────────────────
from .elements import (
    group, strong, emph, styled_text, linebreak, parbreak,
    heading, bullet_list, enum_list,
    Alignment, align, aligned, block,
    h, v, pagebreak, hspace, vspace,
    grid, grid_cell, par,
)

# ── Manifest / builder / config ─────────────────────────────────────────────
from .manifest import DocumentManifest, ManifestElement, parse_manifest, parse_manifest_json
from .builder import DocumentBuilder
from .config import Settings, get_settings, configure_logging

__version__ = "0.1.0"

__all__ = [
    # Core
    "Keyed", "Positional", "RenderedAttr",
    "PlainText", "Element", "Group", "Content",
    "BlockJoined", "BlockPerChild", "InlineArgs", "ChildLayout",
    "ElementKind", "Attr",
    "make_keyed_attr", "make_positional_attr", "render_attrs",
    "build_node", "build_multi_node", "build_inline_node",
    "text", "render",
    # Erreurs
    "TypstBuilderError", "ConfigurationError", "AttrKindMismatchError",
    "UnknownElementError", "UnknownAttributeError",
    # Unités
    "Length", "Fraction", "Ratio", "Auto", "AUTO",
    "pt", "mm", "cm", "inches", "em", "fr", "percent", "Pattern",
    # Éléments
    "group", "strong", "emph", "styled_text", "linebreak", "parbreak",
    "heading", "bullet_list", "enum_list",
    "Alignment", "align", "aligned", "block",
    "h", "v", "pagebreak", "hspace", "vspace",
    "grid", "grid_cell", "par",
    # Manifest / builder / config
    "DocumentManifest", "ManifestElement", "parse_manifest", "parse_manifest_json",
    "DocumentBuilder",
    "Settings", "get_settings", "configure_logging",
]
