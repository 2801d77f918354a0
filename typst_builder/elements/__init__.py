"""
Builders d'éléments Typst — exports publics.

Les constructeurs d'attributs restent dans leur module (headings.level,
lists.marker…) : un même nom d'attribut existe pour plusieurs éléments.
"""
from . import enums, grids, headings, layout, lists, paragraphs, spacing
from . import text as text_attrs
from .base import Child, as_content
from .text import group, strong, emph, styled_text, linebreak, parbreak
from .headings import heading
from .lists import bullet_list
from .enums import enum_list
from .layout import Alignment, align, aligned, block
from .spacing import h, v, pagebreak, hspace, vspace
from .grids import grid, grid_cell
from .paragraphs import par

__all__ = [
    # Modules d'attributs
    "enums", "grids", "headings", "layout", "lists", "paragraphs", "spacing", "text_attrs",
    # Base
    "Child", "as_content",
    # Texte
    "group", "strong", "emph", "styled_text", "linebreak", "parbreak",
    # Titres / listes
    "heading", "bullet_list", "enum_list",
    # Mise en page
    "Alignment", "align", "aligned", "block",
    "h", "v", "pagebreak", "hspace", "vspace",
    "grid", "grid_cell",
    "par",
]
