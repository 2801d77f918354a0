"""
API publique du builder de documents Typst.
"""
import logging

from .core.schemas import Content, Group, group
from .core.values import Pattern
from .elements.base import Child, as_content
from .elements.headings import heading, level as heading_level, numbering as heading_numbering
from .elements.text import parbreak
from .renderer.base import Renderer
from .renderer.typst import TypstRenderer

log = logging.getLogger(__name__)


class DocumentBuilder:
    """
    Builder de document Typst.

    Usage:
        >>> builder = DocumentBuilder()
        >>> builder.heading("Introduction", level=1).paragraph("Bonjour.")
        >>> markup = builder.render()

    Le builder est le seul objet mutable : build() renvoie un Group immuable.
    """

    def __init__(self, renderer: Renderer | None = None):
        """
        Initialise le builder.

        Args:
            renderer: Renderer à utiliser (TypstRenderer par défaut)
        """
        self.renderer = renderer or TypstRenderer()
        self._parts: list[Content] = []

    def add(self, *parts: Child) -> "DocumentBuilder":
        """Ajoute des noeuds (ou du texte brut) à la fin du document."""
        self._parts.extend(as_content(parts))
        return self

    def heading(self, title: str, level: int = 1, numbering: str | None = None) -> "DocumentBuilder":
        """
        Ajoute un titre.

        Args:
            title: Texte du titre
            level: Niveau (1 = titre principal)
            numbering: Motif de numérotation ("1.", "1.a.")
        """
        attrs = [heading_level(level)]
        if numbering is not None:
            attrs.append(heading_numbering(Pattern(numbering)))
        return self.add(heading(attrs, [title]))

    def paragraph(self, *children: Child) -> "DocumentBuilder":
        """Ajoute un paragraphe suivi d'un #parbreak."""
        return self.add(*children, parbreak())

    def build(self) -> Group:
        return group(self._parts)

    def render(self) -> str:
        """
        Rend le document courant.

        Returns:
            Markup Typst complet
        """
        document = self.build()
        log.debug("DocumentBuilder: %d parties", len(document.children))
        return self.renderer.render(document)
