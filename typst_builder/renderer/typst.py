"""
Renderer Typst — transforme un arbre Content en markup.

Deux contextes mutuellement récursifs :
  - bloc   (racine, enfants de BlockJoined / BlockPerChild) : texte brut, éléments préfixés par #
  - inline (enfants de InlineArgs) : texte entre guillemets, éléments sans #

Fonctions pures, sans état : le même arbre donne toujours le même texte.
"""
import logging
from typing import Sequence

from ..core.schemas import (
    BlockJoined,
    BlockPerChild,
    Content,
    Element,
    Group,
    InlineArgs,
    PlainText,
)

log = logging.getLogger(__name__)


# ── Point d'entrée public ───────────────────────────────────────────────────

def render(root: Content) -> str:
    """Rend un document complet (contexte bloc)."""
    markup = render_block(root)
    log.debug("render %s → %d caractères", root.kind, len(markup))
    return markup


class TypstRenderer:
    """Renderer Typst conforme au Protocol Renderer."""

    def render(self, root: Content) -> str:
        return render(root)


# ── Contextes ───────────────────────────────────────────────────────────────

def render_block(node: Content) -> str:
    if isinstance(node, PlainText):
        return node.value
    if isinstance(node, Group):
        return "".join(render_block(child) for child in node.children)
    if isinstance(node, Element):
        return "#" + render_element(node.name, node.attributes, node.children)
    raise TypeError(f"Noeud non rendable : {type(node).__name__}")


def render_inline(node: Content) -> str:
    if isinstance(node, PlainText):
        return f'"{node.value}"'
    if isinstance(node, Group):
        return "".join(render_inline(child) for child in node.children)
    if isinstance(node, Element):
        # Un élément inline est une expression d'argument, pas un appel de premier niveau
        return render_element(node.name, node.attributes, node.children)
    raise TypeError(f"Noeud non rendable : {type(node).__name__}")


# ── Élément ─────────────────────────────────────────────────────────────────

def render_element(name: str, attrs: Sequence[str], children) -> str:
    """name + (paramètres) + [corps], selon la disposition des enfants."""
    return name + _render_params(attrs, children) + _render_body(children)


def _render_body(children) -> str:
    if isinstance(children, BlockJoined):
        if not children.children:
            return ""
        return "[" + "".join(render_block(c) for c in children.children) + "]"
    if isinstance(children, BlockPerChild):
        return "".join(f"[{render_block(c)}]" for c in children.children)
    if isinstance(children, InlineArgs):
        return ""
    raise TypeError(f"Disposition inconnue : {type(children).__name__}")


def _render_params(attrs: Sequence[str], children) -> str:
    if isinstance(children, InlineArgs):
        args = ", ".join(render_inline(c) for c in children.children)
        if attrs:
            # Sans enfant, la virgule finale est conservée : name(a1, )
            return f"({', '.join(attrs)}, {args})"
        return f"({args})"
    if not attrs:
        return ""
    return f"({', '.join(attrs)})"
