"""
Modèle de contenu typst_builder.
Arbre immuable : Content = PlainText | Element | Group

Chaque Element porte déjà ses attributs rendus ("key: value" ou "value")
et sa stratégie de disposition des enfants (ChildLayout) :
  - BlockJoined   → #name(attrs)[c1c2]
  - BlockPerChild → #name(attrs)[c1][c2]
  - InlineArgs    → #name(attrs, "c1", "c2")

Le core ne connaît aucun élément Typst : les noms ("heading", "list"…) sont
fournis par la couche elements/.
"""
from typing import Annotated, ClassVar, Generic, List, Literal, Sequence, Tuple, Type, TypeVar, Union
from pydantic import BaseModel, ConfigDict, Field

from .errors import AttrKindMismatchError


class FrozenModel(BaseModel):
    """Base immuable de tous les noeuds (aucune mutation après construction)."""
    model_config = ConfigDict(frozen=True, extra="forbid")


# ── Attributs rendus ────────────────────────────────────────────────────────

class Keyed(FrozenModel):
    """Attribut nommé → `key: value`."""
    attr_type: Literal["keyed"] = "keyed"
    key: str
    value: str

    def render(self) -> str:
        return f"{self.key}: {self.value}"


class Positional(FrozenModel):
    """Attribut positionnel → `value`."""
    attr_type: Literal["positional"] = "positional"
    value: str

    def render(self) -> str:
        return self.value


RenderedAttr = Annotated[Union[Keyed, Positional], Field(discriminator="attr_type")]


# ── Content ─────────────────────────────────────────────────────────────────

class PlainText(FrozenModel):
    """Feuille texte, recopiée telle quelle (bloc) ou entre guillemets (inline)."""
    kind: Literal["text"] = "text"
    value: str


class Element(FrozenModel):
    """Un appel de fonction Typst."""
    kind: Literal["element"] = "element"
    name: str
    attributes: Tuple[str, ...] = ()
    children: "ChildLayout"


class Group(FrozenModel):
    """Concaténation transparente, sans markup propre."""
    kind: Literal["group"] = "group"
    children: Tuple["Content", ...] = ()


Content = Annotated[Union[PlainText, Element, Group], Field(discriminator="kind")]


# ── ChildLayout ─────────────────────────────────────────────────────────────

class BlockJoined(FrozenModel):
    """Tous les enfants dans une seule paire de crochets (aucune si vide)."""
    layout: Literal["block_joined"] = "block_joined"
    children: Tuple[Content, ...] = ()


class BlockPerChild(FrozenModel):
    """Une paire de crochets par enfant."""
    layout: Literal["block_per_child"] = "block_per_child"
    children: Tuple[Content, ...] = ()


class InlineArgs(FrozenModel):
    """Enfants passés en arguments, après les attributs."""
    layout: Literal["inline_args"] = "inline_args"
    children: Tuple[Content, ...] = ()


ChildLayout = Annotated[
    Union[BlockJoined, BlockPerChild, InlineArgs],
    Field(discriminator="layout"),
]

# Références croisées Content <-> ChildLayout
for _model in (Element, Group, BlockJoined, BlockPerChild, InlineArgs):
    _model.model_rebuild()


# ── Attributs typés par élément (marqueur fantôme) ──────────────────────────

class ElementKind:
    """
    Marqueur fantôme d'un type d'élément. Jamais instancié.
    Les sous-classes (HeadingKind, ListKind…) vivent dans elements/.
    """
    name: ClassVar[str] = ""


K = TypeVar("K", bound=ElementKind)


class Attr(FrozenModel, Generic[K]):
    """
    Attribut valable pour un seul type d'élément.

    `Attr[HeadingKind]` est rejeté statiquement par le builder d'une liste ;
    à l'exécution, `kind` porte le même marqueur et les builders le vérifient
    (AttrKindMismatchError).
    """
    kind: str
    rendered: RenderedAttr


def make_attr(kind: Type[K], rendered: Union[Keyed, Positional]) -> "Attr[K]":
    """Associe un attribut rendu au marqueur de son élément."""
    return Attr(kind=kind.name, rendered=rendered)


def check_attrs(kind: Type[ElementKind], attrs: Sequence[Attr]) -> List[Union[Keyed, Positional]]:
    """Vérifie que chaque attribut appartient à `kind` et renvoie les attributs rendus."""
    checked = []
    for attr in attrs:
        # PlainText.kind == "text" == TextKind.name : vérifier le type d'abord
        if not isinstance(attr, Attr):
            raise AttrKindMismatchError(kind.name, type(attr).__name__)
        if attr.kind != kind.name:
            raise AttrKindMismatchError(kind.name, attr.kind, attr.rendered.render())
        checked.append(attr.rendered)
    return checked


# ── Constructeurs ───────────────────────────────────────────────────────────

def make_keyed_attr(key: str, value: str) -> Keyed:
    # Aucune validation : `value` est déjà en syntaxe Typst
    return Keyed(key=key, value=value)


def make_positional_attr(value: str) -> Positional:
    return Positional(value=value)


def render_attrs(attrs: Sequence[Union[Keyed, Positional]]) -> List[str]:
    """Rend chaque attribut, dans l'ordre fourni (ni tri, ni dédoublonnage)."""
    return [attr.render() for attr in attrs]


def build_node(name: str, attrs: Sequence[Union[Keyed, Positional]], children: Sequence[Content]) -> Element:
    """Élément à corps unique : #name(attrs)[children]."""
    return Element(name=name, attributes=render_attrs(attrs), children=BlockJoined(children=children))


def build_multi_node(name: str, attrs: Sequence[Union[Keyed, Positional]], children: Sequence[Content]) -> Element:
    """Élément à un corps par enfant : #name(attrs)[c1][c2]."""
    return Element(name=name, attributes=render_attrs(attrs), children=BlockPerChild(children=children))


def build_inline_node(name: str, attrs: Sequence[Union[Keyed, Positional]], children: Sequence[Content]) -> Element:
    """Élément dont les enfants sont des arguments : #name(attrs, "c1", "c2")."""
    return Element(name=name, attributes=render_attrs(attrs), children=InlineArgs(children=children))


def text(value: str) -> PlainText:
    return PlainText(value=value)


def group(children: Sequence[Union[Content, str]]) -> Group:
    # Chaînes brutes acceptées comme enfants, comme dans les builders
    return Group(children=[text(c) if isinstance(c, str) else c for c in children])
