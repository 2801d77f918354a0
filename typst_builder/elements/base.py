"""
Base des builders d'éléments.
Un builder = marqueur ElementKind + constructeurs d'attributs + appel à build_node.
"""
from typing import Sequence, Union

from ..core.schemas import Content, PlainText, text

# Les builders acceptent des chaînes brutes comme enfants
Child = Union[Content, str]


def as_content(children: Sequence[Child]) -> list:
    """Convertit les chaînes en PlainText, laisse les noeuds intacts."""
    return [text(child) if isinstance(child, str) else child for child in children]
