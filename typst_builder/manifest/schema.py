"""
Schéma du manifest — description déclarative d'un document.
DocumentManifest → parse_manifest() → Content → render() → Typst

Exemple minimal :
{
  "body": [
    {"element": "heading", "attrs": {"level": 1, "numbering": "1."}, "children": ["Titre"]},
    "Texte libre ",
    {"element": "strong", "children": ["important"]},
    {"element": "grid", "attrs": {"columns": ["1fr", "2fr"]}, "children": ["A", "B"]}
  ]
}

L'ordre des clés de `attrs` est l'ordre de rendu des attributs.
"""
from typing import Any, Dict, List, Union
from pydantic import BaseModel, Field


class ManifestElement(BaseModel):
    """Un élément : nom Typst + attributs (valeurs JSON) + enfants."""
    element: str
    attrs: Dict[str, Any] = Field(default_factory=dict)
    children: List["ManifestNode"] = Field(default_factory=list)


# Chaîne brute = texte
ManifestNode = Union[str, ManifestElement]

ManifestElement.model_rebuild()


class DocumentManifest(BaseModel):
    body: List[ManifestNode] = Field(default_factory=list)
    meta: Dict[str, Any] = Field(default_factory=dict)
