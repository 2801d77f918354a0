"""Manifest — schema + parser."""
from .schema import DocumentManifest, ManifestElement, ManifestNode
from .parser import ELEMENT_REGISTRY, ElementEntry, parse_manifest, parse_manifest_json

__all__ = [
    "DocumentManifest",
    "ManifestElement",
    "ManifestNode",
    "ELEMENT_REGISTRY",
    "ElementEntry",
    "parse_manifest",
    "parse_manifest_json",
]
