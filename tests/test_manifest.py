"""Tests manifest — parse, registry, validation des attributs, render Typst."""
import json

import pytest
from pydantic import ValidationError

from typst_builder import render
from typst_builder.core.errors import ConfigurationError, UnknownAttributeError, UnknownElementError
from typst_builder.core.schemas import Group
from typst_builder.manifest import (
    ELEMENT_REGISTRY,
    DocumentManifest,
    ManifestElement,
    parse_manifest,
    parse_manifest_json,
)


def _render(body):
    return render(parse_manifest(DocumentManifest(body=body)))


# ── Schéma ───────────────────────────────────────────────────────────────────

def test_manifest_nodes_are_parsed():
    manifest = DocumentManifest(body=["texte", {"element": "strong", "children": ["x"]}])
    assert manifest.body[0] == "texte"
    assert isinstance(manifest.body[1], ManifestElement)
    assert manifest.body[1].children == ["x"]


def test_manifest_defaults():
    manifest = DocumentManifest()
    assert manifest.body == []
    assert manifest.meta == {}


# ── parse_manifest ───────────────────────────────────────────────────────────

def test_parse_manifest_returns_group():
    content = parse_manifest(DocumentManifest(body=["a", "b"]))
    assert isinstance(content, Group)
    assert render(content) == "ab"


def test_heading_and_text():
    body = [
        {"element": "heading", "attrs": {"level": 1, "numbering": "1."}, "children": ["Titre"]},
        "Texte ",
        {"element": "strong", "children": ["gras"]},
    ]
    assert _render(body) == '#heading(level: 1, numbering: "1.")[Titre]Texte #strong[gras]'


def test_attribute_order_follows_manifest():
    body = [{"element": "heading", "attrs": {"numbering": "1.", "level": 2}, "children": ["T"]}]
    assert _render(body) == '#heading(numbering: "1.", level: 2)[T]'


def test_list_and_enum():
    body = [
        {"element": "list", "attrs": {"marker": "--", "indent": "1em"}, "children": ["a", "b"]},
        {"element": "enum", "attrs": {"numbering": "a)", "start": 2}, "children": ["c"]},
    ]
    assert _render(body) == '#list(marker: [--], indent: 1.0em)[a][b]#enum(numbering: "a)", start: 2)[c]'


def test_grid_from_json():
    data = json.dumps({"body": [
        {"element": "grid", "attrs": {"columns": ["1fr", "2fr"]}, "children": ["Hello", "World"]},
    ]})
    assert render(parse_manifest_json(data)) == '#grid(columns: (1.0fr, 2.0fr), "Hello", "World")'


def test_grid_cell_inside_grid():
    body = [{
        "element": "grid",
        "attrs": {"columns": 2},
        "children": ["A", {"element": "grid.cell", "attrs": {"colspan": 2, "align": "center"}, "children": ["B"]}],
    }]
    assert _render(body) == '#grid(columns: 2, "A", grid.cell(colspan: 2, align: center)[B])'


def test_spacing_and_align():
    body = [
        {"element": "h", "attrs": {"amount": "1em"}},
        {"element": "v", "attrs": {"amount": "12pt", "weak": True}},
        {"element": "align", "attrs": {"alignment": ["center", "horizon"]}, "children": ["x"]},
        {"element": "pagebreak"},
    ]
    assert _render(body) == "#h(1.0em)#v(12.0pt, weak: true)#align(center + horizon)[x]#pagebreak"


def test_text_and_par():
    body = [{
        "element": "par",
        "attrs": {"justify": True},
        "children": [{"element": "text", "attrs": {"font": "Inter", "size": "11pt"}, "children": ["x"]}],
    }]
    assert _render(body) == '#par(justify: true)[#text(font: "Inter", size: 11.0pt)[x]]'


def test_group_element():
    body = [{"element": "group", "children": ["a", {"element": "emph", "children": ["b"]}]}]
    assert _render(body) == "a#emph[b]"


def test_registry_covers_elements():
    for name in ("heading", "strong", "emph", "list", "enum", "grid", "grid.cell", "align", "h", "v", "par"):
        assert name in ELEMENT_REGISTRY


# ── Erreurs ──────────────────────────────────────────────────────────────────

def test_unknown_element():
    with pytest.raises(UnknownElementError) as exc:
        _render([{"element": "table"}])
    assert exc.value.element == "table"


def test_unknown_attribute():
    with pytest.raises(UnknownAttributeError) as exc:
        _render([{"element": "heading", "attrs": {"marker": "-"}}])
    assert exc.value.attr == "marker"


def test_invalid_attribute_value():
    with pytest.raises(ValidationError):
        _render([{"element": "heading", "attrs": {"level": "abc"}}])
    with pytest.raises(ValidationError):
        _render([{"element": "grid", "attrs": {"columns": ["1px"]}}])


def test_children_on_leaf_element_rejected():
    with pytest.raises(ConfigurationError):
        _render([{"element": "h", "attrs": {"amount": "1em"}, "children": ["x"]}])


def test_group_attrs_rejected():
    with pytest.raises(ConfigurationError):
        _render([{"element": "group", "attrs": {"level": 1}}])


def test_invalid_json_rejected():
    with pytest.raises(ValidationError):
        parse_manifest_json('{"body": [42]}')


def test_boolean_tracks_rejected():
    data = '{"body": [{"element": "grid", "attrs": {"columns": true}, "children": ["a"]}]}'
    with pytest.raises(ValidationError):
        parse_manifest_json(data)
