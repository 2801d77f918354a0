"""Tests DocumentBuilder — chaînage, build immuable, renderer pluggable."""
from typst_builder import DocumentBuilder, render
from typst_builder.core.schemas import Group, text
from typst_builder.renderer import TypstRenderer
from typst_builder.elements import bullet_list, lists, strong


def test_builder_heading_and_paragraph():
    markup = (
        DocumentBuilder()
        .heading("Intro", level=1, numbering="1.")
        .paragraph("Bonjour ", strong(children=["monde"]))
        .render()
    )
    assert markup == '#heading(level: 1, numbering: "1.")[Intro]Bonjour #strong[monde]#parbreak'


def test_builder_add_nodes():
    builder = DocumentBuilder()
    builder.add(bullet_list([lists.marker("-")], ["a", "b"]))
    builder.add("fin")
    assert builder.render() == "#list(marker: [-])[a][b]fin"


def test_build_returns_group_snapshot():
    builder = DocumentBuilder().add("a")
    first = builder.build()
    builder.add("b")
    assert isinstance(first, Group)
    assert render(first) == "a"
    assert render(builder.build()) == "ab"


def test_empty_builder():
    assert DocumentBuilder().render() == ""


def test_custom_renderer():
    class CountingRenderer:
        def __init__(self):
            self.calls = 0

        def render(self, root):
            self.calls += 1
            return f"{len(root.children)} parties"

    renderer = CountingRenderer()
    builder = DocumentBuilder(renderer=renderer).add(text("a"), text("b"))
    assert builder.render() == "2 parties"
    assert renderer.calls == 1


def test_default_renderer_when_none():
    builder = DocumentBuilder(renderer=None)
    assert isinstance(builder.renderer, TypstRenderer)
    assert builder.heading("T", numbering=None).render() == "#heading(level: 1)[T]"
