"""Renderers — Typst + Protocol."""
from .base import Renderer
from .typst import TypstRenderer, render, render_block, render_element, render_inline

__all__ = [
    "Renderer",
    "TypstRenderer",
    "render",
    "render_block",
    "render_inline",
    "render_element",
]
