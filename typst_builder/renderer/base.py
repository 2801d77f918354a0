"""
Protocol Renderer — interface pluggable pour les renderers (Typst, debug…).
"""
from typing import Protocol, runtime_checkable

from ..core.schemas import Content


@runtime_checkable
class Renderer(Protocol):
    def render(self, root: Content) -> str: ...
