"""Core module pour typst_builder."""
from .schemas import (
    FrozenModel,
    Keyed,
    Positional,
    RenderedAttr,
    PlainText,
    Element,
    Group,
    Content,
    BlockJoined,
    BlockPerChild,
    InlineArgs,
    ChildLayout,
    ElementKind,
    Attr,
    make_attr,
    check_attrs,
    make_keyed_attr,
    make_positional_attr,
    render_attrs,
    build_node,
    build_multi_node,
    build_inline_node,
    text,
    group,
)
from .errors import (
    TypstBuilderError,
    ConfigurationError,
    AttrKindMismatchError,
    UnknownElementError,
    UnknownAttributeError,
)

__all__ = [
    "FrozenModel",
    "Keyed",
    "Positional",
    "RenderedAttr",
    "PlainText",
    "Element",
    "Group",
    "Content",
    "BlockJoined",
    "BlockPerChild",
    "InlineArgs",
    "ChildLayout",
    "ElementKind",
    "Attr",
    "make_attr",
    "check_attrs",
    "make_keyed_attr",
    "make_positional_attr",
    "render_attrs",
    "build_node",
    "build_multi_node",
    "build_inline_node",
    "text",
    "group",
    "TypstBuilderError",
    "ConfigurationError",
    "AttrKindMismatchError",
    "UnknownElementError",
    "UnknownAttributeError",
]
