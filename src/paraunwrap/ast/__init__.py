#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Document tree nodes, visitors and JSON serialization."""

from paraunwrap.ast.nodes import (
    WHITESPACE_INLINE_TYPES,
    Attributes,
    BlockQuote,
    Div,
    Document,
    Figure,
    Image,
    LineBreak,
    Node,
    OpaqueNode,
    Paragraph,
    RawBlock,
    RawInline,
    SoftBreak,
    Space,
    Text,
)
from paraunwrap.ast.transforms import NodeTransformer
from paraunwrap.ast.visitors import NodeVisitor

__all__ = [
    "WHITESPACE_INLINE_TYPES",
    "Attributes",
    "BlockQuote",
    "Div",
    "Document",
    "Figure",
    "Image",
    "LineBreak",
    "Node",
    "NodeTransformer",
    "NodeVisitor",
    "OpaqueNode",
    "Paragraph",
    "RawBlock",
    "RawInline",
    "SoftBreak",
    "Space",
    "Text",
]
