#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/paraunwrap/ast/visitors.py
"""Visitor pattern base class for AST traversal.

Every node kind dispatches to exactly one ``visit_*`` method, so a concrete
visitor that implements all abstract methods handles the whole closed set of
node kinds, including ``OpaqueNode`` for everything else.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from paraunwrap.ast.nodes import (
    BlockQuote,
    Div,
    Document,
    Figure,
    Image,
    LineBreak,
    OpaqueNode,
    Paragraph,
    RawBlock,
    RawInline,
    SoftBreak,
    Space,
    Text,
)


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement one ``visit_*`` method per node kind. Most code
    should subclass ``NodeTransformer`` instead, which supplies pass-through
    defaults and container descent.
    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node."""

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""

    @abstractmethod
    def visit_raw_block(self, node: RawBlock) -> Any:
        """Visit a RawBlock node."""

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node."""

    @abstractmethod
    def visit_div(self, node: Div) -> Any:
        """Visit a Div node."""

    @abstractmethod
    def visit_figure(self, node: Figure) -> Any:
        """Visit a Figure node."""

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""

    @abstractmethod
    def visit_space(self, node: Space) -> Any:
        """Visit a Space node."""

    @abstractmethod
    def visit_soft_break(self, node: SoftBreak) -> Any:
        """Visit a SoftBreak node."""

    @abstractmethod
    def visit_line_break(self, node: LineBreak) -> Any:
        """Visit a LineBreak node."""

    @abstractmethod
    def visit_raw_inline(self, node: RawInline) -> Any:
        """Visit a RawInline node."""

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit an Image node."""

    @abstractmethod
    def visit_opaque(self, node: OpaqueNode) -> Any:
        """Visit an OpaqueNode."""
