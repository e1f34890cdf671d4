#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/paraunwrap/ast/transforms.py
"""Base transformer for block-level AST rewriting.

``NodeTransformer`` walks block sequences and descends into the container
kinds (``BlockQuote``, ``Div``, ``Figure``). Containers are kept as the same
objects; only their child lists are replaced. Every other node is returned
unchanged and is not descended into, so subclasses only override the
``visit_*`` methods for the nodes they want to replace.

Examples
--------
Drop every raw block:

    >>> class DropRawBlocks(NodeTransformer):
    ...     def visit_raw_block(self, node):
    ...         return None
    >>> DropRawBlocks().transform_document(doc)

"""

from __future__ import annotations

from paraunwrap.ast.nodes import (
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
from paraunwrap.ast.visitors import NodeVisitor


class NodeTransformer(NodeVisitor):
    """Base class for transforming block-level AST nodes.

    Subclass ``visit_*`` methods return the replacement node, the same node
    to keep it, or None to remove it.
    """

    def transform(self, node: Node) -> Node | None:
        """Transform a single node.

        Parameters
        ----------
        node : Node
            Node to transform

        Returns
        -------
        Node or None
            Replacement node, or None to remove

        """
        return node.accept(self)

    def transform_blocks(self, blocks: list[Node]) -> list[Node]:
        """Transform a block sequence in order.

        Parameters
        ----------
        blocks : list of Node
            Blocks to transform

        Returns
        -------
        list of Node
            New list with transformed blocks (None results dropped)

        """
        result = []
        for block in blocks:
            transformed = self.transform(block)
            if transformed is not None:
                result.append(transformed)
        return result

    def transform_document(self, document: Document) -> Document:
        """Transform a document's blocks in place and return the document."""
        return document.accept(self)

    def visit_document(self, node: Document) -> Document:
        """Rewrite the top-level block sequence when there is one."""
        if node.blocks is not None:
            node.blocks = self.transform_blocks(node.blocks)
        return node

    def visit_block_quote(self, node: BlockQuote) -> Node | None:
        """Rewrite the quoted blocks in place."""
        node.children = self.transform_blocks(node.children)
        return node

    def visit_div(self, node: Div) -> Node | None:
        """Rewrite the div's blocks in place; attributes are untouched."""
        node.children = self.transform_blocks(node.children)
        return node

    def visit_figure(self, node: Figure) -> Node | None:
        """Rewrite the figure body in place; attributes and caption are untouched."""
        node.children = self.transform_blocks(node.children)
        return node

    # Pass-through defaults. Block sequences never dispatch to the inline
    # kinds below; they exist to complete the NodeVisitor interface and so
    # ``transform`` returns any single inline node as is.

    def visit_paragraph(self, node: Paragraph) -> Node | None:
        return node

    def visit_raw_block(self, node: RawBlock) -> Node | None:
        return node

    def visit_text(self, node: Text) -> Node | None:
        return node

    def visit_space(self, node: Space) -> Node | None:
        return node

    def visit_soft_break(self, node: SoftBreak) -> Node | None:
        return node

    def visit_line_break(self, node: LineBreak) -> Node | None:
        return node

    def visit_raw_inline(self, node: RawInline) -> Node | None:
        return node

    def visit_image(self, node: Image) -> Node | None:
        return node

    def visit_opaque(self, node: OpaqueNode) -> Node | None:
        return node
