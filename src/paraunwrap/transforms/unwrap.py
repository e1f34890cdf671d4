#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/paraunwrap/transforms/unwrap.py
"""Paragraph unwrapping over a whole document.

The transform walks the block tree once. Containers (``BlockQuote``, ``Div``
and ``Figure``) keep their identity and have their block list rewritten
first; each paragraph is then checked against the angle rule and, failing
that, the single-image rule. Every other node, including kinds this package
does not model, is passed through without being descended into.

Examples
--------
Unwrap a decoded document:

    >>> transform = UnwrapTransform()
    >>> doc = transform.transform_document(doc)

Unwrap a JSON payload in one call:

    >>> unwrap_json('{"blocks":[{"t":"Para","c":[{"t":"Str","c":"<hr>"}]}]}')
    '{"blocks":[{"t":"RawBlock","c":["html","<hr>"]}]}'

"""

from __future__ import annotations

import logging
from typing import IO, Optional, Union

from paraunwrap.ast.nodes import Document, Node, Paragraph
from paraunwrap.ast.transforms import NodeTransformer
from paraunwrap.options import PandocJsonParserOptions, PandocJsonRendererOptions, UnwrapOptions
from paraunwrap.transforms.classify import is_angle_paragraph, is_single_image_paragraph
from paraunwrap.transforms.rewrite import rewrite_angle_paragraph, rewrite_image_paragraph

logger = logging.getLogger(__name__)


class UnwrapTransform(NodeTransformer):
    """Replace angle paragraphs and single-image paragraphs with raw blocks.

    Parameters
    ----------
    options : UnwrapOptions or None
        Which rewrites to apply and how

    Attributes
    ----------
    angle_rewrites : int
        Number of angle paragraphs replaced so far
    image_rewrites : int
        Number of single-image paragraphs replaced so far

    """

    def __init__(self, options: UnwrapOptions | None = None):
        """Initialize the transform with options."""
        self.options = options or UnwrapOptions()
        self.angle_rewrites = 0
        self.image_rewrites = 0

    def visit_document(self, node: Document) -> Document:
        """Rewrite the document's blocks and log a summary."""
        if node.blocks is None:
            logger.debug("Document has no block sequence; passing it through")
            return node

        node = super().visit_document(node)
        logger.debug(
            "Unwrapped %d angle paragraph(s) and %d image paragraph(s)", self.angle_rewrites, self.image_rewrites
        )
        return node

    def visit_paragraph(self, node: Paragraph) -> Node | None:
        """Replace the paragraph if it matches one of the unwrap patterns."""
        options = self.options

        if options.unwrap_angle_paragraphs and is_angle_paragraph(node, options.require_space_after_angle):
            replacement = rewrite_angle_paragraph(
                node, raw_format=options.raw_format, require_space=options.require_space_after_angle
            )
            if replacement is not node:
                self.angle_rewrites += 1
            return replacement

        if options.unwrap_image_paragraphs and is_single_image_paragraph(node):
            replacement = rewrite_image_paragraph(node, raw_format=options.raw_format)
            if replacement is not node:
                self.image_rewrites += 1
            return replacement

        return node


def walk_blocks(blocks: list[Node], options: UnwrapOptions | None = None) -> list[Node]:
    """Unwrap matching paragraphs in a block sequence.

    Parameters
    ----------
    blocks : list of Node
        Block sequence to rewrite; container nodes in it are updated in place
    options : UnwrapOptions or None
        Transform options

    Returns
    -------
    list of Node
        The rewritten sequence, same length and order as the input

    """
    return UnwrapTransform(options).transform_blocks(blocks)


def unwrap_document(document: Document, options: UnwrapOptions | None = None) -> Document:
    """Unwrap matching paragraphs throughout a document.

    Parameters
    ----------
    document : Document
        Document to rewrite in place; metadata is never touched
    options : UnwrapOptions or None
        Transform options

    Returns
    -------
    Document
        The same document object

    """
    return UnwrapTransform(options).transform_document(document)


def unwrap_json(
    input_data: Union[str, bytes, IO[bytes], IO[str]],
    options: UnwrapOptions | None = None,
    parser_options: PandocJsonParserOptions | None = None,
    renderer_options: PandocJsonRendererOptions | None = None,
) -> str:
    """Decode a JSON document, unwrap it, and encode it again.

    Parameters
    ----------
    input_data : str, bytes, or file-like
        JSON document text, raw bytes, or a readable stream
    options : UnwrapOptions or None
        Transform options
    parser_options : PandocJsonParserOptions or None
        Decoding options
    renderer_options : PandocJsonRendererOptions or None
        Encoding options

    Returns
    -------
    str
        The rewritten JSON document

    Raises
    ------
    ParsingError
        If the input cannot be decoded into a document

    """
    from paraunwrap.parsers.pandoc_json import PandocJsonParser
    from paraunwrap.renderers.pandoc_json import PandocJsonRenderer

    document = PandocJsonParser(parser_options).parse(input_data)
    unwrap_document(document, options)
    return PandocJsonRenderer(renderer_options).render_to_string(document)
