#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/paraunwrap/ast/nodes.py
"""AST node classes for Pandoc-style document trees.

This module defines the closed set of node kinds the unwrap transform
understands. Every other kind is carried as an ``OpaqueNode`` holding its
decoded JSON value, so it can be written back out exactly as it came in.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Block-level nodes:
    - Paragraph, RawBlock
    - BlockQuote, Div, Figure (containers with one block-sequence slot)

Inline nodes:
    - Text, Space, SoftBreak, LineBreak, RawInline, Image

Other:
    - OpaqueNode (any kind or payload shape not modelled here)
    - Document (root record, not a Node in the interchange sense)

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

from paraunwrap.constants import (
    DEFAULT_RAW_FORMAT,
    DOCUMENT_API_VERSION_KEY,
    DOCUMENT_BLOCKS_KEY,
    DOCUMENT_META_KEY,
    TAG_PARAGRAPH,
    TAG_TEXT,
)


@dataclass
class Attributes:
    """Attribute triple attached to images, divs and figures.

    Parameters
    ----------
    identifier : str, default = ""
        Element identifier, rendered as ``id`` only when non-empty
    classes : list of str, default = empty list
        Class names in order
    key_values : list of (str, str), default = empty list
        Additional key/value attributes in order

    """

    identifier: str = ""
    classes: list[str] = field(default_factory=list)
    key_values: list[tuple[str, str]] = field(default_factory=list)

    def is_empty(self) -> bool:
        """Return True when no part of the triple would render."""
        return not self.identifier and not self.classes and not any(key for key, _ in self.key_values)


class Node(ABC):
    """Base class for all AST nodes.

    Attributes
    ----------
    payload_first : bool
        Set on nodes read with their ``c`` member ahead of ``t`` so they are
        written back in the same order. Not part of node equality.

    """

    payload_first: bool = False

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Paragraph(Node):
    """Paragraph node holding a sequence of inline nodes.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline children in order
    tag : str, default = "Paragraph"
        Interchange tag the node was read with (``"Para"`` for Pandoc input)

    """

    content: list[Node] = field(default_factory=list)
    tag: str = field(default=TAG_PARAGRAPH, compare=False, repr=False)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph."""
        return visitor.visit_paragraph(self)


@dataclass
class RawBlock(Node):
    """Raw block emitted verbatim in the named output format.

    Parameters
    ----------
    format : str
        Target format tag (e.g. ``"html"``)
    content : str
        Raw markup

    """

    format: str = DEFAULT_RAW_FORMAT
    content: str = ""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this raw block."""
        return visitor.visit_raw_block(self)


@dataclass
class BlockQuote(Node):
    """Block quote container.

    Parameters
    ----------
    children : list of Node, default = empty list
        Quoted block nodes

    """

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this block quote."""
        return visitor.visit_block_quote(self)


@dataclass
class Div(Node):
    """Generic division container with attributes.

    Parameters
    ----------
    attr : Attributes
        Division attributes, preserved untouched
    children : list of Node, default = empty list
        Contained block nodes

    """

    attr: Attributes = field(default_factory=Attributes)
    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this div."""
        return visitor.visit_div(self)


@dataclass
class Figure(Node):
    """Figure container.

    Parameters
    ----------
    attr : Attributes
        Figure attributes, preserved untouched
    caption : Any
        Caption in its decoded interchange form; never inspected
    children : list of Node, default = empty list
        Figure body blocks

    """

    attr: Attributes = field(default_factory=Attributes)
    caption: Any = field(default_factory=lambda: [None, []])
    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this figure."""
        return visitor.visit_figure(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text run.

    Parameters
    ----------
    content : str
        Literal text
    tag : str, default = "Text"
        Interchange tag the node was read with (``"Str"`` for Pandoc input)

    """

    content: str = ""
    tag: str = field(default=TAG_TEXT, compare=False, repr=False)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text node."""
        return visitor.visit_text(self)


@dataclass
class Space(Node):
    """Inter-word space."""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this space."""
        return visitor.visit_space(self)


@dataclass
class SoftBreak(Node):
    """Soft line break (a newline in the source)."""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this soft break."""
        return visitor.visit_soft_break(self)


@dataclass
class LineBreak(Node):
    """Hard line break."""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this line break."""
        return visitor.visit_line_break(self)


@dataclass
class RawInline(Node):
    """Raw inline markup.

    Parameters
    ----------
    format : str
        Format tag of the markup
    content : str
        Raw markup text

    """

    format: str = DEFAULT_RAW_FORMAT
    content: str = ""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this raw inline."""
        return visitor.visit_raw_inline(self)


@dataclass
class Image(Node):
    """Image inline.

    Parameters
    ----------
    attr : Attributes
        Image attributes (defaults to an empty triple)
    alt : list of Node, default = empty list
        Alt text as inline nodes
    url : str, default = ""
        Image source
    title : str, default = ""
        Image title
    source : Any, default = None
        Original JSON form when the decoder had to fill in defaults for a
        malformed attribute triple or target; re-encoded verbatim if the
        image survives the transform

    """

    attr: Attributes = field(default_factory=Attributes)
    alt: list[Node] = field(default_factory=list)
    url: str = ""
    title: str = ""
    source: Any = field(default=None, compare=False, repr=False)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this image."""
        return visitor.visit_image(self)


# ============================================================================
# Opaque Nodes
# ============================================================================


@dataclass
class OpaqueNode(Node):
    """Node of a kind the transform does not model.

    Parameters
    ----------
    raw : Any
        The decoded JSON value, written back unchanged

    """

    raw: Any = None

    @property
    def tag(self) -> Optional[str]:
        """Return the interchange tag, if the raw value carries one."""
        if isinstance(self.raw, dict):
            tag = self.raw.get("t")
            return tag if isinstance(tag, str) else None
        return None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this opaque node."""
        return visitor.visit_opaque(self)


# ============================================================================
# Document
# ============================================================================


def _default_key_order() -> list[str]:
    return [DOCUMENT_API_VERSION_KEY, DOCUMENT_META_KEY, DOCUMENT_BLOCKS_KEY]


@dataclass
class Document:
    """Root document record.

    Parameters
    ----------
    blocks : list of Node or None, default = empty list
        Top-level blocks; None when the input had no usable block sequence
    meta : Any, default = empty dict
        Document metadata, passed through unmodified
    extra : dict, default = empty dict
        Any other top-level members (``pandoc-api-version``, or a ``blocks``
        member that was not a list), passed through unmodified
    key_order : list of str
        Order of the top-level members as read

    """

    blocks: Optional[list[Node]] = field(default_factory=list)
    meta: Any = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)
    key_order: list[str] = field(default_factory=_default_key_order, compare=False, repr=False)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document."""
        return visitor.visit_document(self)


WHITESPACE_INLINE_TYPES: tuple[type[Node], ...] = (Space, SoftBreak, LineBreak)
