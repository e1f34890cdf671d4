#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/paraunwrap/transforms/classify.py
"""Paragraph pattern predicates.

These functions decide whether a paragraph should be unwrapped. They are
read-only and never raise: a node that does not have the expected shape is
simply reported as not matching.

Angle paragraphs
----------------
A paragraph is an *angle paragraph* when its first inline is a text run that
starts with ``<``. With ``require_space=True`` the stricter rule applies: the
text must start with ``"< "``, or be exactly ``"<"`` and be followed by a
whitespace inline, which is how Pandoc tokenizes ``< div``.

Single-image paragraphs
-----------------------
A paragraph whose inlines are exactly one ``Image``, ignoring trailing
``Space``/``SoftBreak``/``LineBreak`` nodes.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from paraunwrap.ast.nodes import WHITESPACE_INLINE_TYPES, Image, Node, Paragraph, Text
from paraunwrap.constants import ANGLE_MARKER, ANGLE_MARKER_WITH_SPACE


def is_whitespace_inline(node: Any) -> bool:
    """Return True for ``Space``, ``SoftBreak`` and ``LineBreak`` nodes."""
    return isinstance(node, WHITESPACE_INLINE_TYPES)


def _has_angle_lead(inlines: Sequence[Node], require_space: bool) -> bool:
    if not inlines:
        return False
    first = inlines[0]
    if not isinstance(first, Text) or not isinstance(first.content, str):
        return False
    if not require_space:
        return first.content.startswith(ANGLE_MARKER)
    if first.content.startswith(ANGLE_MARKER_WITH_SPACE):
        return True
    return first.content == ANGLE_MARKER and len(inlines) > 1 and is_whitespace_inline(inlines[1])


def is_angle_paragraph(node: Any, require_space: bool = False) -> bool:
    """Check whether a node is a paragraph that starts with ``<``.

    Parameters
    ----------
    node : Any
        Node to classify
    require_space : bool, default = False
        Require the angle to be followed by a space

    Returns
    -------
    bool
        True if the node is an angle paragraph

    Examples
    --------
    >>> is_angle_paragraph(Paragraph(content=[Text("< hello")]))
    True
    >>> is_angle_paragraph(Paragraph(content=[Text("hello")]))
    False

    """
    if not isinstance(node, Paragraph) or not isinstance(node.content, list):
        return False
    return _has_angle_lead(node.content, require_space)


def is_single_image_inlines(inlines: Any) -> bool:
    """Check whether an inline sequence is one image plus optional trailing whitespace."""
    if not isinstance(inlines, (list, tuple)) or not inlines:
        return False
    if not isinstance(inlines[0], Image):
        return False
    return all(is_whitespace_inline(inline) for inline in inlines[1:])


def is_single_image_paragraph(node: Any) -> bool:
    """Check whether a node is a paragraph containing exactly one image.

    Trailing whitespace inlines after the image are ignored.

    Parameters
    ----------
    node : Any
        Node to classify

    Returns
    -------
    bool
        True if the node is a single-image paragraph

    """
    if not isinstance(node, Paragraph):
        return False
    return is_single_image_inlines(node.content)


def strip_angle_lead_in(inlines: Any, require_space: bool = False) -> Optional[list[Node]]:
    """Remove the leading angle text run and the whitespace after it.

    Parameters
    ----------
    inlines : Any
        A paragraph's inline children
    require_space : bool, default = False
        Apply the stricter angle rule

    Returns
    -------
    list of Node or None
        The remaining inlines, or None if the sequence does not start with
        an angle text run

    Examples
    --------
    >>> rest = strip_angle_lead_in([Text("<"), Space(), Image(url="a.png")])
    >>> [type(node).__name__ for node in rest]
    ['Image']

    """
    if not isinstance(inlines, (list, tuple)) or not _has_angle_lead(inlines, require_space):
        return None

    index = 1
    while index < len(inlines) and is_whitespace_inline(inlines[index]):
        index += 1
    return list(inlines[index:])
