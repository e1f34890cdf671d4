#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/paraunwrap/transforms/rewrite.py
"""Replacement builders for unwrapped paragraphs.

Given a paragraph the classifier matched, these functions build the node
that replaces it: either a raw block holding the paragraph's text verbatim,
or a raw block holding a single ``<img />`` element.

Flattening is deliberately conservative. Only plain text, line breaks and
raw inline markup can be turned into a string; anything else (spaces,
emphasis, links, nested images, notes...) makes flattening fail, and the
paragraph is then kept as it is rather than being rewritten.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from paraunwrap.ast.nodes import (
    Attributes,
    Image,
    LineBreak,
    Node,
    Paragraph,
    RawBlock,
    RawInline,
    SoftBreak,
    Text,
)
from paraunwrap.constants import DEFAULT_RAW_FORMAT
from paraunwrap.transforms.classify import is_single_image_inlines, strip_angle_lead_in
from paraunwrap.utils.escape import escape_html_attribute, is_valid_attribute_name

logger = logging.getLogger(__name__)


def flatten_inlines_to_text(inlines: Sequence[Any]) -> Optional[str]:
    """Concatenate inline nodes into plain text.

    Parameters
    ----------
    inlines : sequence of Node
        Inline nodes to flatten

    Returns
    -------
    str or None
        The concatenated text, or None if any inline cannot be represented
        as plain text

    Notes
    -----
    - ``Text`` contributes its string
    - ``SoftBreak`` and ``LineBreak`` contribute a newline
    - ``RawInline`` contributes its markup verbatim, whatever its format
    - anything else, ``Space`` included, makes the result None

    Examples
    --------
    >>> flatten_inlines_to_text([Text("<table>"), SoftBreak(), Text("</table>")])
    '<table>\\n</table>'
    >>> flatten_inlines_to_text([Text("<div"), Space(), Text("x>")]) is None
    True

    """
    parts: list[str] = []
    for inline in inlines:
        if isinstance(inline, Text):
            parts.append(inline.content)
        elif isinstance(inline, (SoftBreak, LineBreak)):
            parts.append("\n")
        elif isinstance(inline, RawInline):
            parts.append(inline.content)
        else:
            return None
    return "".join(parts)


def attributes_to_html(attr: Optional[Attributes]) -> str:
    """Render an attribute triple as HTML attributes.

    Parameters
    ----------
    attr : Attributes or None
        Attributes to render; None renders nothing

    Returns
    -------
    str
        ``' id="..." class="..." key="..."'`` with a leading space, or an
        empty string when nothing renders

    Notes
    -----
    Key/value pairs whose key is not a valid HTML attribute name (empty, or
    holding whitespace, quotes, ``<``, ``>``, ``/`` or ``=``) are skipped.

    """
    if attr is None or attr.is_empty():
        return ""

    rendered: list[str] = []
    if attr.identifier:
        rendered.append(f'id="{escape_html_attribute(attr.identifier)}"')
    if attr.classes:
        rendered.append(f'class="{escape_html_attribute(" ".join(attr.classes))}"')
    for key, value in attr.key_values:
        if not is_valid_attribute_name(key):
            logger.debug("Skipping image attribute with invalid name %r", key)
            continue
        rendered.append(f'{key}="{escape_html_attribute(value)}"')

    if not rendered:
        return ""
    return " " + " ".join(rendered)


def image_to_raw_html(image: Image, raw_format: str = DEFAULT_RAW_FORMAT) -> RawBlock:
    """Build a raw block holding a self-closing ``<img>`` for an image.

    Attributes are emitted in a fixed order: ``src``, ``alt``, ``title``,
    then ``id``, ``class`` and the key/value pairs. Empty ``src``, ``alt``
    and ``title`` values are omitted.

    Parameters
    ----------
    image : Image
        Image to convert
    raw_format : str, default = "html"
        Format tag for the raw block

    Returns
    -------
    RawBlock
        The ``<img />`` markup

    Examples
    --------
    >>> image = Image(attr=Attributes("fig1", ["center"], []), alt=[Text("cat")], url="a.png")
    >>> image_to_raw_html(image).content
    '<img src="a.png" alt="cat" id="fig1" class="center" />'

    """
    alt = flatten_inlines_to_text(image.alt) or ""

    parts = ["<img"]
    if image.url:
        parts.append(f' src="{escape_html_attribute(image.url)}"')
    if alt:
        parts.append(f' alt="{escape_html_attribute(alt)}"')
    if image.title:
        parts.append(f' title="{escape_html_attribute(image.title)}"')
    parts.append(attributes_to_html(image.attr))
    parts.append(" />")

    return RawBlock(format=raw_format, content="".join(parts))


def rewrite_angle_paragraph(
    paragraph: Paragraph, raw_format: str = DEFAULT_RAW_FORMAT, require_space: bool = False
) -> Node:
    """Unwrap a paragraph that starts with ``<``.

    If the paragraph is just the angle marker followed by one image, the
    image is emitted as a bare ``<img />``. Otherwise the whole paragraph
    (marker included) is flattened and emitted verbatim as a raw block. When
    the paragraph holds content that cannot be flattened, it is returned
    unchanged.

    Parameters
    ----------
    paragraph : Paragraph
        An angle paragraph
    raw_format : str, default = "html"
        Format tag for the raw block
    require_space : bool, default = False
        Apply the stricter angle rule when stripping the marker

    Returns
    -------
    Node
        The replacement raw block, or ``paragraph`` itself

    """
    rest = strip_angle_lead_in(paragraph.content, require_space=require_space)
    if rest is not None and is_single_image_inlines(rest):
        logger.debug("Angle paragraph wraps a single image; emitting bare <img>")
        return image_to_raw_html(rest[0], raw_format=raw_format)

    text = flatten_inlines_to_text(paragraph.content)
    if text is None:
        logger.debug("Angle paragraph holds rich inline content; leaving it wrapped")
        return paragraph
    return RawBlock(format=raw_format, content=text)


def rewrite_image_paragraph(paragraph: Paragraph, raw_format: str = DEFAULT_RAW_FORMAT) -> Node:
    """Unwrap a paragraph that holds a single image.

    Parameters
    ----------
    paragraph : Paragraph
        A single-image paragraph
    raw_format : str, default = "html"
        Format tag for the raw block

    Returns
    -------
    Node
        The ``<img />`` raw block, or ``paragraph`` itself if it has no
        leading image

    """
    first = paragraph.content[0] if paragraph.content else None
    if not isinstance(first, Image):
        return paragraph
    return image_to_raw_html(first, raw_format=raw_format)
