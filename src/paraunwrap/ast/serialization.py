#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/paraunwrap/ast/serialization.py
"""JSON serialization and deserialization for Pandoc-style document trees.

Nodes travel as ``{"t": tag, "c": payload}`` objects. Known tags whose
payload has the expected shape decode into typed nodes; anything else decodes
into an ``OpaqueNode`` and is re-encoded exactly as it was read. Decoding
never fails on a node it does not understand. The ``t`` and ``c`` members
may come in either order, and typed nodes are written back in the order
they were read.

Examples
--------
Round-trip a document:

    >>> doc = json_to_document('{"blocks":[{"t":"Para","c":[{"t":"Str","c":"hi"}]}]}')
    >>> doc.blocks[0].content[0].content
    'hi'
    >>> document_to_json(doc)
    '{"blocks":[{"t":"Para","c":[{"t":"Str","c":"hi"}]}]}'

"""

from __future__ import annotations

import json
from typing import Any, Callable, Optional

from paraunwrap.ast.nodes import (
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
from paraunwrap.constants import (
    COMPACT_JSON_SEPARATORS,
    DOCUMENT_BLOCKS_KEY,
    DOCUMENT_META_KEY,
    PARAGRAPH_TAGS,
    PAYLOAD_KEY,
    TAG_BLOCK_QUOTE,
    TAG_DIV,
    TAG_FIGURE,
    TAG_IMAGE,
    TAG_KEY,
    TAG_LINE_BREAK,
    TAG_RAW_BLOCK,
    TAG_RAW_INLINE,
    TAG_SOFT_BREAK,
    TAG_SPACE,
    TEXT_TAGS,
)

_KEYS_WITH_PAYLOAD = frozenset({TAG_KEY, PAYLOAD_KEY})
_KEYS_WITHOUT_PAYLOAD = frozenset({TAG_KEY})


# ============================================================================
# Decoding
# ============================================================================


def _is_str_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def _is_str_pair(value: Any) -> bool:
    return isinstance(value, list) and len(value) == 2 and all(isinstance(item, str) for item in value)


def decode_attributes(value: Any) -> Optional[Attributes]:
    """Decode an attribute triple.

    Parameters
    ----------
    value : Any
        Decoded JSON value expected to be ``[id, [classes], [[key, value], ...]]``

    Returns
    -------
    Attributes or None
        The attributes, or None if the value is not a well-formed triple

    """
    if not isinstance(value, list) or len(value) != 3:
        return None
    identifier, classes, key_values = value
    if not isinstance(identifier, str) or not _is_str_list(classes) or not isinstance(key_values, list):
        return None
    if not all(_is_str_pair(pair) for pair in key_values):
        return None
    return Attributes(
        identifier=identifier,
        classes=list(classes),
        key_values=[(key, val) for key, val in key_values],
    )


def decode_node_list(value: Any) -> Optional[list[Node]]:
    """Decode a JSON array of nodes, or return None if ``value`` is not an array."""
    if not isinstance(value, list):
        return None
    return [node_from_dict(item) for item in value]


def _decode_paragraph(value: dict[str, Any]) -> Optional[Node]:
    content = decode_node_list(value[PAYLOAD_KEY])
    if content is None:
        return None
    return Paragraph(content=content, tag=value[TAG_KEY])


def _decode_text(value: dict[str, Any]) -> Optional[Node]:
    payload = value[PAYLOAD_KEY]
    if not isinstance(payload, str):
        return None
    return Text(content=payload, tag=value[TAG_KEY])


def _decode_raw_block(value: dict[str, Any]) -> Optional[Node]:
    payload = value[PAYLOAD_KEY]
    if not _is_str_pair(payload):
        return None
    return RawBlock(format=payload[0], content=payload[1])


def _decode_raw_inline(value: dict[str, Any]) -> Optional[Node]:
    payload = value[PAYLOAD_KEY]
    if not _is_str_pair(payload):
        return None
    return RawInline(format=payload[0], content=payload[1])


def _decode_block_quote(value: dict[str, Any]) -> Optional[Node]:
    children = decode_node_list(value[PAYLOAD_KEY])
    if children is None:
        return None
    return BlockQuote(children=children)


def _decode_div(value: dict[str, Any]) -> Optional[Node]:
    payload = value[PAYLOAD_KEY]
    if not isinstance(payload, list) or len(payload) != 2:
        return None
    attr = decode_attributes(payload[0])
    children = decode_node_list(payload[1])
    if attr is None or children is None:
        return None
    return Div(attr=attr, children=children)


def _decode_figure(value: dict[str, Any]) -> Optional[Node]:
    payload = value[PAYLOAD_KEY]
    if not isinstance(payload, list) or len(payload) != 3:
        return None
    attr = decode_attributes(payload[0])
    children = decode_node_list(payload[2])
    if attr is None or children is None:
        return None
    return Figure(attr=attr, caption=payload[1], children=children)


def _decode_image(value: dict[str, Any]) -> Optional[Node]:
    payload = value[PAYLOAD_KEY]
    if not isinstance(payload, list):
        return None

    exact = len(payload) == 3

    attr = decode_attributes(payload[0]) if len(payload) > 0 else None
    if attr is None:
        attr = Attributes()
        exact = False

    alt = decode_node_list(payload[1]) if len(payload) > 1 else None
    if alt is None:
        alt = []
        exact = False

    target = payload[2] if len(payload) > 2 else None
    if _is_str_pair(target):
        url, title = target
    else:
        exact = False
        target = target if isinstance(target, list) else []
        url = target[0] if len(target) > 0 and isinstance(target[0], str) else ""
        title = target[1] if len(target) > 1 and isinstance(target[1], str) else ""

    return Image(attr=attr, alt=alt, url=url, title=title, source=None if exact else value)


def _decode_empty(node_type: type[Node]) -> Callable[[dict[str, Any]], Optional[Node]]:
    def decode(value: dict[str, Any]) -> Optional[Node]:
        return node_type()

    return decode


# Tag -> (decoder, whether a payload member is expected)
_DECODERS: dict[str, tuple[Callable[[dict[str, Any]], Optional[Node]], bool]] = {
    TAG_RAW_BLOCK: (_decode_raw_block, True),
    TAG_BLOCK_QUOTE: (_decode_block_quote, True),
    TAG_DIV: (_decode_div, True),
    TAG_FIGURE: (_decode_figure, True),
    TAG_IMAGE: (_decode_image, True),
    TAG_RAW_INLINE: (_decode_raw_inline, True),
    TAG_SPACE: (_decode_empty(Space), False),
    TAG_SOFT_BREAK: (_decode_empty(SoftBreak), False),
    TAG_LINE_BREAK: (_decode_empty(LineBreak), False),
}
_DECODERS.update({tag: (_decode_paragraph, True) for tag in PARAGRAPH_TAGS})
_DECODERS.update({tag: (_decode_text, True) for tag in TEXT_TAGS})


def node_from_dict(value: Any) -> Node:
    """Decode one node from its JSON value.

    Parameters
    ----------
    value : Any
        Decoded JSON value

    Returns
    -------
    Node
        Typed node for a known, well-shaped kind; ``OpaqueNode`` otherwise

    """
    if not isinstance(value, dict):
        return OpaqueNode(raw=value)

    tag = value.get(TAG_KEY)
    entry = _DECODERS.get(tag) if isinstance(tag, str) else None
    if entry is None:
        return OpaqueNode(raw=value)

    decoder, has_payload = entry
    expected_keys = _KEYS_WITH_PAYLOAD if has_payload else _KEYS_WITHOUT_PAYLOAD
    if value.keys() != expected_keys:
        return OpaqueNode(raw=value)

    node = decoder(value)
    if node is None:
        return OpaqueNode(raw=value)
    if has_payload and next(iter(value)) == PAYLOAD_KEY:
        node.payload_first = True
    return node


def document_from_dict(data: dict[str, Any]) -> Document:
    """Build a Document from a decoded top-level JSON object.

    Parameters
    ----------
    data : dict
        Top-level JSON object

    Returns
    -------
    Document
        Document with decoded blocks; members other than ``blocks`` and
        ``meta`` are kept as-is in ``extra``

    """
    blocks: Optional[list[Node]] = None
    meta: Any = {}
    extra: dict[str, Any] = {}

    for key, value in data.items():
        if key == DOCUMENT_BLOCKS_KEY and isinstance(value, list):
            blocks = decode_node_list(value)
        elif key == DOCUMENT_META_KEY:
            meta = value
        else:
            extra[key] = value

    return Document(blocks=blocks, meta=meta, extra=extra, key_order=list(data.keys()))


def json_to_document(json_str: str) -> Document:
    """Deserialize a JSON string into a Document.

    Parameters
    ----------
    json_str : str
        JSON document text

    Returns
    -------
    Document
        Decoded document

    Raises
    ------
    json.JSONDecodeError
        If the text is not valid JSON
    ValueError
        If the JSON root is not an object

    """
    data = json.loads(json_str)
    if not isinstance(data, dict):
        raise ValueError(f"Document root must be a JSON object, got {type(data).__name__}")
    return document_from_dict(data)


# ============================================================================
# Encoding
# ============================================================================


def encode_attributes(attr: Attributes) -> list[Any]:
    """Encode an attribute triple to its JSON form."""
    return [attr.identifier, list(attr.classes), [[key, value] for key, value in attr.key_values]]


def encode_node_list(nodes: list[Node]) -> list[Any]:
    """Encode a list of nodes to a JSON array."""
    return [node_to_dict(node) for node in nodes]


def _tagged(node: Node, tag: str, payload: Any) -> dict[str, Any]:
    if node.payload_first:
        return {PAYLOAD_KEY: payload, TAG_KEY: tag}
    return {TAG_KEY: tag, PAYLOAD_KEY: payload}


def node_to_dict(node: Node) -> Any:
    """Encode one node to its JSON value.

    Members are written ``t`` then ``c`` unless the node was read with
    ``c`` first.

    Parameters
    ----------
    node : Node
        Node to encode

    Returns
    -------
    Any
        JSON-compatible value

    Raises
    ------
    TypeError
        If ``node`` is not one of the node kinds defined in ``paraunwrap.ast.nodes``

    """
    if isinstance(node, OpaqueNode):
        return node.raw
    if isinstance(node, Paragraph):
        return _tagged(node, node.tag, encode_node_list(node.content))
    if isinstance(node, Text):
        return _tagged(node, node.tag, node.content)
    if isinstance(node, Space):
        return {TAG_KEY: TAG_SPACE}
    if isinstance(node, SoftBreak):
        return {TAG_KEY: TAG_SOFT_BREAK}
    if isinstance(node, LineBreak):
        return {TAG_KEY: TAG_LINE_BREAK}
    if isinstance(node, RawBlock):
        return _tagged(node, TAG_RAW_BLOCK, [node.format, node.content])
    if isinstance(node, RawInline):
        return _tagged(node, TAG_RAW_INLINE, [node.format, node.content])
    if isinstance(node, Image):
        if node.source is not None:
            return node.source
        return _tagged(
            node,
            TAG_IMAGE,
            [encode_attributes(node.attr), encode_node_list(node.alt), [node.url, node.title]],
        )
    if isinstance(node, BlockQuote):
        return _tagged(node, TAG_BLOCK_QUOTE, encode_node_list(node.children))
    if isinstance(node, Div):
        return _tagged(node, TAG_DIV, [encode_attributes(node.attr), encode_node_list(node.children)])
    if isinstance(node, Figure):
        return _tagged(node, TAG_FIGURE, [encode_attributes(node.attr), node.caption, encode_node_list(node.children)])
    raise TypeError(f"Cannot serialize node of type {type(node).__name__}")


def document_to_dict(document: Document) -> dict[str, Any]:
    """Encode a Document to its top-level JSON object.

    Members are written in the order they were read; ``blocks`` is appended
    when a programmatically built document lacks it in ``key_order``.
    """
    result: dict[str, Any] = {}

    for key in document.key_order:
        if key == DOCUMENT_BLOCKS_KEY:
            if document.blocks is not None:
                result[key] = encode_node_list(document.blocks)
            elif key in document.extra:
                result[key] = document.extra[key]
        elif key == DOCUMENT_META_KEY:
            result[key] = document.meta
        elif key in document.extra:
            result[key] = document.extra[key]

    for key, value in document.extra.items():
        if key not in result:
            result[key] = value
    if document.blocks is not None and DOCUMENT_BLOCKS_KEY not in result:
        result[DOCUMENT_BLOCKS_KEY] = encode_node_list(document.blocks)

    return result


def document_to_json(document: Document, indent: Optional[int] = None, ensure_ascii: bool = False) -> str:
    """Serialize a Document to a JSON string.

    Parameters
    ----------
    document : Document
        Document to serialize
    indent : int or None, default = None
        Indentation width; None gives compact output without whitespace
    ensure_ascii : bool, default = False
        Escape non-ASCII characters

    Returns
    -------
    str
        JSON text

    """
    separators = COMPACT_JSON_SEPARATORS if indent is None else None
    return json.dumps(document_to_dict(document), indent=indent, ensure_ascii=ensure_ascii, separators=separators)
