"""paraunwrap - unwrap raw-markup and single-image paragraphs in document trees.

paraunwrap reads a Pandoc-style JSON document tree, replaces two kinds of
paragraph with raw HTML blocks, and writes the tree back out. It is meant to
run as a JSON filter so that the downstream renderer does not wrap those
blocks in a ``<p>`` tag.

Rewrites
--------
- A paragraph whose first text run starts with ``<`` becomes a raw block
  holding the paragraph text verbatim (``< hello`` stays ``< hello``).
- A paragraph holding a single image becomes a bare ``<img />``.
- ``<`` followed by a single image gives the bare ``<img />``.

Everything else (other blocks, metadata, unknown node kinds) is written back
exactly as read. Paragraphs inside block quotes, divs and figures are
rewritten while their containers are kept.

Requirements
------------
- Python 3.10+
- Optional: ``rich`` for colored CLI diagnostics

Examples
--------
Filter a JSON payload:

    >>> from paraunwrap import unwrap_json
    >>> unwrap_json('{"blocks":[{"t":"Para","c":[{"t":"Str","c":"<hr>"}]}]}')
    '{"blocks":[{"t":"RawBlock","c":["html","<hr>"]}]}'

Work with the tree directly:

    >>> from paraunwrap import Document, Paragraph, Text, unwrap_document
    >>> doc = Document(blocks=[Paragraph(content=[Text("< hello")])])
    >>> unwrap_document(doc).blocks
    [RawBlock(format='html', content='< hello')]

"""

import sys

# Check Python version before any imports
if sys.version_info < (3, 10):
    raise RuntimeError(
        f"paraunwrap requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from paraunwrap.ast import (  # noqa: E402
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
from paraunwrap.exceptions import (  # noqa: E402
    DependencyError,
    ParaUnwrapError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from paraunwrap.options import (  # noqa: E402
    PandocJsonParserOptions,
    PandocJsonRendererOptions,
    UnwrapOptions,
)
from paraunwrap.parsers import PandocJsonParser  # noqa: E402
from paraunwrap.renderers import PandocJsonRenderer  # noqa: E402
from paraunwrap.transforms import UnwrapTransform, unwrap_document, unwrap_json, walk_blocks  # noqa: E402

__all__ = [
    "__version__",
    # Nodes
    "Attributes",
    "BlockQuote",
    "Div",
    "Document",
    "Figure",
    "Image",
    "LineBreak",
    "Node",
    "OpaqueNode",
    "Paragraph",
    "RawBlock",
    "RawInline",
    "SoftBreak",
    "Space",
    "Text",
    # Transform
    "UnwrapTransform",
    "unwrap_document",
    "unwrap_json",
    "walk_blocks",
    # Codec
    "PandocJsonParser",
    "PandocJsonRenderer",
    # Options
    "UnwrapOptions",
    "PandocJsonParserOptions",
    "PandocJsonRendererOptions",
    # Exceptions
    "ParaUnwrapError",
    "ParsingError",
    "RenderingError",
    "ValidationError",
    "DependencyError",
]
