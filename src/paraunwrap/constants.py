#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for paraunwrap.

Constants are organized by category:
1. Interchange Tags - node kind tags understood by the codec
2. Unwrap Behavior - defaults for the paragraph rewrites
3. Codec Defaults - JSON parser and renderer settings
4. CLI Exit Codes - process exit status per error class
"""

from __future__ import annotations

# =============================================================================
# Interchange Tags
# =============================================================================

TAG_KEY = "t"
PAYLOAD_KEY = "c"

TAG_PARAGRAPH = "Paragraph"
TAG_RAW_BLOCK = "RawBlock"
TAG_BLOCK_QUOTE = "BlockQuote"
TAG_DIV = "Div"
TAG_FIGURE = "Figure"
TAG_IMAGE = "Image"
TAG_TEXT = "Text"
TAG_SOFT_BREAK = "SoftBreak"
TAG_LINE_BREAK = "LineBreak"
TAG_SPACE = "Space"
TAG_RAW_INLINE = "RawInline"

# Tag names emitted by Pandoc itself; decoded to the same node kinds
TAG_PANDOC_PARAGRAPH = "Para"
TAG_PANDOC_TEXT = "Str"

PARAGRAPH_TAGS = frozenset({TAG_PARAGRAPH, TAG_PANDOC_PARAGRAPH})
TEXT_TAGS = frozenset({TAG_TEXT, TAG_PANDOC_TEXT})

DOCUMENT_BLOCKS_KEY = "blocks"
DOCUMENT_META_KEY = "meta"
DOCUMENT_API_VERSION_KEY = "pandoc-api-version"

# =============================================================================
# Unwrap Behavior
# =============================================================================

ANGLE_MARKER = "<"
ANGLE_MARKER_WITH_SPACE = "< "

DEFAULT_RAW_FORMAT = "html"
DEFAULT_UNWRAP_ANGLE_PARAGRAPHS = True
DEFAULT_UNWRAP_IMAGE_PARAGRAPHS = True
DEFAULT_REQUIRE_SPACE_AFTER_ANGLE = False

# =============================================================================
# Codec Defaults
# =============================================================================

DEFAULT_JSON_INDENT: int | None = None
DEFAULT_JSON_ENSURE_ASCII = False
DEFAULT_JSON_STRICT_ROOT = True
COMPACT_JSON_SEPARATORS = (",", ":")

# =============================================================================
# CLI Exit Codes
# =============================================================================

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7
