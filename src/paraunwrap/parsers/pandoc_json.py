#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/paraunwrap/parsers/pandoc_json.py
"""Pandoc-style JSON to Document decoder.

This is the input boundary of the filter. Decoding problems here are fatal:
the input is not UTF-8, not JSON, or not a JSON object, and nothing should be
written downstream. Problems *inside* the tree never fail here; unknown or
malformed nodes are carried as opaque nodes.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import IO, Union

from paraunwrap.ast.nodes import Document
from paraunwrap.ast.serialization import document_from_dict
from paraunwrap.constants import DOCUMENT_BLOCKS_KEY, DOCUMENT_META_KEY
from paraunwrap.exceptions import FileNotFoundError, ParsingError
from paraunwrap.options import PandocJsonParserOptions
from paraunwrap.utils.io_utils import read_text_input

logger = logging.getLogger(__name__)


class PandocJsonParser:
    """Decode Pandoc-style JSON into Document objects.

    Parameters
    ----------
    options : PandocJsonParserOptions or None
        Parser options

    Examples
    --------
    Parse JSON text:
        >>> parser = PandocJsonParser()
        >>> doc = parser.parse('{"pandoc-api-version":[1,23],"meta":{},"blocks":[]}')

    Parse a file:
        >>> doc = parser.parse(Path("document.json"))

    """

    def __init__(self, options: PandocJsonParserOptions | None = None):
        """Initialize the parser with options."""
        self.options = options or PandocJsonParserOptions()

    def parse(self, input_data: Union[str, Path, bytes, IO[bytes], IO[str]]) -> Document:
        """Parse JSON input into a Document.

        Parameters
        ----------
        input_data : str, Path, bytes, IO[bytes], or IO[str]
            JSON text, a path to a JSON file, raw bytes, or a readable stream

        Returns
        -------
        Document
            Decoded document

        Raises
        ------
        FileNotFoundError
            If ``input_data`` is a path that does not exist
        ParsingError
            If the input cannot be read or decoded into a document

        """
        if isinstance(input_data, Path) and not input_data.exists():
            raise FileNotFoundError(str(input_data))

        try:
            json_str = read_text_input(input_data)
        except UnicodeDecodeError as e:
            logger.debug("Input is not valid UTF-8: %s", e)
            raise ParsingError(f"Input is not valid UTF-8: {e}", parsing_stage="input_reading", original_error=e) from e
        except (OSError, TypeError) as e:
            raise ParsingError(f"Failed to read input: {e}", parsing_stage="input_reading", original_error=e) from e

        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            logger.debug("JSON decode error at line %d column %d", e.lineno, e.colno)
            raise ParsingError(f"JSON decode error: {e}", parsing_stage="json_parsing", original_error=e) from e

        if not isinstance(data, dict):
            raise ParsingError(
                f"Invalid document: root must be a JSON object, got {type(data).__name__}",
                parsing_stage="document_validation",
            )

        if self.options.strict_root and DOCUMENT_BLOCKS_KEY not in data and DOCUMENT_META_KEY not in data:
            raise ParsingError(
                "Invalid document: root object has neither 'blocks' nor 'meta'",
                parsing_stage="document_validation",
            )

        document = document_from_dict(data)
        logger.debug(
            "Decoded document with %s top-level block(s)",
            len(document.blocks) if document.blocks is not None else "no",
        )
        return document
