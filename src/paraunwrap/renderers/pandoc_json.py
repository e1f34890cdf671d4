#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/paraunwrap/renderers/pandoc_json.py
"""Document to Pandoc-style JSON encoder.

This is the output boundary of the filter. Output is compact by default,
matching what Pandoc writes and expects back from a JSON filter.
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, Union

from paraunwrap.ast.nodes import Document
from paraunwrap.ast.serialization import document_to_json
from paraunwrap.exceptions import OutputWriteError, RenderingError
from paraunwrap.options import PandocJsonRendererOptions
from paraunwrap.utils.io_utils import write_text_output


class PandocJsonRenderer:
    """Encode Document objects as Pandoc-style JSON.

    Parameters
    ----------
    options : PandocJsonRendererOptions or None
        Renderer options

    Examples
    --------
        >>> renderer = PandocJsonRenderer()
        >>> json_str = renderer.render_to_string(doc)

    """

    def __init__(self, options: PandocJsonRendererOptions | None = None):
        """Initialize the renderer with options."""
        self.options = options or PandocJsonRendererOptions()

    def render_to_string(self, document: Document) -> str:
        """Render a Document to a JSON string.

        Raises
        ------
        RenderingError
            If the tree holds something that cannot be encoded as JSON

        """
        try:
            return document_to_json(document, indent=self.options.indent, ensure_ascii=self.options.ensure_ascii)
        except (TypeError, ValueError) as e:
            raise RenderingError(
                f"Failed to encode document: {e}", rendering_stage="json_encoding", original_error=e
            ) from e

    def render(self, document: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render a Document and write it to a path or stream.

        The document is fully encoded before anything is written.

        Raises
        ------
        RenderingError
            If encoding fails
        OutputWriteError
            If the output cannot be written

        """
        json_text = self.render_to_string(document)
        try:
            write_text_output(json_text, output)
        except OSError as e:
            target = str(output) if isinstance(output, (str, Path)) else getattr(output, "name", "<stream>")
            raise OutputWriteError(str(target), original_error=e) from e
