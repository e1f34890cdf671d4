#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/paraunwrap/options.py
"""Configuration options for the unwrap transform and the JSON codec.

All options are frozen dataclasses. Use ``create_updated`` to derive a
modified copy instead of mutating an instance.

Examples
--------
Only unwrap image paragraphs:

    >>> options = UnwrapOptions(unwrap_angle_paragraphs=False)

Require ``"< "`` rather than a bare ``"<"`` to trigger the angle rewrite:

    >>> strict = UnwrapOptions().create_updated(require_space_after_angle=True)

"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from paraunwrap.constants import (
    DEFAULT_JSON_ENSURE_ASCII,
    DEFAULT_JSON_INDENT,
    DEFAULT_JSON_STRICT_ROOT,
    DEFAULT_RAW_FORMAT,
    DEFAULT_REQUIRE_SPACE_AFTER_ANGLE,
    DEFAULT_UNWRAP_ANGLE_PARAGRAPHS,
    DEFAULT_UNWRAP_IMAGE_PARAGRAPHS,
)
from paraunwrap.exceptions import ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class UnwrapOptions(CloneFrozenMixin):
    """Options controlling which paragraphs are unwrapped and how.

    Parameters
    ----------
    unwrap_angle_paragraphs : bool, default = True
        Rewrite paragraphs whose first text run starts with ``<`` into raw blocks
    unwrap_image_paragraphs : bool, default = True
        Rewrite paragraphs holding a single image into a bare ``<img />``
    require_space_after_angle : bool, default = False
        Only treat a paragraph as raw markup when the ``<`` is followed by a
        space (``"< div"``). By default any leading ``<`` is enough.
    raw_format : str, default = "html"
        Format tag attached to generated raw blocks

    """

    unwrap_angle_paragraphs: bool = field(
        default=DEFAULT_UNWRAP_ANGLE_PARAGRAPHS,
        metadata={"help": "Unwrap paragraphs starting with '<' into raw blocks", "importance": "core"},
    )
    unwrap_image_paragraphs: bool = field(
        default=DEFAULT_UNWRAP_IMAGE_PARAGRAPHS,
        metadata={"help": "Unwrap single-image paragraphs into bare <img> tags", "importance": "core"},
    )
    require_space_after_angle: bool = field(
        default=DEFAULT_REQUIRE_SPACE_AFTER_ANGLE,
        metadata={"help": "Require '< ' (angle followed by a space) for the angle rule", "importance": "advanced"},
    )
    raw_format: str = field(
        default=DEFAULT_RAW_FORMAT,
        metadata={"help": "Format tag for generated raw blocks", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValidationError
            If ``raw_format`` is empty or contains whitespace

        """
        if not isinstance(self.raw_format, str) or not self.raw_format or any(c.isspace() for c in self.raw_format):
            raise ValidationError(
                f"raw_format must be a non-empty string without whitespace, got {self.raw_format!r}",
                parameter_name="raw_format",
                parameter_value=self.raw_format,
            )


@dataclass(frozen=True)
class PandocJsonParserOptions(CloneFrozenMixin):
    """Options for decoding Pandoc-style JSON documents.

    Parameters
    ----------
    strict_root : bool, default = True
        Require the root object to carry a ``blocks`` or ``meta`` member.
        When false, any JSON object is accepted as a document.

    """

    strict_root: bool = field(
        default=DEFAULT_JSON_STRICT_ROOT,
        metadata={"help": "Require a 'blocks' or 'meta' member on the root object", "importance": "advanced"},
    )


@dataclass(frozen=True)
class PandocJsonRendererOptions(CloneFrozenMixin):
    """Options for encoding documents back to JSON.

    Parameters
    ----------
    indent : int or None, default = None
        Number of spaces for JSON indentation. None for compact output,
        which is what Pandoc itself produces and expects from filters.
    ensure_ascii : bool, default = False
        Whether to escape non-ASCII characters in JSON output

    """

    indent: int | None = field(
        default=DEFAULT_JSON_INDENT,
        metadata={"help": "JSON indentation spaces (None for compact)", "type": int, "importance": "core"},
    )
    ensure_ascii: bool = field(
        default=DEFAULT_JSON_ENSURE_ASCII,
        metadata={"help": "Escape non-ASCII characters in JSON", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate the indentation width."""
        if self.indent is not None and self.indent < 0:
            raise ValidationError(
                f"indent must be None or non-negative, got {self.indent}",
                parameter_name="indent",
                parameter_value=self.indent,
            )
