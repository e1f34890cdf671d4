"""Test utilities for the paraunwrap test suite.

Helpers for building Pandoc-style JSON nodes as plain dicts.
"""

from typing import Any


def para(*inlines: Any) -> dict:
    """Build a Pandoc ``Para`` node."""
    return {"t": "Para", "c": list(inlines)}


def text(value: str) -> dict:
    """Build a Pandoc ``Str`` node."""
    return {"t": "Str", "c": value}


def space() -> dict:
    """Build a Pandoc ``Space`` node."""
    return {"t": "Space"}


def image(
    url: str,
    title: str = "",
    identifier: str = "",
    classes: list | None = None,
    key_values: list | None = None,
    alt: list | None = None,
) -> dict:
    """Build a Pandoc ``Image`` node."""
    return {"t": "Image", "c": [[identifier, classes or [], key_values or []], alt or [], [url, title]]}


def raw_html(content: str) -> dict:
    """Build the ``RawBlock`` node the filter emits."""
    return {"t": "RawBlock", "c": ["html", content]}
