#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/paraunwrap/utils/escape.py
"""HTML escaping for generated markup."""

from __future__ import annotations

import html
import re

_ATTRIBUTE_NAME_PATTERN = re.compile(r"[^\s\x00-\x1f\x7f\"'<>/=]+")


def escape_html_attribute(text: str) -> str:
    """Escape text for use inside a double-quoted HTML attribute value.

    Parameters
    ----------
    text : str
        Attribute value to escape

    Returns
    -------
    str
        Escaped value

    Examples
    --------
        >>> escape_html_attribute('a "b" & <c>')
        'a &quot;b&quot; &amp; &lt;c&gt;'

    Notes
    -----
    This function escapes the following characters:
    - & -> &amp;
    - < -> &lt;
    - > -> &gt;
    - " -> &quot;
    - ' -> &#x27; (HTML5 standard)

    """
    if not text:
        return text

    return html.escape(text, quote=True)


def is_valid_attribute_name(name: str) -> bool:
    """Check whether a string can be written as an HTML attribute name.

    Empty names and names holding whitespace, control characters, quotes,
    ``<``, ``>``, ``/`` or ``=`` are rejected, since writing them out would
    end the attribute early or start a new one.

    Examples
    --------
        >>> is_valid_attribute_name("data-x")
        True
        >>> is_valid_attribute_name('onload="x" a')
        False

    """
    return isinstance(name, str) and _ATTRIBUTE_NAME_PATTERN.fullmatch(name) is not None
