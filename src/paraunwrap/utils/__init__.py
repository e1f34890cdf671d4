#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/paraunwrap/utils/__init__.py
"""Utility modules for the paraunwrap package."""

from paraunwrap.utils.escape import escape_html_attribute, is_valid_attribute_name

__all__ = ["escape_html_attribute", "is_valid_attribute_name"]
