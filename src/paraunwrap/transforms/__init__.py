#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/paraunwrap/transforms/__init__.py
"""Paragraph classification, rewriting and the document-level unwrap transform."""

from paraunwrap.transforms.classify import (
    is_angle_paragraph,
    is_single_image_inlines,
    is_single_image_paragraph,
    is_whitespace_inline,
    strip_angle_lead_in,
)
from paraunwrap.transforms.rewrite import (
    attributes_to_html,
    flatten_inlines_to_text,
    image_to_raw_html,
    rewrite_angle_paragraph,
    rewrite_image_paragraph,
)
from paraunwrap.transforms.unwrap import UnwrapTransform, unwrap_document, unwrap_json, walk_blocks

__all__ = [
    "UnwrapTransform",
    "attributes_to_html",
    "flatten_inlines_to_text",
    "image_to_raw_html",
    "is_angle_paragraph",
    "is_single_image_inlines",
    "is_single_image_paragraph",
    "is_whitespace_inline",
    "rewrite_angle_paragraph",
    "rewrite_image_paragraph",
    "strip_angle_lead_in",
    "unwrap_document",
    "unwrap_json",
    "walk_blocks",
]
