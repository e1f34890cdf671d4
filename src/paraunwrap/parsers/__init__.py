#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Input decoders."""

from paraunwrap.parsers.pandoc_json import PandocJsonParser

__all__ = ["PandocJsonParser"]
