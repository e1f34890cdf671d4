#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Output encoders."""

from paraunwrap.renderers.pandoc_json import PandocJsonRenderer

__all__ = ["PandocJsonRenderer"]
