"""Pytest configuration and shared fixtures for the paraunwrap test suite.

This module provides shared fixtures, test configuration, and helpers for
building Pandoc-style JSON payloads.
"""

import json
from typing import Any, Callable

import pytest
from utils import image, para, space, text

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    # Register custom Hypothesis profiles
    settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=50)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    # Load profile from environment or use default
    import os

    profile = os.getenv("HYPOTHESIS_PROFILE", "dev")
    settings.load_profile(profile)
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests using Hypothesis")


@pytest.fixture
def pandoc_document() -> Callable[..., dict]:
    """Provide a factory for top-level Pandoc JSON documents.

    Returns
    -------
    callable
        ``factory(*blocks, meta=None)`` returning the document as a dict

    """

    def factory(*blocks: Any, meta: dict | None = None) -> dict:
        return {"pandoc-api-version": [1, 23, 1], "meta": meta or {}, "blocks": list(blocks)}

    return factory


@pytest.fixture
def pandoc_json(pandoc_document) -> Callable[..., str]:
    """Provide a factory for compact Pandoc JSON text."""

    def factory(*blocks: Any, meta: dict | None = None) -> str:
        return json.dumps(pandoc_document(*blocks, meta=meta), separators=(",", ":"), ensure_ascii=False)

    return factory


@pytest.fixture
def sample_pandoc_document(pandoc_document) -> dict:
    """Provide a document exercising both rewrites, containers and unknown nodes.

    Returns
    -------
    dict
        Pandoc JSON document as a dict

    """
    return pandoc_document(
        {"t": "Header", "c": [1, ["intro", [], []], [text("Intro")]]},
        para(text("<div"), space(), text('class="note">')),
        para(image("a.png", identifier="fig1", classes=["center"], alt=[text("cat")])),
        {"t": "BlockQuote", "c": [para(text("<hr>")), para(text("quoted"))]},
        {"t": "Div", "c": [["box", ["wide"], [["data-x", "1"]]], [para(text("<"), space(), image("b.png"))]]},
        para(text("plain"), space(), text("words")),
        meta={"title": {"t": "MetaInlines", "c": [text("Doc")]}},
    )
