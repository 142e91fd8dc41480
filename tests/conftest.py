"""Shared test fixtures for the tocfilter test suite."""

from __future__ import annotations

import logging
from types import SimpleNamespace
from typing import TYPE_CHECKING

import pytest

from tocfilter.config import Settings
from tocfilter.logs import LOGGER_NAMESPACE

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture()
def settings() -> Settings:
    """Default settings, isolated from any tocfilter.yaml on the machine."""
    return Settings(filter={"name": "toc"}, logging={"level": "ERROR", "format": "text"})


@pytest.fixture()
def host() -> SimpleNamespace:
    """Minimal template host: anything with a mutable ``filters`` mapping."""
    return SimpleNamespace(filters={})


@pytest.fixture()
def article_html() -> str:
    """A rendered blog post with a mix of headings."""
    return (
        "<h1>Release notes</h1>\n"
        "<p>Intro paragraph.</p>\n"
        '<h2 id="install">Installing</h2>\n'
        "<p>pip install it.</p>\n"
        "<h3 id=\"extras\">Extras</h3>\n"
        '<h2 class="section" id="usage"><code>toc</code> usage</h2>\n'
        "<p>Pipe your content through it.</p>\n"
        "<h2 id='faq'>FAQ</h2>\n"
    )


@pytest.fixture(autouse=True)
def _restore_package_logger() -> Iterator[None]:
    """Undo any handler/level changes a test makes to the ``tocfilter`` logger."""
    logger = logging.getLogger(LOGGER_NAMESPACE)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
