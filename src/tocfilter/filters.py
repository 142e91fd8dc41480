"""Template filters exposed to the host site generator."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tocfilter.logs import get_logger
from tocfilter.parser import extract_headings, to_entry

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tocfilter.models.toc import TocEntry

log = get_logger(__name__)

TOC_OPEN = '<ol class="toc">'
TOC_CLOSE = "</ol>"


def render_toc(entries: Iterable[TocEntry]) -> str:
    """Render entries as a flat ordered list with no whitespace between items."""
    items = [f'<li><a href="#{entry.identifier}">{entry.title}</a></li>' for entry in entries]
    return TOC_OPEN + "".join(items) + TOC_CLOSE


def toc(html: str) -> str:
    """Build a table of contents from the ``<h2>`` headings in *html*.

    Never raises for string input: no headings yields ``<ol class="toc"></ol>``.
    """
    entries = [to_entry(heading) for heading in extract_headings(html)]
    log.debug("toc_rendered", entries=len(entries))
    return render_toc(entries)
