"""Heading extractor for rendered HTML.

Lexical, single-pass scan for ``<h2>`` elements. No DOM is built: the opening
tag, its attribute run and the body up to the matching ``</h2>`` are picked out
with one back-referencing pattern, so unterminated or mangled headings simply
do not match.
"""

from __future__ import annotations

import re

from tocfilter.models.toc import HeadingMatch, TocEntry

# Bare <h2> or <h2 attrs>; body is the shortest run up to </h2> that does
# not cross another <h2 opener, so an unclosed heading cannot swallow the next.
_HEADING_RE = re.compile(
    r"<(h2)(?:>|\s+([^>]*)>)((?:(?!<h2[\s>]).)*?)</\1\s*>",
    re.IGNORECASE | re.DOTALL,
)

# id="..." or id='...', not the tail of a longer name like data-id.
_IDENTIFIER_RE = re.compile(
    r"""(?<![\w-])id\s*=\s*(['"])(.*?)\1""",
    re.IGNORECASE | re.DOTALL,
)

# <tag ...>content</tag> with the same name on both sides.
_WRAPPING_TAG_RE = re.compile(
    r"<(\w+)\b[^>]*>(.*?)</\1\s*>",
    re.IGNORECASE | re.DOTALL,
)


def find_identifier(attributes: str) -> str | None:
    """Return the ``id`` attribute value from an attribute run, or None."""
    match = _IDENTIFIER_RE.search(attributes)
    if match is None:
        return None
    return match.group(2)


def extract_headings(html: str) -> list[HeadingMatch]:
    """Find every level-2 heading in *html*, in document order."""
    headings: list[HeadingMatch] = []

    for match in _HEADING_RE.finditer(html):
        attributes = match.group(2) or ""
        headings.append(
            HeadingMatch(
                identifier=find_identifier(attributes),
                raw_inner_content=match.group(3),
            )
        )

    return headings


def strip_tags(text: str) -> str:
    """Unwrap one level of ``<tag>...</tag>`` spans.

    A single pass only: ``<b><i>x</i></b>`` becomes ``<i>x</i>``. Mismatched
    or unclosed tags are left untouched.
    """
    return _WRAPPING_TAG_RE.sub(r"\2", text)


def to_entry(heading: HeadingMatch) -> TocEntry:
    return TocEntry(
        identifier=heading.identifier or "",
        title=strip_tags(heading.raw_inner_content).strip(),
    )
