from __future__ import annotations

from tocfilter.models.toc import HeadingMatch, TocEntry

__all__ = [
    "HeadingMatch",
    "TocEntry",
]
