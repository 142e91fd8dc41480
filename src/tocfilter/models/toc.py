from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class HeadingMatch(BaseModel):
    """One ``<h2>`` occurrence found in the input, before any clean-up."""

    model_config = ConfigDict(frozen=True)

    identifier: str | None = None  # Value of the id attribute, if any
    raw_inner_content: str  # Heading body, nested markup included


class TocEntry(BaseModel):
    """A rendered-ready table-of-contents line."""

    model_config = ConfigDict(frozen=True)

    identifier: str  # Used verbatim as the anchor, never escaped
    title: str
