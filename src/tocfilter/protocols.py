"""Structural interfaces for the template engine that hosts our filters.

Nothing here imports a template engine. Anything with a mutable ``filters``
mapping (a Jinja2 ``Environment``, a test double, a plain namespace) can
receive the filters.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import MutableMapping


class TemplateFilter(Protocol):
    """A single-argument string transform callable from a template."""

    def __call__(self, value: str, /) -> str: ...


class FilterHost(Protocol):
    """Template engine side of the registration handshake."""

    @property
    def filters(self) -> MutableMapping[str, TemplateFilter]: ...
