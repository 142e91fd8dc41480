"""Filter registry: explicit, one-time wiring of filters into a template host."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tocfilter.errors import ErrorCode, TocFilterError
from tocfilter.filters import toc
from tocfilter.logs import get_logger

if TYPE_CHECKING:
    from tocfilter.config import Settings
    from tocfilter.protocols import FilterHost, TemplateFilter

log = get_logger(__name__)


class FilterRegistry:
    """Named template filters, collected before being installed into a host."""

    def __init__(self) -> None:
        self._filters: dict[str, TemplateFilter] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._filters

    def __len__(self) -> int:
        return len(self._filters)

    def register(self, name: str, func: TemplateFilter) -> None:
        """Register *func* under *name*.

        Registering the same callable twice is a no-op; a different callable
        under a taken name is an error.
        """
        if not name.isidentifier():
            raise TocFilterError(
                code=ErrorCode.INVALID_FILTER_NAME,
                message=f"Filter name {name!r} is not a valid identifier.",
                suggestion="Use letters, digits and underscores, not starting with a digit.",
            )

        existing = self._filters.get(name)
        if existing is func:
            return
        if existing is not None:
            raise TocFilterError(
                code=ErrorCode.FILTER_ALREADY_REGISTERED,
                message=f"A different filter is already registered as {name!r}.",
                suggestion="Pick another name via the filter.name setting.",
            )

        self._filters[name] = func
        log.debug("filter_registered", filter_name=name)

    def get(self, name: str) -> TemplateFilter:
        try:
            return self._filters[name]
        except KeyError:
            raise TocFilterError(
                code=ErrorCode.FILTER_NOT_FOUND,
                message=f"No filter registered as {name!r}.",
                suggestion=f"Registered filters: {', '.join(self.names()) or '(none)'}.",
            ) from None

    def names(self) -> list[str]:
        return sorted(self._filters)

    def install(self, host: FilterHost) -> list[str]:
        """Copy every registered filter into ``host.filters``.

        Refuses to replace a different callable the host already exposes under
        the same name. Nothing is installed if any name clashes.
        """
        target = host.filters
        for name, func in self._filters.items():
            current = target.get(name)
            if current is not None and current is not func:
                raise TocFilterError(
                    code=ErrorCode.FILTER_ALREADY_REGISTERED,
                    message=f"The template host already has a filter named {name!r}.",
                    suggestion="Pick another name via the filter.name setting.",
                )

        target.update(self._filters)
        installed = self.names()
        log.info("filters_installed", names=installed)
        return installed


def build_registry(settings: Settings) -> FilterRegistry:
    """Return a registry holding the ``toc`` filter under its configured name."""
    registry = FilterRegistry()
    registry.register(settings.filter.name, toc)
    return registry
