"""Host-facing entrypoint.

``init_filters`` is the one call a host makes at start-up: it builds the
filter registry from settings and installs it into the host's template
engine. Logging output is opt-in (``logging.enabled``); by default events
flow to whatever the host has configured for the ``tocfilter`` logger.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tocfilter import __version__
from tocfilter.config import Settings
from tocfilter.logs import get_logger, setup_logging
from tocfilter.registry import FilterRegistry, build_registry

if TYPE_CHECKING:
    from tocfilter.protocols import FilterHost

log = get_logger(__name__)


def init_filters(host: FilterHost, settings: Settings | None = None) -> FilterRegistry:
    """Register the tocfilter filters with *host* and return the registry."""
    if settings is None:
        settings = Settings()

    if settings.logging.enabled:
        setup_logging(settings.logging)

    registry = build_registry(settings)
    registry.install(host)
    log.info("filters_registered", version=__version__, names=registry.names())
    return registry
