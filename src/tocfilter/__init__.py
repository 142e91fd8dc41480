"""tocfilter: table-of-contents template filter for rendered HTML.

Hosts call :func:`init_filters` once at start-up; :func:`toc` can also be used
directly as a plain ``str -> str`` function.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("tocfilter")
except PackageNotFoundError:
    # Running from a source checkout without installed metadata.
    __version__ = "0.0.0+unknown"

from tocfilter.bootstrap import init_filters  # noqa: E402
from tocfilter.filters import toc  # noqa: E402
from tocfilter.registry import FilterRegistry  # noqa: E402

__all__ = [
    "FilterRegistry",
    "__version__",
    "init_filters",
    "toc",
]
