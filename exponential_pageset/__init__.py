"""Page numbering for result sets that span thousands of pages."""

__version__ = "0.4.0"

from .core.exceptions import (  # noqa: E402
    ConfigurationError,
    InvalidArgumentError,
    PagesetException,
)
from .modules.pageset import (  # noqa: E402
    ExponentialPageset,
    LegacyPageAdapter,
    PagerState,
    PagesetSnapshot,
    build_pager,
    snapshot,
)

__all__ = [
    "__version__",
    "ConfigurationError",
    "ExponentialPageset",
    "InvalidArgumentError",
    "LegacyPageAdapter",
    "PagerState",
    "PagesetException",
    "PagesetSnapshot",
    "build_pager",
    "snapshot",
]
