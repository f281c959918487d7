"""Dispatch configuration.

HandlerOptions is a frozen dataclass, passed per ``handler()`` call
rather than kept in shared module state.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeAlias

# (error, req, res) -> response | None
ErrorCallback: TypeAlias = Callable[[BaseException, Any, Any], Any]

# (req, res) -> response | None
NoMatchCallback: TypeAlias = Callable[[Any, Any], Any]


@dataclass(frozen=True, slots=True)
class HandlerOptions:
    """Callbacks used by an adapter's ``handler()``.

    Both may be sync or async. ``None`` selects the adapter default::

        app = router.handler(HandlerOptions(on_no_match=render_404))
        app = router.handler(on_error=report_and_render)  # same thing, as kwargs
    """

    on_error: ErrorCallback | None = None
    on_no_match: NoMatchCallback | None = None
