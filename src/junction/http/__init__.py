"""HTTP value types handed to handlers by the adapters."""

from junction.http.request import Request
from junction.http.response import Response

__all__ = ["Request", "Response"]
