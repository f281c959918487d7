"""Routing — ordered route table with multi-match resolution.

Routes are registered during setup; ``Router.find`` then returns every
matching route's handlers, merged params and a ``middle_only`` flag.
"""

from junction.routing.pattern import Pattern, PatternMatch, compile_pattern, join_paths
from junction.routing.route import ALL, METHODS, FindResult, Route
from junction.routing.router import Router

__all__ = [
    "ALL",
    "METHODS",
    "FindResult",
    "Pattern",
    "PatternMatch",
    "Route",
    "Router",
    "compile_pattern",
    "join_paths",
]
