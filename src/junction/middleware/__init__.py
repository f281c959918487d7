"""Middleware — the chain executor and handler wrappers.

A handler is any callable matching:
    handler(req, res, next) -> value | awaitable

Contents:
    execute -- Run a handler sequence as one onion-style chain
    callback_wrapper -- Adapt error-first ``fn(req, res, done)`` handlers
    timeout -- Fail a handler that runs longer than a deadline
"""

from junction.middleware.callback import callback_wrapper
from junction.middleware.chain import Continuation, execute
from junction.middleware.protocol import Handler, Next
from junction.middleware.timeout import timeout

__all__ = [
    "Continuation",
    "Handler",
    "Next",
    "callback_wrapper",
    "execute",
    "timeout",
]
