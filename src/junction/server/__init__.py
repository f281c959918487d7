"""ASGI plumbing — message sending and the mutable response writer."""
