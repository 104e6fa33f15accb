"""
API package containing versioned routes.

This package groups API versions under subpackages such as ``v1``.  A
version subpackage exposes a ``build_router`` function which includes
all of its domain‑specific endpoints.
"""
