"""
Application package for the donation API.

The project is organised into logical pieces: ``core`` holds
configuration, logging and error handling, ``schemas`` the Pydantic
payload models, ``services`` the in‑memory donation store and
``api/<version>/`` the routers.  The ASGI application itself is
created in ``main``.
"""
