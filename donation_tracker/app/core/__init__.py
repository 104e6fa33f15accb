"""
Cross‑cutting concerns: settings, logging setup and exception handlers.
"""
