"""
Top‑level package for the Donation Tracker.

The HTTP service lives under ``app`` (served from
``donation_tracker.app.main:app``) and a small client for the service
lives in ``client``.
"""
