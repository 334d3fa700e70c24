"""Routers package — HTTP endpoint definitions.

Files:
  deps.py  — get_current_vendor (token header -> Vendor)
  v1/      — Versioned API routes (/api/v1/*)
"""
