"""Pydantic schemas package.

Folder intent:
  common.py  — CamelModel base + HealthResponse (all schemas inherit CamelModel)
  vendor.py  — registration / login requests, vendor and login responses
  firm.py    — firm creation DTO and firm response
"""
