"""Services package — all business logic lives here, never in routers.

Files:
  vendor.py   — registration, login, token resolution, vendor reads
  firm.py     — firm creation (with image), reads and owner-only deletion
  storage.py  — firm image validation and on-disk storage

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
