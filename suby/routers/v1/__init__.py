"""v1 router package — all /api/v1/* endpoints live here.

Files:
  vendors.py  — register, login, vendor reads
  firms.py    — firm creation (multipart with image), reads, deletion

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to suby/services/.
"""
