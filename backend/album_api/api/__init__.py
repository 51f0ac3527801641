"""API Layer: FastAPI routes, response class, and error handlers.

Invariants:
    - Routes registered from core/route_table.py in create_app (no auto-discovery)
    - Every response, success or error, is pretty-printed JSON
"""
