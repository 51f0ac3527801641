"""Pydantic Schemas: request/response shapes for the album endpoints.

Invariants:
    - Schemas check JSON shape (types) at the system boundary
    - Business rules (required fields, price range) live in core/validate_album.py

Design Decisions:
    - Separate from core/domain_types: schemas are wire contracts, Album is the stored value
"""
