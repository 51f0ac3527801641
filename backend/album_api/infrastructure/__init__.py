"""Infrastructure Layer: album storage and cross-cutting concerns (logging).

Invariants:
    - Infrastructure implements core/ protocols, never imports from api/
"""
