"""Album Catalog API Package: in-memory album catalog served over HTTP/JSON.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
