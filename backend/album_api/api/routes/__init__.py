"""Route Modules: one file per resource.

Invariants:
    - Routes never contain business logic (validation in core/, storage behind AlbumStore)
"""
