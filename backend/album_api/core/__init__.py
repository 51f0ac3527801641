"""Core Layer: pure domain logic, no IO, no HTTP, no locking.

Invariants:
    - No module in core/ imports from api/, infrastructure/, or schemas/
    - All functions are pure and deterministic
"""
