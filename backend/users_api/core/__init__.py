"""Core Layer — pure domain types and the error hierarchy, no IO.

Invariants:
    - No module in core/ imports from api/, infrastructure/, or db/
"""
