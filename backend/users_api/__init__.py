"""Users API Package — CRUD HTTP service for the users table.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
