"""Core Layer - pure domain logic, no DB, no async.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, models/ or db/
    - Functions are deterministic apart from reading the clock in timestamps.py
"""
