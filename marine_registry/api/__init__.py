"""API Layer - FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses
    - Public operation names are the route operation_ids

Design Decisions:
    - Thin routes delegate to the stores in services/
"""
