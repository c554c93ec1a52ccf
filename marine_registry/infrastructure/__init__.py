"""Infrastructure Layer - database engine/session management and logging setup.

Invariants:
    - Infrastructure only imports core/errors from core/
    - All SQLAlchemy failures mapped to DatabaseError before leaving this layer
"""
