"""ORM Models - SQLAlchemy declarative models for the two stores.

Invariants:
    - All models inherit from Base (db/base.py)
    - Each table is an independent ordered collection keyed by a string id

Design Decisions:
    - One file per entity
    - All models imported here so Base.metadata is complete before create_all()
"""

from marine_registry.models.taxonomy import Taxonomy  # noqa: F401
from marine_registry.models.marine_specie import MarineSpecie  # noqa: F401
