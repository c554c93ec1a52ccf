"""Taxonomy ORM - persists a kingdom-to-species classification record.

Invariants:
    - id is a uuid4 string primary key, assigned by the store, never rewritten
    - Classification fields are non-nullable text
    - created_at / updated_at are ISO-8601 UTC strings, updated_at >= created_at

Design Decisions:
    - Timestamps kept as strings: stored exactly as they are exposed
    - No relationship to MarineSpecie: species embed a copy, not a foreign key
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from marine_registry.db.base import Base


class Taxonomy(Base):
    """Taxonomy entity - a biological classification."""
    __tablename__ = "taxonomies"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    kingdom: Mapped[str] = mapped_column(Text, nullable=False)
    phylum: Mapped[str] = mapped_column(Text, nullable=False)
    taxon_class: Mapped[str] = mapped_column(Text, nullable=False)
    order: Mapped[str] = mapped_column(Text, nullable=False)
    family: Mapped[str] = mapped_column(Text, nullable=False)
    genus: Mapped[str] = mapped_column(Text, nullable=False)
    species: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[str] = mapped_column(String(40), nullable=False)
    updated_at: Mapped[str] = mapped_column(String(40), nullable=False)
