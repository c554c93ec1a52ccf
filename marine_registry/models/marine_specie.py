"""MarineSpecie ORM - persists a named species with an embedded taxonomy snapshot.

Invariants:
    - id is a uuid4 string primary key, never rewritten
    - taxonomy holds a full copy of a Taxonomy row at association time
    - The snapshot is replaced wholesale, never mutated in place

Design Decisions:
    - JSON column over ForeignKey: later edits or deletion of the source
      Taxonomy do not reach the species record
"""

from sqlalchemy import JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from marine_registry.db.base import Base


class MarineSpecie(Base):
    """Marine species entity."""
    __tablename__ = "marine_species"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    taxonomy: Mapped[dict] = mapped_column(JSON, nullable=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[str] = mapped_column(String(40), nullable=False)
    updated_at: Mapped[str] = mapped_column(String(40), nullable=False)
