"""
Habitat repository: name lookups, persistence and filtered listing.
"""
from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session

from zoo.models.habitat import Habitat, TerrainType


class HabitatRepository:
    """Lookup, persistence and filtered listing of habitats."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def find_by_name(self, name: str, for_update: bool = False) -> Optional[Habitat]:
        """Get the habitat with this name, optionally locking its row for update."""
        query = self._db.query(Habitat).filter(Habitat.name == name)
        if for_update:
            query = query.with_for_update()
        return query.first()

    def exists(self, name: str) -> bool:
        """Check whether the name is taken without loading the row."""
        return self._db.query(Habitat.id).filter(Habitat.name == name).first() is not None

    def save(self, habitat: Habitat) -> Habitat:
        self._db.add(habitat)
        return habitat

    def list(
        self,
        terrain_type: Optional[TerrainType] = None,
        vacant: Optional[bool] = None,
    ) -> List[Habitat]:
        query = self._db.query(Habitat)
        if terrain_type is not None:
            query = query.filter(Habitat.terrain_type == terrain_type)
        if vacant is True:
            query = query.filter(~Habitat.resident.has())
        elif vacant is False:
            query = query.filter(Habitat.resident.has())
        return query.order_by(Habitat.id).all()
