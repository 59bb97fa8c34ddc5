"""
Animal repository: name lookups, persistence and filtered listing.
"""
from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session

from zoo.models.animal import Animal, AnimalType, Mood


class AnimalRepository:
    """Lookup, persistence and filtered listing of animals."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def find_by_name(self, name: str, for_update: bool = False) -> Optional[Animal]:
        """Get the animal with this name, optionally locking its row for update."""
        query = self._db.query(Animal).filter(Animal.name == name)
        if for_update:
            query = query.with_for_update()
        return query.first()

    def exists(self, name: str) -> bool:
        """Check whether the name is taken without loading the row."""
        return self._db.query(Animal.id).filter(Animal.name == name).first() is not None

    def save(self, animal: Animal) -> Animal:
        """Stage the animal in the session; the caller commits."""
        self._db.add(animal)
        return animal

    def list(
        self,
        mood: Optional[Mood] = None,
        animal_type: Optional[AnimalType] = None,
    ) -> List[Animal]:
        """Return animals matching every given filter, oldest first."""
        query = self._db.query(Animal)
        if mood is not None:
            query = query.filter(Animal.mood == mood)
        if animal_type is not None:
            query = query.filter(Animal.type == animal_type)
        return query.order_by(Animal.id).all()
