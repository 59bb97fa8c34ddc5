"""
Animal service: creation, feeding, relocation and filtered listing.

Every public function is one unit of work against the session it is
given and ends with a single commit.
"""
import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from zoo.core.exceptions import ConflictError, NotFoundError
from zoo.db.session import commit_or_conflict
from zoo.models.animal import Animal, AnimalType, Mood
from zoo.repositories import AnimalRepository, HabitatRepository
from zoo.services.compatibility import compatible_terrains, is_compatible

logger = logging.getLogger(__name__)


def create_animal(name: str, animal_type: AnimalType, db: Session) -> Animal:
    """Create an unhappy, homeless animal. Raises ConflictError on a taken name."""
    animals = AnimalRepository(db)
    if animals.exists(name):
        logger.warning(f"Rejected creation of animal '{name}': name already taken")
        raise ConflictError(f"Animal '{name}' already exists")

    animal = animals.save(Animal(name=name, type=animal_type, mood=Mood.UNHAPPY))
    commit_or_conflict(db, f"Animal '{name}' already exists")
    db.refresh(animal)

    logger.info(f"Created animal '{name}' ({animal_type.value})")
    return animal


def get_animal(name: str, db: Session) -> Animal:
    """Get an animal by name or raise NotFoundError."""
    animal = AnimalRepository(db).find_by_name(name)
    if not animal:
        raise NotFoundError(f"Animal '{name}' not found")
    return animal


def list_animals(
    db: Session,
    mood: Optional[Mood] = None,
    animal_type: Optional[AnimalType] = None
) -> List[Animal]:
    """List animals in creation order, filtered by mood and/or type."""
    return AnimalRepository(db).list(mood=mood, animal_type=animal_type)


def feed_animal(name: str, db: Session) -> Animal:
    """Feed an animal, making it happy. Feeding a happy animal is a no-op."""
    animal = get_animal(name, db)
    animal.mood = Mood.HAPPY
    db.commit()
    db.refresh(animal)

    logger.info(f"Fed animal '{name}'")
    return animal


def move_animal(name: str, habitat_name: str, db: Session) -> Animal:
    """
    Move an animal into a habitat.

    Checks run in this order:
    1. The animal and the habitat must exist (NotFoundError).
    2. The habitat's terrain must suit the animal's type. If not, the
       animal becomes unhappy (and that change is committed) before
       ConflictError is raised; its current habitat is kept.
    3. The habitat must be empty, even of the moving animal itself
       (ConflictError, nothing changes).

    On success the previous habitat, if any, is vacated.
    """
    animal = AnimalRepository(db).find_by_name(name, for_update=True)
    if not animal:
        raise NotFoundError(f"Animal '{name}' not found")

    habitat = HabitatRepository(db).find_by_name(habitat_name, for_update=True)
    if not habitat:
        raise NotFoundError(f"Habitat '{habitat_name}' not found")

    if not is_compatible(animal.type, habitat.terrain_type):
        suitable = ", ".join(terrain.value for terrain in compatible_terrains(animal.type))
        detail = (
            f"Habitat '{habitat_name}' ({habitat.terrain_type.value}) is not suitable "
            f"for {animal.type.value} animal '{name}'; suitable terrains: {suitable}"
        )
        animal.mood = Mood.UNHAPPY
        db.commit()
        logger.warning(f"Rejected move: {detail}")
        raise ConflictError(detail)

    if habitat.resident is not None:
        logger.warning(
            f"Rejected move of '{name}' to '{habitat_name}': "
            f"occupied by '{habitat.resident.name}'"
        )
        raise ConflictError(f"Habitat '{habitat_name}' is already occupied")

    previous = animal.habitat.name if animal.habitat else None
    # Assigning the relationship also clears the old habitat's resident
    animal.habitat = habitat
    commit_or_conflict(db, f"Habitat '{habitat_name}' is already occupied")
    db.refresh(animal)

    if previous:
        logger.info(f"Moved animal '{name}' from '{previous}' to '{habitat_name}'")
    else:
        logger.info(f"Moved animal '{name}' into '{habitat_name}'")
    return animal
