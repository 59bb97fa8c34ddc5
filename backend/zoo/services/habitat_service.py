"""
Habitat service for habitat creation and lookup.
"""
import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from zoo.core.exceptions import ConflictError, NotFoundError
from zoo.db.session import commit_or_conflict
from zoo.models.habitat import Habitat, TerrainType
from zoo.repositories import HabitatRepository

logger = logging.getLogger(__name__)


def create_habitat(name: str, terrain_type: TerrainType, db: Session) -> Habitat:
    """Create an empty habitat. Raises ConflictError on a taken name."""
    habitats = HabitatRepository(db)
    if habitats.exists(name):
        logger.warning(f"Rejected creation of habitat '{name}': name already taken")
        raise ConflictError(f"Habitat '{name}' already exists")

    habitat = habitats.save(Habitat(name=name, terrain_type=terrain_type))
    commit_or_conflict(db, f"Habitat '{name}' already exists")
    db.refresh(habitat)

    logger.info(f"Created habitat '{name}' ({terrain_type.value})")
    return habitat


def get_habitat(name: str, db: Session) -> Habitat:
    """Get a habitat by name or raise NotFoundError."""
    habitat = HabitatRepository(db).find_by_name(name)
    if not habitat:
        raise NotFoundError(f"Habitat '{name}' not found")
    return habitat


def list_habitats(
    db: Session,
    terrain_type: Optional[TerrainType] = None,
    vacant: Optional[bool] = None
) -> List[Habitat]:
    """List habitats in creation order, optionally by terrain and vacancy."""
    return HabitatRepository(db).list(terrain_type=terrain_type, vacant=vacant)
