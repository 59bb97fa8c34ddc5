"""
Static table of which terrains each animal type can live in.
"""
from typing import Dict, FrozenSet, List
from zoo.models.animal import AnimalType
from zoo.models.habitat import TerrainType


COMPATIBLE_TERRAINS: Dict[AnimalType, FrozenSet[TerrainType]] = {
    AnimalType.WALKING: frozenset({TerrainType.FOREST, TerrainType.DESERT, TerrainType.GRASSLAND}),
    AnimalType.FLYING: frozenset({TerrainType.AVIARY}),
    AnimalType.SWIMMING: frozenset({TerrainType.AQUATIC}),
}


def is_compatible(animal_type: AnimalType, terrain_type: TerrainType) -> bool:
    """Check whether an animal of the given type may reside on the given terrain."""
    return terrain_type in COMPATIBLE_TERRAINS.get(animal_type, frozenset())


def compatible_terrains(animal_type: AnimalType) -> List[TerrainType]:
    """Get terrains suitable for an animal type, in enum order."""
    allowed = COMPATIBLE_TERRAINS.get(animal_type, frozenset())
    return [terrain for terrain in TerrainType if terrain in allowed]
