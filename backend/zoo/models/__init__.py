"""Models package - Import all models for SQLAlchemy registration."""
from zoo.models.animal import Animal, AnimalType, Mood
from zoo.models.habitat import Habitat, TerrainType

__all__ = [
    "Animal",
    "AnimalType",
    "Mood",
    "Habitat",
    "TerrainType",
]
