"""Repositories wrapping SQLAlchemy queries for the domain services."""
from zoo.repositories.animal_repository import AnimalRepository
from zoo.repositories.habitat_repository import HabitatRepository

__all__ = ["AnimalRepository", "HabitatRepository"]
