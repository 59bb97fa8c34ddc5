"""
Animal model for zoo residents.
"""
from sqlalchemy import Column, String, Enum as SQLEnum, ForeignKey, Integer
from sqlalchemy.orm import relationship
from zoo.db.base import BaseModel
import enum


class AnimalType(str, enum.Enum):
    """How an animal gets around; decides which terrains suit it."""
    WALKING = "WALKING"
    FLYING = "FLYING"
    SWIMMING = "SWIMMING"


class Mood(str, enum.Enum):
    """Animal mood enumeration."""
    HAPPY = "HAPPY"
    UNHAPPY = "UNHAPPY"


class Animal(BaseModel):
    """Animal model with immutable name and type."""
    __tablename__ = "animals"

    name = Column(String(100), unique=True, nullable=False, index=True)
    type = Column(SQLEnum(AnimalType), nullable=False, index=True)
    mood = Column(SQLEnum(Mood), default=Mood.UNHAPPY, nullable=False, index=True)
    # Unique: a habitat can be referenced by at most one animal
    habitat_id = Column(Integer, ForeignKey("habitats.id"), unique=True, nullable=True)

    # Relationships
    habitat = relationship("Habitat", back_populates="resident")
