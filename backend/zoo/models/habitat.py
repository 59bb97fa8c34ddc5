"""
Habitat model for zoo enclosures.
"""
from sqlalchemy import Column, String, Enum as SQLEnum
from sqlalchemy.orm import relationship
from zoo.db.base import BaseModel
import enum


class TerrainType(str, enum.Enum):
    """Habitat terrain enumeration."""
    FOREST = "FOREST"
    DESERT = "DESERT"
    GRASSLAND = "GRASSLAND"
    AQUATIC = "AQUATIC"
    AVIARY = "AVIARY"


class Habitat(BaseModel):
    """Habitat model holding at most one resident animal."""
    __tablename__ = "habitats"

    name = Column(String(100), unique=True, nullable=False, index=True)
    terrain_type = Column(SQLEnum(TerrainType), nullable=False, index=True)

    # Reverse side of Animal.habitat_id, so both directions share one column
    resident = relationship("Animal", back_populates="habitat", uselist=False)
