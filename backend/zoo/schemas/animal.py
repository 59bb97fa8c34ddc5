"""
Pydantic schemas for Animal entity.
"""
from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, Optional
from zoo.models.animal import AnimalType, Mood
from zoo.schemas.habitat import HabitatSummary


class AnimalBase(BaseModel):
    """Base animal schema."""
    name: str
    type: AnimalType


class AnimalCreate(AnimalBase):
    """Schema for animal creation."""
    name: str = Field(..., min_length=1, max_length=100)
    # Accepted for wire compatibility, ignored: new animals start UNHAPPY and homeless
    mood: Optional[Mood] = None
    habitat: Optional[Dict[str, Any]] = None

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        """Trim surrounding whitespace before length validation."""
        if isinstance(v, str):
            return v.strip()
        return v


class AnimalResponse(AnimalBase):
    """Schema for animal response."""
    mood: Mood
    habitat: Optional[HabitatSummary] = None

    class Config:
        from_attributes = True
