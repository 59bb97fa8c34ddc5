"""
Pydantic schemas for Habitat entity.
"""
from pydantic import BaseModel, Field, AliasChoices, field_validator
from typing import Optional
from zoo.models.habitat import TerrainType


class HabitatBase(BaseModel):
    """Base habitat schema; terrain is exposed as ``terrainType`` on the wire."""
    name: str
    terrain_type: TerrainType = Field(
        validation_alias=AliasChoices("terrain_type", "terrainType"),
        serialization_alias="terrainType"
    )


class HabitatCreate(HabitatBase):
    """Schema for habitat creation."""
    name: str = Field(..., min_length=1, max_length=100)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        """Trim surrounding whitespace before length validation."""
        if isinstance(v, str):
            return v.strip()
        return v


class HabitatSummary(HabitatBase):
    """Habitat as embedded in an animal response."""

    class Config:
        from_attributes = True


class HabitatResponse(HabitatBase):
    """Schema for habitat response."""
    resident: Optional[str] = None  # Name of the animal living here

    @field_validator("resident", mode="before")
    @classmethod
    def resident_name(cls, v):
        """Collapse the resident Animal into its name."""
        if v is not None and not isinstance(v, str):
            return v.name
        return v

    class Config:
        from_attributes = True
