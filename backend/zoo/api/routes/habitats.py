"""
Habitat routes.
"""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
from zoo.core.exceptions import ConflictError, NotFoundError
from zoo.db.session import get_db
from zoo.models.habitat import TerrainType
from zoo.schemas.habitat import HabitatCreate, HabitatResponse
from zoo.services import habitat_service

router = APIRouter(prefix="/habitats", tags=["habitats"])


@router.post("", response_model=HabitatResponse, status_code=status.HTTP_201_CREATED)
async def create_habitat(
    habitat_data: HabitatCreate,
    db: Session = Depends(get_db)
):
    """Create a new, empty habitat."""
    try:
        return habitat_service.create_habitat(habitat_data.name, habitat_data.terrain_type, db)
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.get("", response_model=List[HabitatResponse])
async def list_habitats(
    terrain_type: Optional[TerrainType] = Query(None, alias="terrainType"),
    vacant: Optional[bool] = None,
    db: Session = Depends(get_db)
):
    """List habitats in creation order."""
    return habitat_service.list_habitats(db, terrain_type=terrain_type, vacant=vacant)


@router.get("/{name}", response_model=HabitatResponse)
async def get_habitat(
    name: str,
    db: Session = Depends(get_db)
):
    """Get a single habitat with its resident."""
    try:
        return habitat_service.get_habitat(name, db)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
