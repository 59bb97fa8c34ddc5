"""
Animal routes: creation, listing, feeding and relocation.
"""
import json
from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from sqlalchemy.orm import Session
from typing import List, Optional
from zoo.core.exceptions import ConflictError, NotFoundError
from zoo.db.session import get_db
from zoo.models.animal import AnimalType, Mood
from zoo.schemas.animal import AnimalCreate, AnimalResponse
from zoo.services import animal_service

router = APIRouter(prefix="/animals", tags=["animals"])


async def read_habitat_name(request: Request) -> str:
    """
    Read the destination habitat name from a move request body.

    The body is the raw name as plain text. A JSON string literal is
    also accepted when the request is sent as application/json.
    """
    raw = await request.body()
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Habitat name must be UTF-8 text"
        )

    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            decoded = json.loads(text)
        except ValueError:
            decoded = None
        if isinstance(decoded, str):
            text = decoded

    habitat_name = text.strip()
    if not habitat_name:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Habitat name is required"
        )
    return habitat_name


@router.post("", response_model=AnimalResponse, status_code=status.HTTP_201_CREATED)
async def create_animal(
    animal_data: AnimalCreate,
    db: Session = Depends(get_db)
):
    """Create a new animal. Mood and habitat in the body are ignored."""
    try:
        return animal_service.create_animal(animal_data.name, animal_data.type, db)
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.get("", response_model=List[AnimalResponse])
async def list_animals(
    mood: Optional[Mood] = None,
    animal_type: Optional[AnimalType] = Query(None, alias="type"),
    db: Session = Depends(get_db)
):
    """List animals in creation order, filtered by mood and/or type."""
    return animal_service.list_animals(db, mood=mood, animal_type=animal_type)


@router.get("/{name}", response_model=AnimalResponse)
async def get_animal(
    name: str,
    db: Session = Depends(get_db)
):
    """Get a single animal."""
    try:
        return animal_service.get_animal(name, db)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/{name}/feed", response_model=AnimalResponse)
async def feed_animal(
    name: str,
    db: Session = Depends(get_db)
):
    """Feed an animal, making it happy."""
    try:
        return animal_service.feed_animal(name, db)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post(
    "/{name}/move",
    response_model=AnimalResponse,
    openapi_extra={"requestBody": {"content": {"text/plain": {"schema": {"type": "string"}}}}}
)
async def move_animal(
    name: str,
    habitat_name: str = Depends(read_habitat_name),
    db: Session = Depends(get_db)
):
    """Move an animal into the habitat named by the request body."""
    try:
        return animal_service.move_animal(name, habitat_name, db)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
