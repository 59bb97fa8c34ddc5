"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from zoo.api.routes import animals, habitats

api_router = APIRouter()

# Include all route modules
api_router.include_router(animals.router)
api_router.include_router(habitats.router)
