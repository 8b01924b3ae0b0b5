from fastapi import APIRouter
from spz_api.api.routes import plates, saved, preferences, counter

api_router = APIRouter()
api_router.include_router(plates.router, tags=["plates"])
api_router.include_router(saved.router, tags=["saved"])
api_router.include_router(preferences.router, tags=["preferences"])
api_router.include_router(counter.router, tags=["counter"])
