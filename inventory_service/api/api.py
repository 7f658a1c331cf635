from fastapi import APIRouter

from inventory_service.api.endpoints import inventory
from inventory_service.api.endpoints import pages
from inventory_service.api.endpoints import search

api_router = APIRouter()
api_router.include_router(inventory.router, tags=["inventory"])
api_router.include_router(search.router, tags=["search"])
api_router.include_router(pages.router)
