from fastapi import APIRouter

from app.api.v1 import convert, hbl, health, mbl

api_router = APIRouter()

api_router.include_router(health.router, prefix="/v1", tags=["health"])
api_router.include_router(convert.router, prefix="/v1/convert", tags=["convert"])
api_router.include_router(mbl.router, prefix="/v1/mbl", tags=["mbl"])
api_router.include_router(hbl.router, prefix="/v1", tags=["hbl"])
