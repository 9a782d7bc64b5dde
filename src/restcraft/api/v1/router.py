"""V1 API router aggregating all sub-routers."""

from fastapi import APIRouter

from restcraft.api.v1.posts.router import router as posts_router
from restcraft.api.v1.system.router import router as system_router

v1_router = APIRouter()
v1_router.include_router(system_router, prefix="/system", tags=["system"])
v1_router.include_router(posts_router, prefix="/posts", tags=["posts"])
