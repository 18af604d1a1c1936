"""API v1 router configuration."""

from fastapi import APIRouter

from api.v1.routes.blogs import router as blogs_router
from api.v1.routes.links import router as links_router
from api.v1.routes.products import router as products_router
from api.v1.routes.profiles import router as profiles_router
from api.v1.routes.socials import router as socials_router

router = APIRouter()
router.include_router(profiles_router)
router.include_router(socials_router)
router.include_router(links_router)
router.include_router(products_router)
router.include_router(blogs_router)
