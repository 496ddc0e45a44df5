"""API v1 routes."""

from fastapi import APIRouter

from pesca_api.api.v1 import auth, health, pedidos

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(pedidos.router, prefix="/pedidos", tags=["pedidos"])
