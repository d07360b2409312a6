from fastapi import APIRouter

from api.routes.discord import router as discord_router
from api.routes.notifications import router as notifications_router
from api.routes.stripe import router as stripe_router
from api.routes.system import router as system_router

api_router = APIRouter()

api_router.include_router(system_router)
api_router.include_router(notifications_router)
api_router.include_router(discord_router)
api_router.include_router(stripe_router)
