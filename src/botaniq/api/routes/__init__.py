"""HTTP routes."""

from fastapi import APIRouter

from botaniq.api.routes import auth, gardens, health, plants, recommendations, users

router = APIRouter()

# Include routers
router.include_router(health.router)
router.include_router(auth.router)
router.include_router(users.router)
router.include_router(recommendations.router)
router.include_router(gardens.router)
router.include_router(plants.router)
