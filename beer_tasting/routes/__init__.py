"""API routes."""

from fastapi import APIRouter

from beer_tasting.routes import admin, beers, ratings, ui

api_router = APIRouter()

# Beer CRUD (tasting list)
api_router.include_router(beers.router, prefix="/v1/beers", tags=["beers"])

# Rating submission and removal
api_router.include_router(ratings.router, prefix="/v1/ratings", tags=["ratings"])

# Public result views (leaderboard, statistics)
api_router.include_router(ui.router, prefix="/v1/ui", tags=["ui"])

# Admin endpoints (reveal toggle)
api_router.include_router(admin.router, prefix="/v1/admin", tags=["admin"])
