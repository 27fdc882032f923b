"""Public result views.

GET /v1/ui/leaderboard - Rated beers ranked by average rating
GET /v1/ui/stats       - Price vs. rating correlation

Both read the reveal flag once per request; names and images are left out of
the payload while it is off.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from beer_tasting.schemas import LeaderboardResponse, StatsResponse
from beer_tasting.services.catalog import get_leaderboard, get_stats
from beer_tasting.stores.postgres import get_db_session

router = APIRouter()


@router.get("/leaderboard", response_model=LeaderboardResponse, response_model_exclude_none=True)
async def leaderboard(session: AsyncSession = Depends(get_db_session)) -> LeaderboardResponse:
    """Get the leaderboard.

    Returns:
        LeaderboardResponse with beers that have at least one rating.
    """
    return await get_leaderboard(session)


@router.get("/stats", response_model=StatsResponse, response_model_exclude_none=True)
async def stats(session: AsyncSession = Depends(get_db_session)) -> StatsResponse:
    """Get price vs. rating statistics for rated beers with a price."""
    return await get_stats(session)
