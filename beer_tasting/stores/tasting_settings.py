"""Settings store: the single tasting settings record."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from beer_tasting.errors import StoreError
from beer_tasting.models import TastingSettings

logger = logging.getLogger("uvicorn.error")


async def _find_settings(session: AsyncSession) -> TastingSettings | None:
    result = await session.execute(
        select(TastingSettings).order_by(TastingSettings.id.asc()).limit(1)
    )
    return result.scalar_one_or_none()


async def get_or_create_settings(session: AsyncSession) -> TastingSettings:
    """Get the settings record, persisting defaults if none exists yet."""
    try:
        settings = await _find_settings(session)
        if settings is None:
            settings = TastingSettings(show_beer_names=False)
            session.add(settings)
            await session.commit()
            await session.refresh(settings)
            logger.info("[settings] created default settings")
    except SQLAlchemyError as exc:
        await session.rollback()
        logger.exception("Error fetching settings")
        raise StoreError("Failed to fetch settings") from exc
    return settings


async def update_settings(session: AsyncSession, *, show_beer_names: bool) -> TastingSettings:
    """Set the reveal flag, creating the record if missing."""
    try:
        settings = await _find_settings(session)
        if settings is None:
            settings = TastingSettings(show_beer_names=show_beer_names)
            session.add(settings)
        else:
            settings.show_beer_names = show_beer_names
        await session.commit()
        await session.refresh(settings)
    except SQLAlchemyError as exc:
        await session.rollback()
        logger.exception("Error updating settings")
        raise StoreError("Failed to update settings") from exc

    logger.info(f"[settings] show_beer_names={settings.show_beer_names}")
    return settings
