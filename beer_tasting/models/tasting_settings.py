"""Tasting settings model.

Exactly one row is expected; it is created lazily with defaults on first read.
"""

from datetime import datetime

from sqlalchemy import DateTime, func
from sqlalchemy.orm import Mapped, mapped_column

from beer_tasting.stores.postgres import Base


class TastingSettings(Base):
    """Admin-controlled switches for the public views."""

    __tablename__ = "tasting_settings"

    id: Mapped[int] = mapped_column(primary_key=True)

    # Reveal beer names and images on the public leaderboard
    show_beer_names: Mapped[bool] = mapped_column(default=False)

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )

    def __repr__(self) -> str:
        return f"<TastingSettings show_beer_names={self.show_beer_names}>"
