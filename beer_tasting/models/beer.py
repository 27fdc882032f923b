"""Beer model.

A beer on the tasting list. Price, alcohol percentage and image are optional;
the name is always present.
"""

from datetime import datetime
from uuid import uuid4

from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from beer_tasting.stores.postgres import Base


def generate_beer_id() -> str:
    """Generate unique public beer ID."""
    return str(uuid4())


class Beer(Base):
    """A beer registered for the tasting."""

    __tablename__ = "beers"

    id: Mapped[int] = mapped_column(primary_key=True)

    # Public beer ID (used in URLs and by ratings)
    beer_id: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        index=True,
        default=generate_beer_id,
    )

    name: Mapped[str] = mapped_column(String(200))
    price: Mapped[float | None] = mapped_column()
    alcohol_percentage: Mapped[float | None] = mapped_column()
    image_url: Mapped[str | None] = mapped_column(Text)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )

    def __repr__(self) -> str:
        return f"<Beer {self.beer_id} {self.name!r}>"
