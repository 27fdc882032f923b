"""Rating model.

A single anonymous 1-5 score for one beer. The beer reference is the public
beer ID and is deliberately not a foreign key: ratings may outlive a beer
until the beer store's cascade delete removes them.
"""

from datetime import datetime
from uuid import uuid4

from sqlalchemy import CheckConstraint, DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from beer_tasting.stores.postgres import Base

MIN_RATING = 1
MAX_RATING = 5


def generate_rating_id() -> str:
    """Generate unique public rating ID."""
    return str(uuid4())


class Rating(Base):
    """Anonymous rating of a beer."""

    __tablename__ = "ratings"
    __table_args__ = (
        CheckConstraint(
            f"value >= {MIN_RATING} AND value <= {MAX_RATING}",
            name="ck_ratings_value_range",
        ),
    )

    id: Mapped[int] = mapped_column(primary_key=True)

    rating_id: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        index=True,
        default=generate_rating_id,
    )
    beer_id: Mapped[str] = mapped_column(String(100), index=True)
    value: Mapped[int] = mapped_column()  # 1-5

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<Rating {self.rating_id} beer={self.beer_id} value={self.value}>"
