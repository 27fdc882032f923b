"""SQLAlchemy ORM models.

Models represent database tables:
- beers: Beers on the tasting list
- ratings: Anonymous 1-5 ratings, keyed by public beer ID
- tasting_settings: Single row with the reveal flag
"""

from beer_tasting.models.beer import Beer
from beer_tasting.models.rating import Rating
from beer_tasting.models.tasting_settings import TastingSettings

__all__ = ["Beer", "Rating", "TastingSettings"]
