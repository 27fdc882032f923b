"""Ranking service for the leaderboard and price vs. rating statistics.

Ranking logic:
1. Number beers 1..N in creation order (the "beer number" shown to tasters)
2. Drop beers without ratings
3. Sort by average rating DESC
4. Then by beer number ASC (earlier beers win ties)

Everything here is pure: callers pass a snapshot of beers joined with their
ratings plus the reveal flag, and get response schemas back. Names and images
are removed here, before the payload leaves this module, when the reveal flag
is off.
"""

from collections.abc import Sequence
from dataclasses import dataclass
import math

from beer_tasting.schemas import (
    BeerWithRatings,
    CorrelationTrend,
    LeaderboardEntry,
    LeaderboardResponse,
    Medal,
    PriceDomain,
    StatsPoint,
    StatsResponse,
)

# Correlation bands for the narrative summary
POSITIVE_THRESHOLD = 0.3
NEGATIVE_THRESHOLD = -0.3

# Chart padding on each side of the price axis, as a fraction of the range
PRICE_PADDING_FRACTION = 0.1
DEFAULT_PRICE_DOMAIN = (0.0, 100.0)

_MEDALS = (Medal.GOLD, Medal.SILVER, Medal.BRONZE)

_SUMMARIES = {
    CorrelationTrend.POSITIVE: "Positive correlation: pricier beers tend to get higher ratings.",
    CorrelationTrend.NEGATIVE: "Negative correlation: pricier beers tend to get lower ratings.",
    CorrelationTrend.WEAK: "Weak or no correlation between price and rating.",
}


@dataclass(frozen=True)
class BeerStats:
    """A beer with its derived statistics."""

    beer: BeerWithRatings
    beer_number: int
    average_rating: float

    @property
    def rating_count(self) -> int:
        return len(self.beer.ratings)

    @property
    def rating_values(self) -> list[int]:
        return [r.value for r in self.beer.ratings]


def average_rating(values: Sequence[int]) -> float:
    """Arithmetic mean of rating values; 0.0 for no ratings."""
    if not values:
        return 0.0
    return sum(values) / len(values)


def compute_beer_stats(beers: Sequence[BeerWithRatings]) -> list[BeerStats]:
    """Attach beer numbers and averages.

    Args:
        beers: Beers in creation order.

    Returns:
        One BeerStats per beer, same order, including unrated beers.
    """
    return [
        BeerStats(
            beer=beer,
            beer_number=number,
            average_rating=average_rating([r.value for r in beer.ratings]),
        )
        for number, beer in enumerate(beers, start=1)
    ]


def rank_beers(stats: Sequence[BeerStats]) -> list[BeerStats]:
    """Filter to rated beers and sort by average DESC, beer number ASC."""
    rated = [s for s in stats if s.rating_count > 0]
    return sorted(rated, key=lambda s: (-s.average_rating, s.beer_number))


def beer_label(beer_number: int, name: str, *, show_beer_names: bool) -> str:
    """Display label: "Beer #3", or "Beer #3: Name" when names are revealed."""
    if show_beer_names:
        return f"Beer #{beer_number}: {name}"
    return f"Beer #{beer_number}"


def build_leaderboard(
    beers: Sequence[BeerWithRatings],
    *,
    show_beer_names: bool,
) -> LeaderboardResponse:
    """Build the public leaderboard.

    Args:
        beers: Beers with ratings, in creation order.
        show_beer_names: Reveal flag, read once per request by the caller.

    Returns:
        LeaderboardResponse with rated beers only, ranked from 1.
    """
    ranked = rank_beers(compute_beer_stats(beers))

    entries: list[LeaderboardEntry] = []
    for rank, stats in enumerate(ranked, start=1):
        beer = stats.beer
        entries.append(
            LeaderboardEntry(
                id=beer.id,
                rank=rank,
                beer_number=stats.beer_number,
                label=beer_label(stats.beer_number, beer.name, show_beer_names=show_beer_names),
                name=beer.name if show_beer_names else None,
                image_url=beer.image_url if show_beer_names else None,
                price=beer.price,
                alcohol_percentage=beer.alcohol_percentage,
                average_rating=stats.average_rating,
                rating_count=stats.rating_count,
                ratings=stats.rating_values,
                medal=_MEDALS[rank - 1] if rank <= len(_MEDALS) else None,
            )
        )

    return LeaderboardResponse(
        show_beer_names=show_beer_names,
        entries=entries,
        rated_count=len(entries),
        total_count=len(beers),
    )


def pearson_correlation(xs: Sequence[float], ys: Sequence[float]) -> float:
    """Pearson correlation coefficient of two equally long series.

    Computed as sum(dx*dy) / sqrt(sum(dx^2) * sum(dy^2)) over deviations from
    the mean, which equals the n*Sxy - Sx*Sy form without its cancellation
    error. Deviations are scaled to [-1, 1] before any products are formed,
    so prices near the float limit neither overflow nor lose the sign.

    Returns:
        r in [-1, 1]; 0.0 when there are fewer than two points or either
        series is constant.
    """
    if len(xs) != len(ys):
        raise ValueError("xs and ys must have the same length")

    n = len(xs)
    if n < 2:
        return 0.0
    if min(xs) == max(xs) or min(ys) == max(ys):
        return 0.0

    dx = _scaled_deviations(xs)
    dy = _scaled_deviations(ys)
    if dx is None or dy is None:
        return 0.0

    sxy = math.fsum(a * b for a, b in zip(dx, dy))
    sxx = math.fsum(a * a for a in dx)
    syy = math.fsum(b * b for b in dy)

    denominator = math.sqrt(sxx) * math.sqrt(syy)
    if denominator == 0:
        return 0.0
    return max(-1.0, min(1.0, sxy / denominator))


def _scaled_deviations(values: Sequence[float]) -> list[float] | None:
    """Deviations from the mean divided by the largest one, or None if all zero."""
    n = len(values)
    mean = math.fsum(v / n for v in values)
    deviations = [v - mean for v in values]
    scale = max(abs(d) for d in deviations)
    if scale == 0 or not math.isfinite(scale):
        return None
    return [d / scale for d in deviations]


def classify_correlation(r: float) -> CorrelationTrend:
    """Map r to a narrative band (thresholds are policy, not statistics)."""
    if r > POSITIVE_THRESHOLD:
        return CorrelationTrend.POSITIVE
    if r < NEGATIVE_THRESHOLD:
        return CorrelationTrend.NEGATIVE
    return CorrelationTrend.WEAK


def price_domain(prices: Sequence[float]) -> PriceDomain:
    """Chart bounds: min/max price padded by 10% of the range."""
    if not prices:
        low, high = DEFAULT_PRICE_DOMAIN
        return PriceDomain(min=low, max=high)

    low, high = min(prices), max(prices)
    padding = (high - low) * PRICE_PADDING_FRACTION
    return PriceDomain(min=low - padding, max=high + padding)


def build_stats(
    beers: Sequence[BeerWithRatings],
    *,
    show_beer_names: bool,
) -> StatsResponse:
    """Build the price vs. rating statistics view.

    Only beers with at least one rating and a known price take part.
    """
    qualifying = [
        s for s in compute_beer_stats(beers)
        if s.rating_count > 0 and s.beer.price is not None
    ]

    points = [
        StatsPoint(
            id=s.beer.id,
            beer_number=s.beer_number,
            label=beer_label(s.beer_number, s.beer.name, show_beer_names=show_beer_names),
            name=s.beer.name if show_beer_names else None,
            price=s.beer.price,
            alcohol_percentage=s.beer.alcohol_percentage,
            average_rating=s.average_rating,
            rating_count=s.rating_count,
        )
        for s in qualifying
    ]

    prices = [p.price for p in points]
    r = pearson_correlation(prices, [p.average_rating for p in points])
    trend = classify_correlation(r)

    return StatsResponse(
        show_beer_names=show_beer_names,
        points=points,
        sample_size=len(points),
        correlation=r,
        trend=trend,
        summary=_SUMMARIES[trend],
        price_domain=price_domain(prices),
    )
