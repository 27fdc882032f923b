"""Tests for leaderboard ranking, redaction and price/rating correlation."""

import pytest

from beer_tasting.schemas import BeerWithRatings, CorrelationTrend, Medal, RatingSummary
from beer_tasting.services.ranking import (
    average_rating,
    beer_label,
    build_leaderboard,
    build_stats,
    classify_correlation,
    compute_beer_stats,
    pearson_correlation,
    price_domain,
    rank_beers,
)


def make_beer(
    beer_id: str,
    ratings: list[int],
    *,
    name: str | None = None,
    price: float | None = None,
    image_url: str | None = None,
) -> BeerWithRatings:
    return BeerWithRatings(
        id=beer_id,
        name=name or f"Beer {beer_id}",
        price=price,
        image_url=image_url,
        ratings=[RatingSummary(id=f"{beer_id}-r{i}", value=v) for i, v in enumerate(ratings)],
    )


class TestAverageRating:
    """Tests for the arithmetic mean."""

    def test_mean(self):
        assert average_rating([4, 5]) == 4.5
        assert average_rating([1, 2, 2]) == pytest.approx(5 / 3)
        assert average_rating([3]) == 3.0

    def test_empty_is_zero(self):
        assert average_rating([]) == 0.0


class TestRanking:
    """Tests for numbering, filtering and ordering."""

    def test_unrated_beers_are_excluded(self):
        beers = [make_beer("a", []), make_beer("b", [3]), make_beer("c", [])]
        ranked = rank_beers(compute_beer_stats(beers))
        assert [s.beer.id for s in ranked] == ["b"]

    def test_sorted_non_increasing(self):
        beers = [
            make_beer("a", [2, 3]),
            make_beer("b", [5]),
            make_beer("c", [4, 4, 5]),
            make_beer("d", [1]),
            make_beer("e", [3, 4]),
        ]
        ranked = rank_beers(compute_beer_stats(beers))
        averages = [s.average_rating for s in ranked]
        assert all(a >= b for a, b in zip(averages, averages[1:]))
        assert [s.beer.id for s in ranked] == ["b", "c", "e", "a", "d"]

    def test_ties_keep_creation_order(self):
        beers = [make_beer("a", [3]), make_beer("b", [4, 2]), make_beer("c", [5]), make_beer("d", [3])]
        ranked = rank_beers(compute_beer_stats(beers))
        assert [s.beer.id for s in ranked] == ["c", "a", "b", "d"]

    def test_beer_number_follows_creation_order_not_rank(self):
        beers = [make_beer("a", [1]), make_beer("b", []), make_beer("c", [5])]
        ranked = rank_beers(compute_beer_stats(beers))
        assert [(s.beer.id, s.beer_number) for s in ranked] == [("c", 3), ("a", 1)]

    def test_beer_number_stable_when_ratings_change(self):
        before = [make_beer("a", [2]), make_beer("b", [3])]
        after = [make_beer("a", [2, 5, 5]), make_beer("b", [3])]

        numbers_before = {s.beer.id: s.beer_number for s in rank_beers(compute_beer_stats(before))}
        ranked_after = rank_beers(compute_beer_stats(after))
        numbers_after = {s.beer.id: s.beer_number for s in ranked_after}

        assert ranked_after[0].beer.id == "a"
        assert numbers_before == numbers_after == {"a": 1, "b": 2}


class TestBuildLeaderboard:
    """Tests for the leaderboard payload."""

    def test_scenario_order_and_averages(self):
        beers = [make_beer("A", [4, 5], price=20), make_beer("B", [2], price=50)]
        board = build_leaderboard(beers, show_beer_names=True)
        assert [(e.id, e.rank, e.average_rating) for e in board.entries] == [("A", 1, 4.5), ("B", 2, 2.0)]
        assert board.rated_count == 2
        assert board.total_count == 2

    def test_hidden_names_are_redacted(self):
        beers = [make_beer("a", [4], name="Secret Stout", image_url="https://img/x.png")]
        entry = build_leaderboard(beers, show_beer_names=False).entries[0]
        assert entry.label == "Beer #1"
        assert entry.name is None
        assert entry.image_url is None
        assert "Secret Stout" not in entry.model_dump_json()

    def test_revealed_names(self):
        beers = [make_beer("a", []), make_beer("b", [4], name="Porter", image_url="https://img/p.png")]
        entry = build_leaderboard(beers, show_beer_names=True).entries[0]
        assert entry.label == "Beer #2: Porter"
        assert entry.name == "Porter"
        assert entry.image_url == "https://img/p.png"

    def test_medals_for_top_three(self):
        beers = [make_beer(str(i), [5 - i % 5]) for i in range(5)]
        medals = [e.medal for e in build_leaderboard(beers, show_beer_names=False).entries]
        assert medals == [Medal.GOLD, Medal.SILVER, Medal.BRONZE, None, None]

    def test_ratings_listed_in_order(self):
        entry = build_leaderboard([make_beer("a", [3, 1, 5])], show_beer_names=False).entries[0]
        assert entry.ratings == [3, 1, 5]
        assert entry.rating_count == 3

    def test_empty(self):
        board = build_leaderboard([], show_beer_names=False)
        assert board.entries == []
        assert board.total_count == 0


class TestBeerLabel:
    def test_label(self):
        assert beer_label(7, "IPA", show_beer_names=False) == "Beer #7"
        assert beer_label(7, "IPA", show_beer_names=True) == "Beer #7: IPA"


class TestPearsonCorrelation:
    """Tests for the price vs. rating correlation coefficient."""

    def test_two_points_negative(self):
        assert pearson_correlation([20, 50], [4.5, 2.0]) == pytest.approx(-1.0)

    def test_two_points_positive(self):
        assert pearson_correlation([20, 50], [2.0, 4.5]) == pytest.approx(1.0)

    def test_fewer_than_two_points(self):
        assert pearson_correlation([], []) == 0.0
        assert pearson_correlation([10], [3]) == 0.0

    def test_no_variance(self):
        assert pearson_correlation([19.99, 19.99, 19.99], [1, 3, 5]) == 0.0
        assert pearson_correlation([10, 20, 30], [4, 4, 4]) == 0.0

    def test_matches_raw_sum_formula(self):
        xs = [12.9, 24.9, 29.5, 32.0, 45.0]
        ys = [2.33, 4.0, 3.0, 4.5, 4.67]
        n = len(xs)
        sx, sy = sum(xs), sum(ys)
        sxy = sum(x * y for x, y in zip(xs, ys))
        sx2, sy2 = sum(x * x for x in xs), sum(y * y for y in ys)
        expected = (n * sxy - sx * sy) / ((n * sx2 - sx**2) * (n * sy2 - sy**2)) ** 0.5
        assert pearson_correlation(xs, ys) == pytest.approx(expected)

    @pytest.mark.parametrize("a,b", [(2.0, 0.0), (0.5, 10.0), (100.0, -3.0)])
    def test_invariant_under_affine_price_rescaling(self, a, b):
        xs = [10.0, 15.0, 22.0, 40.0]
        ys = [3.0, 2.5, 4.0, 3.5]
        scaled = [a * x + b for x in xs]
        assert pearson_correlation(scaled, ys) == pytest.approx(pearson_correlation(xs, ys))

    def test_bounded(self):
        xs = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
        ys = [2.0, 4.0, 6.0, 8.0, 10.0, 12.0]
        r = pearson_correlation(xs, ys)
        assert -1.0 <= r <= 1.0
        assert r == pytest.approx(1.0)

    def test_prices_near_float_limit(self):
        assert pearson_correlation([1.0e308, 1.5e308], [5.0, 1.0]) == pytest.approx(-1.0)
        assert pearson_correlation([1e200, 3e200], [5.0, 1.0]) == pytest.approx(-1.0)
        assert pearson_correlation([1e200, 2e200, 3e200], [1.0, 2.0, 3.0]) == pytest.approx(1.0)

    def test_tiny_prices(self):
        assert pearson_correlation([1e-300, 3e-300], [1.0, 5.0]) == pytest.approx(1.0)

    def test_length_mismatch(self):
        with pytest.raises(ValueError):
            pearson_correlation([1, 2], [1])


class TestClassifyCorrelation:
    def test_bands(self):
        assert classify_correlation(0.31) == CorrelationTrend.POSITIVE
        assert classify_correlation(-0.31) == CorrelationTrend.NEGATIVE
        assert classify_correlation(0.3) == CorrelationTrend.WEAK
        assert classify_correlation(-0.3) == CorrelationTrend.WEAK
        assert classify_correlation(0.0) == CorrelationTrend.WEAK


class TestBuildStats:
    """Tests for the statistics view."""

    def test_only_rated_and_priced_beers(self):
        beers = [
            make_beer("a", [4, 5], price=20),
            make_beer("b", [2], price=50),
            make_beer("c", [5], price=None),
            make_beer("d", [], price=10),
        ]
        stats = build_stats(beers, show_beer_names=False)
        assert [p.id for p in stats.points] == ["a", "b"]
        assert stats.sample_size == 2
        assert stats.correlation == pytest.approx(-1.0)
        assert stats.trend == CorrelationTrend.NEGATIVE
        assert "Negative" in stats.summary

    def test_point_labels_follow_reveal_flag(self):
        beers = [make_beer("a", [3], name="Lager", price=10)]
        hidden = build_stats(beers, show_beer_names=False).points[0]
        shown = build_stats(beers, show_beer_names=True).points[0]
        assert (hidden.label, hidden.name) == ("Beer #1", None)
        assert (shown.label, shown.name) == ("Beer #1: Lager", "Lager")

    def test_huge_prices_do_not_overflow(self):
        beers = [make_beer("a", [5], price=1.0e308), make_beer("b", [1], price=1.5e308)]
        stats = build_stats(beers, show_beer_names=False)
        assert stats.correlation == pytest.approx(-1.0)
        assert stats.trend == CorrelationTrend.NEGATIVE

    def test_empty_stats(self):
        stats = build_stats([make_beer("a", [])], show_beer_names=False)
        assert stats.points == []
        assert stats.correlation == 0.0
        assert stats.trend == CorrelationTrend.WEAK
        assert (stats.price_domain.min, stats.price_domain.max) == (0.0, 100.0)


class TestPriceDomain:
    def test_padding(self):
        domain = price_domain([20.0, 50.0])
        assert domain.min == pytest.approx(17.0)
        assert domain.max == pytest.approx(53.0)

    def test_single_price(self):
        domain = price_domain([30.0])
        assert (domain.min, domain.max) == (30.0, 30.0)
