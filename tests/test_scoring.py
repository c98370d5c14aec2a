"""Tests for activity scoring and ranking."""

from storefront.recommender.scoring import (
    ACTION_WEIGHTS,
    RECOMMENDATION_LIMIT,
    rank_product_ids,
    score_activities,
)


def test_action_weights():
    """Views, cart additions and purchases weigh 1, 3 and 5."""
    assert ACTION_WEIGHTS == {"viewed": 1, "added_to_cart": 3, "purchased": 5}


def test_score_activities_example(make_activities):
    activities = make_activities("u1", [
        ("p1", "viewed"),
        ("p1", "viewed"),
        ("p2", "purchased"),
        ("p3", "added_to_cart"),
    ])

    scores = score_activities(activities)

    assert scores == {"p1": 2, "p2": 5, "p3": 3}
    assert rank_product_ids(scores) == ["p2", "p3", "p1"]


def test_score_activities_empty():
    assert score_activities([]) == {}
    assert rank_product_ids({}) == []


def test_unknown_action_contributes_zero(make_activities):
    """Unknown actions neither fail nor add weight, but the product is kept."""
    activities = make_activities("u1", [
        ("p1", "viewed"),
        ("p1", "wishlisted"),
        ("p2", "ordered"),
        ("p3", ""),
    ])

    scores = score_activities(activities)

    assert scores == {"p1": 1, "p2": 0, "p3": 0}


def test_scores_mix_of_actions_per_product(make_activities):
    activities = make_activities("u1", [
        ("p1", "viewed"),
        ("p1", "added_to_cart"),
        ("p1", "purchased"),
        ("p2", "viewed"),
    ])

    assert score_activities(activities) == {"p1": 9, "p2": 1}


def test_ties_keep_first_seen_order(make_activities):
    """Equal scores are ranked in the order products first appear."""
    activities = make_activities("u1", [
        ("p3", "viewed"),
        ("p1", "viewed"),
        ("p2", "viewed"),
        ("p4", "added_to_cart"),
    ])

    ranked = rank_product_ids(score_activities(activities))

    assert ranked == ["p4", "p3", "p1", "p2"]


def test_tie_order_uses_first_occurrence_not_last(make_activities):
    activities = make_activities("u1", [
        ("a", "viewed"),
        ("b", "viewed"),
        ("b", "viewed"),
        ("a", "viewed"),
    ])

    assert rank_product_ids(score_activities(activities)) == ["a", "b"]


def test_rank_product_ids_respects_limit():
    scores = {f"p{i}": i for i in range(25)}

    ranked = rank_product_ids(scores)

    assert len(ranked) == RECOMMENDATION_LIMIT == 10
    assert ranked == [f"p{i}" for i in range(24, 14, -1)]


def test_rank_product_ids_custom_limit():
    scores = {"p1": 1, "p2": 2, "p3": 3}

    assert rank_product_ids(scores, limit=2) == ["p3", "p2"]
    assert rank_product_ids(scores, limit=0) == []
