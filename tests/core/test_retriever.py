from __future__ import annotations

import pytest

from core.retriever import cosine_similarity, top_k
from model.document import RetrievableUnit


def _unit(uid: str, embedding: list[float]) -> RetrievableUnit:
    return RetrievableUnit(id=uid, page=int(uid[1:]), text=f"text {uid}", embedding=embedding)


def test_top_k_orders_by_descending_similarity() -> None:
    units = [_unit("p1", [1.0, 0.0]), _unit("p2", [0.0, 1.0]), _unit("p3", [0.9, 0.1])]

    result = top_k(units, [1.0, 0.0], k=2)

    assert [u.id for u in result] == ["p1", "p3"]


def test_k_larger_than_units_returns_all_with_ties_in_input_order() -> None:
    units = [_unit("p1", [0.0, 1.0]), _unit("p2", [1.0, 0.0]), _unit("p3", [0.0, 2.0])]

    result = top_k(units, [1.0, 0.0], k=10)

    assert [u.id for u in result] == ["p2", "p1", "p3"]


def test_degenerate_vectors_score_zero_instead_of_failing() -> None:
    units = [
        _unit("p1", []),
        _unit("p2", [0.0, 0.0]),
        _unit("p3", [1.0, 0.0, 0.0]),
        _unit("p4", [-1.0, 0.0]),
        _unit("p5", [0.5, 0.5]),
    ]

    result = top_k(units, [1.0, 0.0], k=5)

    assert [u.id for u in result] == ["p5", "p1", "p2", "p3", "p4"]


def test_top_k_does_not_mutate_input() -> None:
    units = [_unit("p1", [0.0, 1.0]), _unit("p2", [1.0, 0.0])]
    snapshot = list(units)

    top_k(units, [1.0, 0.0], k=1)

    assert units == snapshot


def test_empty_units_give_empty_result() -> None:
    assert top_k([], [1.0, 0.0], k=3) == []


@pytest.mark.parametrize("k", [0, -1])
def test_k_must_be_positive(k: int) -> None:
    with pytest.raises(ValueError):
        top_k([_unit("p1", [1.0])], [1.0], k=k)


def test_cosine_similarity_values() -> None:
    assert cosine_similarity([1.0, 0.0], [1.0, 0.0]) == pytest.approx(1.0)
    assert cosine_similarity([1.0, 0.0], [0.0, 3.0]) == pytest.approx(0.0)
    assert cosine_similarity([2.0, 0.0], [-1.0, 0.0]) == pytest.approx(-1.0)
    assert cosine_similarity([], []) == 0.0
    assert cosine_similarity([0.0, 0.0], [1.0, 1.0]) == 0.0
    assert cosine_similarity([1.0], [1.0, 0.0]) == 0.0
