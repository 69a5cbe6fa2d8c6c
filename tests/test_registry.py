"""Algorithm registry: one card per variant, grouped by family."""

from __future__ import annotations

import json

import pytest

from algorithms import (
    FAMILIES,
    LINKED_LIST,
    MST,
    QUEUE,
    REGISTRY,
    SEARCH,
    SORT,
    STACK,
    TRAVERSAL,
    algorithms_by_family,
    algorithms_by_tag,
    get_algorithm,
    list_algorithms,
)
from algorithms.variants import (
    ListOperation, QueueOperation, SearchVariant, SortVariant, StackOperation, TraversalOrder,
)


@pytest.mark.parametrize(
    "enum_cls, family",
    [
        (SearchVariant, SEARCH),
        (SortVariant, SORT),
        (TraversalOrder, TRAVERSAL),
        (ListOperation, LINKED_LIST),
        (StackOperation, STACK),
        (QueueOperation, QUEUE),
    ],
)
def test_every_variant_has_a_card(enum_cls, family) -> None:
    for member in enum_cls:
        info = get_algorithm(member.value)
        assert info is not None
        assert info.key == member.value
        assert info.family == family


def test_kruskal_is_the_mst_card() -> None:
    assert [a.key for a in algorithms_by_family(MST)] == ["kruskal"]


def test_listing_order() -> None:
    keys = [a.key for a in list_algorithms()]
    assert keys[:4] == ["bfs", "dfs", "dijkstra", "astar"]
    assert len(keys) == len(REGISTRY) == 22
    assert len(FAMILIES) == 7


def test_cards_are_complete() -> None:
    for info in list_algorithms():
        assert info.family in FAMILIES
        assert callable(info.fn)
        assert info.pseudocode and all(isinstance(line, str) for line in info.pseudocode)
        assert info.complexity_time and info.description


def test_to_dict_is_json_safe() -> None:
    data = get_algorithm("astar").to_dict()
    assert "fn" not in data
    assert data["family"] == "search"
    json.dumps(data)


def test_lookup_helpers() -> None:
    assert get_algorithm("nope") is None
    assert {a.key for a in algorithms_by_tag("stable")} == {"bubble", "insertion", "merge"}
    assert [a.key for a in algorithms_by_family(SORT)] == ["bubble", "selection", "insertion", "merge", "quick"]
