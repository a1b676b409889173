import pytest

from shared.models.filters import EMPTY_FILTERS, PresenceFilter, SearchFilters
from shared.search.filter_state import (
    active_filter_chips,
    active_filter_count,
    clear_all_filters,
    remove_filter,
    set_kdrive_filter,
    set_query,
    set_year_range,
    toggle_set_filter,
)


def test_empty_filters_constant():
    assert EMPTY_FILTERS.query == ""
    assert EMPTY_FILTERS.document_types == frozenset()
    assert EMPTY_FILTERS.year_from == "" and EMPTY_FILTERS.year_to == ""
    assert EMPTY_FILTERS.has_kdrive_link is PresenceFilter.UNCONSTRAINED
    assert active_filter_count(EMPTY_FILTERS) == 0


def test_set_query_is_verbatim_and_returns_a_new_value():
    updated = set_query(EMPTY_FILTERS, "  Plan  ")
    assert updated.query == "  Plan  "
    assert EMPTY_FILTERS.query == ""


def test_filters_are_immutable():
    with pytest.raises(Exception):
        EMPTY_FILTERS.query = "mutated"


def test_toggle_is_a_symmetric_difference():
    once = toggle_set_filter(EMPTY_FILTERS, "people", "Alice")
    assert once.people == {"Alice"}
    twice = toggle_set_filter(once, "people", "Alice")
    assert twice.people == frozenset()
    assert once.people == {"Alice"}


def test_toggle_with_unknown_key_is_a_no_op():
    assert toggle_set_filter(EMPTY_FILTERS, "colors", "red") == EMPTY_FILTERS


def test_set_year_range_replaces_both_bounds():
    ranged = set_year_range(EMPTY_FILTERS, "1990", "2000")
    assert (ranged.year_from, ranged.year_to) == ("1990", "2000")
    cleared_lower = set_year_range(ranged, "", ranged.year_to)
    assert (cleared_lower.year_from, cleared_lower.year_to) == ("", "2000")


def test_set_kdrive_filter_accepts_flags_and_enum():
    assert set_kdrive_filter(EMPTY_FILTERS, True).has_kdrive_link is PresenceFilter.REQUIRED
    assert set_kdrive_filter(EMPTY_FILTERS, False).has_kdrive_link is PresenceFilter.EXCLUDED
    required = set_kdrive_filter(EMPTY_FILTERS, PresenceFilter.REQUIRED)
    assert set_kdrive_filter(required, None).has_kdrive_link is PresenceFilter.UNCONSTRAINED


def test_clear_all_resets_query_too():
    busy = SearchFilters(query="plan", origins={"Bogota"}, year_from="1990", has_kdrive_link=True)
    assert clear_all_filters() == EMPTY_FILTERS
    assert busy != clear_all_filters()


def test_remove_filter_by_key():
    busy = SearchFilters(
        query="plan",
        origins={"Bogota", "Lima"},
        year_from="1990",
        year_to="2000",
        has_kdrive_link=False,
    )
    assert remove_filter(busy, "origins", "Lima").origins == {"Bogota"}
    assert remove_filter(busy, "origins", "Quito") == busy
    assert remove_filter(busy, "origins") == busy

    no_years = remove_filter(busy, "year_range")
    assert (no_years.year_from, no_years.year_to) == ("", "")

    assert remove_filter(busy, "kdrive_link").has_kdrive_link is PresenceFilter.UNCONSTRAINED
    assert remove_filter(busy, "query").query == ""


def test_remove_filter_ignores_unknown_keys():
    busy = SearchFilters(origins={"Bogota"})
    assert remove_filter(busy, "not_a_filter", "x") == busy


def test_active_count_excludes_the_query():
    only_query = set_query(EMPTY_FILTERS, "foo")
    assert active_filter_count(only_query) == 0
    assert active_filter_count(toggle_set_filter(only_query, "classifications", "Secret")) == 1


def test_active_count_sums_sets_year_range_and_presence():
    filters = SearchFilters(
        document_types={"Cable", "Memo"},
        people={"Bob"},
        year_to="2000",
        has_kdrive_link=True,
    )
    assert active_filter_count(filters) == 5


def test_active_chips_map_back_to_remove_filter():
    filters = SearchFilters(origins={"Bogota"}, year_from="1990", has_kdrive_link=True)
    chips = active_filter_chips(filters)
    assert [(chip.key, chip.value, chip.label, chip.prefix) for chip in chips] == [
        ("origins", "Bogota", "Bogota", "Origen"),
        ("year_range", None, "1990–...", "Año"),
        ("kdrive_link", None, "Con archivo", "PDF"),
    ]

    for chip in chips:
        filters = remove_filter(filters, chip.key, chip.value)
    assert filters == EMPTY_FILTERS


def test_filters_are_hashable_snapshots():
    a = SearchFilters(origins={"Bogota"}, query="plan")
    b = toggle_set_filter(set_query(EMPTY_FILTERS, "plan"), "origins", "Bogota")
    assert a == b
    assert hash(a) == hash(b)


def test_filters_serialize_sets_as_sorted_lists():
    dumped = SearchFilters(people={"Carol", "Alice"}).model_dump(mode="json")
    assert dumped["people"] == ["Alice", "Carol"]
    assert dumped["has_kdrive_link"] == "unconstrained"
