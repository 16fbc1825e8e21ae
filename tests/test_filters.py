import pytest

from pokegrid.filters import apply_filters, filter_by_name, filter_by_type, sort_records
from pokegrid.models import QueryState, SortKey


def test_filter_by_name_is_case_insensitive_prefix(make_record):
    pikachu = make_record(25, "pikachu", ("electric",))

    assert filter_by_name(pikachu, "pik")
    assert filter_by_name(pikachu, "PIKA")
    assert not filter_by_name(pikachu, "chu")
    assert filter_by_name(pikachu, "")


def test_filter_by_type_all_matches_everything(make_record):
    charmander = make_record(4, "charmander", ("fire",))

    assert filter_by_type(charmander, "all")
    assert filter_by_type(charmander, "fire")
    assert not filter_by_type(charmander, "water")


def test_search_term_pi_keeps_pikachu_and_pidgey(make_record):
    records = [
        make_record(25, "pikachu", ("electric",)),
        make_record(16, "pidgey", ("normal", "flying")),
        make_record(4, "charmander", ("fire",)),
    ]

    result = apply_filters(records, QueryState(search_term="pi"))

    assert {r.name for r in result} == {"pikachu", "pidgey"}


def test_water_filter_keeps_dual_type_record(make_record):
    gyarados = make_record(130, "gyarados", ("water", "flying"))
    charmander = make_record(4, "charmander", ("fire",))

    result = apply_filters([gyarados, charmander], QueryState(selected_type="water"))

    assert result == [gyarados]


def test_name_and_type_filters_combine_with_and(make_record):
    records = [
        make_record(7, "squirtle", ("water",)),
        make_record(1, "bulbasaur", ("grass", "poison")),
        make_record(8, "wartortle", ("water",)),
    ]

    result = apply_filters(records, QueryState(search_term="s", selected_type="water"))

    assert [r.name for r in result] == ["squirtle"]


@pytest.mark.parametrize(
    "sort_key, field, descending",
    [
        ("id-asc", "id", False),
        ("id-desc", "id", True),
        ("exp-asc", "experience", False),
        ("exp-desc", "experience", True),
        ("base-exp-desc", "experience", True),
    ],
)
def test_sort_orders_by_field(make_record, sort_key, field, descending):
    records = [
        make_record(3, "c", base_experience=10),
        make_record(1, "a", base_experience=None),
        make_record(2, "b", base_experience=300),
    ]

    values = [getattr(r, field) for r in sort_records(records, sort_key)]

    assert values == sorted(values, reverse=descending)


def test_missing_base_experience_sorts_as_zero(make_record):
    records = [make_record(2, "b", base_experience=1), make_record(1, "a", base_experience=None)]

    assert [r.name for r in sort_records(records, SortKey.EXP_ASC)] == ["a", "b"]


def test_unknown_sort_key_falls_back_to_id_ascending(make_record):
    records = [make_record(9, "z"), make_record(2, "y")]

    assert [r.id for r in sort_records(records, "weight-desc")] == [2, 9]


def test_sort_is_stable_for_ties(make_record):
    records = [
        make_record(5, "first", base_experience=50),
        make_record(1, "second", base_experience=50),
        make_record(3, "third", base_experience=50),
    ]

    assert [r.name for r in sort_records(records, "exp-desc")] == ["first", "second", "third"]
    assert [r.name for r in sort_records(records, "exp-asc")] == ["first", "second", "third"]


def test_apply_filters_is_idempotent_and_pure(numbered_records):
    query = QueryState(search_term="mon1", sort_key="id-desc")
    original = list(numbered_records)

    once = apply_filters(numbered_records, query)
    twice = apply_filters(once, query)

    assert once == twice
    assert apply_filters(numbered_records, query) == once
    assert numbered_records == original


def test_apply_filters_defaults_to_id_ascending(make_record):
    records = [make_record(3, "c"), make_record(1, "a"), make_record(2, "b")]

    assert [r.id for r in apply_filters(records)] == [1, 2, 3]
