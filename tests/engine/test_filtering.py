from __future__ import annotations

import pytest

from vehicle_desk.engine.filtering import FilterEngine, filter_records
from vehicle_desk.models import FilterCriteria, VehicleStatus


def ids(view) -> list[int]:
    return [vehicle.id for vehicle in view]


def test_empty_criteria_returns_full_collection_in_order(fleet) -> None:
    view = filter_records(fleet, FilterCriteria())
    assert list(view) == fleet


def test_blank_criteria_fields_match_everything(fleet) -> None:
    criteria = FilterCriteria(id="", make="", model="", color="", status="")
    assert criteria.is_empty()
    assert ids(filter_records(fleet, criteria)) == [1, 2, 3, 4]


def test_whitespace_id_and_status_count_as_blank(fleet) -> None:
    assert ids(filter_records(fleet, FilterCriteria(id="  ", status=" "))) == [1, 2, 3, 4]


@pytest.mark.parametrize("raw", ["not-a-number", "1.0", "abc1", "0x2", "1_000", "\u0663", "1e0"])
def test_unparseable_id_matches_nothing(fleet, raw: str) -> None:
    assert filter_records(fleet, FilterCriteria(id=raw)) == ()


@pytest.mark.parametrize(("raw", "expected"), [("3", [3]), (" 2 ", [2]), ("+1", [1]), ("03", [3]), (4, [4]), ("99", [])])
def test_id_is_exact_match(fleet, raw, expected) -> None:
    assert ids(filter_records(fleet, FilterCriteria(id=raw))) == expected


def test_make_is_case_insensitive_substring(fleet) -> None:
    assert ids(filter_records(fleet, FilterCriteria(make="BMW"))) == [2, 3]
    assert ids(filter_records(fleet, FilterCriteria(make="vw"))) == [1]
    assert ids(filter_records(fleet, FilterCriteria(make="pe"))) == [4]


def test_model_substring(fleet) -> None:
    assert ids(filter_records(fleet, FilterCriteria(model="x"))) == [2]


def test_missing_color_is_treated_as_empty(fleet) -> None:
    assert ids(filter_records(fleet, FilterCriteria(color="BLAU"))) == [1, 4]
    # vehicle 2 has no color and cannot contain any non-empty needle
    assert 2 not in ids(filter_records(fleet, FilterCriteria(color="a")))


def test_status_exact_match(fleet) -> None:
    assert ids(filter_records(fleet, FilterCriteria(status="Verkauft"))) == [2]
    assert ids(filter_records(fleet, FilterCriteria(status=VehicleStatus.RESERVED))) == [3]
    assert filter_records(fleet, FilterCriteria(status="verkauft")) == ()
    assert filter_records(fleet, FilterCriteria(status="Sold")) == ()


def test_matchers_are_combined_with_and(fleet) -> None:
    criteria = FilterCriteria(make="bmw", status="Reserviert", color="schw")
    assert ids(filter_records(fleet, criteria)) == [3]
    assert filter_records(fleet, FilterCriteria(make="bmw", id="1")) == ()


def test_filtering_is_idempotent(fleet) -> None:
    criteria = FilterCriteria(make="b")
    once = filter_records(fleet, criteria)
    twice = filter_records(once, criteria)
    assert once == twice


def test_scenario_status_filter(scenario_vehicles) -> None:
    view = filter_records(scenario_vehicles, FilterCriteria(status="Verfügbar"))
    assert ids(view) == [1]


def test_engine_load_resets_view_and_does_not_reapply(fleet) -> None:
    engine = FilterEngine()
    engine.load(fleet)
    assert engine.view == tuple(fleet)

    engine.filter(FilterCriteria(make="bmw"))
    assert ids(engine.view) == [2, 3]

    engine.load(fleet[:2])
    assert ids(engine.view) == [1, 2]
    assert ids(engine.records) == [1, 2]


def test_engine_reset_restores_source_order(fleet) -> None:
    engine = FilterEngine()
    engine.load(fleet)
    engine.filter(FilterCriteria(status="Verkauft"))
    assert ids(engine.reset()) == [1, 2, 3, 4]


def test_engine_view_is_subset_of_collection(fleet) -> None:
    engine = FilterEngine()
    engine.load(fleet)
    view = engine.filter(FilterCriteria(color="blau"))
    assert set(ids(view)) <= set(ids(engine.records))


def test_engine_does_not_mutate_source(fleet) -> None:
    snapshot = list(fleet)
    engine = FilterEngine()
    engine.load(fleet)
    engine.filter(FilterCriteria(id="2"))
    assert fleet == snapshot


def test_engine_on_empty_collection() -> None:
    engine = FilterEngine()
    assert engine.filter(FilterCriteria(make="vw")) == ()
    assert engine.reset() == ()
