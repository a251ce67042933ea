import pytest

from fearless.missions import (
    Mission,
    Project,
    flight,
    main,
    prefix_by_clock,
    project_flights,
    total_flights,
)


def test_project_names():
    assert [str(p) for p in Project] == ["Apollo", "Gemini", "Mercury"]
    assert str(flight().project) == "Apollo"
    assert Mission(Project.MERCURY, 7, 1).describe() == "Mercury 7 flew for 1 days"


def test_total_flights():
    assert total_flights(project_flights()) == 11


def test_total_flights_overflow():
    with pytest.raises(OverflowError):
        total_flights([(1, 200), (2, 100)])


def test_flight_is_apollo_8():
    mission = flight()
    assert mission.project is Project.APOLLO
    assert mission.number == 8
    assert mission.duration_days == 6


def test_describe_after_mutation():
    mission = Mission(Project.GEMINI, 2, 0)
    mission.number = 12
    mission.duration_days = 3
    assert mission.describe() == "Gemini 12 flew for 3 days"


def test_duration_can_be_reset():
    mission = Mission(Project.MERCURY, 7, 255)
    mission.duration_days = 0
    assert mission.duration_days == 0


@pytest.mark.parametrize("field", ["number", "duration_days"])
def test_out_of_range_rejected(field):
    mission = Mission(Project.APOLLO, 17, 12)
    with pytest.raises(ValueError):
        setattr(mission, field, 256)
    with pytest.raises(ValueError):
        Mission(Project.APOLLO, -1, 0)


@pytest.mark.parametrize("seconds", [0, 3, 17, 1_700_000_123])
def test_prefix_by_clock_is_short_prefix(seconds):
    values = [0, 1, 2, 3, 4, 5, 7, 8, 9, 10]
    result = prefix_by_clock(values, seconds)
    assert result == values[: len(result)]
    assert len(result) < len(values)


def test_prefix_by_clock_multiple_of_length_is_empty():
    assert prefix_by_clock([1, 2, 3], 30) == []


def test_prefix_by_clock_empty_values():
    with pytest.raises(ValueError):
        prefix_by_clock([], 5)


def test_main_split_array(capsys):
    main(["split-array"])
    assert capsys.readouterr().out == "Gemini 2 flew for 0 days\n"