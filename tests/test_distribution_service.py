from charger_map.services.distribution_service import (
    DEFAULT_MAX_POWER_KW,
    build_power_distribution,
    calculate_max_power,
    segment_size,
)
from charger_map.services.metrics_service import enrich_station


def _stations(make_station, *powers):
    return [enrich_station(make_station(i, kilowatts=[kw])) for i, kw in enumerate(powers, 1)]


def test_empty_collection_gives_all_zero_distribution():
    assert build_power_distribution([]) == [0, 0, 0, 0, 0]


def test_empty_collection_uses_default_max_power():
    assert calculate_max_power([]) == DEFAULT_MAX_POWER_KW == 300
    assert segment_size(calculate_max_power([])) == 60


def test_max_power_adds_margin_and_rounds_up_to_ten(make_station):
    assert calculate_max_power(_stations(make_station, 142)) == 170
    assert calculate_max_power(_stations(make_station, 25, 10)) == 50
    assert calculate_max_power(_stations(make_station, 30)) == 50
    assert calculate_max_power(_stations(make_station, 0)) == 20


def test_single_station_on_default_scale_lands_in_first_bucket(make_station):
    stations = _stations(make_station, 25)
    assert build_power_distribution(stations, DEFAULT_MAX_POWER_KW) == [1, 0, 0, 0, 0]


def test_single_station_on_dynamic_scale(make_station):
    # max 50 kW, 10 kW segments
    stations = _stations(make_station, 25)
    assert build_power_distribution(stations) == [0, 0, 1, 0, 0]


def test_stations_spread_over_segments(make_station):
    # max 170 kW, 34 kW segments
    stations = _stations(make_station, 142, 48.5, 0, 13.8, 96)
    assert build_power_distribution(stations) == [2, 1, 1, 0, 1]


def test_value_at_top_of_scale_goes_to_last_bucket(make_station):
    stations = _stations(make_station, 300)
    assert build_power_distribution(stations, 300) == [0, 0, 0, 0, 1]


def test_counts_sum_to_station_count(make_station):
    stations = _stations(make_station, 5, 50, 75, 120, 250, 250, 11)
    distribution = build_power_distribution(stations)

    assert sum(distribution) == len(stations)
    assert all(count >= 0 for count in distribution)
