from charger_map.services.metrics_service import enrich_station
from charger_map.services.ranking_service import filter_by_power, rank_stations


def _abc(make_station):
    a = enrich_station(make_station(1, kilowatts=[50]))
    b = enrich_station(make_station(2, kilowatts=[5]))
    c = enrich_station(make_station(3, kilowatts=[80]))
    distances = {1: 10.0, 2: 1.0, 3: 100.0}
    return [a, b, c], distances


def test_filters_by_power_then_sorts_by_distance(make_station):
    stations, distances = _abc(make_station)

    ranked = rank_stations(stations, 10, distances)

    assert [s.id for s in ranked] == [1, 3]


def test_zero_threshold_admits_all(make_station):
    stations, distances = _abc(make_station)

    ranked = rank_stations(stations, 0, distances)

    assert [s.id for s in ranked] == [2, 1, 3]


def test_threshold_is_inclusive(make_station):
    stations, distances = _abc(make_station)

    ranked = rank_stations(stations, 50, distances)

    assert [s.id for s in ranked] == [1, 3]


def test_threshold_above_all_stations_gives_empty_list(make_station):
    stations, distances = _abc(make_station)
    assert rank_stations(stations, 500, distances) == []


def test_station_missing_from_distances_counts_as_zero(make_station):
    stations, distances = _abc(make_station)
    del distances[3]

    ranked = rank_stations(stations, 0, distances)

    assert ranked[0].id == 3


def test_equal_distances_keep_input_order(make_station):
    stations = [enrich_station(make_station(i, kilowatts=[50])) for i in (4, 2, 9)]
    distances = {4: 5.0, 2: 5.0, 9: 5.0}

    ranked = rank_stations(stations, 0, distances)

    assert [s.id for s in ranked] == [4, 2, 9]


def test_returns_new_list_each_time(make_station):
    stations, distances = _abc(make_station)

    first = rank_stations(stations, 0, distances)
    second = rank_stations(stations, 0, distances)

    assert first == second
    assert first is not second
    assert first is not stations


def test_filter_does_not_touch_input(make_station):
    stations, _ = _abc(make_station)

    filtered = filter_by_power(stations, 10)

    assert len(stations) == 3
    assert [s.id for s in filtered] == [1, 3]
