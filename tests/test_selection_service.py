from charger_map.services.metrics_service import enrich_station
from charger_map.services.selection_service import StationSelection


def test_nothing_selected_by_default(make_station):
    selection = StationSelection()

    assert selection.station_id is None
    assert selection.resolve([enrich_station(make_station(1))]) is None


def test_resolves_selected_station(make_station):
    stations = [enrich_station(make_station(i)) for i in (1, 2, 3)]
    selection = StationSelection()

    selection.select(2)

    assert selection.resolve(stations) is stations[1]


def test_unknown_id_resolves_to_none(make_station):
    stations = [enrich_station(make_station(i)) for i in (1, 2)]
    selection = StationSelection()

    selection.select(99)

    assert selection.station_id == 99
    assert selection.resolve(stations) is None


def test_clear_resets_selection(make_station):
    stations = [enrich_station(make_station(1))]
    selection = StationSelection()
    selection.select(1)

    selection.clear()

    assert selection.station_id is None
    assert selection.resolve(stations) is None
