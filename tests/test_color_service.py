import re

from charger_map.services.color_service import get_placemark_color, string_to_color


def test_empty_string_is_black():
    assert string_to_color("") == "#000000"


def test_known_values():
    assert string_to_color("a") == "#610000"
    assert string_to_color("ab") == "#210c00"


def test_long_strings_stay_valid_hex():
    for text in ("tesla", "moscow energy", "Россети", "x" * 200):
        assert re.fullmatch(r"#[0-9a-f]{6}", string_to_color(text))


def test_color_is_deterministic():
    assert string_to_color("lenenergo") == string_to_color("lenenergo")


def test_placemark_color_ignores_case_and_padding():
    assert get_placemark_color("  Tesla ") == string_to_color("tesla")
    assert get_placemark_color("TESLA") == get_placemark_color("tesla")
