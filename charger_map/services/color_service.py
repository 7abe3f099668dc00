"""Placemark colors derived from provider names."""


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _utf16_code_units(text: str):
    data = text.encode("utf-16-le")
    for i in range(0, len(data), 2):
        yield int.from_bytes(data[i:i + 2], "little")


def string_to_color(text: str) -> str:
    """
    Deterministic hex color for a string.

    Uses the classic `hash * 31 + char` rolling hash over UTF-16 code units
    with 32-bit shift semantics, so colors match the ones the map front end
    computes for the same provider.
    """
    hash_value = 0
    for code in _utf16_code_units(text):
        hash_value = code + (_to_int32(_to_int32(hash_value) << 5) - hash_value)

    hash_value = _to_int32(hash_value)
    color = "#"
    for i in range(3):
        color += f"{(hash_value >> (i * 8)) & 0xFF:02x}"
    return color


def get_placemark_color(provider: str) -> str:
    """Marker color for a station provider, ignoring case and padding."""
    return string_to_color(provider.lower().strip())
