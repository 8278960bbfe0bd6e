"""HomeKit accessory categories"""
from __future__ import annotations

UNKNOWN_CATEGORY = "Unknown"

# Category ID -> display name (25 is not assigned)
CATEGORY_REFERENCE: dict[int, str] = {
    1: "Other",
    2: "Bridge",
    3: "Fan",
    4: "Garage Door Opener",
    5: "Light",
    6: "Lock",
    7: "Outlet",
    8: "Switch",
    9: "Thermostat",
    10: "Sensor",
    11: "Security system",
    12: "Door",
    13: "Window",
    14: "Window covering",
    15: "Programmable switch",
    16: "Range extender",
    17: "IP camera",
    18: "Video doorbell",
    19: "Air purifier",
    20: "Heater",
    21: "Air conditioner",
    22: "Humidifier",
    23: "Dehumidifier",
    24: "Apple TV",
    26: "Speaker",
    27: "Airport",
    28: "Sprinkler",
    29: "Faucet",
    30: "Shower head",
    31: "Television",
    32: "Target remote",
}


def is_known_category(category: int) -> bool:
    return category in CATEGORY_REFERENCE


def category_name(category: int) -> str:
    """Display name for a category, or "Unknown" """
    return CATEGORY_REFERENCE.get(category, UNKNOWN_CATEGORY)


def list_categories() -> list[tuple[int, str]]:
    """All categories as (id, name) pairs sorted by ID"""
    return sorted(CATEGORY_REFERENCE.items())
