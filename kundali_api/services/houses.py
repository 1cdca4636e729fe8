from typing import Any, Dict, List


def whole_sign_house(asc_sign: int, planet_sign: int) -> int:
    house = planet_sign - asc_sign + 1
    if house <= 0:
        house += 12
    return house


def assign_houses(planets: List[Dict[str, Any]], asc_sign: int) -> List[Dict[str, Any]]:
    # Each house spans one full sign counted from the ascendant's sign
    for p in planets:
        p["house"] = whole_sign_house(asc_sign, p["sign"])
    return planets
