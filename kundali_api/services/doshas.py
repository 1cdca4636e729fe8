from typing import Any, Dict, List

MANGAL_HOUSES = (1, 4, 7, 8, 12)


def mangal_dosha(mars_house: int) -> Dict[str, Any]:
    # Houses counted from the lagna only; no Moon/Venus reference or cancellations
    present = mars_house in MANGAL_HOUSES
    if not present:
        return {
            "present": False,
            "name": "Mangal Dosha",
            "severity": "None",
            "description": "No Mangal Dosha present in the chart.",
            "remedy": None,
        }
    return {
        "present": True,
        "name": "Mangal Dosha",
        "severity": "High" if mars_house == 8 else "Medium",
        "description": (
            f"Mars is positioned in the {mars_house}th house, creating Mangal Dosha "
            "which may impact relationships and energy levels."
        ),
        "remedy": "Perform Kumbh Vivah or recite Hanuman Chalisa regularly.",
    }


def kalsarpa_dosha(planets: List[Dict[str, Any]]) -> Dict[str, Any]:
    # TODO: arc test (every body other than the nodes on one side of the Rahu-Ketu axis);
    # pick the strict or Jupiter-exception convention before enabling it.
    return {
        "present": False,
        "name": "Kalsarpa Yoga",
        "severity": "None",
        "description": "Planets are not hemmed between Rahu and Ketu.",
        "remedy": None,
    }


def analyze_doshas(planets: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    mars = next(p for p in planets if p["name"] == "Mars")
    return [mangal_dosha(mars["house"]), kalsarpa_dosha(planets)]
