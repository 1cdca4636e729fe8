from typing import Dict

from .constants import sign_name

ELEMENT = {
  "Aries":"Fire","Leo":"Fire","Sagittarius":"Fire",
  "Taurus":"Earth","Virgo":"Earth","Capricorn":"Earth",
  "Gemini":"Air","Libra":"Air","Aquarius":"Air",
  "Cancer":"Water","Scorpio":"Water","Pisces":"Water",
}
MODALITY = {
  "Aries":"Cardinal","Cancer":"Cardinal","Libra":"Cardinal","Capricorn":"Cardinal",
  "Taurus":"Fixed","Leo":"Fixed","Scorpio":"Fixed","Aquarius":"Fixed",
  "Gemini":"Mutable","Virgo":"Mutable","Sagittarius":"Mutable","Pisces":"Mutable",
}
LUCKY_GEM = "Ruby"
LUCKY_COLOR = "Red"

# Fixed placeholder until pattern matching exists
YOGAS = ("Vipreet Raj Yoga",)


def bio(asc_sign: int) -> Dict[str, str]:
    s = sign_name(asc_sign)
    return {
        "element": ELEMENT[s],
        "quality": MODALITY[s],
        "lucky_gem": LUCKY_GEM,
        "lucky_color": LUCKY_COLOR,
    }


def strength(lon_sid: float) -> float:
    # placeholder shadbala
    return round(50 + (lon_sid % 20), 2)
