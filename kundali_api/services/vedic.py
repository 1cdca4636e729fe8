NAKSHATRAS = [
  "Ashwini","Bharani","Krittika","Rohini","Mrigashira","Ardra","Punarvasu","Pushya","Ashlesha",
  "Magha","Purva Phalguni","Uttara Phalguni","Hasta","Chitra","Swati","Vishakha","Anuradha",
  "Jyeshtha","Mula","Purva Ashadha","Uttara Ashadha","Shravana","Dhanishta","Shatabhisha",
  "Purva Bhadrapada","Uttara Bhadrapada","Revati"
]

# Each nakshatra = 13°20′
NAKSHATRA_SPAN = 360.0 / 27
PADA_SPAN = NAKSHATRA_SPAN / 4


def nakshatra_index(lon_sid: float) -> int:
    return int(lon_sid // NAKSHATRA_SPAN) % 27


def nakshatra_fraction(lon_sid: float) -> float:
    """Fraction of the current nakshatra already traversed, 0..1."""
    return (lon_sid % NAKSHATRA_SPAN) / NAKSHATRA_SPAN


def nakshatra_from_lon_sidereal(lon_sid: float) -> dict:
    idx = nakshatra_index(lon_sid)
    pada = min(int((lon_sid % NAKSHATRA_SPAN) // PADA_SPAN), 3) + 1
    return {"index": idx, "name": NAKSHATRAS[idx], "pada": pada}
