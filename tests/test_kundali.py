import json
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from fakes import FakeEphemeris
from kundali_api.app import app
from kundali_api.schemas import BirthInput
from kundali_api.services.dignities import DIGNITIES
from kundali_api.services.errors import InvalidInstantError
from kundali_api.services.orchestrators.kundali_full import PLANET_ORDER, compute_kundali

client = TestClient(app)

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
LONDON = {"date": "2000-01-01", "time": "12:00", "lat": 51.5074, "lon": -0.1278,
          "tz": "Europe/London", "gender": "female", "location": "London, UK"}


def test_london_example_chart():
    chart = compute_kundali(BirthInput(**LONDON), NOW)
    assert 1 <= chart.ascendant <= 12
    names = [p.name for p in chart.planets]
    assert names == list(PLANET_ORDER) + ["Rahu", "Ketu"]
    for p in chart.planets:
        assert 1 <= p.house <= 12
        assert p.house == ((p.sign - chart.ascendant) % 12) + 1
        assert p.dignity in DIGNITIES
        assert 0 <= p.degree < 30
        assert p.retrograde is False
    rahu, ketu = chart.planets[-2], chart.planets[-1]
    assert rahu.strength == ketu.strength == 100
    assert (ketu.longitude - rahu.longitude) % 360 == pytest.approx(180, abs=1e-3)
    assert chart.birth.gender == "female"
    assert chart.yogas == ["Vipreet Raj Yoga"]
    assert [d.name for d in chart.doshas] == ["Mangal Dosha", "Kalsarpa Yoga"]
    assert len(chart.transits) == 7


def test_chart_is_deterministic_for_fixed_now():
    a = compute_kundali(BirthInput(**LONDON), NOW)
    b = compute_kundali(BirthInput(**LONDON), NOW)
    assert a.model_dump_json() == b.model_dump_json()


def test_chart_is_immutable():
    chart = compute_kundali(BirthInput(**LONDON), NOW, include_transits=False)
    assert chart.transits == []
    with pytest.raises(ValidationError):
        chart.ascendant = 5


def test_fake_chart_mangal_dosha_follows_mars_house():
    # RAMC 0 at the equator: Cancer tropical rising, Gemini sidereal
    # Mars at 20 deg sidereal Capricorn -> 8th house from Gemini
    eph = FakeEphemeris(longitudes={"Mars": 23.85 + 290.0}, gst_hours=0.0)
    birth = BirthInput(date="2000-01-01", time="12:00", lat=0.0, lon=0.0)
    chart = compute_kundali(birth, NOW, eph=eph, include_transits=False)
    assert chart.ascendant == 3
    assert chart.ascendant_sign == "Gemini"
    mars = next(p for p in chart.planets if p.name == "Mars")
    assert mars.sign == 10 and mars.house == 8
    assert mars.dignity == "Exalted"
    mangal = chart.doshas[0]
    assert mangal.present is True and mangal.severity == "High" and mangal.remedy
    assert chart.bio.element == "Air" and chart.bio.quality == "Mutable"


def test_invalid_time_is_rejected_before_computation():
    with pytest.raises(InvalidInstantError):
        compute_kundali(BirthInput(**{**LONDON, "time": "25:61"}), NOW)


def test_birth_input_rejects_nan_coordinates():
    with pytest.raises(ValidationError):
        BirthInput(**{**LONDON, "lat": float("nan")})


def test_kundali_endpoint():
    r = client.post("/v1/kundali/compute", json={"birth": LONDON, "now": NOW.isoformat()})
    assert r.status_code == 200, r.text
    j = r.json()
    assert j["chart_id"].startswith("kdl_")
    assert j["meta"]["zodiac"] == "sidereal"
    assert len(j["planets"]) == 9
    assert j["dasha"]["current_mahadasha"]
    assert 0 <= j["dasha"]["progress"] <= 100
    assert j["transits"][0]["name"] == "Sun"


def test_kundali_endpoint_invalid_time():
    r = client.post("/v1/kundali/compute", json={"birth": {**LONDON, "time": "quarter past"}})
    assert r.status_code == 422
    assert "Invalid time" in r.json()["detail"]


def test_health():
    r = client.get("/__health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}


def test_access_log_when_enabled(monkeypatch, capsys):
    monkeypatch.setenv("LOGGING_ENABLED", "true")
    client.get("/__health")
    line = capsys.readouterr().out.strip().splitlines()[-1]
    log = json.loads(line)
    assert log["endpoint"] == "/__health"
    assert log["status"] == 200


def test_chart_id_ignores_time_spelling():
    ids = {
        compute_kundali(BirthInput(**{**LONDON, "time": t}), NOW, include_transits=False).chart_id
        for t in ("12:00", "12:00:00", "12:00 PM")
    }
    assert len(ids) == 1
