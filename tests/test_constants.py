import math

import pytest

from kundali_api.services.constants import (
    degree_in_sign,
    normalize_deg,
    round_in_sign,
    sign_name,
    sign_of,
)
from kundali_api.services.errors import InvalidInstantError
from kundali_api.services.sidereal import ayanamsa, sidereal_longitude


def test_normalize_handles_negative_and_wraparound():
    assert normalize_deg(-30.0) == 330.0
    assert normalize_deg(720.0) == 0.0
    assert normalize_deg(360.0) == 0.0
    assert normalize_deg(-720.5) == pytest.approx(359.5)
    # float modulo of a tiny negative rounds to 360.0
    assert normalize_deg(-1e-17) == 0.0
    assert normalize_deg(-1e-9) == pytest.approx(360.0 - 1e-9)


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_normalize_rejects_non_finite(bad):
    with pytest.raises(InvalidInstantError):
        normalize_deg(bad)


def test_sign_and_degree_round_trip():
    for i in range(0, 3600):
        lon = i * 0.1
        s = sign_of(lon)
        d = degree_in_sign(lon)
        assert 1 <= s <= 12
        assert 0.0 <= d < 30.0
        assert s * 30 - 30 + d == pytest.approx(lon)


def test_sign_boundaries():
    assert sign_of(0.0) == 1
    assert sign_of(29.9999) == 1
    assert sign_of(30.0) == 2
    assert sign_of(359.999) == 12
    assert sign_name(1) == "Aries"
    assert sign_name(12) == "Pisces"
    assert sign_name(13) == "Aries"


def test_round_in_sign_never_reaches_thirty():
    assert round_in_sign(29.999, 2) == pytest.approx(29.99)
    assert round_in_sign(12.34, 1) == pytest.approx(12.3)


def test_ayanamsa_linear_model():
    assert ayanamsa(2451545.0) == pytest.approx(23.85)
    one_year = ayanamsa(2451545.0 + 365.25) - ayanamsa(2451545.0)
    assert one_year == pytest.approx(50.29 / 3600)


def test_sidereal_longitude_subtracts_ayanamsa():
    assert sidereal_longitude(100.0, 23.85) == pytest.approx(76.15)
    assert sidereal_longitude(10.0, 23.85) == pytest.approx(346.15)
