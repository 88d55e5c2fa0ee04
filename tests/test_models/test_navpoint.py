import pytest

from skynet.models.navpoint import NavPoint, great_circle_distance_km, EARTH_RADIUS_KM


def test_earth_radius_constant():
    assert EARTH_RADIUS_KM == 6371.0
    assert NavPoint.EARTH_RADIUS_KM == 6371.0


def test_known_distances():
    """Distances between well known airports."""
    jfk_lax = great_circle_distance_km(40.6413, -73.7781, 33.9416, -118.4085)
    assert abs(jfk_lax - 3983.86) < 50.0, f"JFK to LAX distance {jfk_lax:.2f}"

    lhr_cdg = great_circle_distance_km(51.47, -0.4543, 49.0097, 2.5479)
    assert abs(lhr_cdg - 343.81) < 10.0, f"LHR to CDG distance {lhr_cdg:.2f}"


def test_same_point_is_zero():
    for lat, lon in [(0.0, 0.0), (51.47, -0.4543), (-33.9, 151.2), (90.0, 0.0)]:
        assert great_circle_distance_km(lat, lon, lat, lon) == 0.0


def test_distance_is_symmetric():
    pairs = [
        ((40.6413, -73.7781), (25.2532, 55.3657)),
        ((-33.9461, 151.1772), (1.3644, 103.9915)),
        ((64.13, -21.94), (-54.84, -68.3)),
    ]
    for (lat1, lon1), (lat2, lon2) in pairs:
        forward = great_circle_distance_km(lat1, lon1, lat2, lon2)
        backward = great_circle_distance_km(lat2, lon2, lat1, lon1)
        assert forward == pytest.approx(backward)


def test_antipodal_points():
    """Half the circumference for points on opposite sides of the earth."""
    distance = great_circle_distance_km(0.0, 0.0, 0.0, 180.0)
    assert distance == pytest.approx(3.141592653589793 * 6371.0, rel=1e-9)


def test_no_range_check_on_plain_function():
    """Out of range inputs still produce a number."""
    assert great_circle_distance_km(100.0, 0.0, 0.0, 0.0) >= 0.0


def test_navpoint_validation():
    with pytest.raises(ValueError):
        NavPoint(91.0, 0.0)
    with pytest.raises(ValueError):
        NavPoint(0.0, -181.0)
    assert NavPoint(-90.0, 180.0).latitude == -90.0


def test_navpoint_rejects_nan_coordinates():
    with pytest.raises(ValueError):
        NavPoint(float('nan'), 0.0)
    with pytest.raises(ValueError):
        NavPoint(0.0, float('nan'))
