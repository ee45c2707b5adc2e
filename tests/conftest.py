"""Shared test fixtures for geomath tests."""
import pytest
from geomath.geospatial import GeoPoint
from geomath.types import Point, Line

# Winchester to Guildford along the M3/A31, (lat, lon)
_ROUTE = [
    (51.06707497, -1.32007599), (51.09430508, -1.31192207), (51.10206677, -1.30926132),
    (51.11133597, -1.30376816), (51.12981493, -1.29261017), (51.15906713, -1.27510071),
    (51.16440941, -1.27057314), (51.16897072, -1.26606703), (51.17439257, -1.26235485),
    (51.17875111, -1.26089573), (51.1833917, -1.26044512), (51.19727033, -1.25793457),
    (51.20141159, -1.25669003), (51.20630532, -1.25347137), (51.21110444, -1.24845028),
    (51.22457158, -1.23325825), (51.22821321, -1.2274003), (51.23103494, -1.22038364),
    (51.23596583, -1.20326042), (51.24346193, -1.1776185), (51.24968088, -1.16356373),
    (51.26363353, -1.13167763), (51.2659966, -1.12247229), (51.26682901, -1.11629248),
    (51.26728549, -1.10906124), (51.26823871, -1.09052181), (51.26885628, -1.08522177),
    (51.27070895, -1.07013702), (51.27350122, -1.03683472), (51.27572955, -1.00917578),
    (51.2779175, -0.98243952), (51.28095094, -0.9509182), (51.28305811, -0.9267354),
    (51.28511151, -0.90499878), (51.2883055, -0.86051702), (51.29023789, -0.83661318),
    (51.29708113, -0.7534647), (51.29795323, -0.74908733), (51.2988924, -0.7400322),
    (51.30125366, -0.71535587), (51.29863749, -0.68475723), (51.30220618, -0.65746307),
    (51.30380261, -0.63246489), (51.30645873, -0.60542822), (51.3103219, -0.58150291),
    (51.31150225, -0.57603121), (51.31317883, -0.57062387), (51.32475227, -0.54195642),
    (51.34771616, -0.4855442), (51.36283147, -0.4553318),
]


@pytest.fixture(scope="session")
def route():
    """Fifty-point road path, about 76.4 km long."""
    return [GeoPoint(lat, lon) for lat, lon in _ROUTE]


@pytest.fixture(scope="session")
def geo_pts():
    """Reference points: two near Winchester, one at Guildford, one in the Gulf of Guinea."""
    return {
        "p1": GeoPoint(51.06707497, -1.32007599),
        "p2": GeoPoint(51.09430508, -1.31192207),
        "p3": GeoPoint(51.36283147, -0.4553318),
        "p4": GeoPoint(-1, 1),
    }


@pytest.fixture(scope="session")
def cross_lines():
    """A vertical line x=100 and a horizontal line y=50."""
    return (
        Line(Point(100, 0), Point(100, 100)),
        Line(Point(50, 50), Point(150, 50)),
    )
