import math

import pytest

from core.types import BuildConfig


def stripe_position(theta_deg, z, phase, color_height):
    """
    Position of (theta, z) inside the helix pattern of one colour, in [0, 2).
    Values in [0, 1] belong to the stripe of that phase, (1, 2) to the other.
    """
    u = z / color_height - (theta_deg - phase) / 180.0 + 1.0
    return u % 2.0


def expected_inside(theta_deg, z, phase, color_height, margin=0.2):
    """
    True/False for points clearly inside/outside the stripe, None near a
    colour boundary where discretisation decides.
    """
    u = stripe_position(theta_deg, z, phase, color_height)
    if min(abs(u), abs(u - 1.0), abs(u - 2.0)) < margin:
        return None
    return u < 1.0


def polar_point(radius, theta_deg, z):
    a = math.radians(theta_deg)
    return (radius * math.cos(a), radius * math.sin(a), z)


@pytest.fixture
def coarse_config():
    return BuildConfig(step_inc=0.1, curved_facets=24)


@pytest.fixture
def stripe():
    return expected_inside


@pytest.fixture
def polar():
    return polar_point
