"""
Shared fixtures: a small rectangular member and a default layout plan.
"""
import pytest

from trusslayout.models import Member, Point2D, Placement, Truss, LayoutParams
from trusslayout.services.layout_service import LayoutService


@pytest.fixture
def block_member():
    """4 x 2 rectangle, 1.5 thick."""
    return Member(
        name="W1",
        geometry=[
            Point2D(x=0, y=0),
            Point2D(x=4, y=0),
            Point2D(x=4, y=2),
            Point2D(x=0, y=2),
        ],
        thickness=1.5,
    )


@pytest.fixture
def north_placement():
    """Placement line running due north along x = 84, on top of 8' walls."""
    return Placement(
        left_point=Point2D(x=84, y=0),
        right_point=Point2D(x=84, y=288),
        elevation=96,
    )


@pytest.fixture
def common_truss(block_member):
    chord = Member(
        name="T1",
        geometry=[
            Point2D(x=0, y=0),
            Point2D(x=100, y=33),
            Point2D(x=100, y=36.5),
            Point2D(x=0, y=3.5),
        ],
        thickness=1.5,
    )
    return Truss(id="design-1", name="A01", members=[chord, block_member])


@pytest.fixture
def default_plan():
    return LayoutService().generate(LayoutParams())
