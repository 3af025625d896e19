from types import SimpleNamespace

import pytest


def _xyz(x=0.0, y=0.0, z=0.0):
    return SimpleNamespace(x=x, y=y, z=z)


def make_marker():
    """Minimal stand-in with the visualization_msgs/Marker fields we touch."""
    return SimpleNamespace(
        ARROW=0, ADD=0,
        header=SimpleNamespace(frame_id='', stamp=None),
        ns='', id=-1, type=-1, action=-1,
        pose=SimpleNamespace(position=_xyz(9.0, 9.0, 9.0),
                             orientation=SimpleNamespace(x=0.5, y=0.5, z=0.5, w=0.5)),
        scale=_xyz(),
        color=SimpleNamespace(r=0.0, g=0.0, b=0.0, a=0.0),
        lifetime=SimpleNamespace(sec=3, nanosec=7),
    )


def make_twist(linear=(0.0, 0.0, 0.0), angular=(0.0, 0.0, 0.0)):
    return SimpleNamespace(linear=_xyz(*linear), angular=_xyz(*angular))


@pytest.fixture
def marker():
    return make_marker()


@pytest.fixture(name="make_twist")
def make_twist_fixture():
    return make_twist
