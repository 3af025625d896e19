#!/usr/bin/env python3
"""
marker_builder.py – turn a velocity vector into an RViz ARROW marker
Arrow length  = |v| * scale
Arrow heading = rotation taking +X onto v
"""

import math
import numpy as np
from scipy.spatial.transform import Rotation

# ------------------------- parameters -------------------------
REFERENCE_AXIS = np.array([1.0, 0.0, 0.0])   # RViz arrows point along +X
MIN_NORM       = 1e-6                        # below this the arrow is hidden
ARROW_WIDTH    = 0.05                        # shaft / head diameter [m]
PARALLEL_EPS   = 1e-9

DEFAULT_SCALE  = (1.0, 0.1, 0.1)
DEFAULT_COLOR  = (0.6, 0.6, 0.0, 1.0)        # r, g, b, a


def quaternion_from_two_vectors(source, target):
    """Minimal rotation taking `source` onto `target`, as (x, y, z, w)."""
    a = np.asarray(source, dtype=float)
    b = np.asarray(target, dtype=float)
    na, nb = np.linalg.norm(a), np.linalg.norm(b)
    if na < PARALLEL_EPS or nb < PARALLEL_EPS:
        raise ValueError("cannot align zero-length vectors")
    a = a / na
    b = b / nb

    axis = np.cross(a, b)
    s    = np.linalg.norm(axis)
    c    = float(np.dot(a, b))

    if s < PARALLEL_EPS:
        if c > 0.0:
            return np.array([0.0, 0.0, 0.0, 1.0])
        # anti-parallel: any axis perpendicular to a works, pick a fixed one
        axis = np.cross(a, [0.0, 0.0, 1.0])
        if np.linalg.norm(axis) < 1e-3:
            axis = np.cross(a, [0.0, 1.0, 0.0])
        axis = axis / np.linalg.norm(axis)
        return Rotation.from_rotvec(axis * math.pi).as_quat()

    angle = math.atan2(s, c)
    return Rotation.from_rotvec(axis / s * angle).as_quat()


# ------------------------------------------------------------
def init_marker(marker, frame_id: str, ns: str):
    """
    Fill a freshly constructed visualization_msgs/Marker with the arrow
    defaults. Same ns + id on every publish, so RViz replaces the arrow
    instead of piling them up.
    """
    marker.header.frame_id = frame_id
    marker.ns = ns
    marker.id = 0
    marker.type = marker.ARROW
    marker.action = marker.ADD

    marker.pose.position.x = 0.0
    marker.pose.position.y = 0.0
    marker.pose.position.z = 0.0
    marker.pose.orientation.x = 0.0
    marker.pose.orientation.y = 0.0
    marker.pose.orientation.z = 0.0
    marker.pose.orientation.w = 1.0

    marker.scale.x, marker.scale.y, marker.scale.z = DEFAULT_SCALE

    r, g, b, a = DEFAULT_COLOR
    marker.color.r = r
    marker.color.g = g
    marker.color.b = b
    marker.color.a = a

    # zero duration -> never expires
    marker.lifetime.sec = 0
    marker.lifetime.nanosec = 0
    return marker


def vector_to_marker(marker, vector, scale: float, stamp):
    """Set arrow length/heading from `vector`; hide it when the vector is ~0."""
    v    = np.asarray(vector, dtype=float)
    norm = float(np.linalg.norm(v))

    if norm > MIN_NORM:
        marker.scale.x = float(norm * scale)
        marker.scale.y = ARROW_WIDTH
        marker.scale.z = ARROW_WIDTH
        qx, qy, qz, qw = quaternion_from_two_vectors(REFERENCE_AXIS, v)
        marker.pose.orientation.x = float(qx)
        marker.pose.orientation.y = float(qy)
        marker.pose.orientation.z = float(qz)
        marker.pose.orientation.w = float(qw)
    else:
        # keep last heading, only collapse the arrow
        marker.scale.x = 0.0
        marker.scale.y = 0.0
        marker.scale.z = 0.0

    marker.header.stamp = stamp
    return marker
