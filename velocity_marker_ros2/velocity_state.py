#!/usr/bin/env python3
import threading
from collections import namedtuple

ZERO = (0.0, 0.0, 0.0)


class VelocityCommand(namedtuple('VelocityCommand', ['linear', 'angular'])):
    """Snapshot of one Twist: two (x, y, z) float tuples."""
    __slots__ = ()

    @classmethod
    def from_twist(cls, twist):
        l, a = twist.linear, twist.angular
        return cls((float(l.x), float(l.y), float(l.z)),
                   (float(a.x), float(a.y), float(a.z)))


class VelocityCommandCell(object):
    """
    Latest velocity command shared between the subscription callback and the
    publish timer. Last write wins; readers always get a complete command.
    """

    def __init__(self, command=None):
        self._lock = threading.Lock()
        self._command = command if command is not None else VelocityCommand(ZERO, ZERO)

    def set(self, command: VelocityCommand):
        with self._lock:
            self._command = command

    def get(self) -> VelocityCommand:
        with self._lock:
            return self._command
