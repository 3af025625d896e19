#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
velocity_marker_node.py – RViz arrows for a velocity command
Sub: geometry_msgs/Twist (or TwistStamped) @ twist_topic
Pub: visualization_msgs/Marker @ velocity_twist_marker
     ns 'velocity'         -> linear  velocity arrow
     ns 'angular_velocity' -> angular velocity arrow
"""

import math

import rclpy
from rclpy.node import Node
from rclpy.executors import ExternalShutdownException
from geometry_msgs.msg import Twist, TwistStamped
from visualization_msgs.msg import Marker

from .marker_builder import init_marker, vector_to_marker
from .velocity_state import VelocityCommand, VelocityCommandCell

# ------------------------- parameters -------------------------
MARKER_TOPIC      = 'velocity_twist_marker'
DEFAULT_FREQUENCY = 10.0   # Hz
QUEUE_DEPTH       = 1


class VelocityMarkerPublisher(Node):
    def __init__(self, **kwargs):
        super().__init__('velocity_marker', **kwargs)

        # ---------------- parameters ----------------
        self.declare_parameter('base_frame',              'world')
        self.declare_parameter('twist_topic',             'cmd_vel')
        self.declare_parameter('is_stamped',              False)
        self.declare_parameter('velocity_scale',          1.0)
        self.declare_parameter('anglular_velocity_scale', 1.0)
        self.declare_parameter('publish_frequency',       DEFAULT_FREQUENCY)

        self.base_frame  = self.get_parameter('base_frame').value
        twist_topic      = self.get_parameter('twist_topic').value
        self.is_stamped  = bool(self.get_parameter('is_stamped').value)
        self.velocity_scale         = float(self.get_parameter('velocity_scale').value)
        self.angular_velocity_scale = float(self.get_parameter('anglular_velocity_scale').value)
        self.publish_frequency      = float(self.get_parameter('publish_frequency').value)

        if not math.isfinite(self.publish_frequency) or self.publish_frequency <= 0.0:
            self.get_logger().warn(
                f"publish_frequency={self.publish_frequency} is invalid, "
                f"using {DEFAULT_FREQUENCY:.1f} Hz")
            self.publish_frequency = DEFAULT_FREQUENCY

        # ---------------- state ----------------
        self.command = VelocityCommandCell()

        self.vel_marker     = init_marker(Marker(), self.base_frame, 'velocity')
        self.ang_vel_marker = init_marker(Marker(), self.base_frame, 'angular_velocity')

        # ---------------- ROS I/O ----------------
        self.marker_pub = self.create_publisher(Marker, MARKER_TOPIC, QUEUE_DEPTH)
        if self.is_stamped:
            self.sub = self.create_subscription(
                TwistStamped, twist_topic, self.twist_stamped_cb, QUEUE_DEPTH)
        else:
            self.sub = self.create_subscription(
                Twist, twist_topic, self.twist_cb, QUEUE_DEPTH)

        self.timer = self.create_timer(1.0 / self.publish_frequency, self.publish_markers)

        self.get_logger().info(
            f"VelocityMarkerPublisher started. base_frame='{self.base_frame}', "
            f"twist_topic='{twist_topic}' ({'TwistStamped' if self.is_stamped else 'Twist'}), "
            f"velocity_scale={self.velocity_scale:.3f}, "
            f"angular_velocity_scale={self.angular_velocity_scale:.3f}, "
            f"publish_frequency={self.publish_frequency:.1f} Hz")

    # -------------------------------------------------- callbacks
    def twist_cb(self, msg: Twist):
        cmd = VelocityCommand.from_twist(msg)
        self.command.set(cmd)
        self.get_logger().debug(f"cmd: {cmd}")

    def twist_stamped_cb(self, msg: TwistStamped):
        cmd = VelocityCommand.from_twist(msg.twist)
        self.command.set(cmd)
        self.get_logger().debug(f"cmd (stamped): {cmd}")

    # -------------------------------------------------- timer
    def publish_markers(self):
        cmd   = self.command.get()
        stamp = self.get_clock().now().to_msg()

        vector_to_marker(self.vel_marker, cmd.linear, self.velocity_scale, stamp)
        self.marker_pub.publish(self.vel_marker)

        vector_to_marker(self.ang_vel_marker, cmd.angular, self.angular_velocity_scale, stamp)
        self.marker_pub.publish(self.ang_vel_marker)


def main(args=None):
    rclpy.init(args=args)
    node = VelocityMarkerPublisher()
    try:
        rclpy.spin(node)
    except (KeyboardInterrupt, ExternalShutdownException):
        pass
    finally:
        node.destroy_node()
        rclpy.try_shutdown()


if __name__ == '__main__':
    main()
