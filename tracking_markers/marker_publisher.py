#!/usr/bin/env python3
import rclpy
from rclpy.node import Node
from geometry_msgs.msg import Point
from std_msgs.msg import Float64, Float64MultiArray
from visualization_msgs.msg import Marker, MarkerArray

from tracking_markers.config import DEFAULT_CONFIG
from tracking_markers.curve_sampler import sample_curve
from tracking_markers.guide_state import GuideState, resolve_startup
from tracking_markers.scene import MarkerShape, SceneComposer

_MARKER_TYPES = {
    MarkerShape.SPHERE: Marker.SPHERE,
    MarkerShape.LINE_STRIP: Marker.LINE_STRIP,
    MarkerShape.TEXT_VIEW_FACING: Marker.TEXT_VIEW_FACING,
}


def to_marker(spec, stamp, ns=DEFAULT_CONFIG.namespace):
    marker = Marker()
    marker.header.frame_id = spec.frame_id
    marker.header.stamp = stamp
    marker.ns = ns
    marker.id = spec.marker_id
    marker.type = _MARKER_TYPES[spec.shape]
    marker.action = Marker.ADD

    marker.scale.x = float(spec.scale[0])
    marker.scale.y = float(spec.scale[1])
    marker.scale.z = float(spec.scale[2])

    marker.color.r = float(spec.color[0])
    marker.color.g = float(spec.color[1])
    marker.color.b = float(spec.color[2])
    marker.color.a = float(spec.color[3])

    marker.pose.position.x = float(spec.position[0])
    marker.pose.position.y = float(spec.position[1])
    marker.pose.position.z = float(spec.position[2])
    marker.pose.orientation.w = 1.0

    if spec.points is not None:
        marker.points = [Point(x=float(p[0]), y=float(p[1]), z=float(p[2])) for p in spec.points]
    if spec.text:
        marker.text = spec.text

    return marker


def to_marker_array(snapshot, stamp, ns=DEFAULT_CONFIG.namespace):
    marker_array = MarkerArray()
    marker_array.markers = [to_marker(spec, stamp, ns) for spec in snapshot.markers]
    return marker_array


class MarkerPublisher(Node):
    param_names = ["use_depth", "part_id", "alpha_id", "traj_id"]

    def __init__(self, config=DEFAULT_CONFIG, **kwargs):
        super().__init__('marker_publisher', **kwargs)
        self.config = config

        # --- Startup parameters ---
        for name in self.param_names:
            self.declare_parameter(name, 0)
        values = [self.get_parameter(name).value for name in self.param_names]
        self.params = resolve_startup(*values)
        self.print_params()

        if not self.params.known_trajectory:
            self.get_logger().warn(
                f"Unknown trajectory id {self.params.traj_id}, expected 0..5. Using a flat trajectory.")

        # --- Static reference curve ---
        trajectory = sample_curve(
            self.params.curve_spec,
            config.origin,
            config.max_points,
            config.traj_height,
            config.traj_width,
            config.traj_depth,
        )
        self.composer = SceneComposer(
            trajectory,
            origin=config.origin,
            bar_center=config.bar_center,
            base_frame=config.base_frame,
            tcp_frame=config.tcp_frame,
        )
        self.state = GuideState(max_smoothing_time=config.max_smoothing_time)

        # --- Publisher + timer (50 Hz) ---
        self.marker_pub = self.create_publisher(MarkerArray, config.marker_topic, config.qos_depth)
        self.marker_timer = self.create_timer(config.timer_period, self.marker_callback)

        # --- Subscribers ---
        self.ref_sub = self.create_subscription(
            Float64MultiArray,
            config.position_topic,
            self.ref_callback,
            config.qos_depth
        )
        self.count_sub = self.create_subscription(
            Float64,
            config.countdown_topic,
            self.count_callback,
            config.qos_depth
        )

        self.get_logger().info(f"Marker Publisher Started ({config.max_points + 1} trajectory points)")

    def marker_callback(self):
        reading = self.state.read()
        snapshot = self.composer.compose(reading.reference, reading.countdown)
        stamp = self.get_clock().now().to_msg()
        self.marker_pub.publish(to_marker_array(snapshot, stamp, self.config.namespace))

    def ref_callback(self, msg: Float64MultiArray):
        if len(msg.data) != 3:
            self.get_logger().error(
                f"Received {len(msg.data)} values on '{self.config.position_topic}', expected 3.")
            return

        x, y, z = msg.data
        self.state.update_reference(x, y, z)

    def count_callback(self, msg: Float64):
        self.state.update_elapsed(msg.data)

    def print_params(self):
        p = self.params
        self.get_logger().info(
            "The current parameters [marker_publisher] are as follows:\n"
            f"  Use depth parameter = {p.use_depth}\n"
            f"  Participant ID = {p.part_id}\n"
            f"  Alpha ID = {p.alpha_id}\n"
            f"  Trajectory ID = {p.traj_id}"
        )


def main(args=None):
    rclpy.init(args=args)
    node = MarkerPublisher()

    try:
        rclpy.spin(node)
    except KeyboardInterrupt:
        pass
    node.destroy_node()
    rclpy.shutdown()


if __name__ == '__main__':
    main()
