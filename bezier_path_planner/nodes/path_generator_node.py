#!/usr/bin/env python3
import rclpy
from rclpy.node import Node
from rclpy.qos import QoSProfile, DurabilityPolicy, HistoryPolicy, ReliabilityPolicy
from std_msgs.msg import Float32MultiArray
from nav_msgs.msg import Path as PathMsg
from geometry_msgs.msg import PoseStamped

from bezier_path_planner.utils.path import PathConfig
from bezier_path_planner.utils.path_io import (
    DEFAULT_SPLINE_ROWS,
    build_path,
    flatten_trajectory,
    generate_for_resolution,
    load_splines_from_csv,
    splines_from_rows,
)
from bezier_path_planner.utils.time_parameterization import make_velocity_trajectory


class PathGeneratorNode(Node):
    """
    Builds a velocity-annotated trajectory from a chain of cubic Bezier splines
    and publishes it once (latched):
      - nav_msgs/Path on 'smoothed_path' (for RViz)
      - Float32MultiArray on 'trajectory' as [x, y, v, t, x, y, v, t, ...]
    """
    def __init__(self):
        super().__init__('path_generator_node')

        # params
        self.declare_parameter('tolerance', 50)               # samples per spline
        self.declare_parameter('spacing', 0)                  # output points; 0 -> from inches_per_point
        self.declare_parameter('inches_per_point', 2.0)       # target gap between output points
        self.declare_parameter('max_speed', 60.0)             # velocity ceiling
        self.declare_parameter('curvature_multiplier', 50.0)  # forward-pass speed scale (slider units)
        self.declare_parameter('decel', 20.0)                 # backward-pass deceleration
        self.declare_parameter('splines_file', '')            # optional CSV, 8 values per row
        self.declare_parameter('frame_id', 'odom')
        self.declare_parameter('latched_qos', True)           # publish transient_local

        p = self.get_parameter
        self.tolerance = int(p('tolerance').value)
        self.spacing = int(p('spacing').value)
        self.inches_per_point = float(p('inches_per_point').value)
        self.max_speed = float(p('max_speed').value)
        self.curvature_multiplier = float(p('curvature_multiplier').value)
        self.decel = float(p('decel').value)
        self.splines_file = p('splines_file').value
        self.frame_id = str(p('frame_id').value)
        self.latched_qos = bool(p('latched_qos').value)

        qos = QoSProfile(
            depth=1,
            durability=DurabilityPolicy.TRANSIENT_LOCAL if self.latched_qos else DurabilityPolicy.VOLATILE,
            history=HistoryPolicy.KEEP_LAST,
            reliability=ReliabilityPolicy.RELIABLE
        )
        self.path_pub = self.create_publisher(PathMsg, 'smoothed_path', qos)
        self.traj_pub = self.create_publisher(Float32MultiArray, 'trajectory', qos)

        self._published = False
        self._timer = self.create_timer(0.5, self._publish_once)

        self.get_logger().info("Path Generator Node started.")

    def _get_splines(self):
        # priority: CSV -> default
        if self.splines_file:
            try:
                return load_splines_from_csv(self.splines_file)
            except (OSError, ValueError) as e:
                self.get_logger().warn(f"Failed to load splines from CSV '{self.splines_file}': {e}; "
                                       "falling back to default splines.")
        return splines_from_rows(DEFAULT_SPLINE_ROWS)

    def _build(self):
        # curvature_multiplier is per spline, scaled by sampling density like the UI slider
        config = PathConfig.from_sliders(self.max_speed, self.curvature_multiplier, self.tolerance, self.decel)
        path = build_path(self._get_splines(), config)
        generate_for_resolution(path, self.tolerance, self.spacing, self.inches_per_point)
        return path

    def _make_path_msg(self, points):
        path_msg = PathMsg()
        path_msg.header.frame_id = self.frame_id
        path_msg.header.stamp = self.get_clock().now().to_msg()
        for pt in points:
            pose = PoseStamped()
            pose.header = path_msg.header
            pose.pose.position.x = float(pt.x)
            pose.pose.position.y = float(pt.y)
            pose.pose.position.z = 0.0
            pose.pose.orientation.w = 1.0
            path_msg.poses.append(pose)
        return path_msg

    def _publish_once(self):
        if self._published:
            return
        self._published = True
        self._timer.cancel()

        try:
            path = self._build()
        except ValueError as e:
            self.get_logger().error(f"Cannot build path: {e}")
            return

        traj = make_velocity_trajectory(path.points2)
        msg = Float32MultiArray()
        msg.data = flatten_trajectory(traj)
        self.traj_pub.publish(msg)
        self.path_pub.publish(self._make_path_msg(path.points2))

        self.get_logger().info(f"Published trajectory: {len(traj)} points from {len(path.splines)} splines "
                               f"({len(path.points)} raw samples), length={path.length:.3f}")
        s = traj[0]
        e = traj[-1]
        self.get_logger().info(f"Path start: ({s[0]:.3f}, {s[1]:.3f}), end: ({e[0]:.3f}, {e[1]:.3f}), "
                               f"total_time={e[3]:.3f}s")

    def destroy_node(self):
        self._timer.cancel()
        super().destroy_node()


def main(args=None):
    rclpy.init(args=args)
    node = PathGeneratorNode()
    try:
        rclpy.spin(node)
    except KeyboardInterrupt:
        pass
    node.destroy_node()
    rclpy.shutdown()


if __name__ == '__main__':
    main()
