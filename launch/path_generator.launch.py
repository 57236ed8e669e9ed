#!/usr/bin/env python3
"""
Dev-friendly launch that runs the path generator node script directly (no need for installed entrypoints).

Arguments (forwarded as ROS parameters):
  splines_file  - CSV of chained splines, 8 values per row ('' -> built-in S-curve)
  tolerance     - samples per spline
  spacing       - output points (0 -> derived from inches_per_point)

Assumes the script lives in:
  ~/ros2_ws/src/bezier_path_planner/bezier_path_planner/nodes
Adjust SCRIPT_DIR if your scripts are elsewhere.
"""
import os
from launch import LaunchDescription
from launch.actions import DeclareLaunchArgument, ExecuteProcess, LogInfo
from launch.substitutions import LaunchConfiguration
SCRIPT_DIR = os.path.expanduser('~/ros2_ws/src/bezier_path_planner/bezier_path_planner/nodes')


def generate_launch_description():
    args = [
        DeclareLaunchArgument('splines_file', default_value=''),
        DeclareLaunchArgument('tolerance', default_value='50'),
        DeclareLaunchArgument('spacing', default_value='0'),
    ]
    path_gen = ExecuteProcess(
        cmd=['python3', os.path.join(SCRIPT_DIR, 'path_generator_node.py'),
             '--ros-args',
             '-p', ['splines_file:=', LaunchConfiguration('splines_file')],
             '-p', ['tolerance:=', LaunchConfiguration('tolerance')],
             '-p', ['spacing:=', LaunchConfiguration('spacing')]],
        output='screen')

    ld = LaunchDescription(args)
    ld.add_action(LogInfo(msg='[path_generator.launch] starting path_generator_node'))
    ld.add_action(path_gen)
    return ld


if __name__ == '__main__':
    # allow direct 'python3 path_generator.launch.py' execution for debugging
    import launch
    ls = launch.LaunchService()
    ls.include_launch_description(launch.LaunchDescriptionSource(generate_launch_description()))
    ls.run()
