from launch import LaunchDescription
from launch.actions import DeclareLaunchArgument
from launch.conditions import IfCondition
from launch.substitutions import LaunchConfiguration
from launch_ros.actions import Node
from launch_ros.parameter_descriptions import ParameterValue


def generate_launch_description():
    param_args = [
        DeclareLaunchArgument(name="use_depth", default_value="0", description='1 adds the depth sweep to the curve'),
        DeclareLaunchArgument(name="part_id", default_value="0", description='Participant ID (display only)'),
        DeclareLaunchArgument(name="alpha_id", default_value="0", description='Alpha ID (display only)'),
        DeclareLaunchArgument(name="traj_id", default_value="0", description='Trajectory preset 0..5'),
    ]
    rviz_arg = DeclareLaunchArgument(name="use_rviz", default_value="false", description='Also start rviz2')

    marker_publisher_node = Node(
        package='tracking_markers',
        executable='marker_publisher',
        name='marker_publisher',
        output='screen',
        parameters=[{
            name: ParameterValue(LaunchConfiguration(name), value_type=int)
            for name in ("use_depth", "part_id", "alpha_id", "traj_id")
        }]
    )

    rviz_node = Node(
        package='rviz2',
        executable='rviz2',
        name='rviz2',
        output='screen',
        condition=IfCondition(LaunchConfiguration('use_rviz'))
    )

    return LaunchDescription(param_args + [
        rviz_arg,
        marker_publisher_node,
        rviz_node
    ])
