from launch import LaunchDescription
from launch.actions import DeclareLaunchArgument
from launch.conditions import IfCondition
from launch.substitutions import LaunchConfiguration
from launch_ros.actions import Node
from launch_ros.parameter_descriptions import ParameterValue
import os
from ament_index_python.packages import get_package_share_directory


def generate_launch_description():
    package_dir = get_package_share_directory('velocity_marker_ros2')
    rviz_config_file = os.path.join(package_dir, 'rviz', 'velocity_marker.rviz')

    args = [
        DeclareLaunchArgument('base_frame',              default_value='world'),
        DeclareLaunchArgument('twist_topic',             default_value='cmd_vel'),
        DeclareLaunchArgument('is_stamped',              default_value='false'),
        DeclareLaunchArgument('velocity_scale',          default_value='1.0'),
        DeclareLaunchArgument('anglular_velocity_scale', default_value='1.0'),
        DeclareLaunchArgument('publish_frequency',       default_value='10.0'),
        DeclareLaunchArgument('use_rviz',                default_value='false'),
    ]

    return LaunchDescription(args + [
        Node(
            package='velocity_marker_ros2',
            executable='velocity_marker_node',
            name='velocity_marker',
            parameters=[{
                'base_frame': LaunchConfiguration('base_frame'),
                'twist_topic': LaunchConfiguration('twist_topic'),
                'is_stamped': ParameterValue(LaunchConfiguration('is_stamped'), value_type=bool),
                'velocity_scale': ParameterValue(LaunchConfiguration('velocity_scale'), value_type=float),
                'anglular_velocity_scale': ParameterValue(
                    LaunchConfiguration('anglular_velocity_scale'), value_type=float),
                'publish_frequency': ParameterValue(LaunchConfiguration('publish_frequency'), value_type=float),
            }],
            output='screen'),
        Node(
            package='rviz2',
            executable='rviz2',
            name='rviz2',
            arguments=['-d', rviz_config_file],
            condition=IfCondition(LaunchConfiguration('use_rviz')),
            output='screen'),
    ])
