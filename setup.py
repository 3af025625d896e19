from setuptools import find_packages, setup
from glob import glob

package_name = 'velocity_marker_ros2'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['test']),
    data_files=[
        ('share/ament_index/resource_index/packages',
            ['resource/' + package_name]),
        ('share/' + package_name, ['package.xml']),
        ('share/' + package_name + '/launch', glob('launch/*.launch.py')),
        ('share/' + package_name + '/rviz',
        glob('rviz/*.rviz')),
    ],
    install_requires=[
        'setuptools',
        'numpy',
        'scipy',
    ],
    zip_safe=True,
    maintainer='orangepi',
    maintainer_email='huangandong905@gmail.com',
    description='Publishes RViz arrow markers for linear and angular velocity commands',
    license='BSD-3-Clause',
    tests_require=['pytest'],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'velocity_marker_node = velocity_marker_ros2.velocity_marker_node:main',
        ],
    },
)
