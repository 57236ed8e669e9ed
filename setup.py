from glob import glob
import os

from setuptools import find_packages, setup

package_name = 'bezier_path_planner'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['test']),
    data_files=[
        ('share/ament_index/resource_index/packages',
            ['resource/' + package_name]),
        ('share/' + package_name, ['package.xml']),
        (os.path.join('share', package_name, 'launch'), glob('launch/*.launch.py')),
    ],
    install_requires=['setuptools', 'numpy'],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=True,
    maintainer='shareef',
    maintainer_email='shareef@todo.todo',
    description='Velocity-annotated, evenly spaced trajectories along chained cubic Bezier splines',
    license='MIT',
    tests_require=['pytest'],
    entry_points={
        'console_scripts': [
            'path_generator_node = bezier_path_planner.nodes.path_generator_node:main',
        ],
    },
)
