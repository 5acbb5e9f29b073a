"""
Shared fixtures for the tracking_markers tests.

Core modules are plain Python + numpy; only test_marker_publisher needs a
sourced ROS 2 environment and skips itself otherwise.
"""

import os
import sys

import pytest

# Allow running from a source checkout without `colcon build`
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from tracking_markers.config import DEFAULT_CONFIG
from tracking_markers.curve_sampler import sample_curve
from tracking_markers.scene import SceneComposer
from tracking_markers.trajectory_presets import curve_spec_for


@pytest.fixture
def config():
    return DEFAULT_CONFIG


def make_trajectory(traj_id=0, use_depth=False, cfg=DEFAULT_CONFIG):
    return sample_curve(curve_spec_for(traj_id, use_depth), cfg.origin, cfg.max_points,
                        cfg.traj_height, cfg.traj_width, cfg.traj_depth)


@pytest.fixture
def trajectory():
    return make_trajectory()


@pytest.fixture
def composer(trajectory):
    return SceneComposer(trajectory)
