"""
Shared fixtures for the ray_physics test suite.
"""

import importlib.util
from pathlib import Path

import pytest

from ray_physics.config import PhysicsConfig
from ray_physics.models import BlackHole

SERVICES = Path(__file__).resolve().parent.parent / "services"

# Sagittarius A*-like mass used throughout
SGR_A_MASS = 8.54e36


def load_service(name):
    """Import services/<name>/app/main.py under a unique module name."""
    path = SERVICES / name / "app" / "main.py"
    spec = importlib.util.spec_from_file_location(name.replace("-", "_") + "_main", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def config():
    return PhysicsConfig()


@pytest.fixture
def black_hole(config):
    return BlackHole((0.0, 0.0), SGR_A_MASS, config)
