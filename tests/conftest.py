"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import numpy as np
import pytest

# The simulator is a flat collection of modules at the project root.
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from config import SimulationConfig  # noqa: E402


@pytest.fixture
def free_config():
    """A 200x100 world with no gravity and no damping."""
    return SimulationConfig(width=200.0, height=100.0, gravity_constant=0.0, friction=1.0)


@pytest.fixture
def rng():
    """A seeded generator so randomized tests are repeatable."""
    return np.random.default_rng(1234)


@pytest.fixture(scope="session")
def project_root_path():
    """Provide the project root path."""
    return project_root
