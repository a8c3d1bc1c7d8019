# config.py

import json
import logging
import math
from typing import NamedTuple

import constants

logger = logging.getLogger("particle_collider")


class SimulationConfig(NamedTuple):
    """
    Immutable physics parameters handed to every simulation step.

    Data Contract:
    - width, height (float): World bounds, the rectangle [0, width] x [0, height].
    - gravity_constant (float): Strength G of the central attractor.
    - friction (float): Velocity damping factor in (0, 1], applied once per step.
    - grid_cell_size (float): Side length of a spatial hash cell.
    - epsilon (float): Distance threshold below which pair and attractor math is skipped.
    """
    width: float
    height: float
    gravity_constant: float
    friction: float = constants.DEFAULT_FRICTION
    grid_cell_size: float = constants.DEFAULT_GRID_CELL_SIZE
    epsilon: float = constants.EPSILON

    @property
    def center(self):
        """The fixed attractor point at the middle of the world."""
        return (self.width / 2.0, self.height / 2.0)


def validate_config(config: SimulationConfig) -> SimulationConfig:
    """
    Rejects parameter sets that would make the physics undefined.

    Raises ValueError naming the first offending field. Returns the config
    unchanged so it can be used inline.
    """
    for name in ('width', 'height', 'grid_cell_size', 'epsilon'):
        value = getattr(config, name)
        if not math.isfinite(value) or value <= 0:
            raise ValueError(f"{name} must be a positive finite number, got {value!r}")
    if not math.isfinite(config.gravity_constant):
        raise ValueError(f"gravity_constant must be finite, got {config.gravity_constant!r}")
    if not 0 < config.friction <= 1:
        raise ValueError(f"friction must lie in (0, 1], got {config.friction!r}")
    return config


def load_config(config_path='config.json'):
    """Reads the raw JSON configuration file into a dictionary."""
    with open(config_path, 'r') as f:
        return json.load(f)


def build_config(sim_config: dict, bounds: tuple) -> SimulationConfig:
    """
    Maps the 'simulation' section of config.json onto a SimulationConfig.

    - Inputs:
        - sim_config (dict): The 'simulation' section. 'gravity_strength' is
          required and is given in m/s^2; it is scaled by GRAVITY_INPUT_SCALE.
        - bounds (tuple): The (width, height) of the simulation area.
    - Outputs: A validated SimulationConfig.
    """
    width, height = bounds
    config = SimulationConfig(
        width=float(width),
        height=float(height),
        gravity_constant=float(sim_config['gravity_strength']) * constants.GRAVITY_INPUT_SCALE,
        friction=float(sim_config.get('friction', constants.DEFAULT_FRICTION)),
        grid_cell_size=float(sim_config.get('grid_cell_size', constants.DEFAULT_GRID_CELL_SIZE)),
        epsilon=float(sim_config.get('epsilon', constants.EPSILON)),
    )
    validate_config(config)
    logger.debug(f"Simulation config built: {config}")
    return config


def log_throttle_ticks(sim_config: dict) -> int:
    """
    How many frames pass between diagnostic log lines.
    Defaults to 100; anything below 1 raises ValueError.
    """
    ticks = sim_config.get('log_throttle_ticks', 100)
    if isinstance(ticks, bool) or not isinstance(ticks, int) or ticks < 1:
        raise ValueError(f"log_throttle_ticks must be a positive integer, got {ticks!r}")
    return ticks
