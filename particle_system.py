# particle_system.py

import logging
import math

import numpy as np

import constants
from collisions import resolve_collisions
from config import SimulationConfig, validate_config
from force_field import apply_central_force
from particle import Particle
from spatial_grid import SpatialHashGrid

logger = logging.getLogger("particle_collider")


def advance(particles, dt: float, config: SimulationConfig, grid=None) -> int:
    """
    Advances a particle population by one frame.

    The order is fixed: integrate, reflect off the walls, rebuild the grid
    from the corrected positions, resolve collisions, then apply the central
    force. Nothing persists between calls except the particles themselves.

    - Inputs:
        - particles (list[Particle]): Mutated in place.
        - dt (float): Elapsed time in seconds, finite and >= 0.
        - config (SimulationConfig): Physics parameters for this frame.
        - grid (SpatialHashGrid | None): Reused if given, otherwise a fresh
          grid is made with config.grid_cell_size.
    - Outputs: The number of pair visits that applied a collision correction.
    """
    if not math.isfinite(dt) or dt < 0:
        raise ValueError(f"dt must be a finite non-negative number, got {dt!r}")
    if grid is None:
        grid = SpatialHashGrid(config.grid_cell_size)

    # --- 1. Integration ---
    for p in particles:
        p.update(dt, config.friction)

    # --- 2. Boundary reflection ---
    for p in particles:
        p.check_boundary_collision(config.width, config.height)

    # --- 3. Broad phase ---
    grid.rebuild(particles)

    # --- 4. Narrow phase ---
    collision_count = resolve_collisions(grid, config.epsilon)

    # --- 5. Central attractor ---
    apply_central_force(particles, dt, config)

    return collision_count


def step(particles, dt: float, config: SimulationConfig, grid=None):
    """Runs advance() and hands back the same, now updated, particle list."""
    advance(particles, dt, config, grid)
    return particles


class ParticleSystem:
    """
    Owns the particle population and the parameters it is stepped with.

    Data Contract:
    - Inputs:
        - config (SimulationConfig): Validated on construction.
        - rng (np.random.Generator | None): Source of all randomness. A fresh
          unseeded generator is made when omitted.
    - Outputs: None. This class modifies its internal state.
    - Side Effects: Manages the lifecycle of all particles.
    - Invariants: Particles are only ever appended, so indices into
      self.particles stay valid for the whole run.
    """
    def __init__(self, config: SimulationConfig, rng: np.random.Generator = None):
        self.config = validate_config(config)
        self.rng = rng if rng is not None else np.random.default_rng()
        self.particles = []
        self.grid = SpatialHashGrid(config.grid_cell_size)
        self.interactive_particle = None
        self.last_collision_count = 0

        logger.info(
            f"ParticleSystem created for a {config.width:g}x{config.height:g} world, "
            f"G={config.gravity_constant:g}, friction={config.friction:g}."
        )
        logger.info(f"Spatial grid initialized with cell size {config.grid_cell_size:g}.")

    @property
    def num_particles(self) -> int:
        return len(self.particles)

    def _random_radius_and_mass(self):
        radius = self.rng.uniform(*constants.SPAWN_RADIUS_RANGE)
        mass = self.rng.uniform(*constants.SPAWN_MASS_RANGE)
        return radius, mass

    def initialize(self, count: int):
        """
        Populates the world with count randomized particles.
        Positions are uniform over the world, velocities uniform per component.
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count!r}")

        low_v, high_v = constants.SPAWN_VELOCITY_RANGE
        for _ in range(count):
            x = self.rng.uniform(0, self.config.width)
            y = self.rng.uniform(0, self.config.height)
            radius, mass = self._random_radius_and_mass()
            vx = self.rng.uniform(low_v, high_v)
            vy = self.rng.uniform(low_v, high_v)
            self.particles.append(Particle(x, y, radius, mass, vx, vy))

        logger.info(f"Initialized {count} particles. Population: {self.num_particles}.")
        return self.particles

    def add_particle(self, x: float, y: float, velocity_x: float, velocity_y: float) -> Particle:
        """Appends one particle at a chosen position and velocity with random size and mass."""
        radius, mass = self._random_radius_and_mass()
        particle = Particle(x, y, radius, mass, velocity_x, velocity_y)
        self.particles.append(particle)
        logger.info(f"Added {particle}. Population: {self.num_particles}.")
        return particle

    def set_or_move_interactive_particle(self, x: float, y: float) -> Particle:
        """
        Creates the pointer-driven particle on first use, then drags it.

        Each later call sets its velocity from the displacement to (x, y),
        scaled by INTERACTIVE_THROW_FACTOR, and snaps it onto (x, y), so a
        fast pointer movement throws the particle.
        """
        if self.interactive_particle is None:
            self.interactive_particle = Particle(
                x, y, constants.INTERACTIVE_RADIUS, constants.INTERACTIVE_MASS
            )
            self.particles.append(self.interactive_particle)
            logger.info(f"Interactive particle created at ({x:.1f}, {y:.1f}).")
            return self.interactive_particle

        target = np.array([x, y], dtype=np.float64)
        particle = self.interactive_particle
        particle.velocity[:] = (target - particle.position) * constants.INTERACTIVE_THROW_FACTOR
        particle.position[:] = target
        return particle

    def update(self, dt: float):
        """Runs one simulation step over the owned population."""
        self.last_collision_count = advance(self.particles, dt, self.config, self.grid)
        return self.particles

    # The frame driver calls this name.
    step = update

    def get_total_kinetic_energy(self) -> float:
        """
        Calculates the total kinetic energy of the system.
        KE = sum(0.5 * m * v^2)
        """
        return float(sum(p.kinetic_energy for p in self.particles))

    def get_total_momentum(self) -> np.ndarray:
        """Vector sum of m * v over all particles."""
        total = np.zeros(2, dtype=np.float64)
        for p in self.particles:
            total += p.momentum
        return total


def initialize(count: int, width: float, height: float, gravity_constant: float, rng: np.random.Generator = None, **overrides) -> ParticleSystem:
    """
    Builds a populated ParticleSystem in one call.

    Extra keyword arguments override SimulationConfig defaults
    (friction, grid_cell_size, epsilon).
    """
    config = SimulationConfig(
        width=float(width),
        height=float(height),
        gravity_constant=float(gravity_constant),
        **overrides
    )
    system = ParticleSystem(config, rng)
    system.initialize(count)
    return system
