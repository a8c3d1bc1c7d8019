# particle.py

import logging
import math

import numba
import numpy as np

from constants import COLOR_MAX_SPEED, FAST_COLOR, SLOW_COLOR, EPSILON

logger = logging.getLogger("particle_collider")


@numba.jit(nopython=True)
def _resolve_collision_jit(pos_a, vel_a, radius_a, mass_a, pos_b, vel_b, radius_b, mass_b, epsilon):
    """
    Numba-accelerated elastic collision for a single pair.
    Modifies both positions and velocities in place.
    Returns True if the pair overlapped and was corrected.
    """
    dx = pos_b[0] - pos_a[0]
    dy = pos_b[1] - pos_a[1]
    distance = np.sqrt(dx * dx + dy * dy)

    if distance >= radius_a + radius_b or distance <= epsilon:
        return False

    nx = dx / distance
    ny = dy / distance

    # Impulse along the line of centers
    rel_vx = vel_b[0] - vel_a[0]
    rel_vy = vel_b[1] - vel_a[1]
    dot = rel_vx * nx + rel_vy * ny
    impulse = (2.0 * dot) / (mass_a + mass_b)

    vel_a[0] += impulse * nx / mass_a
    vel_a[1] += impulse * ny / mass_a
    vel_b[0] -= impulse * nx / mass_b
    vel_b[1] -= impulse * ny / mass_b

    # Split the overlap evenly between the two particles
    overlap = (radius_a + radius_b - distance) / 2.0
    pos_a[0] -= overlap * nx
    pos_a[1] -= overlap * ny
    pos_b[0] += overlap * nx
    pos_b[1] += overlap * ny
    return True


class Particle:
    """
    Represents a single particle in the simulation.

    Data Contract:
    - position, velocity: float64 numpy arrays of shape (2,), mutated in place.
    - radius, mass: positive floats, fixed for the particle's lifetime.
    - color: derived from speed on every access, never stored.
    """
    def __init__(self, x: float, y: float, radius: float, mass: float, velocity_x: float = 0.0, velocity_y: float = 0.0):
        if not math.isfinite(radius) or radius <= 0:
            raise ValueError(f"radius must be a positive finite number, got {radius!r}")
        if not math.isfinite(mass) or mass <= 0:
            raise ValueError(f"mass must be a positive finite number, got {mass!r}")

        self.position = np.array([x, y], dtype=np.float64)
        self.velocity = np.array([velocity_x, velocity_y], dtype=np.float64)
        self.radius = float(radius)
        self.mass = float(mass)

        logger.debug(f"Particle created: radius={self.radius:.2f}, mass={self.mass:.2f}, pos={self.position}")

    def __repr__(self):
        return (
            f"Particle(pos=({self.position[0]:.2f}, {self.position[1]:.2f}), "
            f"vel=({self.velocity[0]:.2f}, {self.velocity[1]:.2f}), "
            f"radius={self.radius:.2f}, mass={self.mass:.2f})"
        )

    @property
    def speed(self) -> float:
        return float(np.hypot(self.velocity[0], self.velocity[1]))

    @property
    def color(self):
        """
        Determines particle color based on speed.
        Interpolates from SLOW_COLOR at rest to FAST_COLOR at COLOR_MAX_SPEED,
        clamping faster particles to FAST_COLOR.
        """
        norm_speed = min(self.speed / COLOR_MAX_SPEED, 1.0)
        return tuple(
            int(slow * (1.0 - norm_speed) + fast * norm_speed)
            for slow, fast in zip(SLOW_COLOR, FAST_COLOR)
        )

    @property
    def momentum(self) -> np.ndarray:
        return self.mass * self.velocity

    @property
    def kinetic_energy(self) -> float:
        return 0.5 * self.mass * float(np.dot(self.velocity, self.velocity))

    def update(self, dt: float, friction: float):
        """
        Advances the particle by dt seconds, then damps its velocity.
        p_new = p_old + v * dt
        v_new = v * friction
        """
        self.position += self.velocity * dt
        self.velocity *= friction

    def resolve_collision(self, other: "Particle", epsilon: float = EPSILON) -> bool:
        """
        Resolves an elastic collision with another particle, if the two overlap.

        The impulse is applied along the line of centers and the overlap is
        removed by pushing each particle back by half of it. Coincident
        centers (distance <= epsilon) are left untouched.

        - Inputs:
            - other (Particle): The particle to test against.
            - epsilon (float): Degenerate-distance threshold.
        - Outputs: True if a correction was applied.
        """
        return _resolve_collision_jit(
            self.position, self.velocity, self.radius, self.mass,
            other.position, other.velocity, other.radius, other.mass,
            epsilon
        )

    def check_boundary_collision(self, width: float, height: float):
        """
        Keeps the particle's disc inside [0, width] x [0, height].

        Each axis is handled on its own. A disc poking past the near wall is
        set flush against it; otherwise one poking past the far wall is set
        flush against that. Either way the velocity component on that axis
        flips sign, whatever direction it had.
        """
        for axis, limit in enumerate((width, height)):
            low = self.radius
            high = limit - self.radius
            if self.position[axis] < low:
                self.position[axis] = low
            elif self.position[axis] > high:
                self.position[axis] = high
            else:
                continue
            self.velocity[axis] = -self.velocity[axis]
