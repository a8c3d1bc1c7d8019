# force_field.py

import numba
import numpy as np


@numba.jit(nopython=True, fastmath=True)
def _apply_central_force_jit(position, velocity, mass, center_x, center_y, g_const, epsilon, dt):
    """
    Numba-accelerated pull toward the attractor for a single particle.
    a = G * m / d^2, directed at the center. Modifies velocity in place.
    """
    dx = center_x - position[0]
    dy = center_y - position[1]
    distance = np.sqrt(dx * dx + dy * dy)
    if distance <= epsilon:
        return

    # Scaled by the particle's own mass, so heavier particles fall harder.
    acceleration = (g_const * mass) / (distance * distance)
    velocity[0] += (dx / distance) * acceleration * dt
    velocity[1] += (dy / distance) * acceleration * dt


def apply_central_force(particles, dt: float, config):
    """
    Accelerates every particle toward the world center.

    - Inputs:
        - particles (list[Particle]): The population to update.
        - dt (float): Elapsed time in seconds.
        - config (SimulationConfig): Supplies the center, G and epsilon.
    - Side Effects: Modifies particle velocities. Positions are untouched.
    """
    center_x, center_y = config.center
    for p in particles:
        _apply_central_force_jit(
            p.position, p.velocity, p.mass,
            center_x, center_y,
            config.gravity_constant, config.epsilon, dt
        )
