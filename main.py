# main.py

import logging
import sys

import numpy as np
import pygame

import constants
import logger_setup
from config import build_config, load_config, log_throttle_ticks
from particle_system import ParticleSystem

# Get the application's dedicated logger
logger = logging.getLogger("particle_collider")


def draw_particles(screen: pygame.Surface, particles):
    """Draws every particle as a filled circle in its speed color."""
    for p in particles:
        pygame.draw.circle(
            screen,
            p.color,
            (int(p.position[0]), int(p.position[1])),
            max(1, int(p.radius))
        )


def handle_events(particle_system: ParticleSystem) -> bool:
    """
    Routes pointer input into the particle system.
    Returns False once the window has been closed.
    """
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.MOUSEMOTION:
            particle_system.set_or_move_interactive_particle(*event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            particle_system.add_particle(*event.pos, *constants.CLICK_SPAWN_VELOCITY)
    return True


def run_simulation_loop(particle_system: ParticleSystem, screen: pygame.Surface, clock, log_throttle: int):
    """
    The main frame loop: poll input, step the physics with the measured
    frame time, draw, and periodically log system diagnostics.
    """
    running = True
    tick = 0

    while running:
        running = handle_events(particle_system)

        # --- Physics & Logic Update ---
        dt = clock.tick(constants.FPS) / 1000.0
        particle_system.update(dt)

        # --- Logging (throttled) ---
        if tick % log_throttle == 0:
            momentum = particle_system.get_total_momentum()
            logger.debug(
                f"Tick={tick}, "
                f"Particles={particle_system.num_particles}, "
                f"Kinetic={particle_system.get_total_kinetic_energy():.2f}, "
                f"Momentum=({momentum[0]:+.2f}, {momentum[1]:+.2f}), "
                f"Collisions={particle_system.last_collision_count}, "
                f"dt={dt:.4f}"
            )

        # --- Drawing ---
        screen.fill(constants.BLACK)
        draw_particles(screen, particle_system.particles)
        pygame.display.flip()
        tick += 1

    logger.info(f"Simulation loop finished after {tick} ticks.")


def main():
    """
    Main function to initialize and run the particle simulation.
    """
    # --- Setup ---
    config = load_config('config.json')
    logger_setup.setup_logging(config)
    sim_config = config['simulation']

    logger.info("Application starting...")
    logger.info(f"Loaded configuration: {config}")

    try:
        physics_config = build_config(sim_config, (constants.WIDTH, constants.HEIGHT))
        log_throttle = log_throttle_ticks(sim_config)
    except (KeyError, ValueError) as e:
        logger.error(f"Invalid simulation configuration: {e}")
        return 1

    # Initialize the master random number generator (RNG)
    rng = np.random.default_rng(config['master_seed'])
    logger.info(f"Master RNG initialized with seed: {config['master_seed']}")

    # --- Initialization ---
    pygame.init()
    screen = pygame.display.set_mode((constants.WIDTH, constants.HEIGHT))
    pygame.display.set_caption(constants.TITLE)
    clock = pygame.time.Clock()

    particle_system = ParticleSystem(physics_config, rng)
    particle_system.initialize(sim_config['particle_count'])

    # Discard the time spent on setup so the first frame has a sane dt.
    clock.tick()

    run_simulation_loop(particle_system, screen, clock, log_throttle)

    logger.info("Application shutting down.")
    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
