# constants.py

"""
Application Constants

This module defines static configuration values for the application's framework.
These are not expected to change between simulation runs.

Data Contract:
- All values are immutable constants.
- Units are specified in comments where applicable.
"""

# Screen dimensions
WIDTH = 1200  # Pixels (world units)
HEIGHT = 800  # Pixels (world units)

# Framerate
FPS = 60  # Frames per second

# Colors (RGB)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)

# Window Title
TITLE = "Particle Collider"

# Color Mapping for Visualization
# Particles fade from SLOW_COLOR at rest to FAST_COLOR at COLOR_MAX_SPEED.
SLOW_COLOR = (0, 0, 255)  # Blue
FAST_COLOR = (255, 0, 0)  # Red
COLOR_MAX_SPEED = 200.0   # Units/second. Speeds above this clamp to FAST_COLOR.

# Physics defaults
DEFAULT_FRICTION = 0.99         # Per-frame velocity damping factor.
DEFAULT_GRID_CELL_SIZE = 20.0   # World units per spatial hash cell.
EPSILON = 0.001                 # Distances at or below this are treated as degenerate.

# Raw gravity input is given in m/s^2 and scaled into world units.
GRAVITY_INPUT_SCALE = 100.0

# Spawn ranges, half-open [low, high)
SPAWN_RADIUS_RANGE = (3.0, 10.0)
SPAWN_MASS_RANGE = (1.0, 5.0)
SPAWN_VELOCITY_RANGE = (-100.0, 100.0)  # Units/second, per component.

# Pointer-driven particle
INTERACTIVE_RADIUS = 10.0
INTERACTIVE_MASS = 5.0
INTERACTIVE_THROW_FACTOR = 10.0  # Velocity = displacement * factor.

# Velocity given to particles spawned with a mouse click.
CLICK_SPAWN_VELOCITY = (0.0, 0.0)
