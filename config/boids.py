"""Configuration for the 3D wind boids simulation."""

import math

WINDOW = {
    "width": 1280,
    "height": 720,
    "title": "3D Wind Boids",
    "fps": 60
}

CAMERA = {
    "initial_distance": 700.0,
    "initial_azimuth": -math.pi / 4,
    "initial_elevation": math.pi / 6,
    "focal_length": 300.0,
    "min_distance": 200.0,
    "max_distance": 2000.0,
    "min_elevation": -math.pi / 2,
    "max_elevation": math.pi / 2,
    "chase_smoothing": 0.05,     # Fraction of the gap closed per tick
    "mouse_sensitivity": 0.005,  # Radians per pixel of drag
    "wheel_sensitivity": 0.5,    # Distance per wheel delta unit
    "wheel_step": 100.0,         # Wheel delta units per pygame wheel notch
    "keyboard_rotate_speed": 1.5,
    "keyboard_zoom_speed": 400.0
}

BOIDS = {
    "count": 200,
    "depth": 500.0,              # Width and height follow the window
    "max_speed": 4.0,
    "max_force": 0.2,
    "min_spawn_speed": 2.0,
    "max_spawn_speed": 4.0,
    "boundary_margin": 80.0,     # Distance from a wall to start turning
    "boundary_force": 1.5,       # Multiple of max_force for wall avoidance
    "resize_step": 10,
    "glyph_size": 4.0,
    "look_ahead": 10.0
}

# Defaults for the per-tick tuning record
FLOCKING = {
    "perception_radius": 50.0,
    "separation": 1.5,
    "alignment": 1.0,
    "cohesion": 1.0,
    "wind_strength": 0.5
}

# Keyboard adjustment of the tuning record: (minimum, maximum, step)
FACTOR_CONTROLS = {
    "perception_radius": (0.0, 200.0, 5.0),
    "separation": (0.0, 5.0, 0.1),
    "alignment": (0.0, 5.0, 0.1),
    "cohesion": (0.0, 5.0, 0.1),
    "wind_strength": (0.0, 5.0, 0.1)
}

WIND = {
    "automatic": True,
    "time_step": 0.005,
    "y_rate": 0.7,
    "z_rate": 0.3,
    "azimuth": 0.0,      # Degrees, manual mode
    "elevation": 0.0,    # Degrees, manual mode
    "max_elevation": 90.0,
    "turn_speed": 90.0   # Degrees per second while an arrow key is held
}

REPEL = {
    "duration_ms": 2000.0,
    "radius": 150.0,
    "strength": 2.5
}

GRID = {
    "divisions": 10,
    "color": (255, 255, 255, 38)
}

WIND_FIELD = {
    "spacing": 120.0,
    "line_length": 20.0,
    "head_length": 8.0,
    "color": (255, 255, 255, 51)
}

COLORS = {
    "background": (3, 3, 5),
    "boid": (0, 229, 255),
    "text": (230, 230, 230)
}
