"""
constants.py: Centralized default tuning for the simulation and the window.
"""

# -------- Timing --------
FPS = 60                        # Nominal frames (and simulation ticks) per second

# -------- Playfield Config --------
SCREEN_WIDTH = 400
SCREEN_HEIGHT = 600
GROUND_HEIGHT = 50

# -------- Bird Config --------
BIRD_X = 100                    # Fixed bird X position
BIRD_RADIUS = 20                # For collision detection and drawing

# -------- Physics Config (pixels / tick) --------
GRAVITY = 0.6                   # Added to velocity every tick
JUMP_STRENGTH = -10.0           # Velocity set by a flap (negative is up)
MAX_FALL_SPEED = 12.0           # Terminal velocity, keeps the bird from tunneling

# -------- Pipe Config --------
PIPE_WIDTH = 50
PIPE_GAP = 180
PIPE_SPEED = 2.0                # Horizontal speed (pixels/tick)
PIPE_SPAWN_INTERVAL_TICKS = 120 # Minimum ticks between two spawns
PIPE_MIN_SPACING = 200          # Minimum x distance from the last pipe
PIPE_GAP_MARGIN = 80            # Gap keeps this far from ceiling and ground
PIPE_RETIRE_THRESHOLD = -50     # Right edge must pass this before a pipe is dropped
