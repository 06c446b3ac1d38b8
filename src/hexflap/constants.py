"""
constants.py: Centralized configuration for game, audio and storage settings.
"""

# -------- Timing --------
TICK_RATE = 60                  # Fixed update ticks per second
TICK_TIME = 1.0 / TICK_RATE     # Fixed time step (seconds per tick)
RENDER_FPS = 60
MAX_TICKS_PER_FRAME = 5         # Catch-up cap after a long frame

# -------- Game World Config --------
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
BIRD_X = 80                     # Fixed player X position
RESPAWN_Y = SCREEN_HEIGHT / 2
BG_SCROLL_SPEED = 0.5

# -------- Player Config --------
BIRD_BASE_WIDTH = 38
BIRD_BASE_HEIGHT = 26
BIRD_MAX_WIDTH = 65
BIRD_MAX_HEIGHT = 42
BIRD_GROWTH_PER_POINT = 0.02    # 2% of base size per point

# -------- Physics Config (pixels / tick) --------
GRAVITY = 0.4
JUMP_VELOCITY = -8.0            # Overwrites the current velocity
MAX_VELOCITY = 12.0             # Downward clamp only
ROTATION_FACTOR = 0.05          # Radians per unit of velocity
MAX_ROTATION = 0.5

# -------- Trail --------
TRAIL_LENGTH = 10
TRAIL_LIFE = 20

# -------- Pipe Config --------
PIPE_WIDTH = 60
PIPE_GAP = 140
PIPE_SPEED = 2.0
PIPE_SPAWN_INTERVAL_TICKS = 120
PIPE_MIN_HEIGHT = 50

# -------- Effects --------
PARTICLE_LIFE = 30
PARTICLE_GRAVITY = 0.1
JUMP_PARTICLES = 5
DEATH_PARTICLES = 20
SPARKLE_LIFE = 60
SCORE_SPARKLES = 8

# -------- Persistence --------
HIGH_SCORE_KEY = "chipFlap_highScore"
DB_FILE = "hexflap_scores.db"

# -------- Audio --------
SAMPLE_RATE = 44100
MASTER_GAIN = 12.0              # Scales the quiet cue volumes up to 16-bit range
