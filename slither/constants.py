"""Gameplay constants shared across the simulation modules."""

# World
WORLD_SIZE: float = 2_000.0
FOOD_COUNT: int = 100
PELLET_COUNT: int = 50
BOT_COUNT: int = 10
TICK_RATE: int = 60

# Snake growth
START_MASS: float = 10.0
MIN_MASS: float = 10.0
PASSIVE_DECAY: float = 0.001
BASE_SPEED: float = 2.0
SPEED_LOG_FACTOR: float = 0.5

# Boost
BOOST_MULTIPLIER: float = 2.5
BOOST_DRAIN_PER_TICK: float = 0.1
BOOST_MAX_TICKS: int = 60
BOT_BOOST_COOLDOWN: int = 120
BOT_BOOST_MIN_MASS: float = 20.0
BOT_BOOST_CHANCE: float = 0.01

# Consumables
FOOD_SIZE: float = 3.0
FOOD_VALUE: float = 1.0
FOOD_PICKUP_RADIUS: float = 15.0
PELLET_SIZE: float = 2.0
PELLET_VALUE: float = 0.5
PELLET_PICKUP_RADIUS: float = 10.0

# Snake vs snake
STRIKE_RADIUS: float = 8.0
ENGULF_RADIUS: float = 20.0
ENGULF_MASS_RATIO: float = 1.25
ENGULF_GAIN: float = 0.75
DEATH_RING_MIN_RADIUS: float = 20.0
DEATH_RING_MAX_RADIUS: float = 70.0

# Presentation
MIN_ZOOM: float = 0.5
LEADERBOARD_SIZE: int = 10
GRID_SPACING: float = 50.0
NAME_MAX_LENGTH: int = 16
PLAYER_COLOR: tuple[int, int, int] = (0, 255, 0)
