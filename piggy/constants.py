"""Default tuning values shared by the simulation modules."""

# Time settings
DEFAULT_HOUR_DURATION_SECONDS = 60.0

# Stat rates (per tick)
DEFAULT_HUNGER_RATE = 5.0
DEFAULT_THIRST_RATE = 5.0
DEFAULT_HAPPINESS_DECAY = 2.0

# Spawn seeds
DEFAULT_INITIAL_HUNGER = 50.0
DEFAULT_INITIAL_THIRST = 50.0
DEFAULT_INITIAL_HAPPINESS = 50.0
DEFAULT_INITIAL_HEALTH = 100.0

STAT_MIN = 0.0
STAT_MAX = 100.0

# Fixed per-tick penalty while starving or parched
STARVATION_HEALTH_PENALTY = 5.0
HEALTH_ALERT_THRESHOLD = 20.0

# Emotion thresholds
DEFAULT_JOY_THRESHOLD = 85.0
DEFAULT_SADNESS_THRESHOLD = 20.0
DEFAULT_ANXIOUS_THRESHOLD = 80.0

# Bonding
DEFAULT_POINTS_PER_LEVEL = (10, 25, 50, 100, 200)
DEFAULT_MAX_BOND_LEVEL = 4

# Notification pacing
DEFAULT_DISPLAY_DURATION_SECONDS = 3.0
DEFAULT_QUEUE_DELAY_SECONDS = 1.0

# Quests and rewards
DEFAULT_QUEST_INTERACTIONS_REQUIRED = 5
DEFAULT_REWARD_PROBABILITY = 0.3
MIN_REWARD_PROBABILITY = 0.1
MAX_REWARD_PROBABILITY = 1.0
TICK_REWARD_ACTION = "Tick"

# Data logging
DEFAULT_MAX_CACHED_EVENTS = 100

# Interaction contract: (stat deltas, bond points, animation)
FEED_HUNGER_DELTA = -30.0
FEED_HAPPINESS_DELTA = 10.0
FEED_BOND_POINTS = 1

DRINK_THIRST_DELTA = -30.0
DRINK_HAPPINESS_DELTA = 5.0
DRINK_BOND_POINTS = 1

PLAY_HAPPINESS_DELTA = 15.0
PLAY_HUNGER_DELTA = 5.0
PLAY_THIRST_DELTA = 5.0
PLAY_BOND_POINTS = 5

# Alert copy
HUNGER_ALERT = "I'm starving! 😢"
THIRST_ALERT = "I'm parched! 💧"
HEALTH_ALERT = "I don't feel well... 🥺"

DEFAULT_ENV_FILE = "piggy.env"
