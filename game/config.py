"""
Ecclesia - Configuration Module

All tunable game parameters live here. Adjust these to change game feel
without touching game logic.
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

# =============================================================================
# COMMUNITY STATS
# =============================================================================

# Starting values for a new session
INITIAL_STATS = {
    "members": 48,
    "cohesion": 70,
    "resources": 35,
    "influence": 20,
}

# Members needed for the community to endure (victory)
WIN_TARGET = 500

# Cohesion or members at or below this collapse the community
LOSS_THRESHOLD = 0

# Upper clamp for cohesion, resources and influence (members has none)
STAT_CEILING = 100

# Below this the UI warns that the community may fracture
COHESION_RISK_THRESHOLD = 30

# =============================================================================
# PACING
# =============================================================================

# Pause between resolving one event and presenting the next
COOLDOWN_SECONDS = 6.5

# Micro-event is revealed this far into the cooldown (0.5 = midpoint)
MICRO_EVENT_REVEAL_FRACTION = 0.5

# When the deck runs out, the final outcome stays on screen this long
EXHAUSTION_DELAY_SECONDS = 1.5

# =============================================================================
# MICRO-EVENTS
# =============================================================================

# At or below this, micro-events are drawn from the donation pool only
LOW_RESOURCE_THRESHOLD = 20

# Chance of a donation even when resources are healthy (keeps coffers moving)
DONATION_SPRINKLE_PROBABILITY = 0.2

# Donations grow with the economy: linear between the two anchors, clamped outside
DONATION_SCALING = {
    "early_year": 100,
    "early_multiplier": 1.0,
    "late_year": 500,
    "late_multiplier": 1.8,
}

# How many recent micro-events to avoid repeating
MICRO_EVENT_HISTORY_SIZE = 4

# Re-draws with a fresh seed before accepting a repeat
MICRO_EVENT_RETRY_LIMIT = 3

# =============================================================================
# RANDOMNESS
# =============================================================================

# Each selection builds its own generator; seeded sessions step by this
SEED_STRIDE = 7919

# =============================================================================
# SESSION CONFIGURATION
# =============================================================================


@dataclass(frozen=True)
class SessionConfiguration:
    """
    Per-session options handed to the progression engine.

    debug_skip_to_event_count: resolve this many events silently at start
    seed: base seed for every selection in the session (None = clock-seeded)
    cooldown_seconds: override COOLDOWN_SECONDS (tests, demos)
    """
    debug_skip_to_event_count: Optional[int] = None
    seed: Optional[int] = None
    cooldown_seconds: Optional[float] = None

    @property
    def effective_cooldown(self) -> float:
        if self.cooldown_seconds is None:
            return COOLDOWN_SECONDS
        return self.cooldown_seconds


# =============================================================================
# DEBUG SETTINGS (Development Only)
# =============================================================================

def _env_int(name: str) -> Optional[int]:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer {name}={raw!r}")
        return None


def get_session_configuration() -> SessionConfiguration:
    """
    Build the configuration for a new session from the environment.

    DEBUG_SKIP_TO_EVENT and DEBUG_SEED only apply when DEBUG_MODE=true.
    """
    debug_mode = os.environ.get("DEBUG_MODE", "").lower() == "true"
    if not debug_mode:
        return SessionConfiguration()

    skip = _env_int("DEBUG_SKIP_TO_EVENT")
    if skip is not None and skip < 0:
        logger.warning(f"Ignoring negative DEBUG_SKIP_TO_EVENT={skip}")
        skip = None

    return SessionConfiguration(
        debug_skip_to_event_count=skip,
        seed=_env_int("DEBUG_SEED"),
    )
