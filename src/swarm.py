import logging
import math
import random
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple

from config import (
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SWARM_CAPACITY,
    SWARM_OFFSCREEN_MARGIN,
    SWARM_SPAWN_X_MARGIN,
    SWARM_SPAWN_Y_MAX,
    SWARM_SPAWN_Y_MIN,
    SWARM_STEP,
)


class SwarmPhase(Enum):
    IDLE = 0
    DEPLOYING = 1


@dataclass(frozen=True)
class SwarmMember:
    """Position of a single background nanobot."""

    x: float
    y: float


@dataclass(frozen=True)
class SwarmSettings:
    """Tunable constants for the swarm, defaulting to the values in config."""

    capacity: int = SWARM_CAPACITY
    step: float = SWARM_STEP
    offscreen_margin: float = SWARM_OFFSCREEN_MARGIN
    spawn_x_margin: float = SWARM_SPAWN_X_MARGIN
    spawn_y_min: float = SWARM_SPAWN_Y_MIN
    spawn_y_max: float = SWARM_SPAWN_Y_MAX
    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT

    @property
    def exit_y(self) -> float:
        """Members at or below this y are off-screen and get removed."""
        return self.height + self.offscreen_margin


@dataclass(frozen=True)
class SwarmState:
    members: Tuple[SwarmMember, ...] = field(default_factory=tuple)
    deploying: bool = False

    @property
    def phase(self) -> SwarmPhase:
        return SwarmPhase.DEPLOYING if self.deploying else SwarmPhase.IDLE

    def __len__(self) -> int:
        return len(self.members)


def add_member(
    state: SwarmState,
    settings: SwarmSettings = SwarmSettings(),
    rng: Optional[random.Random] = None,
) -> SwarmState:
    """
    Appends a nanobot at a random position inside the spawn area.
    Capacity is not checked here; the next tick picks it up.
    """
    if state.deploying:
        logging.debug("Add rejected: swarm is deploying.")
        return state

    rng = rng or random
    member = SwarmMember(
        x=rng.uniform(
            settings.spawn_x_margin, settings.width - settings.spawn_x_margin
        ),
        y=rng.uniform(settings.spawn_y_min, settings.spawn_y_max),
    )
    return replace(state, members=state.members + (member,))


def remove_member(state: SwarmState) -> SwarmState:
    """Removes the most recently added nanobot."""
    if state.deploying:
        logging.debug("Remove rejected: swarm is deploying.")
        return state
    if not state.members:
        return state
    return replace(state, members=state.members[:-1])


def tick(state: SwarmState, settings: SwarmSettings = SwarmSettings()) -> SwarmState:
    """
    Advances the swarm by one frame.

    Below capacity the swarm is left untouched. Once capacity is reached (or
    deployment already started) every on-screen member moves down by one
    step and members past the exit line are dropped. Each member is handled
    exactly once per tick.
    """
    if len(state.members) < settings.capacity and not state.deploying:
        return state
    # An empty swarm never deploys, even with a zero capacity
    if not state.members:
        return state if not state.deploying else SwarmState()

    if not state.deploying:
        logging.info(f"Swarm deploying with {len(state.members)} nanobots.")

    exit_y = settings.exit_y
    members = tuple(
        SwarmMember(m.x, m.y + settings.step) for m in state.members if m.y < exit_y
    )

    if not members:
        logging.info("Swarm deployment finished.")
        return SwarmState(members=(), deploying=False)
    return SwarmState(members=members, deploying=True)


def max_drain_ticks(settings: SwarmSettings = SwarmSettings()) -> int:
    """
    Upper bound on ticks needed for a freshly deployed swarm to empty:
    steps for the highest spawn to pass the exit line, plus the removal tick.
    """
    distance = settings.exit_y - settings.spawn_y_min
    return math.ceil(distance / settings.step) + 1
