import logging
import random
from dataclasses import dataclass, field, replace
from enum import Enum, IntEnum
from typing import Callable, Dict, Optional

from config import (
    OPERATION_MODE_IMAGE,
    OPERATION_MODE_TEXT,
    SEARCH_MODE_IMAGE,
    SEARCH_MODE_TEXT,
    SWARM_SPRITE_HEIGHT_OPERATION,
    SWARM_SPRITE_HEIGHT_SEARCH,
)
from src.swarm import SwarmSettings, SwarmState, add_member, remove_member, tick


class ButtonAction(IntEnum):
    """Button ids as they appear in the clickable layout file."""

    ADD = 0
    REMOVE = 1
    SEARCH_DESCRIPTION = 2
    TOGGLE_MODE = 3
    OPERATION_DESCRIPTION = 4


class DisplayMode(Enum):
    SEARCH = 0
    OPERATION = 1


class DescriptionKind(Enum):
    SEARCH = 0
    OPERATION = 1


_MODE_IMAGES = {
    DisplayMode.SEARCH: SEARCH_MODE_IMAGE,
    DisplayMode.OPERATION: OPERATION_MODE_IMAGE,
}

_MODE_SPRITE_HEIGHTS = {
    DisplayMode.SEARCH: SWARM_SPRITE_HEIGHT_SEARCH,
    DisplayMode.OPERATION: SWARM_SPRITE_HEIGHT_OPERATION,
}

_DESCRIPTION_TEXTS = {
    DescriptionKind.SEARCH: SEARCH_MODE_TEXT,
    DescriptionKind.OPERATION: OPERATION_MODE_TEXT,
}


def mode_image(mode: DisplayMode) -> str:
    """Asset file name for the nanobot image shown in `mode`."""
    return _MODE_IMAGES[mode]


def sprite_height(mode: DisplayMode) -> int:
    return _MODE_SPRITE_HEIGHTS[mode]


def description_text(kind: DescriptionKind) -> str:
    return _DESCRIPTION_TEXTS[kind]


@dataclass(frozen=True)
class DescriptionPanel:
    visible: bool = False
    kind: DescriptionKind = DescriptionKind.SEARCH


@dataclass(frozen=True)
class AppState:
    """Everything the sketch needs to render a frame."""

    swarm: SwarmState = field(default_factory=SwarmState)
    mode: DisplayMode = DisplayMode.SEARCH
    panel: DescriptionPanel = field(default_factory=DescriptionPanel)

    @property
    def deploying(self) -> bool:
        return self.swarm.deploying

    @property
    def image_name(self) -> str:
        return mode_image(self.mode)

    @property
    def sprite_height(self) -> int:
        return sprite_height(self.mode)


# --- Transitions ---
# Each takes the current state and returns the next one. Callers guarantee
# the swarm is not deploying.


def _add(state: AppState, settings: SwarmSettings, rng) -> AppState:
    return replace(state, swarm=add_member(state.swarm, settings, rng))


def _remove(state: AppState, settings: SwarmSettings, rng) -> AppState:
    return replace(state, swarm=remove_member(state.swarm))


def _toggle_mode(state: AppState, settings: SwarmSettings, rng) -> AppState:
    mode = (
        DisplayMode.OPERATION
        if state.mode is DisplayMode.SEARCH
        else DisplayMode.SEARCH
    )
    logging.info(f"Display mode changed to {mode.name}.")
    return replace(state, mode=mode)


def _toggle_description(kind: DescriptionKind):
    def transition(state: AppState, settings: SwarmSettings, rng) -> AppState:
        panel = DescriptionPanel(visible=not state.panel.visible, kind=kind)
        return replace(state, panel=panel)

    return transition


_TRANSITIONS: Dict[
    ButtonAction, Callable[[AppState, SwarmSettings, Optional[random.Random]], AppState]
] = {
    ButtonAction.ADD: _add,
    ButtonAction.REMOVE: _remove,
    ButtonAction.SEARCH_DESCRIPTION: _toggle_description(DescriptionKind.SEARCH),
    ButtonAction.TOGGLE_MODE: _toggle_mode,
    ButtonAction.OPERATION_DESCRIPTION: _toggle_description(
        DescriptionKind.OPERATION
    ),
}


def apply_action(
    state: AppState,
    action: ButtonAction,
    settings: SwarmSettings = SwarmSettings(),
    rng: Optional[random.Random] = None,
) -> AppState:
    """
    Returns the state after a button press. Every action is ignored while
    the swarm is deploying.
    """
    if state.deploying:
        logging.debug(f"Action {action.name} ignored while deploying.")
        return state
    return _TRANSITIONS[action](state, settings, rng)


def advance(state: AppState, settings: SwarmSettings = SwarmSettings()) -> AppState:
    """Per-frame update: ticks the swarm and leaves the rest untouched."""
    swarm = tick(state.swarm, settings)
    if swarm is state.swarm:
        return state
    return replace(state, swarm=swarm)
