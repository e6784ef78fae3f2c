"""
Tests for button action dispatch, display mode and description panel.
"""

import random

import pytest

from src.app_state import (
    AppState,
    ButtonAction,
    DescriptionKind,
    DescriptionPanel,
    DisplayMode,
    advance,
    apply_action,
    description_text,
)
from src.swarm import SwarmSettings


@pytest.fixture
def settings():
    return SwarmSettings(width=800, height=700)


@pytest.fixture
def rng():
    return random.Random(7)


def press(state, action, settings, rng, times=1):
    for _ in range(times):
        state = apply_action(state, action, settings, rng)
    return state


def deploying_state(settings, rng):
    state = press(AppState(), ButtonAction.ADD, settings, rng, times=30)
    return advance(state, settings)


class TestButtonAction:
    """Tests for the action ids."""

    def test_ids_are_stable(self):
        """Ids match the layout file's ID column."""
        assert [a.value for a in ButtonAction] == [0, 1, 2, 3, 4]
        assert ButtonAction(3) is ButtonAction.TOGGLE_MODE

    def test_unknown_id_rejected(self):
        """Ids outside the enum raise ValueError."""
        with pytest.raises(ValueError):
            ButtonAction(9)


class TestModeToggle:
    """Tests for the search/operation mode toggle."""

    def test_initial_mode(self):
        """The sketch starts in search mode."""
        state = AppState()
        assert state.mode is DisplayMode.SEARCH
        assert state.image_name == "SearchMode.png"
        assert state.sprite_height == 75

    def test_toggle_switches_asset_and_height(self, settings, rng):
        """Operation mode uses its own image and taller sprites."""
        state = press(AppState(), ButtonAction.TOGGLE_MODE, settings, rng)
        assert state.mode is DisplayMode.OPERATION
        assert state.image_name == "OperationMode.png"
        assert state.sprite_height == 126

    def test_toggle_twice_restores(self, settings, rng):
        """Two toggles return to the original asset and height."""
        original = AppState()
        state = press(original, ButtonAction.TOGGLE_MODE, settings, rng, times=2)
        assert state.mode is original.mode
        assert state.image_name == original.image_name
        assert state.sprite_height == original.sprite_height


class TestDescriptionPanel:
    """Tests for the description toggles."""

    def test_search_description_toggles_visibility(self, settings, rng):
        """Search button shows, then hides, the search text."""
        state = press(AppState(), ButtonAction.SEARCH_DESCRIPTION, settings, rng)
        assert state.panel == DescriptionPanel(True, DescriptionKind.SEARCH)
        state = press(state, ButtonAction.SEARCH_DESCRIPTION, settings, rng)
        assert state.panel.visible is False

    def test_other_button_flips_visibility_and_forces_kind(self, settings, rng):
        """Each button forces its own kind while flipping visibility."""
        state = press(AppState(), ButtonAction.SEARCH_DESCRIPTION, settings, rng)
        state = press(state, ButtonAction.OPERATION_DESCRIPTION, settings, rng)
        assert state.panel == DescriptionPanel(False, DescriptionKind.OPERATION)
        state = press(state, ButtonAction.OPERATION_DESCRIPTION, settings, rng)
        assert state.panel == DescriptionPanel(True, DescriptionKind.OPERATION)

    def test_texts_are_distinct(self):
        """Each kind has its own text block."""
        assert "search mode" in description_text(DescriptionKind.SEARCH)
        assert "operation mode" in description_text(DescriptionKind.OPERATION)


class TestDispatch:
    """Tests for add/remove dispatch and the deploying lockout."""

    def test_add_and_remove(self, settings, rng):
        """Add and remove change the swarm size."""
        state = press(AppState(), ButtonAction.ADD, settings, rng, times=5)
        state = press(state, ButtonAction.REMOVE, settings, rng, times=2)
        assert len(state.swarm) == 3

    def test_transitions_do_not_mutate_input(self, settings, rng):
        """apply_action returns a new state and leaves the old one alone."""
        state = AppState()
        new_state = apply_action(state, ButtonAction.ADD, settings, rng)
        assert len(state.swarm) == 0
        assert len(new_state.swarm) == 1

    @pytest.mark.parametrize("action", list(ButtonAction))
    def test_every_action_ignored_while_deploying(self, settings, rng, action):
        """No button has an effect during deployment."""
        state = deploying_state(settings, rng)
        assert state.deploying is True
        assert apply_action(state, action, settings, rng) is state

    def test_advance_is_identity_when_idle(self, settings, rng):
        """Idle frames return the same state object."""
        state = press(AppState(), ButtonAction.ADD, settings, rng, times=3)
        assert advance(state, settings) is state

    def test_advance_keeps_mode_and_panel(self, settings, rng):
        """Ticking the swarm leaves mode and panel untouched."""
        state = press(AppState(), ButtonAction.TOGGLE_MODE, settings, rng)
        state = press(state, ButtonAction.OPERATION_DESCRIPTION, settings, rng)
        state = press(state, ButtonAction.ADD, settings, rng, times=30)
        ticked = advance(state, settings)
        assert ticked.deploying is True
        assert ticked.mode is DisplayMode.OPERATION
        assert ticked.panel == state.panel
