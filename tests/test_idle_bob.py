"""
Tests for the central nanobot idle animation.
"""

from src.idle_bob import IdleBob


class TestIdleBob:
    """Tests for IdleBob."""

    def test_initial_position(self):
        """Starts 60 units above the vertical center, moving down."""
        bob = IdleBob(screen_height=700)
        assert bob.y == 290
        assert bob.velocity == 0.5

    def test_reverses_at_lower_bound(self):
        """Direction flips once the lower bound is reached."""
        bob = IdleBob(screen_height=700)
        for _ in range(30):
            bob.update()
        assert bob.y == 305
        assert bob.velocity == -0.5

    def test_stays_within_bounds(self):
        """y never leaves [top, bottom] over many frames."""
        bob = IdleBob(screen_height=700)
        seen = set()
        for _ in range(500):
            y = bob.update()
            assert bob.top <= y <= bob.bottom
            seen.add(y)
        assert min(seen) == 275
        assert max(seen) == 305
