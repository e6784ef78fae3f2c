from config import (
    IDLE_BOB_LOWER_OFFSET,
    IDLE_BOB_SPEED,
    IDLE_BOB_START_OFFSET,
    IDLE_BOB_UPPER_OFFSET,
    SCREEN_HEIGHT,
)


class IdleBob:
    """Bobs the central nanobot up and down between two screen heights."""

    def __init__(
        self,
        screen_height: int = SCREEN_HEIGHT,
        speed: float = IDLE_BOB_SPEED,
    ):
        center = screen_height / 2
        self.y = center + IDLE_BOB_START_OFFSET
        self.top = center + IDLE_BOB_UPPER_OFFSET
        self.bottom = center + IDLE_BOB_LOWER_OFFSET
        self.speed = speed
        self.velocity = speed

    def update(self) -> float:
        """Moves one frame and flips direction at the bounds. Returns the new y."""
        self.y += self.velocity
        # y grows downward, so `bottom` is the larger bound
        if self.y >= self.bottom:
            self.velocity = -self.speed
        if self.y <= self.top:
            self.velocity = self.speed
        return self.y
