from enum import StrEnum


class AnimationDirection(StrEnum):
    """Direction an entry animation travels towards its resting place."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    def start_offset(self, distance: int) -> tuple[int, int]:
        """Offset (dx, dy) the widget starts from before sliding into place."""
        return {
            AnimationDirection.UP: (0, distance),
            AnimationDirection.DOWN: (0, -distance),
            AnimationDirection.LEFT: (distance, 0),
            AnimationDirection.RIGHT: (-distance, 0),
        }[self]
