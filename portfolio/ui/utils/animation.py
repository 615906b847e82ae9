from portfolio.core.enums.animation_direction import AnimationDirection


def ease_out(t: float) -> float:
    """Cubic ease-out on [0, 1]."""
    t = min(max(t, 0.0), 1.0)
    return 1 - (1 - t) ** 3


def entry_offsets(
    direction: AnimationDirection, distance: int, steps: int
) -> list[tuple[int, int]]:
    """Per-frame (dx, dy) offsets of a slide-in, from the start offset to (0, 0).

    Returns ``steps + 1`` frames.
    """
    steps = max(steps, 1)
    start_x, start_y = direction.start_offset(distance)
    frames = []
    for i in range(steps + 1):
        remaining = 1 - ease_out(i / steps)
        frames.append((round(start_x * remaining), round(start_y * remaining)))
    return frames


def step_interval(duration_ms: int, steps: int) -> int:
    """Milliseconds between frames, at least 1."""
    return max(1, duration_ms // max(steps, 1))


def padding_for_offset(offset: int) -> tuple[int, int]:
    """Split a signed offset into (before, after) pack padding."""
    return (offset, 0) if offset >= 0 else (0, -offset)
