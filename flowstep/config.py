"""Configuration classes for flowstep display and playback."""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass
class DisplayConfig:
    """Colors used by the algorithms to annotate graphs for display."""

    # Edges on the current augmenting path and edges whose flow just changed
    path_color: str = "#07f"

    # Vertex selected by Preflow-Push
    active_color: str = "#07f"

    # Dinitz level graph: vertex color is level_colors[distance % len(level_colors)]
    level_colors: Tuple[str, ...] = field(
        default_factory=lambda: ("#c66", "#6c6", "#6ac", "#c6c", "#cc6")
    )

    # Preflow-Push height ramp: red channel goes from low to high, others fixed
    height_low: int = 96
    height_high: int = 255

    def level_color(self, distance: int) -> str:
        """Return the palette color for a BFS distance."""
        return self.level_colors[distance % len(self.level_colors)]

    def height_color(self, height: int, max_height: int) -> str:
        """Return an ``rgb()`` color whose red channel grows with height."""
        ratio = height / max_height if max_height > 0 else 0.0
        red = round(self.height_low + (self.height_high - self.height_low) * ratio)
        return f"rgb({red}, {self.height_low}, {self.height_low})"


@dataclass
class PlaybackConfig:
    """Auto-play timing.

    A speed setting ``n`` maps to a delay of ``base_delay / speed_base ** n``
    seconds between steps, with ``n`` clamped to ``[min_speed, max_speed]``.
    """

    base_delay: float = 0.5
    speed_base: float = 1.2
    min_speed: int = -5
    max_speed: int = 5

    def delay_for_speed(self, speed: int) -> float:
        """Calculate the delay between auto-played steps for a speed setting."""
        speed = max(self.min_speed, min(speed, self.max_speed))
        return self.base_delay / (self.speed_base**speed)


# Global configuration instances
DISPLAY_CONFIG = DisplayConfig()
PLAYBACK_CONFIG = PlaybackConfig()
