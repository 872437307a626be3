"""Tests for `flowstep.config` focusing on behavior and correctness."""

from flowstep.config import DISPLAY_CONFIG, DisplayConfig, PlaybackConfig


def test_delay_for_speed_default_is_base_delay() -> None:
    config = PlaybackConfig()
    assert config.delay_for_speed(0) == config.base_delay


def test_delay_for_speed_monotonic_and_clamped() -> None:
    """Faster speeds never wait longer; values outside the range are clamped."""
    config = PlaybackConfig()
    speeds = list(range(config.min_speed, config.max_speed + 1))
    delays = [config.delay_for_speed(s) for s in speeds]
    assert delays == sorted(delays, reverse=True)

    assert config.delay_for_speed(config.max_speed + 10) == config.delay_for_speed(
        config.max_speed
    )
    assert config.delay_for_speed(config.min_speed - 10) == config.delay_for_speed(
        config.min_speed
    )


def test_delay_for_speed_formula_custom_config() -> None:
    config = PlaybackConfig(base_delay=1.0, speed_base=2.0, min_speed=-3, max_speed=3)
    assert config.delay_for_speed(2) == 0.25
    assert config.delay_for_speed(-1) == 2.0


def test_level_color_cycles_through_palette() -> None:
    config = DisplayConfig()
    n = len(config.level_colors)
    assert config.level_color(0) == config.level_colors[0]
    assert config.level_color(n) == config.level_colors[0]
    assert config.level_color(n + 2) == config.level_colors[2]


def test_height_color_ramp() -> None:
    assert DISPLAY_CONFIG.height_color(0, 6) == "rgb(96, 96, 96)"
    assert DISPLAY_CONFIG.height_color(6, 6) == "rgb(255, 96, 96)"
    # Degenerate maximum falls back to the low end of the ramp
    assert DISPLAY_CONFIG.height_color(0, 0) == "rgb(96, 96, 96)"
