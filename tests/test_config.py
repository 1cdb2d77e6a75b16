from __future__ import annotations

import dataclasses

import pytest

from spotscroll.config import DEFAULT_FORMAT, AppConfig, ScrollConfig


def test_app_config_defaults() -> None:
    config = AppConfig()

    assert config.scroll.width == 20
    assert config.scroll.tick_delay_seconds == 0.3
    assert config.scroll.settle_multiplier == 10
    assert config.scroll.divider == " - "
    assert config.player.player == "spotifyd"
    assert config.player.format_spec == DEFAULT_FORMAT
    assert config.player.poll_interval_seconds == 0
    assert config.log.level == "WARNING"
    assert config.log.log_dir is None


def test_config_is_frozen() -> None:
    config = AppConfig()

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.scroll.width = 40  # type: ignore[misc]


def test_sections_can_be_overridden_at_startup() -> None:
    config = AppConfig(scroll=ScrollConfig(width=30, divider=" | "))

    assert config.scroll.width == 30
    assert config.scroll.divider == " | "
    assert config.player.format_spec == DEFAULT_FORMAT
