"""Configuration for the spotscroll status line.

Values are fixed at startup; there is no configuration file.
"""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_FORMAT = "{{ artist }}: {{ album }}: {{ title }}"


@dataclass(frozen=True)
class PlayerConfig:
    """Which player to query and how often."""

    player: str = "spotifyd"
    process_name: str = "spotifyd"
    format_spec: str = DEFAULT_FORMAT
    check_status: bool = True
    poll_interval_seconds: float = 0.0


@dataclass(frozen=True)
class ScrollConfig:
    """Window width and pacing of the scrolling output."""

    width: int = 20
    tick_delay_seconds: float = 0.3
    settle_multiplier: int = 10
    divider: str = " - "


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    log_dir: str | None = None


@dataclass(frozen=True)
class AppConfig:
    """Top-level application configuration."""

    player: PlayerConfig = field(default_factory=PlayerConfig)
    scroll: ScrollConfig = field(default_factory=ScrollConfig)
    log: LoggingConfig = field(default_factory=LoggingConfig)


__all__ = ["DEFAULT_FORMAT", "AppConfig", "LoggingConfig", "PlayerConfig", "ScrollConfig"]
