"""Driver loop: poll, scroll, print, sleep."""

from __future__ import annotations

import logging
import time
from typing import Callable

from spotscroll.config import AppConfig, ScrollConfig
from spotscroll.data.mailbox import Mailbox
from spotscroll.data.playerctl_client import PlayerctlClient, ProviderEnvironmentError
from spotscroll.data.poller import BackgroundPoller, SourcePoller
from spotscroll.display import LineSink
from spotscroll.logging_setup import configure_logging
from spotscroll.logic.scroller import ScrollEngine

logger = logging.getLogger(__name__)


def frame_delay(engine: ScrollEngine, scroll: ScrollConfig) -> float:
    """Delay for the frame the engine is about to produce.

    The first frame of a scrolling buffer is held longer so a new title can
    be read before it starts moving.
    """
    if engine.is_scrolling and engine.cursor == 0:
        return scroll.tick_delay_seconds * scroll.settle_multiplier
    return scroll.tick_delay_seconds


def run(
    config: AppConfig,
    client: PlayerctlClient | None = None,
    sink: LineSink | None = None,
    sleep: Callable[[float], None] = time.sleep,
    max_ticks: int | None = None,
) -> None:
    """Run the display loop; forever unless max_ticks is given."""
    if client is None:
        client = PlayerctlClient(player=config.player.player, process_name=config.player.process_name)
    if sink is None:
        sink = LineSink()

    poller = SourcePoller(client, config.player.format_spec, check_status=config.player.check_status)
    engine = ScrollEngine(config.scroll.width, divider=config.scroll.divider)

    background: BackgroundPoller | None = None
    mailbox: Mailbox | None = None
    if config.player.poll_interval_seconds > 0:
        mailbox = Mailbox()
        background = BackgroundPoller(poller, mailbox, config.player.poll_interval_seconds)
        background.start()

    ticks = 0
    try:
        while max_ticks is None or ticks < max_ticks:
            if background is not None and mailbox is not None:
                background.raise_if_failed()
                result = mailbox.take()
            else:
                result = poller.poll()

            if result is not None and engine.on_poll_result(result):
                logger.debug("Scroll state reset for new text")

            delay = frame_delay(engine, config.scroll)
            sink.write_line(engine.tick())
            sleep(delay)
            ticks += 1
    finally:
        if background is not None:
            background.stop()


def main() -> int:
    """Entry point; returns the process exit code."""
    config = AppConfig()
    configure_logging(config.log)
    try:
        run(config)
    except ProviderEnvironmentError as exc:
        logger.critical("%s", exc)
        return 1
    except KeyboardInterrupt:
        return 0
    return 0


__all__ = ["frame_delay", "main", "run"]
