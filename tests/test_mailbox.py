from __future__ import annotations

from spotscroll.data.mailbox import Mailbox
from spotscroll.data.poller import UNAVAILABLE, UNCHANGED, changed


def test_take_empty_returns_none() -> None:
    assert Mailbox().take() is None


def test_take_clears_slot() -> None:
    mailbox = Mailbox()
    mailbox.put(changed("A"))

    assert mailbox.take() == changed("A")
    assert mailbox.take() is None


def test_newest_change_wins() -> None:
    mailbox = Mailbox()
    mailbox.put(changed("A"))
    mailbox.put(changed("B"))

    assert mailbox.take() == changed("B")


def test_unread_change_survives_later_non_change() -> None:
    mailbox = Mailbox()
    mailbox.put(changed("A"))
    mailbox.put(UNAVAILABLE)
    mailbox.put(UNCHANGED)

    assert mailbox.take() == changed("A")


def test_non_change_overwrites_non_change() -> None:
    mailbox = Mailbox()
    mailbox.put(UNAVAILABLE)
    mailbox.put(UNCHANGED)

    assert mailbox.take() == UNCHANGED
