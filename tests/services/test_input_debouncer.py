"""Unit tests for InputDebouncer."""

from unittest.mock import MagicMock

import pytest
from PySide6.QtTest import QTest

from quick_translate.services import InputDebouncer

QUIET_MS = 30


@pytest.fixture
def debouncer():
    return InputDebouncer(quiet_period_ms=QUIET_MS)


@pytest.fixture
def settled_spy(debouncer):
    spy = MagicMock()
    debouncer.settled.connect(spy)
    return spy


def wait_for_quiet_period():
    QTest.qWait(QUIET_MS * 5)


def test_default_quiet_period():
    assert InputDebouncer().quiet_period_ms == 250


def test_burst_emits_once_with_last_text(debouncer, settled_spy):
    for text in ("H", "He", "Hel", "Hello"):
        debouncer.notify_input(text)

    settled_spy.assert_not_called()
    wait_for_quiet_period()

    settled_spy.assert_called_once_with("Hello")


def test_separate_bursts_emit_separately(debouncer, settled_spy):
    debouncer.notify_input("one")
    wait_for_quiet_period()
    debouncer.notify_input("two")
    wait_for_quiet_period()

    assert [c.args[0] for c in settled_spy.call_args_list] == ["one", "two"]


def test_empty_text_is_emitted(debouncer, settled_spy):
    debouncer.notify_input("abc")
    debouncer.notify_input("")
    wait_for_quiet_period()

    settled_spy.assert_called_once_with("")


def test_is_pending_until_timer_fires(debouncer, settled_spy):
    assert not debouncer.is_pending()
    debouncer.notify_input("abc")
    assert debouncer.is_pending()

    wait_for_quiet_period()
    assert not debouncer.is_pending()


def test_cancel_drops_pending_text(debouncer, settled_spy):
    debouncer.notify_input("abc")
    debouncer.cancel()
    wait_for_quiet_period()

    settled_spy.assert_not_called()
    assert not debouncer.is_pending()
