"""Tests for the synchronous event bus."""

import logging

from connect_four.core.bus import EventBus
from connect_four.core.events import Event, EventType


def make_event(event_type=EventType.TOKEN_DROPPED, data=None) -> Event:
    return Event(type=event_type, data=data, source="test")


class TestEventBus:
    def test_dispatch_in_registration_order(self):
        bus = EventBus()
        order = []
        bus.subscribe(EventType.TOKEN_DROPPED, lambda e: order.append(1))
        bus.subscribe(EventType.TOKEN_DROPPED, lambda e: order.append(2))

        bus.publish(make_event())

        assert order == [1, 2]

    def test_only_matching_type(self):
        bus = EventBus()
        received = []
        bus.subscribe(EventType.GAME_WON, received.append)

        bus.publish(make_event(EventType.TOKEN_DROPPED))

        assert received == []

    def test_duplicate_subscription_ignored(self):
        bus = EventBus()
        received = []
        bus.subscribe(EventType.GAME_TIED, received.append)
        bus.subscribe(EventType.GAME_TIED, received.append)

        bus.publish(make_event(EventType.GAME_TIED))

        assert len(received) == 1
        assert bus.handler_count(EventType.GAME_TIED) == 1

    def test_unsubscribe(self):
        bus = EventBus()
        received = []
        bus.subscribe(EventType.GAME_TIED, received.append)
        bus.unsubscribe(EventType.GAME_TIED, received.append)
        bus.unsubscribe(EventType.GAME_TIED, received.append)  # no-op

        bus.publish(make_event(EventType.GAME_TIED))

        assert received == []

    def test_handler_error_is_logged(self, caplog):
        bus = EventBus()
        received = []

        def broken(event):
            raise ValueError("boom")

        bus.subscribe(EventType.GAME_WON, broken)
        bus.subscribe(EventType.GAME_WON, received.append)

        with caplog.at_level(logging.ERROR, logger="connect_four.core.bus"):
            bus.publish(make_event(EventType.GAME_WON))

        assert len(received) == 1
        assert "Handler error for GAME_WON" in caplog.text

    def test_event_log_is_bounded(self):
        bus = EventBus(max_log_size=3)
        for i in range(5):
            bus.publish(make_event(data=i))

        log = bus.get_event_log()
        assert [e.data for e in log] == [2, 3, 4]
        assert [e.data for e in bus.get_event_log(limit=1)] == [4]

        bus.clear_log()
        assert bus.get_event_log() == []

    def test_event_str(self):
        event = make_event(EventType.GAME_TIED)
        assert str(event) == "[test] GAME_TIED: None"
