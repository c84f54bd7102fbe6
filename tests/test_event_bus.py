"""EventBus and file notification helpers."""
import pytest

from recentmenu.core.event_bus import EventBus
from recentmenu.core.events import (
    EVENT_FILE_OPENED, EVENT_FILE_SAVED, FileOpenedEvent, FileSavedEvent, event_name_for, publish_file_event,
)


def test_emit_and_unsubscribe():
    bus = EventBus()
    got = []

    def cb(name, data):
        got.append((name, data))

    bus.subscribe("x", cb)
    bus.emit("x", 1)
    bus.unsubscribe("x", cb)
    bus.unsubscribe("x", cb)
    bus.emit("x", 2)
    assert got == [("x", 1)]


def test_callback_errors_are_logged(caplog):
    bus = EventBus()
    got = []

    def boom(name, data):
        raise RuntimeError("boom")

    bus.subscribe("x", boom)
    bus.subscribe("x", lambda n, d: got.append(d))
    bus.emit("x", "data")
    assert got == ["data"]
    assert "boom" in caplog.text


def test_file_events_map_to_names():
    assert event_name_for(FileOpenedEvent("a")) == EVENT_FILE_OPENED
    assert event_name_for(FileSavedEvent("a")) == EVENT_FILE_SAVED
    with pytest.raises(TypeError):
        event_name_for("a")


def test_publish_file_event():
    bus = EventBus()
    got = []
    bus.subscribe(EVENT_FILE_SAVED, lambda n, d: got.append(d))
    publish_file_event(bus, FileSavedEvent("/tmp/a.tif"))
    assert got == [FileSavedEvent("/tmp/a.tif")]


def test_handler_may_unsubscribe_during_emit():
    bus = EventBus()
    got = []

    def once(name, data):
        got.append(data)
        bus.unsubscribe(name, once)

    bus.subscribe("x", once)
    bus.emit("x", 1)
    bus.emit("x", 2)
    assert got == [1]
