"""
File notifications delivered through the EventBus.
Opened and saved files are both "touches" for the recent-files list.
"""
from dataclasses import dataclass
from typing import Union

EVENT_FILE_OPENED = "file_opened"
EVENT_FILE_SAVED = "file_saved"

EVENT_COMMANDS_ADDED = "commands_added"
EVENT_COMMANDS_REMOVED = "commands_removed"
EVENT_COMMAND_UPDATED = "command_updated"


@dataclass(frozen=True)
class FileOpenedEvent:
    path: str


@dataclass(frozen=True)
class FileSavedEvent:
    path: str


FileEvent = Union[FileOpenedEvent, FileSavedEvent]


def event_name_for(event: FileEvent) -> str:
    """Bus event name carrying this notification kind."""
    if isinstance(event, FileOpenedEvent):
        return EVENT_FILE_OPENED
    if isinstance(event, FileSavedEvent):
        return EVENT_FILE_SAVED
    raise TypeError("Not a file event: %r" % (event,))


def publish_file_event(event_bus, event: FileEvent) -> None:
    """Emit event on the bus under its kind's event name."""
    event_bus.emit(event_name_for(event), event)
