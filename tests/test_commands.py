"""CommandService and CommandInfo: registration, lookup, change notifications."""
from recentmenu.core.commands import CommandInfo, CommandService
from recentmenu.core.event_bus import EventBus
from recentmenu.core.menu import MenuEntry, MenuPath


def _info(action="recentmenu.open_file", label="a.tif"):
    return CommandInfo(action, presets={"input_file": label},
                       menu_path=MenuPath([MenuEntry("File"), MenuEntry("Open Recent"), MenuEntry(label, 0)]))


def test_register_and_remove_by_identity():
    service = CommandService()
    a, b = _info(label="a"), _info(label="b")
    service.add_commands([a, b])
    service.add_command(a)
    assert service.commands() == [a, b]
    service.remove_command(_info(label="a"))
    assert len(service) == 2
    service.remove_commands([a, b])
    assert len(service) == 0
    assert a not in service


def test_batch_registration_skips_invalid(caplog):
    service = CommandService()
    good = _info()
    bad = CommandInfo("")
    with caplog.at_level("WARNING", logger="recentmenu.commands"):
        service.add_commands([bad, good])
    assert service.commands() == [good]
    assert "without action" in caplog.text


def test_get_command_by_action():
    service = CommandService()
    opener = CommandInfo("recentmenu.open", icon_path="/icons/open.png")
    service.add_commands([_info(), opener])
    assert service.get_command("recentmenu.open") is opener
    assert service.get_command("missing") is None
    assert len(service.commands("recentmenu.open_file")) == 1


def test_changes_are_announced():
    bus = EventBus()
    seen = []
    for name in ("commands_added", "commands_removed", "command_updated"):
        bus.subscribe(name, lambda n, data: seen.append(n))
    service = CommandService(bus)
    info = _info()
    service.add_command(info)
    service.update_command(info)
    service.remove_command(info)
    service.remove_command(info)
    assert seen == ["commands_added", "command_updated", "commands_removed"]


def test_update_refreshes_usage():
    info = _info()
    assert info.use_count == 0 and info.last_used is None
    info.update()
    info.update()
    assert info.use_count == 2
    assert info.last_used is not None


def test_label_and_menu_string():
    info = _info(label="a.tif")
    assert info.label == "a.tif"
    assert info.menu_path.menu_string() == "File > Open Recent > a.tif"
    assert CommandInfo("x").label == "x"
